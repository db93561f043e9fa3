"""
Maze structure validation checks.

Validates a generated maze against its structural contract:
- Passage count is cell count minus one (MAZE-001)
- Every cell is reachable from the origin (MAZE-002)
- No passage closes a cycle (MAZE-003)
- Every passage joins two in-range grid neighbours (MAZE-004)
- Queries agree in both directions (MAZE-005)
- Forward queries past the last index return None (MAZE-006)
- Length-1 dimensions are reported (MAZE-007)
"""

from collections import deque
from typing import Set

from ...generators.maze import (
    Coordinate,
    Direction,
    DisjointSet,
    MazeGraph,
    in_bounds,
    offset,
    wrap_index,
)
from ..core import ValidationResult
from ..rules import MAZE_001, MAZE_002, MAZE_003, MAZE_004, MAZE_005, MAZE_006, MAZE_007


def check_edge_count(maze: MazeGraph) -> ValidationResult:
    """Check MAZE-001: a spanning tree over V cells has V - 1 passages."""
    result = ValidationResult(checks_run=["edge_count"])
    expected = maze.cell_count - 1
    if maze.edge_count != expected:
        result.add_issue(MAZE_001.issue(
            actual=maze.edge_count, cells=maze.cell_count, expected=expected
        ))
    return result


def check_edges_adjacent(maze: MazeGraph) -> ValidationResult:
    """Check MAZE-004: each passage differs by one step in one dimension."""
    result = ValidationResult(checks_run=["edges_adjacent"])
    for a, b in maze.iter_edges():
        in_grid = in_bounds(maze.lengths, a) and in_bounds(maze.lengths, b)
        if not in_grid or sum(abs(x - y) for x, y in zip(a, b)) != 1:
            result.add_issue(MAZE_004.issue(location=str(a), edge=(a, b)))
    return result


def check_acyclic(maze: MazeGraph) -> ValidationResult:
    """Check MAZE-003: replaying the passages never merges a set with itself."""
    result = ValidationResult(checks_run=["acyclic"])
    cells = DisjointSet(maze.cell_count)
    for a, b in maze.iter_edges():
        index_a = wrap_index(maze.lengths, a)
        index_b = wrap_index(maze.lengths, b)
        if index_a is None or index_b is None:
            # Reported by check_edges_adjacent
            continue
        if not cells.try_merge(index_a, index_b):
            result.add_issue(MAZE_003.issue(location=str(a), edge=(a, b)))
    return result


def check_connected(maze: MazeGraph) -> ValidationResult:
    """Check MAZE-002: breadth-first search from the origin reaches every cell."""
    result = ValidationResult(checks_run=["connected"])
    origin: Coordinate = tuple(0 for _ in maze.lengths)
    visited: Set[Coordinate] = {origin}
    queue = deque([origin])

    while queue:
        current = queue.popleft()
        for neighbor in maze.neighbors(current):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)

    unreached = maze.cell_count - len(visited)
    if unreached:
        result.add_issue(MAZE_002.issue(unreached=unreached, cells=maze.cell_count))
    return result


def check_symmetry(maze: MazeGraph) -> ValidationResult:
    """Check MAZE-005: can_move(a, k, +) == can_move(a + e_k, k, -)."""
    result = ValidationResult(checks_run=["symmetry"])
    for cell in maze.iter_cells():
        for dim, length in enumerate(maze.lengths):
            if cell[dim] + 1 >= length:
                continue
            neighbor = offset(cell, dim, 1)
            forward = maze.can_move(cell, dim, Direction.POSITIVE)
            backward = maze.can_move(neighbor, dim, Direction.NEGATIVE)
            if forward != backward:
                result.add_issue(MAZE_005.issue(location=str(cell), a=cell, b=neighbor))
    return result


def check_boundary(maze: MazeGraph) -> ValidationResult:
    """Check MAZE-006: forward queries from the last index return None."""
    result = ValidationResult(checks_run=["boundary"])
    for cell in maze.iter_cells():
        for dim, length in enumerate(maze.lengths):
            if cell[dim] != length - 1:
                continue
            value = maze.can_move(cell, dim, Direction.POSITIVE)
            if value is not None:
                result.add_issue(MAZE_006.issue(
                    location=str(cell), dim=dim, cell=cell, value=value
                ))
    return result


def check_degenerate_dimensions(maze: MazeGraph) -> ValidationResult:
    """Report MAZE-007 for every dimension of length 1."""
    result = ValidationResult(checks_run=["degenerate_dimensions"])
    for dim, length in enumerate(maze.lengths):
        if length == 1:
            result.add_issue(MAZE_007.issue(dim=dim))
    return result


def validate_maze_structure(maze: MazeGraph, thorough: bool = True) -> ValidationResult:
    """Run every maze structure check.

    Args:
        maze: The maze to validate
        thorough: Also run the per-cell query checks (symmetry, boundary),
            which cost O(cells * dims) queries

    Returns:
        Merged ValidationResult
    """
    result = ValidationResult()
    result.merge(check_edge_count(maze))
    result.merge(check_edges_adjacent(maze))
    result.merge(check_acyclic(maze))
    result.merge(check_connected(maze))
    if thorough:
        result.merge(check_symmetry(maze))
        result.merge(check_boundary(maze))
    result.merge(check_degenerate_dimensions(maze))
    return result
