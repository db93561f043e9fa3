from collections import deque

import numpy as np
import pytest

from hypermaze.generators.maze import (
    Direction,
    InvalidDimensionsError,
    MazeError,
    MazeGraph,
    cell_count,
    offset,
)


def _reachable_from_origin(maze):
    origin = tuple(0 for _ in maze.lengths)
    visited = {origin}
    queue = deque([origin])
    while queue:
        current = queue.popleft()
        for neighbor in maze.neighbors(current):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)
    return visited


@pytest.mark.parametrize("lengths", [
    (1,),
    (7,),
    (3, 3),
    (4, 15, 2),
    (5, 1, 1),
    (2, 2, 2, 2),
    (3, 2, 1, 2, 2),
    (2, 2, 2, 2, 2, 2),
])
def test_generates_spanning_tree(lengths):
    maze = MazeGraph(lengths, 42)

    assert maze.cell_count == cell_count(lengths)
    assert maze.edge_count == maze.cell_count - 1
    # V - 1 edges reaching all V cells leaves no room for a cycle
    assert len(_reachable_from_origin(maze)) == maze.cell_count


def test_square_maze_bfs_visits_every_cell_once(square_maze):
    assert square_maze.edge_count == 8

    origin = (0, 0)
    visited = [origin]
    seen = {origin}
    queue = deque([origin])
    while queue:
        current = queue.popleft()
        for neighbor in square_maze.neighbors(current):
            if neighbor not in seen:
                seen.add(neighbor)
                visited.append(neighbor)
                queue.append(neighbor)

    assert len(visited) == 9
    assert len(set(visited)) == 9


def test_single_corridor_forward():
    maze = MazeGraph((5, 1, 1), 684153987)

    assert maze.can_move((0, 0, 0), 0, Direction.POSITIVE) is True
    assert maze.can_move((1, 0, 0), 0, Direction.POSITIVE) is True
    assert maze.can_move((2, 0, 0), 0, Direction.POSITIVE) is True
    assert maze.can_move((3, 0, 0), 0, Direction.POSITIVE) is True
    assert maze.can_move((4, 0, 0), 0, Direction.POSITIVE) is None


def test_single_corridor_backward():
    maze = MazeGraph((5, 1, 1), 684153987)

    assert maze.can_move((0, 0, 0), 0, Direction.NEGATIVE) is None
    assert maze.can_move((1, 0, 0), 0, Direction.NEGATIVE) is True
    assert maze.can_move((2, 0, 0), 0, Direction.NEGATIVE) is True
    assert maze.can_move((3, 0, 0), 0, Direction.NEGATIVE) is True
    assert maze.can_move((4, 0, 0), 0, Direction.NEGATIVE) is True


def test_single_corridor_degenerate_dimensions():
    maze = MazeGraph((5, 1, 1), 684153987)
    assert maze.can_move((2, 0, 0), 1) is None
    assert maze.can_move((2, 0, 0), 2, Direction.NEGATIVE) is None


def test_out_of_range_queries_return_none():
    maze = MazeGraph((5, 5, 5, 5, 5), 684153987)

    assert maze.can_move((1, 2, 3214, 2, 2), 2) is None
    assert maze.can_move((1, 2, 3, 2, 2), 5) is None
    assert maze.can_move((1, 2, 3, 2, 2), -1) is None
    assert maze.can_move((1, 2, 3), 0) is None
    assert maze.can_move((-1, 0, 0, 0, 0), 0) is None


def test_default_direction_is_forward(square_maze):
    for cell in square_maze.iter_cells():
        for dim in range(2):
            assert square_maze.can_move(cell, dim) == square_maze.can_move(cell, dim, Direction.POSITIVE)


def test_boundary_forward_is_none():
    lengths = (4, 3, 2)
    maze = MazeGraph(lengths, 9)
    for cell in maze.iter_cells():
        for dim, length in enumerate(lengths):
            if cell[dim] == length - 1:
                assert maze.can_move(cell, dim) is None
            else:
                assert maze.can_move(cell, dim) is not None


def test_edge_presence_is_direction_independent():
    lengths = (3, 4, 2)
    maze = MazeGraph(lengths, 1234)
    for cell in maze.iter_cells():
        for dim, length in enumerate(lengths):
            if cell[dim] + 1 < length:
                neighbor = offset(cell, dim, 1)
                assert maze.can_move(cell, dim) == maze.can_move(neighbor, dim, Direction.NEGATIVE)
                assert maze.has_edge(cell, neighbor) == maze.has_edge(neighbor, cell)


def test_same_seed_same_maze():
    lengths = (4, 4, 3)
    first = MazeGraph(lengths, 777)
    second = MazeGraph(lengths, 777)

    assert list(first.iter_edges()) == list(second.iter_edges())
    for cell in first.iter_cells():
        for dim in range(len(lengths)):
            for direction in Direction:
                assert first.can_move(cell, dim, direction) == second.can_move(cell, dim, direction)


def test_generator_and_int_seed_agree():
    lengths = (5, 4)
    from_seed = MazeGraph(lengths, 31337)
    from_generator = MazeGraph(lengths, np.random.default_rng(31337))

    assert list(from_seed.iter_edges()) == list(from_generator.iter_edges())
    assert from_seed.seed == 31337
    assert from_generator.seed is None


def test_different_seeds_usually_differ():
    lengths = (6, 6)
    mazes = {tuple(MazeGraph(lengths, seed).iter_edges()) for seed in range(5)}
    assert len(mazes) > 1


def test_unseeded_maze_is_still_a_tree():
    maze = MazeGraph((4, 4))
    assert maze.seed is None
    assert maze.edge_count == 15


@pytest.mark.parametrize("lengths", [
    (),
    (0,),
    (3, 0),
    (2, -1),
    (2.5, 2),
    (True, 2),
    "ab",
])
def test_invalid_lengths_rejected(lengths):
    with pytest.raises(InvalidDimensionsError):
        MazeGraph(lengths, 1)


def test_invalid_dimensions_error_hierarchy():
    with pytest.raises(ValueError):
        MazeGraph((), 1)
    with pytest.raises(MazeError):
        MazeGraph((0,), 1)


def test_unsupported_random_source():
    with pytest.raises(TypeError):
        MazeGraph((2, 2), "seed")


def test_neighbors_follow_passages(square_maze):
    for cell in square_maze.iter_cells():
        for neighbor in square_maze.neighbors(cell):
            assert square_maze.has_edge(cell, neighbor)


def test_edges_join_unit_neighbors():
    maze = MazeGraph((3, 3, 3), 5)
    for a, b in maze.iter_edges():
        assert a < b
        assert sum(abs(x - y) for x, y in zip(a, b)) == 1


def test_from_edges_round_trip(square_maze):
    rebuilt = MazeGraph.from_edges(square_maze.lengths, list(square_maze.iter_edges()))
    assert list(rebuilt.iter_edges()) == list(square_maze.iter_edges())
    assert rebuilt.can_move((0, 0), 0) == square_maze.can_move((0, 0), 0)


def test_from_edges_normalises_orientation():
    maze = MazeGraph.from_edges((2, 1), [[[1, 0], [0, 0]]])
    assert list(maze.iter_edges()) == [((0, 0), (1, 0))]
    assert maze.can_move((0, 0), 0) is True
