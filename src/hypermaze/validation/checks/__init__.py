"""
Validation check modules.

Each module provides specific validation checks:
- maze_checks: Spanning-tree structure and query consistency of a maze
- navigation_checks: Axis and position invariants of a navigation state
"""

from .maze_checks import (
    validate_maze_structure,
    check_edge_count,
    check_edges_adjacent,
    check_acyclic,
    check_connected,
    check_symmetry,
    check_boundary,
    check_degenerate_dimensions,
)

from .navigation_checks import validate_navigation_state

__all__ = [
    # Maze
    'validate_maze_structure',
    'check_edge_count',
    'check_edges_adjacent',
    'check_acyclic',
    'check_connected',
    'check_symmetry',
    'check_boundary',
    'check_degenerate_dimensions',
    # Navigation
    'validate_navigation_state',
]
