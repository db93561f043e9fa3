"""Debug export helpers for generated mazes."""

from .graph_export import (
    export_maze_dot,
    export_maze_json,
    load_maze_json,
    maze_to_dict,
)

__all__ = [
    'export_maze_dot',
    'export_maze_json',
    'load_maze_json',
    'maze_to_dict',
]
