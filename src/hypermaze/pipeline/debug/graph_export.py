"""
Graph export utilities for maze debugging.

Provides export functions to inspect generated mazes in:
- DOT format (Graphviz) for visual graph inspection
- JSON format for programmatic analysis and reproducibility tracking
"""

from typing import Any, Dict, Optional
import json

from ...generators.maze import MazeGraph


def _node_name(cell) -> str:
    return "c_" + "_".join(str(c) for c in cell)


def export_maze_dot(maze: MazeGraph) -> str:
    """Export a maze as an undirected Graphviz DOT graph.

    Args:
        maze: Generated maze

    Returns:
        DOT format string, one node per cell and one edge per passage
    """
    lines = ['graph HyperMaze {']
    lines.append('  node [shape=circle, style=filled, fillcolor="#D3D3D3"];')
    lines.append('')

    origin = tuple(0 for _ in maze.lengths)
    exit_cell = tuple(n - 1 for n in maze.lengths)

    # Nodes (cells)
    for cell in maze.iter_cells():
        label = ",".join(str(c) for c in cell)
        if cell == origin:
            color = '#90EE90'  # Light green
        elif cell == exit_cell:
            color = '#FFB6C1'  # Light pink
        else:
            color = None
        attrs = f'label="{label}"'
        if color:
            attrs += f' fillcolor="{color}"'
        lines.append(f'  {_node_name(cell)} [{attrs}];')

    lines.append('')

    # Edges (passages)
    for a, b in maze.iter_edges():
        dim = next(i for i, (x, y) in enumerate(zip(a, b)) if x != y)
        lines.append(f'  {_node_name(a)} -- {_node_name(b)} [label="d{dim}"];')

    lines.append('}')
    return '\n'.join(lines)


def maze_to_dict(maze: MazeGraph) -> Dict[str, Any]:
    """Plain-data form of a maze (lengths and passage list)."""
    return {
        'lengths': list(maze.lengths),
        'edges': [[list(a), list(b)] for a, b in maze.iter_edges()],
    }


def export_maze_json(maze: MazeGraph, seed: Optional[int] = None) -> str:
    """Export a maze as JSON with metadata.

    Args:
        maze: Generated maze
        seed: The seed used for generation (defaults to the maze's own)

    Returns:
        JSON string with the maze and debug metadata
    """
    passages_per_dim = [0] * maze.dims
    for a, b in maze.iter_edges():
        for dim, (x, y) in enumerate(zip(a, b)):
            if x != y:
                passages_per_dim[dim] += 1

    output = {
        'metadata': {
            'seed': seed if seed is not None else maze.seed,
            'version': '1.0',
            'generator': 'hypermaze',
        },
        'statistics': {
            'dimensions': maze.dims,
            'cell_count': maze.cell_count,
            'edge_count': maze.edge_count,
            'passages_per_dimension': passages_per_dim,
        },
        'maze': maze_to_dict(maze),
    }
    return json.dumps(output, indent=2)


def load_maze_json(text: str) -> MazeGraph:
    """Rebuild a MazeGraph from export_maze_json output."""
    data = json.loads(text)
    maze_data = data.get('maze', data)
    return MazeGraph.from_edges(maze_data['lengths'], maze_data['edges'])

