"""
Maze Generator Module

This module provides spanning-tree maze generation over N-dimensional
hyper-grids and the grid coordinate helpers it is built on.
"""

from .maze_generator import (
    MazeGraph,
    MazeError,
    InvalidDimensionsError,
    RandomSource,
    validate_lengths,
    resolve_rng,
)
from .disjoint_set import DisjointSet
from .grid import (
    Coordinate,
    Lengths,
    Direction,
    cell_count,
    strides,
    unwrap_index,
    wrap_index,
    in_bounds,
    offset,
    iter_cells,
    corner,
)

__all__ = [
    'MazeGraph',
    'MazeError',
    'InvalidDimensionsError',
    'RandomSource',
    'validate_lengths',
    'resolve_rng',
    'DisjointSet',
    'Coordinate',
    'Lengths',
    'Direction',
    'cell_count',
    'strides',
    'unwrap_index',
    'wrap_index',
    'in_bounds',
    'offset',
    'iter_cells',
    'corner',
]
