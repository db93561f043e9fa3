"""
hypermaze - N-dimensional maze generation and navigation.

Generates spanning-tree mazes over hyper-grids of any dimension count and
tracks an explorer moving through them on a 2D projection.
"""

from .generators.maze import MazeGraph, MazeError, InvalidDimensionsError, Direction
from .navigation import NavigationState, AxisSlot, WallSegment, WallKind
from .pipeline import LevelLoader, LevelSettings, load_level

__all__ = [
    'MazeGraph',
    'MazeError',
    'InvalidDimensionsError',
    'Direction',
    'NavigationState',
    'AxisSlot',
    'WallSegment',
    'WallKind',
    'LevelLoader',
    'LevelSettings',
    'load_level',
]

__version__ = '1.0.0'
