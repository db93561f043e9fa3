"""
Generators package.

Procedural generation algorithms for hypermaze levels.
"""

from .maze import MazeGraph, MazeError, InvalidDimensionsError, Direction

__all__ = [
    'MazeGraph',
    'MazeError',
    'InvalidDimensionsError',
    'Direction',
]
