"""
Hyper-grid coordinate helpers.

Cells of a D-dimensional grid are addressed either by a coordinate tuple
or by a flat cell index. Indices use mixed-radix order with dimension 0
as the least significant digit, so for lengths (3, 2) the cells are
enumerated (0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1).
"""

from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np


Coordinate = Tuple[int, ...]
Lengths = Tuple[int, ...]


class Direction(Enum):
    """Step direction along a single dimension."""
    POSITIVE = 1
    NEGATIVE = -1

    @property
    def step(self) -> int:
        return self.value

    def invert(self) -> 'Direction':
        if self is Direction.POSITIVE:
            return Direction.NEGATIVE
        return Direction.POSITIVE


def cell_count(lengths: Sequence[int]) -> int:
    """Number of cells in the grid (product of all lengths)."""
    return int(np.prod(np.asarray(lengths, dtype=np.int64)))


def strides(lengths: Sequence[int]) -> List[int]:
    """
    Index stride of each dimension.

    Moving +1 along dimension k moves the flat cell index by strides[k].
    """
    result = []
    stride = 1
    for length in lengths:
        result.append(stride)
        stride *= int(length)
    return result


def unwrap_index(lengths: Sequence[int], index: int) -> Optional[Coordinate]:
    """
    Decode a flat cell index into a coordinate.

    Args:
        lengths: Per-dimension grid lengths
        index: Flat cell index

    Returns:
        The coordinate tuple, or None if the index lies outside the grid
    """
    if index < 0:
        return None
    result = []
    remaining = index
    for length in lengths:
        result.append(remaining % length)
        remaining //= length
    if remaining != 0:
        return None
    return tuple(result)


def wrap_index(lengths: Sequence[int], coordinate: Sequence[int]) -> Optional[int]:
    """Encode a coordinate into its flat cell index, or None if out of range."""
    if not in_bounds(lengths, coordinate):
        return None
    index = 0
    for component, stride in zip(coordinate, strides(lengths)):
        index += int(component) * stride
    return index


def in_bounds(lengths: Sequence[int], coordinate: Sequence[int]) -> bool:
    """Check that the coordinate has the grid's arity and lies inside it."""
    if len(coordinate) != len(lengths):
        return False
    return all(0 <= c < length for c, length in zip(coordinate, lengths))


def offset(coordinate: Sequence[int], dimension: int, amount: int) -> Coordinate:
    """Return a copy of the coordinate shifted by amount along dimension."""
    shifted = list(coordinate)
    shifted[dimension] += amount
    return tuple(shifted)


def iter_cells(lengths: Sequence[int]) -> Iterator[Coordinate]:
    """Yield every coordinate of the grid in cell index order."""
    for index in range(cell_count(lengths)):
        yield unwrap_index(lengths, index)


def corner(lengths: Sequence[int]) -> Coordinate:
    """The cell opposite the origin (every component at its last index)."""
    return tuple(int(length) - 1 for length in lengths)
