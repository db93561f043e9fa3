"""
Spanning-tree maze generation over an N-dimensional hyper-grid.

The maze is built with a randomized Kruskal pass: every pair of cells that
differ by one step along a single dimension is a candidate edge, the
candidates are processed in a seeded random order, and an edge is kept
only when it joins two previously unconnected regions. The retained edges
form a spanning tree, so every cell is reachable from every other cell by
exactly one path.
"""

import logging
from typing import Iterator, List, Optional, Sequence, Set, Tuple, Union

import numpy as np

from .disjoint_set import DisjointSet
from .grid import (
    Coordinate,
    Direction,
    Lengths,
    cell_count,
    in_bounds,
    iter_cells,
    offset,
    strides,
    unwrap_index,
)

logger = logging.getLogger(__name__)


RandomSource = Union[int, np.integer, np.random.Generator, None]
Edge = Tuple[Coordinate, Coordinate]


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class MazeError(Exception):
    pass


class InvalidDimensionsError(MazeError, ValueError):
    """Raised when a maze is requested with no dimensions or a non-positive length."""
    pass


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def validate_lengths(lengths: Sequence[int]) -> Lengths:
    """
    Normalise and check per-dimension lengths.

    Args:
        lengths: One positive integer per dimension

    Returns:
        The lengths as a tuple of ints

    Raises:
        InvalidDimensionsError: If there are no dimensions or any length is
            not a positive integer
    """
    try:
        values = list(lengths)
    except TypeError:
        raise InvalidDimensionsError(f"Lengths must be a sequence of integers, got {lengths!r}")

    if not values:
        raise InvalidDimensionsError("A maze needs at least one dimension")

    normalised = []
    for dim, length in enumerate(values):
        if isinstance(length, bool) or not isinstance(length, (int, np.integer)):
            raise InvalidDimensionsError(
                f"Length of dimension {dim} must be an integer, got {length!r}"
            )
        if length < 1:
            raise InvalidDimensionsError(
                f"Length of dimension {dim} must be at least 1, got {length}"
            )
        normalised.append(int(length))
    return tuple(normalised)


def resolve_rng(rng: RandomSource) -> Tuple[np.random.Generator, Optional[int]]:
    """
    Turn a random source into a numpy Generator.

    Returns:
        Tuple of (generator, seed) where seed is None unless an integer
        seed was supplied
    """
    if isinstance(rng, np.random.Generator):
        return rng, None
    if rng is None:
        return np.random.default_rng(), None
    if isinstance(rng, bool) or not isinstance(rng, (int, np.integer)):
        raise TypeError(f"Random source must be an int seed or numpy Generator, got {type(rng).__name__}")
    seed = int(rng)
    return np.random.default_rng(seed), seed


def _candidate_edges(lengths: Lengths) -> Tuple[np.ndarray, np.ndarray]:
    """
    Enumerate every candidate edge as (source cell index, dimension).

    The target of each candidate is the +1 neighbour of the source along
    the dimension, so sources on the last index of a dimension are skipped.
    """
    count = cell_count(lengths)
    indices = np.arange(count, dtype=np.int64)
    sources = []
    dims = []
    for dim, (length, stride) in enumerate(zip(lengths, strides(lengths))):
        if length < 2:
            continue
        along = (indices // stride) % length
        eligible = indices[along < length - 1]
        sources.append(eligible)
        dims.append(np.full(len(eligible), dim, dtype=np.int64))

    if not sources:
        empty = np.zeros(0, dtype=np.int64)
        return empty, empty
    return np.concatenate(sources), np.concatenate(dims)


# ---------------------------------------------------------------------------
# Maze graph
# ---------------------------------------------------------------------------

class MazeGraph:
    """
    Immutable spanning-tree maze over a D-dimensional grid.

    Edges ("walks") are stored as canonical coordinate pairs, lower
    endpoint first, in a hash set so adjacency queries are O(1).
    """

    def __init__(self, lengths: Sequence[int], rng: RandomSource = None):
        """
        Generate a maze.

        Args:
            lengths: Side length of the grid along each dimension
            rng: Integer seed, numpy Generator, or None for fresh entropy

        Raises:
            InvalidDimensionsError: If lengths is empty or holds a length < 1
        """
        self._lengths = validate_lengths(lengths)
        generator, self._seed = resolve_rng(rng)
        self._strides = strides(self._lengths)
        self._cell_count = cell_count(self._lengths)
        self._walks: Set[Edge] = set()

        logger.info(
            "Generating %dD maze %s: %d cells",
            len(self._lengths), "x".join(str(n) for n in self._lengths), self._cell_count
        )
        self._generate(generator)
        logger.info("Maze generated with %d passages", len(self._walks))

    @classmethod
    def from_edges(cls, lengths: Sequence[int], edges: Sequence[Edge]) -> 'MazeGraph':
        """
        Rebuild a maze from an explicit edge list (e.g. a JSON export).

        The edges are taken as given; run the maze validation checks to
        confirm they form a spanning tree.
        """
        maze = cls.__new__(cls)
        maze._lengths = validate_lengths(lengths)
        maze._seed = None
        maze._strides = strides(maze._lengths)
        maze._cell_count = cell_count(maze._lengths)
        maze._walks = set()
        for a, b in edges:
            a, b = tuple(int(c) for c in a), tuple(int(c) for c in b)
            maze._walks.add((a, b) if a <= b else (b, a))
        return maze

    def _generate(self, generator: np.random.Generator) -> None:
        sources, dims = _candidate_edges(self._lengths)
        logger.debug("Candidate edges: %d", len(sources))

        # Random priority per candidate, processed lowest first
        priorities = generator.random(len(sources))
        order = np.argsort(priorities, kind="stable")

        cells = DisjointSet(self._cell_count)
        for i in order:
            if cells.components == 1:
                break
            source = int(sources[i])
            dim = int(dims[i])
            target = source + self._strides[dim]
            if cells.try_merge(source, target):
                a = unwrap_index(self._lengths, source)
                self._walks.add((a, offset(a, dim, 1)))

    # -- accessors --

    @property
    def lengths(self) -> Lengths:
        return self._lengths

    @property
    def dims(self) -> int:
        return len(self._lengths)

    @property
    def cell_count(self) -> int:
        return self._cell_count

    @property
    def edge_count(self) -> int:
        return len(self._walks)

    @property
    def seed(self) -> Optional[int]:
        """Integer seed the maze was generated from, if one was given."""
        return self._seed

    def iter_edges(self) -> Iterator[Edge]:
        """Yield every passage as a (lower, upper) coordinate pair, sorted."""
        return iter(sorted(self._walks))

    def iter_cells(self) -> Iterator[Coordinate]:
        return iter_cells(self._lengths)

    # -- queries --

    def has_edge(self, a: Sequence[int], b: Sequence[int]) -> bool:
        """Check for a passage between two cells, in either orientation."""
        a, b = tuple(a), tuple(b)
        return (a, b) in self._walks or (b, a) in self._walks

    def can_move(
        self,
        coordinate: Sequence[int],
        dimension: int,
        direction: Direction = Direction.POSITIVE
    ) -> Optional[bool]:
        """
        Check whether the explorer can step from a cell along one dimension.

        Args:
            coordinate: Cell to step from
            dimension: Dimension index to step along
            direction: POSITIVE for +1, NEGATIVE for -1

        Returns:
            True if a passage connects the two cells, False if a wall
            separates them, None if either cell lies outside the grid or
            the dimension does not exist
        """
        if not 0 <= dimension < len(self._lengths):
            return None
        point = tuple(coordinate)
        if not in_bounds(self._lengths, point):
            return None
        target = offset(point, dimension, direction.step)
        if not in_bounds(self._lengths, target):
            return None

        if direction is Direction.POSITIVE:
            return (point, target) in self._walks
        return (target, point) in self._walks

    def neighbors(self, coordinate: Sequence[int]) -> List[Coordinate]:
        """Cells reachable from coordinate through a single open passage."""
        point = tuple(coordinate)
        result = []
        for dim in range(len(self._lengths)):
            for direction in (Direction.NEGATIVE, Direction.POSITIVE):
                if self.can_move(point, dim, direction):
                    result.append(offset(point, dim, direction.step))
        return result

    def __repr__(self) -> str:
        return f"MazeGraph(lengths={self._lengths}, edges={len(self._walks)})"
