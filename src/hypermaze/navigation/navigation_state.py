"""
Explorer navigation over an N-dimensional maze.

A NavigationState owns a MazeGraph together with the explorer's position
and the two dimensions currently projected onto the 2D view. Renderers
read the projected plane through the derived queries (pos, pos_limit,
iter_walls); input layers drive it through shift_axis and move_pos.

Illegal navigation (walking into a wall, off the grid, or rotating axes in
a maze too small to rotate) is absorbed as a no-op.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, List, Optional, Sequence, Tuple, Union

from ..generators.maze import (
    Coordinate,
    Direction,
    InvalidDimensionsError,
    Lengths,
    MazeGraph,
    RandomSource,
    corner,
)

logger = logging.getLogger(__name__)


AxisPair = Tuple[int, int]


class AxisSlot(Enum):
    """On-screen slot a dimension can be bound to."""
    X = 0
    Y = 1

    def invert(self) -> 'AxisSlot':
        return AxisSlot.Y if self is AxisSlot.X else AxisSlot.X


class WallKind(Enum):
    """Why a wall segment is drawn."""
    INTERIOR = "interior"  # Passage absent between two cells
    BORDER = "border"      # Edge of the grid


@dataclass(frozen=True)
class WallSegment:
    """
    Wall between two points of the projected 2D plane.

    Attributes:
        start: Plane cell the wall belongs to (x, y)
        end: Forward neighbour across the wall (x+1, y) or (x, y+1)
        kind: INTERIOR for a missing passage, BORDER for the grid boundary
    """
    start: Tuple[int, int]
    end: Tuple[int, int]
    kind: WallKind = WallKind.INTERIOR

    @property
    def is_border(self) -> bool:
        return self.kind == WallKind.BORDER


# ---------------------------------------------------------------------------
# Change events
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AxisChanged:
    """Emitted after the visible axes changed."""
    axis: AxisPair


@dataclass(frozen=True)
class PositionChanged:
    """Emitted after the explorer moved."""
    position: Coordinate


NavigationEvent = Union[AxisChanged, PositionChanged]
NavigationListener = Callable[[NavigationEvent], None]


class NavigationState:
    """
    Mutable explorer state over an immutable maze.

    Attributes:
        maze: The owned MazeGraph
        position: Explorer coordinate in all dimensions
        axis: (dim_x, dim_y), the dimensions bound to the X and Y slots
        focus: Slot that the off-axis shortcuts keep fixed
    """

    def __init__(self, maze: MazeGraph):
        if maze.dims < 2:
            raise InvalidDimensionsError(
                f"Navigation needs at least 2 dimensions, maze has {maze.dims}"
            )
        self.maze = maze
        self._position: List[int] = [0] * maze.dims
        self._axis: List[int] = [0, 1]
        self.focus = AxisSlot.X
        self._listeners: List[NavigationListener] = []

    @classmethod
    def generate(cls, lengths: Sequence[int], rng: RandomSource = None) -> 'NavigationState':
        """Generate a fresh maze and start exploring it at the origin."""
        return cls(MazeGraph(lengths, rng))

    # -- listeners --

    def add_listener(self, listener: NavigationListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: NavigationListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, event: NavigationEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Navigation listener failed on %s", type(event).__name__)

    # -- read-only state --

    @property
    def dims(self) -> int:
        return self.maze.dims

    @property
    def axis(self) -> AxisPair:
        return (self._axis[0], self._axis[1])

    @property
    def position(self) -> Coordinate:
        return tuple(self._position)

    def axis_of(self, slot: AxisSlot) -> int:
        """Dimension currently bound to a slot."""
        return self._axis[slot.value]

    def dims_limit(self) -> Lengths:
        """Length of every dimension."""
        return self.maze.lengths

    def pos_limit(self, slot: AxisSlot) -> int:
        """Length of the dimension bound to a slot (plane width or height)."""
        return self.maze.lengths[self.axis_of(slot)]

    def pos(self, slot: AxisSlot) -> int:
        """Explorer coordinate along the dimension bound to a slot."""
        return self._position[self.axis_of(slot)]

    def pos_in(self, axis: Optional[AxisPair] = None) -> Optional[Tuple[int, int]]:
        """
        Explorer coordinate projected onto a pair of dimensions.

        Args:
            axis: (dim_x, dim_y); defaults to the visible axes

        Returns:
            (x, y) or None if the pair is not two distinct valid dimensions
        """
        dim_x, dim_y = self.axis if axis is None else axis
        if not self._valid_pair(dim_x, dim_y):
            return None
        return (self._position[dim_x], self._position[dim_y])

    def can_move(self, dimension: int, direction: Direction) -> Optional[bool]:
        """Maze adjacency query evaluated at the explorer's position."""
        return self.maze.can_move(self._position, dimension, direction)

    @property
    def exit_position(self) -> Coordinate:
        return corner(self.maze.lengths)

    def at_exit(self) -> bool:
        """True once the explorer reaches the cell opposite the origin."""
        return self.position == self.exit_position

    # -- mutation --

    def shift_axis(self, slot: AxisSlot, direction: Direction) -> None:
        """
        Rebind a slot to the next (or previous) dimension.

        Cycles through every dimension except the one held by the other
        slot, wrapping around, so the two visible axes stay distinct.
        """
        dims = self.dims
        if dims < 2:
            return

        current = self._axis[slot.value]
        other = self._axis[slot.invert().value]

        linear = current - 1 if current > other else current
        linear = (linear + direction.step) % (dims - 1)
        dest = linear + 1 if linear >= other else linear

        if dest == current:
            return
        self._axis[slot.value] = dest
        logger.debug("Axis %s now bound to dimension %d", slot.name, dest)
        self._emit(AxisChanged(self.axis))

    def move_pos(self, slot: AxisSlot, direction: Direction) -> bool:
        """
        Step the explorer one cell along the dimension bound to a slot.

        The move happens only when the maze reports an open passage; walls
        and the grid boundary leave the position unchanged.

        Returns:
            True if the explorer moved
        """
        dim = self.axis_of(slot)
        probe = list(self._position)
        if direction is Direction.NEGATIVE:
            if probe[dim] == 0:
                return False
            probe[dim] -= 1

        # The forward edge from the lower cell covers both directions
        if self.maze.can_move(probe, dim, Direction.POSITIVE) is not True:
            return False

        self._position[dim] += direction.step
        logger.debug("Explorer moved to %s", self.position)
        self._emit(PositionChanged(self.position))
        return True

    def flip_focus(self) -> None:
        """Swap which slot is focused."""
        self.focus = self.focus.invert()

    def shift_off_axis(self, direction: Direction) -> None:
        """Rotate the dimension of the slot that is not focused."""
        self.shift_axis(self.focus.invert(), direction)

    # -- walls --

    def _valid_pair(self, dim_x: int, dim_y: int) -> bool:
        return dim_x != dim_y and 0 <= dim_x < self.dims and 0 <= dim_y < self.dims

    def _wall_kind(self, cursor: Sequence[int], dim: int) -> Optional[WallKind]:
        walkable = self.maze.can_move(cursor, dim, Direction.POSITIVE)
        if walkable is None:
            return WallKind.BORDER
        if not walkable:
            return WallKind.INTERIOR
        return None

    def walls_in(
        self,
        dim_x: int,
        dim_y: int,
        include_border: bool = True
    ) -> Optional[Iterator[WallSegment]]:
        """
        Walls of the plane spanned by two dimensions through the explorer.

        Every coordinate outside the plane is held at the explorer's
        position. Each plane cell contributes at most two segments, one per
        forward direction.

        Args:
            dim_x: Dimension mapped to plane X
            dim_y: Dimension mapped to plane Y
            include_border: Also yield segments on the far grid boundary

        Returns:
            A fresh generator of WallSegment, or None for an invalid pair
        """
        if not self._valid_pair(dim_x, dim_y):
            return None
        return self._iter_plane_walls(dim_x, dim_y, self.position, include_border)

    def _iter_plane_walls(
        self,
        dim_x: int,
        dim_y: int,
        position: Coordinate,
        include_border: bool
    ) -> Iterator[WallSegment]:
        length_x = self.maze.lengths[dim_x]
        length_y = self.maze.lengths[dim_y]
        cursor = list(position)

        for x in range(length_x):
            for y in range(length_y):
                cursor[dim_x] = x
                cursor[dim_y] = y
                for dim, end in ((dim_x, (x + 1, y)), (dim_y, (x, y + 1))):
                    kind = self._wall_kind(cursor, dim)
                    if kind is None:
                        continue
                    if kind == WallKind.BORDER and not include_border:
                        continue
                    yield WallSegment((x, y), end, kind)

    def iter_walls(self, include_border: bool = True) -> Iterator[WallSegment]:
        """Walls of the currently visible plane (see walls_in)."""
        dim_x, dim_y = self.axis
        return self._iter_plane_walls(dim_x, dim_y, self.position, include_border)

    def __repr__(self) -> str:
        return f"NavigationState(position={self.position}, axis={self.axis})"
