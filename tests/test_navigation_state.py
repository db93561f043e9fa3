import itertools

import pytest

from hypermaze.generators.maze import Direction, InvalidDimensionsError, MazeGraph
from hypermaze.navigation import (
    AxisChanged,
    AxisSlot,
    NavigationState,
    PositionChanged,
    WallKind,
    WallSegment,
)


def test_initial_state(cube_level):
    assert cube_level.position == (0, 0, 0)
    assert cube_level.axis == (0, 1)
    assert cube_level.focus == AxisSlot.X
    assert cube_level.dims_limit() == (4, 3, 2)
    assert cube_level.pos_limit(AxisSlot.X) == 4
    assert cube_level.pos_limit(AxisSlot.Y) == 3


def test_needs_two_dimensions():
    with pytest.raises(InvalidDimensionsError):
        NavigationState(MazeGraph((5,), 1))


def test_shift_axis_cycles_skipping_other_slot():
    level = NavigationState.generate((2, 2, 2, 2), 3)

    seen = []
    for _ in range(3):
        level.shift_axis(AxisSlot.X, Direction.POSITIVE)
        seen.append(level.axis)
    assert seen == [(2, 1), (3, 1), (0, 1)]

    level.shift_axis(AxisSlot.X, Direction.NEGATIVE)
    assert level.axis == (3, 1)


def test_shift_axis_y_slot():
    level = NavigationState.generate((2, 2, 2), 3)
    level.shift_axis(AxisSlot.Y, Direction.POSITIVE)
    assert level.axis == (0, 2)
    level.shift_axis(AxisSlot.Y, Direction.POSITIVE)
    assert level.axis == (0, 1)
    level.shift_axis(AxisSlot.Y, Direction.NEGATIVE)
    assert level.axis == (0, 2)


def test_shift_axis_two_dimensions_is_identity():
    level = NavigationState.generate((3, 3), 3)
    for slot, direction in itertools.product(AxisSlot, Direction):
        level.shift_axis(slot, direction)
        assert level.axis == (0, 1)


@pytest.mark.parametrize("dims", [3, 4, 5, 6])
def test_axis_invariant_under_random_shifts(dims):
    level = NavigationState.generate((2,) * dims, 11)
    moves = list(itertools.product(AxisSlot, Direction))
    for i in range(200):
        slot, direction = moves[(i * 7 + i // 3) % len(moves)]
        level.shift_axis(slot, direction)
        dim_x, dim_y = level.axis
        assert dim_x != dim_y
        assert 0 <= dim_x < dims
        assert 0 <= dim_y < dims


@pytest.mark.parametrize("direction", list(Direction))
def test_every_dimension_reachable_by_repeated_shifts(direction):
    dims = 5
    level = NavigationState.generate((2,) * dims, 11)
    other = level.axis_of(AxisSlot.Y)

    visited = set()
    for _ in range(dims - 1):
        level.shift_axis(AxisSlot.X, direction)
        visited.add(level.axis_of(AxisSlot.X))

    assert visited == set(range(dims)) - {other}


def test_move_along_corridor(corridor_level):
    for expected in range(1, 5):
        assert corridor_level.move_pos(AxisSlot.X, Direction.POSITIVE) is True
        assert corridor_level.position == (expected, 0)

    # Grid boundary
    assert corridor_level.move_pos(AxisSlot.X, Direction.POSITIVE) is False
    assert corridor_level.position == (4, 0)
    assert corridor_level.at_exit()

    for expected in range(3, -1, -1):
        assert corridor_level.move_pos(AxisSlot.X, Direction.NEGATIVE) is True
        assert corridor_level.position == (expected, 0)

    assert corridor_level.move_pos(AxisSlot.X, Direction.NEGATIVE) is False
    assert corridor_level.position == (0, 0)


def test_move_along_degenerate_dimension_is_noop(corridor_level):
    assert corridor_level.move_pos(AxisSlot.Y, Direction.POSITIVE) is False
    assert corridor_level.move_pos(AxisSlot.Y, Direction.NEGATIVE) is False
    assert corridor_level.position == (0, 0)


def test_moves_only_through_open_passages(cube_level):
    commands = list(itertools.product(AxisSlot, Direction))
    for i in range(300):
        if i % 17 == 0:
            cube_level.shift_axis(AxisSlot.Y, Direction.POSITIVE)
        slot, direction = commands[(i * 5 + i // 4) % len(commands)]
        dim = cube_level.axis_of(slot)
        before = cube_level.position
        allowed = cube_level.can_move(dim, direction)

        moved = cube_level.move_pos(slot, direction)

        assert moved is (allowed is True)
        if moved:
            assert cube_level.position[dim] == before[dim] + direction.step
            assert cube_level.maze.has_edge(before, cube_level.position)
        else:
            assert cube_level.position == before


def test_pos_projection(cube_level):
    cube_level._position = [2, 1, 1]
    assert cube_level.pos(AxisSlot.X) == 2
    assert cube_level.pos(AxisSlot.Y) == 1
    assert cube_level.pos_in() == (2, 1)
    assert cube_level.pos_in((2, 0)) == (1, 2)
    assert cube_level.pos_in((1, 1)) is None
    assert cube_level.pos_in((0, 3)) is None


def test_square_plane_walls(square_maze):
    level = NavigationState(square_maze)
    walls = list(level.iter_walls())

    interior = [w for w in walls if w.kind == WallKind.INTERIOR]
    border = [w for w in walls if w.is_border]
    # 12 candidate passages in a 3x3 grid, 8 of them open
    assert len(interior) == 4
    # Far edge along each visible axis
    assert len(border) == 6
    assert list(level.iter_walls(include_border=False)) == interior


def test_walls_match_maze_queries(cube_level):
    cube_level._position = [0, 0, 1]
    for wall in cube_level.iter_walls():
        (x, y), end = wall.start, wall.end
        dim = 0 if end == (x + 1, y) else 1
        assert end in ((x + 1, y), (x, y + 1))
        cell = (x, y, 1)
        expected = None if wall.is_border else False
        assert cube_level.maze.can_move(cell, dim) is expected


def test_iter_walls_is_restartable(cube_level):
    assert list(cube_level.iter_walls()) == list(cube_level.iter_walls())


def test_walls_in_other_plane(cube_level):
    walls = cube_level.walls_in(2, 0)
    assert walls is not None
    for wall in walls:
        assert isinstance(wall, WallSegment)
        assert 0 <= wall.start[0] < 2
        assert 0 <= wall.start[1] < 4


def test_walls_in_invalid_pair(cube_level):
    assert cube_level.walls_in(1, 1) is None
    assert cube_level.walls_in(0, 3) is None


def test_listeners_receive_changes(cube_level):
    events = []
    cube_level.add_listener(events.append)

    cube_level.shift_axis(AxisSlot.X, Direction.POSITIVE)
    assert events == [AxisChanged((2, 1))]

    events.clear()
    start = cube_level.position
    moved = cube_level.move_pos(AxisSlot.X, Direction.POSITIVE)
    if moved:
        assert events == [PositionChanged(cube_level.position)]
    else:
        assert events == []
        assert cube_level.position == start

    cube_level.remove_listener(events.append)
    events.clear()
    cube_level.shift_axis(AxisSlot.X, Direction.POSITIVE)
    assert events == []


def test_blocked_move_emits_nothing(corridor_level):
    events = []
    corridor_level.add_listener(events.append)
    corridor_level.move_pos(AxisSlot.X, Direction.NEGATIVE)
    corridor_level.move_pos(AxisSlot.Y, Direction.POSITIVE)
    assert events == []


def test_failing_listener_does_not_block_navigation(corridor_level):
    def broken(event):
        raise RuntimeError("renderer crashed")

    received = []
    corridor_level.add_listener(broken)
    corridor_level.add_listener(received.append)

    assert corridor_level.move_pos(AxisSlot.X, Direction.POSITIVE) is True
    assert received == [PositionChanged((1, 0))]


def test_focus_shortcuts():
    level = NavigationState.generate((2, 2, 2), 5)

    # Focus on X: Q/E rotate the Y slot
    level.shift_off_axis(Direction.POSITIVE)
    assert level.axis == (0, 2)

    level.flip_focus()
    assert level.focus == AxisSlot.Y
    level.shift_off_axis(Direction.POSITIVE)
    assert level.axis == (1, 2)


def test_exit_position(cube_level):
    assert cube_level.exit_position == (3, 2, 1)
    assert not cube_level.at_exit()
