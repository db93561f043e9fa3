"""
Navigation Module

Explorer state over a generated maze: position, visible axes, movement
gated by walls, and the projected wall plane consumed by renderers.
"""

from .navigation_state import (
    NavigationState,
    AxisSlot,
    AxisPair,
    WallKind,
    WallSegment,
    AxisChanged,
    PositionChanged,
    NavigationEvent,
    NavigationListener,
)

__all__ = [
    'NavigationState',
    'AxisSlot',
    'AxisPair',
    'WallKind',
    'WallSegment',
    'AxisChanged',
    'PositionChanged',
    'NavigationEvent',
    'NavigationListener',
]
