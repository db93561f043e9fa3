"""
Navigation state validation checks.

- Visible axes are two distinct in-range dimensions (NAV-001)
- Explorer position lies on the grid (NAV-002)
"""

from ...generators.maze import in_bounds
from ...navigation import NavigationState
from ..core import ValidationResult
from ..rules import NAV_001, NAV_002


def validate_navigation_state(state: NavigationState) -> ValidationResult:
    """Validate the mutable part of a NavigationState.

    Args:
        state: Navigation state to inspect

    Returns:
        ValidationResult with NAV issues
    """
    result = ValidationResult(checks_run=["navigation_state"])
    dim_x, dim_y = state.axis
    dims = state.dims

    if dim_x == dim_y or not (0 <= dim_x < dims and 0 <= dim_y < dims):
        result.add_issue(NAV_001.issue(axis=state.axis, dims=dims))

    if not in_bounds(state.dims_limit(), state.position):
        result.add_issue(NAV_002.issue(
            location=str(state.position),
            position=state.position,
            lengths=state.dims_limit(),
        ))

    return result
