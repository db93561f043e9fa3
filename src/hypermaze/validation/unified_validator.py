"""
Unified validator orchestrator.

Central class that coordinates the maze and navigation checks and applies
the session-wide validation policy (strict mode, enable switch, history).
"""

import logging
from typing import List

from ..generators.maze import MazeGraph
from ..navigation import NavigationState
from .core import Severity, ValidationError, ValidationResult
from .checks.maze_checks import validate_maze_structure
from .checks.navigation_checks import validate_navigation_state

logger = logging.getLogger(__name__)


class UnifiedValidator:
    """Central orchestrator for all validation checks.

    Attributes:
        strict_mode: If True, treat WARN as FAIL
        enabled: If False, skip all validation (for performance testing)
        thorough: If True, run the per-cell query checks as well
    """

    def __init__(self, strict_mode: bool = False, enabled: bool = True, thorough: bool = True):
        """Initialize the unified validator.

        Args:
            strict_mode: If True, promote WARN to FAIL
            enabled: If False, skip validation (returns empty results)
            thorough: If False, skip the O(cells * dims) query checks
        """
        self.strict_mode = strict_mode
        self.enabled = enabled
        self.thorough = thorough
        self._validation_history: List[ValidationResult] = []

    def validate_maze(self, maze: MazeGraph) -> ValidationResult:
        """Validate the spanning-tree structure of a maze.

        Checks MAZE-001 through MAZE-007.

        Args:
            maze: Generated maze

        Returns:
            ValidationResult with any structural issues
        """
        if not self.enabled:
            return ValidationResult()

        result = validate_maze_structure(maze, thorough=self.thorough)
        self._apply_strict_mode(result)
        self._record_result(result)
        if result.failed:
            logger.warning("Maze validation failed: %d error(s)", len(result.errors))
        else:
            logger.debug("Maze validation passed (%s)", ", ".join(result.checks_run))
        return result

    def validate_level(self, state: NavigationState) -> ValidationResult:
        """Validate a navigation state together with the maze it owns.

        Args:
            state: Level to validate

        Returns:
            Merged ValidationResult
        """
        if not self.enabled:
            return ValidationResult()

        result = ValidationResult()
        result.merge(self.validate_maze(state.maze))
        nav_result = validate_navigation_state(state)
        self._apply_strict_mode(nav_result)
        self._record_result(nav_result)
        return result.merge(nav_result)

    def require_valid(self, state: NavigationState) -> ValidationResult:
        """Validate a level and raise if any FAIL issue was found.

        Raises:
            ValidationError: If the level fails validation
        """
        result = self.validate_level(state)
        if result.failed:
            raise ValidationError(result)
        return result

    def get_history(self) -> List[ValidationResult]:
        """Get validation history.

        Returns:
            List of all ValidationResult objects from this session
        """
        return self._validation_history.copy()

    def clear_history(self) -> None:
        self._validation_history.clear()

    def _apply_strict_mode(self, result: ValidationResult) -> None:
        """Apply strict mode to a result (promote WARN to FAIL)."""
        if self.strict_mode:
            for issue in result.issues:
                if issue.severity == Severity.WARN:
                    issue.severity = Severity.FAIL

    def _record_result(self, result: ValidationResult) -> None:
        self._validation_history.append(result)

