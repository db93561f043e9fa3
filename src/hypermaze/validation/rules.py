"""
Validation rule definitions.

Each rule has:
- Code: Unique identifier (e.g., "MAZE-001")
- Severity: FAIL, WARN, or INFO
- Message template: Human-readable description
- Remediation: Suggested fix

Rules are organized by category:
- MAZE: Spanning-tree structure of a generated maze
- NAV: Navigation state invariants
"""

from dataclasses import dataclass
from typing import Optional

from .core import Severity, ValidationIssue


@dataclass(frozen=True)
class ValidationRule:
    """Definition of a validation rule.

    Attributes:
        code: Unique rule code (e.g., "MAZE-001")
        severity: Default severity for this rule
        message_template: Template for error message (use {placeholders})
        remediation_template: Template for suggested fix
        description: Full description of the rule
    """
    code: str
    severity: Severity
    message_template: str
    remediation_template: Optional[str] = None
    description: Optional[str] = None

    def format_message(self, **kwargs) -> str:
        """Format the message template with provided values."""
        return self.message_template.format(**kwargs)

    def format_remediation(self, **kwargs) -> Optional[str]:
        """Format the remediation template with provided values."""
        if self.remediation_template:
            return self.remediation_template.format(**kwargs)
        return None

    def issue(self, location: Optional[str] = None, **kwargs) -> ValidationIssue:
        """Build a ValidationIssue for this rule."""
        return ValidationIssue(
            severity=self.severity,
            code=self.code,
            message=self.format_message(**kwargs),
            location=location,
            remediation=self.format_remediation(**kwargs),
        )


# =============================================================================
# MAZE STRUCTURE RULES (MAZE)
# =============================================================================

MAZE_001 = ValidationRule(
    code="MAZE-001",
    severity=Severity.FAIL,
    message_template="Maze has {actual} passages, a spanning tree over {cells} cells needs {expected}",
    remediation_template="Regenerate the maze; passages were added or lost",
    description="Edge count equals cell count minus one",
)

MAZE_002 = ValidationRule(
    code="MAZE-002",
    severity=Severity.FAIL,
    message_template="{unreached} of {cells} cells are unreachable from the origin",
    remediation_template="Regenerate the maze; the passage set is disconnected",
    description="Every cell is reachable from the origin",
)

MAZE_003 = ValidationRule(
    code="MAZE-003",
    severity=Severity.FAIL,
    message_template="Passage {edge} closes a cycle",
    remediation_template="Remove redundant passages so each pair of cells has one path",
    description="The passage set is acyclic",
)

MAZE_004 = ValidationRule(
    code="MAZE-004",
    severity=Severity.FAIL,
    message_template="Passage {edge} does not join two adjacent in-range cells",
    remediation_template="Passages must differ by one step along exactly one dimension",
    description="Every passage joins grid neighbours",
)

MAZE_005 = ValidationRule(
    code="MAZE-005",
    severity=Severity.FAIL,
    message_template="Forward and backward queries disagree between {a} and {b}",
    description="Edge presence does not depend on the query direction",
)

MAZE_006 = ValidationRule(
    code="MAZE-006",
    severity=Severity.FAIL,
    message_template="Query past the last cell along dimension {dim} at {cell} returned {value}",
    description="Forward queries from the last index of a dimension return None",
)

MAZE_007 = ValidationRule(
    code="MAZE-007",
    severity=Severity.WARN,
    message_template="Dimension {dim} has length 1 and contributes no passages",
    remediation_template="Drop dimension {dim} or give it a length of at least 2",
    description="Degenerate dimensions generate but cannot be explored along",
)


# =============================================================================
# NAVIGATION RULES (NAV)
# =============================================================================

NAV_001 = ValidationRule(
    code="NAV-001",
    severity=Severity.FAIL,
    message_template="Visible axes {axis} are not two distinct dimensions below {dims}",
    description="The two visible axes are distinct and in range",
)

NAV_002 = ValidationRule(
    code="NAV-002",
    severity=Severity.FAIL,
    message_template="Explorer position {position} lies outside the grid {lengths}",
    description="The explorer always stands on a grid cell",
)


ALL_RULES = {
    rule.code: rule
    for rule in (
        MAZE_001, MAZE_002, MAZE_003, MAZE_004, MAZE_005, MAZE_006, MAZE_007,
        NAV_001, NAV_002,
    )
}
