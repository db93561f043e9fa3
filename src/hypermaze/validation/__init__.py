"""
Validation package for hypermaze.

Structural checks for generated mazes and navigation states.

Public API:
    - ValidationResult, ValidationIssue, Severity: Core result types
    - ValidationRule: Rule definition with message templates
    - UnifiedValidator: Central orchestrator for all validation
    - ValidationError: Exception raised on FAIL issues
"""

from .core import (
    Severity,
    ValidationIssue,
    ValidationResult,
    ValidationError,
)
from .rules import ValidationRule, ALL_RULES
from .unified_validator import UnifiedValidator
from .checks import validate_maze_structure, validate_navigation_state

__all__ = [
    # Core types
    'Severity',
    'ValidationIssue',
    'ValidationResult',
    'ValidationError',
    # Rules
    'ValidationRule',
    'ALL_RULES',
    # Validator
    'UnifiedValidator',
    # Checks
    'validate_maze_structure',
    'validate_navigation_state',
]
