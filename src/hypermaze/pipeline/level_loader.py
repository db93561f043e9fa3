"""
Level loading for hypermaze sessions.

Turns a LevelSettings description (dimension lengths plus seed) into a
ready-to-explore NavigationState: resolves the seed, generates the maze,
optionally runs the validation gate, and reports what happened in a
LevelLoadResult.
"""

import logging
import random
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from ..generators.maze import InvalidDimensionsError, MazeError, validate_lengths
from ..navigation import NavigationState
from ..validation import UnifiedValidator, ValidationError, ValidationResult

logger = logging.getLogger(__name__)


DEFAULT_SEED = 123456789
DEFAULT_LENGTHS = (2, 2)

# Dimension counts the level shell offers; the generator itself has no cap
MIN_LEVEL_DIMENSIONS = 2
TYPICAL_MAX_DIMENSIONS = 6


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class LoadStage(Enum):
    RESOLVE_SEED = "resolve_seed"
    GENERATE = "generate"
    VALIDATE = "validate"
    COMPLETE = "complete"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class LevelLoadError(MazeError):
    pass


# ---------------------------------------------------------------------------
# Settings / Result dataclasses
# ---------------------------------------------------------------------------

@dataclass
class LevelSettings:
    # Grid
    lengths: Sequence[int] = DEFAULT_LENGTHS

    # Seeding for reproducible generation
    seed: Optional[int] = DEFAULT_SEED  # None = random seed, otherwise deterministic

    # Validation gate
    validate: bool = False
    strict_validation: bool = False

    # Misc
    name: str = "level"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "lengths": [int(n) for n in self.lengths],
            "seed": self.seed,
            "validate": self.validate,
            "strict_validation": self.strict_validation,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LevelSettings':
        seed = data.get("seed", DEFAULT_SEED)
        return cls(
            lengths=tuple(data.get("lengths", DEFAULT_LENGTHS)),
            seed=int(seed) if seed is not None else None,
            validate=bool(data.get("validate", False)),
            strict_validation=bool(data.get("strict_validation", False)),
            name=data.get("name", "level"),
        )


@dataclass
class LevelLoadResult:
    success: bool
    level: Optional[NavigationState] = None
    seed: Optional[int] = None
    stages_completed: List[LoadStage] = field(default_factory=list)
    validation: Optional[ValidationResult] = None
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def total_time(self) -> float:
        return self.metrics.get("total_time", 0.0)

    def add_error(self, error: str, stage: Optional[LoadStage] = None):
        if stage:
            error = f"[{stage.value}] {error}"
        self.errors.append(error)

    def add_warning(self, warning: str, stage: Optional[LoadStage] = None):
        if stage:
            warning = f"[{stage.value}] {warning}"
        self.warnings.append(warning)


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------

def resolve_seed(seed: Optional[int]) -> int:
    """Return the seed to generate with, drawing a random one for None."""
    if seed is not None:
        return int(seed)
    return random.randint(0, 2**63 - 1)


class LevelLoader:
    """Builds a NavigationState from LevelSettings."""

    def __init__(self, settings: Optional[LevelSettings] = None,
                 validator: Optional[UnifiedValidator] = None):
        self.settings = settings or LevelSettings()
        self.validator = validator or UnifiedValidator(strict_mode=self.settings.strict_validation)
        self.current_stage = LoadStage.RESOLVE_SEED
        self._validate_settings()

    def _validate_settings(self):
        errors = []
        try:
            lengths = validate_lengths(self.settings.lengths)
        except InvalidDimensionsError as e:
            raise LevelLoadError(f"Invalid settings: {e}") from e

        if len(lengths) < MIN_LEVEL_DIMENSIONS:
            errors.append(f"A level needs at least {MIN_LEVEL_DIMENSIONS} dimensions, got {len(lengths)}")
        seed = self.settings.seed
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int) or seed < 0):
            errors.append(f"Seed must be a non-negative integer or None, got {seed!r}")
        if errors:
            raise LevelLoadError(f"Invalid settings: {'; '.join(errors)}")

    def load(self) -> LevelLoadResult:
        """
        Generate the level described by the settings.

        Returns:
            LevelLoadResult; success is False when the validation gate
            rejected the maze
        """
        result = LevelLoadResult(success=False)
        start_time = time.time()

        self.current_stage = LoadStage.RESOLVE_SEED
        actual_seed = resolve_seed(self.settings.seed)
        result.seed = actual_seed
        result.metrics["seed"] = actual_seed
        result.stages_completed.append(self.current_stage)
        logger.info("Generation seed: %d", actual_seed)

        lengths = validate_lengths(self.settings.lengths)
        if len(lengths) > TYPICAL_MAX_DIMENSIONS:
            result.add_warning(
                f"{len(lengths)} dimensions exceeds the usual {TYPICAL_MAX_DIMENSIONS}",
                LoadStage.GENERATE,
            )

        self.current_stage = LoadStage.GENERATE
        level = NavigationState.generate(lengths, actual_seed)
        result.stages_completed.append(self.current_stage)
        result.metrics["cell_count"] = level.maze.cell_count
        result.metrics["edge_count"] = level.maze.edge_count
        result.metrics["generation_time"] = time.time() - start_time

        if self.settings.validate:
            self.current_stage = LoadStage.VALIDATE
            try:
                result.validation = self.validator.require_valid(level)
            except ValidationError as e:
                result.validation = e.result
                for issue in e.result.errors:
                    result.add_error(str(issue), LoadStage.VALIDATE)
                result.metrics["total_time"] = time.time() - start_time
                return result
            for issue in result.validation.warnings:
                result.add_warning(str(issue), LoadStage.VALIDATE)
            result.stages_completed.append(self.current_stage)

        self.current_stage = LoadStage.COMPLETE
        result.level = level
        result.success = True
        result.metrics["total_time"] = time.time() - start_time
        logger.info(
            "Level '%s' loaded: %d cells, %d passages in %.3fs",
            self.settings.name, level.maze.cell_count, level.maze.edge_count,
            result.metrics["total_time"]
        )
        return result


def load_level(settings: Optional[LevelSettings] = None) -> NavigationState:
    """
    Load a level and return its navigation state.

    Raises:
        LevelLoadError: If the settings are invalid or validation failed
    """
    result = LevelLoader(settings).load()
    if not result.success:
        raise LevelLoadError("; ".join(result.errors) or "Level load failed")
    return result.level
