"""
hypermaze level pipeline.

Provides level loading from settings, settings persistence, and debug export.
"""

from .level_loader import (
    LevelLoader,
    LevelSettings,
    LevelLoadResult,
    LevelLoadError,
    LoadStage,
    load_level,
    resolve_seed,
    DEFAULT_SEED,
    DEFAULT_LENGTHS,
)

from .level_storage import (
    get_levels_dir,
    save_settings,
    load_settings,
    load_settings_from_path,
    list_saved_settings,
    delete_settings,
)

__all__ = [
    # Loader
    'LevelLoader',
    'LevelSettings',
    'LevelLoadResult',
    'LevelLoadError',
    'LoadStage',
    'load_level',
    'resolve_seed',
    'DEFAULT_SEED',
    'DEFAULT_LENGTHS',
    # Storage
    'get_levels_dir',
    'save_settings',
    'load_settings',
    'load_settings_from_path',
    'list_saved_settings',
    'delete_settings',
]
