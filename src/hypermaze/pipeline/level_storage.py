"""
Persistence layer for level settings.

Handles save/load of LevelSettings to ~/.config/hypermaze/levels/ as JSON.
Every function accepts an explicit directory to work somewhere else.
"""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import List, Optional

from .level_loader import LevelSettings

logger = logging.getLogger(__name__)


def get_levels_dir(directory: Optional[Path] = None) -> Path:
    """
    Get the directory for storing level settings.

    Args:
        directory: Override location; defaults to ~/.config/hypermaze/levels/

    Returns:
        The directory, created if it doesn't exist
    """
    levels_dir = Path(directory) if directory is not None else Path.home() / ".config" / "hypermaze" / "levels"
    levels_dir.mkdir(parents=True, exist_ok=True)
    return levels_dir


def _sanitize_filename(name: str) -> str:
    """
    Sanitize a level name for use as a filename.

    Lowercase, spaces replaced with underscores, anything that isn't
    alphanumeric, underscore or hyphen removed.
    """
    safe = name.lower().replace(" ", "_")
    safe = "".join(c for c in safe if c.isalnum() or c in "_-")
    return safe or "level"


def _settings_path(name: str, directory: Optional[Path]) -> Path:
    return get_levels_dir(directory) / (_sanitize_filename(name) + ".json")


def save_settings(settings: LevelSettings, directory: Optional[Path] = None) -> Path:
    """
    Save level settings under their name.

    Returns:
        Path to the saved file

    Raises:
        OSError: If the file cannot be written
    """
    file_path = _settings_path(settings.name, directory)
    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(settings.to_dict(), f, indent=2, ensure_ascii=False)
    logger.debug("Saved level settings '%s' to %s", settings.name, file_path)
    return file_path


def load_settings_from_path(file_path: Path) -> Optional[LevelSettings]:
    """
    Load level settings from a specific JSON file.

    Returns:
        LevelSettings if the file exists and parses, None otherwise
    """
    file_path = Path(file_path)
    if not file_path.exists():
        return None

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return LevelSettings.from_dict(data)
    except (json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError) as e:
        logger.warning("Ignoring unreadable level settings %s: %s", file_path, e)
        return None


def load_settings(name: str, directory: Optional[Path] = None) -> Optional[LevelSettings]:
    """Load level settings by name, or None if not saved."""
    return load_settings_from_path(_settings_path(name, directory))


def list_saved_settings(directory: Optional[Path] = None) -> List[str]:
    """
    List the names of all saved level settings.

    Returns:
        Sorted list of level names
    """
    names = []
    for file_path in get_levels_dir(directory).glob("*.json"):
        settings = load_settings_from_path(file_path)
        if settings:
            names.append(settings.name)
    return sorted(names)


def delete_settings(name: str, directory: Optional[Path] = None) -> bool:
    """
    Delete saved level settings by name.

    Returns:
        True if deleted, False if not found
    """
    file_path = _settings_path(name, directory)
    if file_path.exists():
        file_path.unlink()
        return True
    return False
