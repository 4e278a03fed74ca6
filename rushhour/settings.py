"""
Run defaults kept in a JSON file.

config.json in the working directory holds the strategy, heuristic and
output options the command line falls back to when a flag is omitted.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

SETTINGS_FILE = Path("config.json")

DEFAULT_SETTINGS: Dict[str, Any] = {
    "strategy_name": "astar",
    "heuristic_name": "h1",
    "debug_enabled": False,
    "output_dir": "output",
    "timeout_sec": None,
}


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Read the settings file over a copy of DEFAULT_SETTINGS.

    A missing, unreadable or non-object file yields the defaults; keys the
    file lacks keep their default values.

    Args:
        path: File to read instead of SETTINGS_FILE
    """
    path = Path(path) if path is not None else SETTINGS_FILE
    settings = dict(DEFAULT_SETTINGS)
    if not path.exists():
        logger.debug(f"No {path}, using default settings")
        return settings

    try:
        with open(path, 'r', encoding='utf-8') as f:
            stored = json.load(f)
        if not isinstance(stored, dict):
            raise ValueError(f"expected a JSON object, got {type(stored).__name__}")
    except (ValueError, OSError) as e:
        logger.warning(f"Ignoring {path}: {e}")
        return settings

    settings.update(stored)
    logger.debug(f"Loaded settings from {path}: {settings}")
    return settings


def save_settings(settings: Dict[str, Any], path: Optional[Path] = None) -> None:
    """
    Write settings as indented JSON. Failures are logged, not raised.

    Args:
        settings: Values to store
        path: File to write instead of SETTINGS_FILE
    """
    path = Path(path) if path is not None else SETTINGS_FILE
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
    except OSError as e:
        logger.error(f"Could not save settings to {path}: {e}")
        return
    logger.debug(f"Saved settings to {path}")
