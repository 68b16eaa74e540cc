from __future__ import annotations

"""Calculator configuration loaded from environment variables and ``settings.json``.

The module provides a central location for runtime options.  Environment
variables take precedence over values stored in the JSON file found next to
this module.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, List

# Path to the optional JSON configuration file
SETTINGS_FILE = Path(__file__).with_name("settings.json")

try:
    with SETTINGS_FILE.open("r", encoding="utf-8") as f:
        _FILE_SETTINGS: Dict[str, Any] = json.load(f)
except (OSError, ValueError):
    # If the settings file is missing or invalid, fall back to defaults
    _FILE_SETTINGS = {}
if not isinstance(_FILE_SETTINGS, dict):
    _FILE_SETTINGS = {}


def _get_str(env_var: str, key: str, default: str) -> str:
    """Return a string setting from ``env_var`` or ``key`` in the JSON file."""
    value = os.environ.get(env_var)
    if value is not None:
        return value
    return str(_FILE_SETTINGS.get(key, default))


def _get_int(env_var: str, key: str, default: int) -> int:
    """Return an integer setting from environment or JSON."""
    value = os.environ.get(env_var)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            return default
    try:
        return int(_FILE_SETTINGS.get(key, default))
    except (TypeError, ValueError):
        return default


def _get_paths(env_var: str) -> List[str]:
    """Return a list of directories from an ``os.pathsep`` separated variable."""
    value = os.environ.get(env_var, "")
    return [p for p in value.split(os.pathsep) if p]


# ---------------------------------------------------------------------------
# Public settings
# ---------------------------------------------------------------------------
# Language used for report labels
LANGUAGE: str = _get_str("KS_LANGUAGE", "language", "de")

# Manifest paths, relative to the asset search paths
UNITS_MANIFEST: str = _get_str("KS_UNITS_MANIFEST", "units_manifest", "units/units.json")
HEROES_MANIFEST: str = _get_str("KS_HEROES_MANIFEST", "heroes_manifest", "units/heroes.json")

# Wall level assumed for a defender whose description omits it
DEFAULT_WALL_LEVEL: int = _get_int("KS_DEFAULT_WALL_LEVEL", "default_wall_level", 3)

# Logging threshold for command line tools
LOG_LEVEL: str = _get_str("KS_LOG_LEVEL", "log_level", "WARNING").upper()

# Extra directories searched for manifests before the bundled ``assets``
ASSETS_DIRS: List[str] = _get_paths("KS_ASSETS_DIR")


__all__ = [
    "LANGUAGE",
    "UNITS_MANIFEST",
    "HEROES_MANIFEST",
    "DEFAULT_WALL_LEVEL",
    "LOG_LEVEL",
    "ASSETS_DIRS",
]
