"""Read-only JSON config helpers.

Stores the default root folder name and UI theme.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .logger import get_logger

APP_NAME = "folderpick"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_ROOT_NAME = "Desktop"

logger = get_logger(__name__)


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _load_name(key: str) -> str | None:
    """Read a non-blank string value, stripped of surrounding whitespace."""
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def load_root_name() -> str:
    """Return the configured folder name under ``$HOME``, default ``Desktop``.

    Names containing a path separator are rejected so the root always stays
    directly under the home directory.
    """
    value = _load_name("root_name")
    if value is None or "/" in value or value in {".", ".."}:
        return DEFAULT_ROOT_NAME
    return value


def load_theme_name() -> str | None:
    """Return the configured UI theme name, or ``None`` when unset."""
    return _load_name("theme")


__all__ = [
    "CONFIG_PATH",
    "DEFAULT_ROOT_NAME",
    "load_config",
    "load_root_name",
    "load_theme_name",
]
