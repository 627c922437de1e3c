"""Read-only JSON config helpers.

Supplies default theme, pygments style, and colour preference.
All access is defensive: malformed or missing config falls back safely.
Nothing is ever written back.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "vimbo"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


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
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _load_str(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip()


def load_theme_name() -> str | None:
    """Return configured UI theme name, if any."""
    return _load_str("theme")


def load_style_name() -> str | None:
    """Return configured pygments style for the command column, if any."""
    return _load_str("style")


def load_no_color() -> bool:
    """Return configured colour preference.

    Only explicit boolean values are accepted; any other type falls back to
    ``False``.
    """
    value = load_config().get("no_color")
    return value if isinstance(value, bool) else False
