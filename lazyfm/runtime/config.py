"""Persistent JSON config and last-directory helpers.

Stores the hidden-file preference and UI theme, and remembers the directory
the browser was in when it quit. All access is defensive: malformed or
missing files fall back safely and write errors are ignored.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir, user_state_dir

APP_NAME = "lazyfm"
CONFIG_FILENAME = "config.json"
LAST_DIR_FILENAME = "lastdir"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
LAST_DIR_PATH = Path(user_state_dir(APP_NAME, appauthor=False)) / LAST_DIR_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON, ignoring write failures."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError):
        pass


def load_show_hidden() -> bool:
    """Return persisted hidden-file visibility preference.

    Only explicit boolean values are accepted; any other type falls back to
    ``False``.
    """
    value = load_config().get("show_hidden")
    return bool(value) if isinstance(value, bool) else False


def save_show_hidden(show_hidden: bool) -> None:
    config = load_config()
    config["show_hidden"] = bool(show_hidden)
    save_config(config)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)


def save_last_directory(path: str) -> None:
    """Write ``path`` as a single newline-terminated line for the next launch."""
    try:
        LAST_DIR_PATH.parent.mkdir(parents=True, exist_ok=True)
        LAST_DIR_PATH.write_text(f"{path}\n", encoding="utf-8")
    except OSError:
        pass


def load_last_directory() -> str | None:
    try:
        raw = LAST_DIR_PATH.read_text(encoding="utf-8")
    except OSError:
        return None
    path = raw.rstrip("\n")
    return path or None


__all__ = [
    "CONFIG_PATH",
    "LAST_DIR_PATH",
    "load_config",
    "save_config",
    "load_show_hidden",
    "save_show_hidden",
    "load_theme_name",
    "save_theme_name",
    "load_last_directory",
    "save_last_directory",
]
