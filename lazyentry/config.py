"""Persistent JSON config helpers.

Stores the CLI log level, Pygments style, and color preference.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazyentry"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_STYLE = "monokai"
LOG_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored so a read-only config
    directory never breaks a probe run.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def normalize_log_level(value: object) -> str | None:
    """Return an upper-cased level name, or ``None`` for unknown values."""
    if not isinstance(value, str):
        return None
    name = value.strip().upper()
    return name if name in LOG_LEVEL_NAMES else None


def load_log_level() -> str:
    return normalize_log_level(load_config().get("log_level")) or DEFAULT_LOG_LEVEL


def save_log_level(level: str) -> None:
    name = normalize_log_level(level)
    if name is None:
        return
    config = load_config()
    config["log_level"] = name
    save_config(config)


def log_level_number(name: str) -> int:
    """Translate a level name to its ``logging`` constant."""
    return logging.getLevelName(normalize_log_level(name) or DEFAULT_LOG_LEVEL)


def load_style() -> str:
    """Load persisted Pygments style name, falling back to the default."""
    value = load_config().get("style")
    if not isinstance(value, str):
        return DEFAULT_STYLE
    stripped = value.strip()
    return stripped if stripped else DEFAULT_STYLE


def save_style(style: str) -> None:
    stripped = str(style).strip()
    if not stripped:
        return
    config = load_config()
    config["style"] = stripped
    save_config(config)


def load_no_color() -> bool:
    """Return persisted color preference.

    Only explicit boolean values are accepted; any other type falls back to
    ``False``.
    """
    value = load_config().get("no_color")
    return bool(value) if isinstance(value, bool) else False


def save_no_color(no_color: bool) -> None:
    config = load_config()
    config["no_color"] = bool(no_color)
    save_config(config)
