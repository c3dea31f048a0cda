"""Persistent JSON config helpers.

Stores default exclusion globs, text-extension overrides, read concurrency,
and the preferred export format. All access is defensive: malformed or
missing config falls back to built-in defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .aggregate import DEFAULT_MAX_CONCURRENCY
from .classifier import build_text_extensions
from .discovery import DEFAULT_EXCLUDE_GLOBS

APP_NAME = "treeingest"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
EXPORT_FORMATS = ("text", "html", "json")
DEFAULT_EXPORT_FORMAT = "text"


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
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so an unwritable config never breaks a scan.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _string_list(value: object) -> list[str] | None:
    """Return ``value`` if it is a list of strings (non-strings dropped)."""
    if not isinstance(value, list):
        return None
    return [item for item in value if isinstance(item, str) and item]


def load_exclude_globs() -> tuple[str, ...]:
    """Return configured exclusion globs, or the built-in defaults."""
    globs = _string_list(load_config().get("exclude_globs"))
    return DEFAULT_EXCLUDE_GLOBS if globs is None else tuple(globs)


def load_text_extensions() -> frozenset[str]:
    """Return the allow-list after ``extra_text_extensions``/``excluded_text_extensions``."""
    config = load_config()
    extra = _string_list(config.get("extra_text_extensions")) or []
    excluded = _string_list(config.get("excluded_text_extensions")) or []
    return build_text_extensions(extra, excluded)


def load_max_concurrency() -> int | None:
    """Return the read fan-out bound; ``None`` means unbounded.

    Booleans, negatives, and non-integers fall back to the default. ``0``
    disables the bound.
    """
    value = load_config().get("max_concurrency")
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return DEFAULT_MAX_CONCURRENCY
    return value or None


def save_max_concurrency(value: int | None) -> None:
    config = load_config()
    config["max_concurrency"] = max(0, int(value or 0))
    save_config(config)


def load_default_format() -> str:
    """Return the persisted export format when valid, else ``text``."""
    value = load_config().get("default_format")
    return value if isinstance(value, str) and value in EXPORT_FORMATS else DEFAULT_EXPORT_FORMAT


def save_default_format(fmt: str) -> None:
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"unknown export format: {fmt!r}")
    config = load_config()
    config["default_format"] = fmt
    save_config(config)


__all__ = [
    "CONFIG_PATH",
    "DEFAULT_EXPORT_FORMAT",
    "EXPORT_FORMATS",
    "load_config",
    "load_default_format",
    "load_exclude_globs",
    "load_max_concurrency",
    "load_text_extensions",
    "save_config",
    "save_default_format",
    "save_max_concurrency",
]
