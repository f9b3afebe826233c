"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict

from adventure.core.types import TextDisplayMode

logger = logging.getLogger(__name__)

_DEFAULT_TEXT_MODE: TextDisplayMode = "instant"


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "TheAdventure"
        return Path.home() / "TheAdventure"
    return Path.home() / ".config" / "the_adventure"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def debug_enabled() -> bool:
    """Return True only when ADVENTURE_DEBUG is explicitly set to '1'."""
    return os.getenv("ADVENTURE_DEBUG") == "1"


def _normalize_text_mode(value: object) -> TextDisplayMode:
    return "step" if value == "step" else _DEFAULT_TEXT_MODE


def _normalize_color(value: object) -> bool:
    return value if isinstance(value, bool) else True


def _defaults() -> Dict[str, object]:
    return {"text_display_mode": _DEFAULT_TEXT_MODE, "color": True}


def load_config(path: Path | None = None) -> Dict[str, object]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return _defaults()
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config at %s: %s", config_path, exc)
        return _defaults()
    if not isinstance(raw, dict):
        return _defaults()
    return {
        "text_display_mode": _normalize_text_mode(raw.get("text_display_mode")),
        "color": _normalize_color(raw.get("color")),
    }
