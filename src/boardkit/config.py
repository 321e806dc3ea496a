"""Centralized settings for board defaults.

Environment-first: each setting reads a BOARDKIT_* variable and falls back
to a built-in default. CLI flags override whatever is loaded here.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import ConfigError

DEFAULT_SIZE = 3
DEFAULT_PRESENTER = "console"
DEFAULT_EMPTY = "."


def board_size() -> int:
    raw = os.getenv("BOARDKIT_SIZE")
    if raw is None or not raw.strip():
        return DEFAULT_SIZE
    try:
        size = int(raw)
    except ValueError:
        raise ConfigError("BOARDKIT_SIZE", raw) from None
    if size < 1:
        raise ConfigError("BOARDKIT_SIZE", raw)
    return size


def presenter_name() -> str:
    # presenters imports state, which imports this module
    from .presenters import available_presenters

    raw = os.getenv("BOARDKIT_PRESENTER")
    if raw is None or not raw.strip():
        return DEFAULT_PRESENTER
    name = raw.strip().lower()
    if name not in available_presenters():
        raise ConfigError("BOARDKIT_PRESENTER", raw)
    return name


def empty_glyph() -> str:
    raw = os.getenv("BOARDKIT_EMPTY")
    if raw is None:
        return DEFAULT_EMPTY
    if len(raw) != 1:
        raise ConfigError("BOARDKIT_EMPTY", raw)
    return raw


@dataclass(frozen=True)
class Settings:
    size: int = DEFAULT_SIZE
    presenter: str = DEFAULT_PRESENTER
    empty: str = DEFAULT_EMPTY


def load_settings() -> Settings:
    """Read all settings from the environment.

    Raises ConfigError naming the first variable holding a bad value.
    """
    return Settings(size=board_size(), presenter=presenter_name(), empty=empty_glyph())
