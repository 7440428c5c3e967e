"""Defaults read from ``COLPRINT_*`` environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from colprint.width import WIDTH_FUNCTIONS

log = logging.getLogger(__name__)

DEFAULT_SEPARATOR = "  "
DEFAULT_WIDTH_MODE = "chars"
DEFAULT_PRETTY_WIDTH = 80

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    separator: str = DEFAULT_SEPARATOR
    width_mode: str = DEFAULT_WIDTH_MODE
    pad_last: bool = True
    pretty_width: int = DEFAULT_PRETTY_WIDTH


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    log.warning("ignoring invalid %s=%r, using %s", name, raw, default)
    return default


def _env_width_mode() -> str:
    raw = os.environ.get("COLPRINT_WIDTH")
    if not raw:
        return DEFAULT_WIDTH_MODE
    if raw not in WIDTH_FUNCTIONS:
        log.warning("ignoring invalid COLPRINT_WIDTH=%r, using %s", raw, DEFAULT_WIDTH_MODE)
        return DEFAULT_WIDTH_MODE
    return raw


def _env_pretty_width() -> int:
    raw = os.environ.get("COLPRINT_PRETTY_WIDTH")
    if not raw:
        return DEFAULT_PRETTY_WIDTH
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value <= 0:
        log.warning(
            "ignoring invalid COLPRINT_PRETTY_WIDTH=%r, using %d", raw, DEFAULT_PRETTY_WIDTH
        )
        return DEFAULT_PRETTY_WIDTH
    return value


def load_settings() -> Settings:
    """Build Settings from the environment, falling back to defaults.

    ``COLPRINT_SEP`` is taken verbatim (an empty value is a valid, empty
    separator). Unparseable values are logged and replaced by defaults.
    """
    return Settings(
        separator=os.environ.get("COLPRINT_SEP", DEFAULT_SEPARATOR),
        width_mode=_env_width_mode(),
        pad_last=_env_bool("COLPRINT_PAD_LAST", True),
        pretty_width=_env_pretty_width(),
    )
