"""Helpers for configuring consistent project logging output."""

from __future__ import annotations

import logging
import os
from typing import Optional

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_LEVEL_ENV_VAR = "LYRICS_PROSODY_LOG_LEVEL"
_CONFIGURED = False


def _resolve_level(level: str | int | None, default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    try:
        return int(level)
    except (TypeError, ValueError):
        normalized = str(level).strip().upper()
        return getattr(logging, normalized, default)


def configure_logging(
    level: Optional[str | int] = None,
    *,
    default: int = logging.INFO,
    force: bool = False,
) -> None:
    """Initialise root logging handlers for the analyzer.

    The level comes from ``level`` when given, otherwise from the
    ``LYRICS_PROSODY_LOG_LEVEL`` environment variable, and falls back to
    ``default``. Repeated calls are ignored unless ``force`` is set.
    """

    global _CONFIGURED

    if _CONFIGURED and not force:
        return

    env_level = os.environ.get(_LEVEL_ENV_VAR)
    resolved_level = _resolve_level(level if level is not None else env_level, default)

    logging.basicConfig(level=resolved_level, format=_DEFAULT_FORMAT)
    logging.getLogger("lyric_prosody").setLevel(resolved_level)
    _CONFIGURED = True


__all__ = ["configure_logging"]
