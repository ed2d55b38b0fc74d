"""Utility helpers shared across the :mod:`lyric_prosody` package."""

from __future__ import annotations

from .logging_config import configure_logging
from .syllables import count_elisions, count_syllables, count_word_syllables
from .observability import (
    StructuredLoggerAdapter,
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)

__all__ = [
    "configure_logging",
    "count_elisions",
    "count_syllables",
    "count_word_syllables",
    "StructuredLoggerAdapter",
    "add_span_attributes",
    "create_counter",
    "create_histogram",
    "get_logger",
    "record_exception",
    "start_span",
]
