#!/usr/bin/env python3
"""
Small formatting and terminal helpers shared by termbar modules.
"""

from __future__ import annotations

import shutil


def fmt_hms_ms(milliseconds: int | float | None) -> str:
    """Return HH:MM:SS for a duration in milliseconds.

    Hours are not wrapped into days, so long runs read e.g. "127:03:09".
    None and negative values render as zero.
    """
    if milliseconds is None:
        return "00:00:00"
    ms = int(max(0, milliseconds))
    return f"{ms // 3600000:02d}:{(ms % 3600000) // 60000:02d}:{(ms % 60000) // 1000:02d}"


def get_terminal_width(fallback: int = 80) -> int:
    """Columns of the attached terminal, or `fallback` when not a TTY."""
    try:
        cols = shutil.get_terminal_size((fallback, 24)).columns
    except (OSError, ValueError):
        return fallback
    return cols if cols > 0 else fallback


def fit_bar_width(columns: int, title: str = "", reserved: int = 50) -> int:
    """Bar cells that fit on one line next to the title and the counters."""
    return max(1, columns - len(title) - reserved)
