#!/usr/bin/env python3
"""
Glyph bar rendering for termbar.

`render_bar` maps a completion fraction onto a fixed number of glyph cells.
Each cell can be partially filled: with the default block set a cell has
eight sub-steps ("▏" .. "█"), so a 10-cell bar resolves 80 distinct levels.

Typical usage
-------------
    from termbar.progress import ProgressBar

    pb = ProgressBar(width=20)
    pb.percentage = 0.42
    print(f"|{pb}|")

NOTE: the bar always draws one sub-glyph for the partial cell, even at zero
progress. A 0.0 bar therefore starts with "▏" (or the full glyph for a
two-glyph set) followed by `width - 1` empty cells.
"""

from __future__ import annotations

from typing import Sequence

DEFAULT_PATTERNS = (" ", "▏", "▎", "▍", "▌", "▋", "▊", "▉", "█")
ASCII_PATTERNS = (" ", "#")

# keeps an exact 1.0 from spilling into an extra cell
_EPSILON = 1e-5


def render_bar(fraction: float, width: int, patterns: Sequence[str] = DEFAULT_PATTERNS) -> str:
    """Return `width` glyph cells showing `fraction` (0..1) of completion."""
    if width <= 0:
        return ""
    steps = len(patterns) - 1
    # int() truncates toward zero, so fraction 0 gives 0 units rather than -1
    units = int((fraction - _EPSILON) * width * steps)
    full = units // steps
    bar = patterns[-1] * full
    bar += patterns[units % steps + 1]
    bar += patterns[0] * (width - full - 1)
    return bar


class ProgressBar:
    """A stateful glyph bar: set `percentage` (a fraction in [0, 1]) and render.

    Parameters
    ----------
    width : int
        Number of glyph cells. Zero or less renders an empty string.
    patterns : sequence of str, default DEFAULT_PATTERNS
        Ordered glyphs from "empty" (index 0) to "full" (last index); the
        ones in between are partial cells. At least two are required.
    """

    def __init__(self, width: int, patterns: Sequence[str] = DEFAULT_PATTERNS) -> None:
        self.width = int(width)
        self.patterns = patterns
        self.percentage = 0.0

    @property
    def patterns(self) -> tuple[str, ...]:
        return self._patterns

    @patterns.setter
    def patterns(self, patterns: Sequence[str]) -> None:
        patterns = tuple(patterns)
        if len(patterns) < 2:
            raise ValueError("ProgressBar needs at least an empty and a full glyph")
        self._patterns = patterns

    def to_string(self) -> str:
        return render_bar(self.percentage, self.width, self._patterns)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"ProgressBar(width={self.width}, percentage={self.percentage:.3f})"
