#!/usr/bin/env python3
"""
Progress state: step counting, timing and the one-line text render.

A `ProgressState` is owned by exactly one iteration. Each render returns a
line that starts with a carriage return so successive renders overwrite the
same terminal row; the render at completion also ends with a newline.

Rendered line (title "copy", width 10, 3 of 8 done):

    \\rcopy [====      ] 37% 3/8 [00:00:08<00:00:05]

The bracketed pair is the estimated total time and the estimated time
remaining, both derived from the elapsed time up to the latest step.
Older tqdm-style ports printed the elapsed time in the second slot
(`estimated<elapsed`); this line shows the remaining time there instead.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, TextIO

from .utils import fmt_hms_ms

logger = logging.getLogger(__name__)


def _to_ms(seconds: float) -> int:
    return int(seconds * 1000)


class ProgressState:
    """Counts steps toward `total` and renders at most once per `mininterval` ms.

    Parameters
    ----------
    total : int
        Expected number of steps. 0 is allowed and renders as "0/0".
    title : str, default ""
        Label printed before the bar.
    mininterval : int, default 100
        Minimum milliseconds between two renders. The first render and the
        render at completion are never held back.
    width : int, default 10
        Cells of the ASCII bar. Zero or less draws an empty "[]".
    clock : callable, default time.monotonic
        Returns the current time in seconds.
    """

    def __init__(
        self,
        total: int,
        title: str = "",
        mininterval: int = 100,
        width: int = 10,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if total < 0:
            raise ValueError(f"total must be >= 0 (got {total})")
        if mininterval < 0:
            raise ValueError(f"mininterval must be >= 0 (got {mininterval})")
        self.total = int(total)
        self.title = title
        self.mininterval = int(mininterval)
        self.width = int(width)
        self._clock = clock
        self.last_render_time = 0.0
        self.suppressed = 0
        self.reset()

    def reset(self) -> None:
        """Back to step 0 with a fresh start time; total and title are kept."""
        self.completed = 0
        self.first_render = True
        self.start_time = self._clock()
        self.current_time = self.start_time
        logger.debug("progress %r reset (total=%d)", self.title, self.total)

    def step(self) -> int:
        if self.completed < self.total:
            self.completed += 1
            self.current_time = self._clock()
        return self.completed

    def is_end(self) -> bool:
        return self.completed >= self.total

    def percentage(self) -> int:
        if self.total == 0:
            return 0
        return 100 * self.completed // self.total

    def elapsed_ms(self) -> int:
        """Milliseconds from the start to the most recent step."""
        return _to_ms(self.current_time - self.start_time)

    def estimates_ms(self) -> tuple[int, int]:
        """(estimated total, remaining) in ms; both 0 before the first step."""
        if not self.completed:
            return 0, 0
        elapsed = self.elapsed_ms()
        estimated = elapsed * self.total // self.completed
        remaining = elapsed * (self.total - self.completed) // self.completed
        return estimated, remaining

    def _bar(self) -> str:
        processed = self.completed / self.total if self.total else 0.0
        return "".join("=" if i / self.width <= processed else " " for i in range(self.width))

    def format(self) -> str:
        """Unthrottled line text, ending in `[estimated<remaining]` (not elapsed)."""
        estimated, remaining = self.estimates_ms()
        return (
            f"{self.title} [{self._bar()}] {self.percentage()}%"
            f" {self.completed}/{self.total}"
            f" [{fmt_hms_ms(estimated)}<{fmt_hms_ms(remaining)}]"
        )

    def render(self) -> str | None:
        """Return the next line to print, or None when throttled."""
        now = self._clock()
        if (
            not self.first_render
            and not self.is_end()
            and _to_ms(now - self.last_render_time) < self.mininterval
        ):
            self.suppressed += 1
            return None
        self.last_render_time = now
        self.first_render = False
        text = "\r" + self.format()
        if self.is_end():
            logger.debug(
                "progress %r finished %d/%d in %d ms (%d renders suppressed)",
                self.title, self.completed, self.total, self.elapsed_ms(), self.suppressed,
            )
            text += "\n"
        return text

    def write(self, file: TextIO) -> bool:
        """Render into `file` and flush. Returns False if the render was throttled."""
        text = self.render()
        if text is None:
            return False
        file.write(text)
        file.flush()
        return True

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"ProgressState(title={self.title!r}, completed={self.completed}, total={self.total})"
