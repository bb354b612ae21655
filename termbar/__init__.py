#!/usr/bin/env python3
"""
termbar: tqdm-style progress lines for any iteration range.
"""

from .adapters import ProgressIterable, tqdm, tqdm_range, tqdm_sized  # noqa: F401
from .config import ProgressConfig  # noqa: F401
from .hook import HookedCursor, IteratorHook, IteratorPosition, SequencePosition, make_iterator_range_hook  # noqa: F401
from .progress import ProgressBar, render_bar  # noqa: F401
from .state import ProgressState  # noqa: F401

__all__ = [
    "ProgressIterable",
    "tqdm",
    "tqdm_range",
    "tqdm_sized",
    "ProgressConfig",
    "HookedCursor",
    "IteratorHook",
    "IteratorPosition",
    "SequencePosition",
    "make_iterator_range_hook",
    "ProgressBar",
    "render_bar",
    "ProgressState",
]
