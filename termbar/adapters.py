#!/usr/bin/env python3
"""
tqdm-style adapters: wrap a range so iterating it prints a progress line.

    from termbar import tqdm

    for item in tqdm(items, title="resize"):
        work(item)

Three ways to describe the range:

    tqdm(container)            any sized iterable (list, dict, set, range...)
    tqdm_range(begin, end)     two positions; size is `end - begin`
    tqdm_sized(begin, size)    a start position and an element count

Each returns a `ProgressIterable`, which owns its `ProgressState`. Output
goes to `file` (stderr by default); the stream must stay open until the
loop is done. The last line is only completed (with a newline) when the
loop runs to the end.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence, Sized
from typing import Any, Iterable, Optional, TextIO

from .config import load_config
from .hook import HookedCursor, IteratorHook, IteratorPosition, P, SequencePosition, advance_position
from .state import ProgressState

logger = logging.getLogger(__name__)


class ProgressIterable(IteratorHook[P]):
    """An `IteratorHook` whose hook renders an owned `ProgressState`.

    On every position except the end it renders (subject to throttling) and
    then counts one step; at the end position it renders the final line.
    """

    def __init__(
        self,
        begin: P,
        end: P,
        state: ProgressState,
        file: Optional[TextIO] = None,
        *,
        container: Any = None,
        disable: bool = False,
    ) -> None:
        super().__init__(begin, end, self._on_position)
        self.state = state
        self.file = sys.stderr if file is None else file
        self.container = container
        self.disable = bool(disable)
        self.renders = 0
        self._started = False

    def begin(self) -> HookedCursor[P]:
        """Start a pass: reset the state, then fire the hook at `begin`.

        A second pass over a non-sequence container needs fresh positions,
        since `IteratorPosition` reads its source only once.
        """
        if self._started:
            self.state.reset()
            self.renders = 0
            if self.container is not None and isinstance(self.begin_position, IteratorPosition):
                self.begin_position = IteratorPosition.begin(self.container)
                self.end_position = self.begin_position.advance(self.state.total)
        self._started = True
        return super().begin()

    def _on_position(self, position: P) -> None:
        if position == self.end_position:
            self._emit()
            return
        self._emit()
        self.state.step()

    def _emit(self) -> None:
        if self.disable:
            return
        if self.state.write(self.file):
            self.renders += 1

    def __len__(self) -> int:
        return self.state.total

    def __repr__(self) -> str:
        return f"ProgressIterable({self.state!r})"


def _build(
    begin: P,
    end: P,
    size: int,
    *,
    title: str,
    file: Optional[TextIO],
    mininterval: Optional[int],
    width: Optional[int],
    disable: Optional[bool],
    container: Any = None,
) -> ProgressIterable[P]:
    if size < 0:
        raise ValueError(f"range size must be >= 0 (got {size})")
    cfg = load_config()
    state = ProgressState(
        size,
        title=title,
        mininterval=cfg.mininterval if mininterval is None else mininterval,
        width=cfg.width if width is None else width,
    )
    logger.debug("wrapping %d-element range %r", size, title)
    return ProgressIterable(
        begin, end, state, file,
        container=container,
        disable=cfg.disable if disable is None else disable,
    )


def tqdm_range(
    begin: P,
    end: P,
    title: str = "",
    file: Optional[TextIO] = None,
    mininterval: Optional[int] = None,
    width: Optional[int] = None,
    *,
    disable: Optional[bool] = None,
) -> ProgressIterable[P]:
    """Progress over [begin, end); positions must support `end - begin`."""
    return _build(begin, end, end - begin, title=title, file=file,
                  mininterval=mininterval, width=width, disable=disable)


def tqdm_sized(
    begin: P,
    size: int,
    title: str = "",
    file: Optional[TextIO] = None,
    mininterval: Optional[int] = None,
    width: Optional[int] = None,
    *,
    disable: Optional[bool] = None,
) -> ProgressIterable[P]:
    """Progress over `size` elements starting at `begin`."""
    end = advance_position(begin, size)
    return _build(begin, end, size, title=title, file=file,
                  mininterval=mininterval, width=width, disable=disable)


def tqdm(
    container: Iterable[Any],
    title: str = "",
    file: Optional[TextIO] = None,
    mininterval: Optional[int] = None,
    width: Optional[int] = None,
    *,
    disable: Optional[bool] = None,
) -> ProgressIterable[Any]:
    """Progress over every element of a sized container.

    The returned iterable holds a reference to `container` until it is
    discarded. Sequences are indexed; other sized iterables are consumed
    once, in order.
    """
    if not isinstance(container, Sized):
        raise TypeError(
            f"tqdm() needs a sized iterable, got {type(container).__name__}; "
            "use tqdm_sized() with an explicit size"
        )
    size = len(container)
    if isinstance(container, Sequence):
        begin: Any = SequencePosition(container, 0)
        end: Any = SequencePosition(container, size)
    else:
        begin = IteratorPosition.begin(container)
        end = begin.advance(size)
    return _build(begin, end, size, title=title, file=file,
                  mininterval=mininterval, width=width, disable=disable,
                  container=container)
