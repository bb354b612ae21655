#!/usr/bin/env python3
"""
Iteration hooks: run a callback on every advancement of a range.

A range is a pair of positions (begin, end). A position knows three things:
its `value`, how to produce the `next()` position, and whether it equals
another position. `IteratorHook` walks begin -> end and calls

    hook(begin)                 once, when iteration starts
    hook(position)              after each advancement, with the new position

so a range of `n` elements fires the hook `n + 1` times; the last call sees
the end position. Values are yielded untouched. Breaking out of the loop
simply stops the calls.

    from termbar.hook import IteratorHook, SequencePosition

    data = ["a", "b", "c"]
    begin, end = SequencePosition(data, 0), SequencePosition(data, len(data))
    for item in IteratorHook(begin, end, lambda pos: print("at", pos.index)):
        ...
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, Optional, Protocol, Sequence, TypeVar


class Position(Protocol):
    @property
    def value(self) -> Any: ...

    def next(self) -> "Position": ...

    def __eq__(self, other: object) -> bool: ...


P = TypeVar("P", bound=Position)
Hook = Callable[[Any], None]


class SequencePosition:
    """Random-access position into a sequence (list, tuple, str, range...)."""

    __slots__ = ("sequence", "index")

    def __init__(self, sequence: Sequence[Any], index: int = 0) -> None:
        self.sequence = sequence
        self.index = index

    @property
    def value(self) -> Any:
        return self.sequence[self.index]

    def next(self) -> "SequencePosition":
        return SequencePosition(self.sequence, self.index + 1)

    def advance(self, n: int) -> "SequencePosition":
        return SequencePosition(self.sequence, self.index + n)

    def __sub__(self, other: "SequencePosition") -> int:
        if not isinstance(other, SequencePosition) or other.sequence is not self.sequence:
            raise ValueError("positions belong to different sequences")
        return self.index - other.index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SequencePosition):
            return NotImplemented
        return self.sequence is other.sequence and self.index == other.index

    def __hash__(self) -> int:
        return hash((id(self.sequence), self.index))

    def __repr__(self) -> str:
        return f"SequencePosition(index={self.index})"


class _Source:
    """Shared single-pass iterator; remembers the last value pulled."""

    __slots__ = ("iterator", "index", "current")

    def __init__(self, iterable: Iterable[Any]) -> None:
        self.iterator = iter(iterable)
        self.index = -1
        self.current: Any = None

    def get(self, index: int) -> Any:
        if index < self.index:
            raise IndexError(f"position {index} already consumed (source is at {self.index})")
        while self.index < index:
            try:
                self.current = next(self.iterator)
            except StopIteration:
                raise IndexError(f"position {index} is past the end of the source") from None
            self.index += 1
        return self.current


class IteratorPosition:
    """Forward-only position over any iterable.

    Advancing never consumes the source; reading `value` pulls items up to
    this position. Values of earlier positions are gone once a later one has
    been read.
    """

    __slots__ = ("_source", "index")

    def __init__(self, source: _Source, index: int = 0) -> None:
        self._source = source
        self.index = index

    @classmethod
    def begin(cls, iterable: Iterable[Any]) -> "IteratorPosition":
        return cls(_Source(iterable), 0)

    @property
    def value(self) -> Any:
        return self._source.get(self.index)

    def next(self) -> "IteratorPosition":
        return IteratorPosition(self._source, self.index + 1)

    def advance(self, n: int) -> "IteratorPosition":
        return IteratorPosition(self._source, self.index + n)

    def __sub__(self, other: "IteratorPosition") -> int:
        if not isinstance(other, IteratorPosition) or other._source is not self._source:
            raise ValueError("positions belong to different sources")
        return self.index - other.index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IteratorPosition):
            return NotImplemented
        return self._source is other._source and self.index == other.index

    def __hash__(self) -> int:
        return hash((id(self._source), self.index))

    def __repr__(self) -> str:
        return f"IteratorPosition(index={self.index})"


def advance_position(position: P, n: int) -> P:
    """`position` moved forward `n` times (one jump when it supports `advance`)."""
    if hasattr(position, "advance"):
        return position.advance(n)
    for _ in range(n):
        position = position.next()
    return position


class HookedCursor(Generic[P]):
    """Wraps a position; `advance()` moves it and then calls the hook."""

    __slots__ = ("position", "hook")

    def __init__(self, position: P, hook: Optional[Hook] = None) -> None:
        self.position = position
        self.hook = hook

    @property
    def value(self) -> Any:
        return self.position.value

    def advance(self) -> "HookedCursor[P]":
        self.position = self.position.next()
        if self.hook is not None:
            self.hook(self.position)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HookedCursor):
            return NotImplemented
        return self.position == other.position

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, HookedCursor):
            return NotImplemented
        return not self.position == other.position

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"HookedCursor({self.position!r})"


class IteratorHook(Generic[P]):
    """A (begin, end) range whose traversal reports every position to `hook`."""

    def __init__(self, begin: P, end: P, hook: Hook) -> None:
        self.begin_position = begin
        self.end_position = end
        self.hook = hook

    def begin(self) -> HookedCursor[P]:
        self.hook(self.begin_position)
        return HookedCursor(self.begin_position, self.hook)

    def end(self) -> HookedCursor[P]:
        return HookedCursor(self.end_position, self.hook)

    def __iter__(self) -> Iterator[Any]:
        cursor = self.begin()
        end = self.end()
        while cursor != end:
            yield cursor.value
            cursor.advance()


def make_iterator_range_hook(begin: P, end: P, hook: Hook) -> IteratorHook[P]:
    return IteratorHook(begin, end, hook)
