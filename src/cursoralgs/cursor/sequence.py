"""Concrete cursors over caller-owned Python containers.

Usage:
    from cursoralgs import back_inserter, begin, end, stream

    data = [3, 1, 2]
    first, last = begin(data), end(data)        # random access
    src_first, src_last = stream(iter(data))     # single pass input
    out = back_inserter([])                       # appending output
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar, cast

from cursoralgs.core.errors import StaleCursorError
from cursoralgs.cursor.models import CursorCategory

T = TypeVar("T")


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class SequenceCursor(Generic[T]):
    """Random-access cursor into a list-like container.

    Cursors compare by index and only against cursors over the same container
    object. Writing through a cursor over an immutable sequence raises the
    container's own TypeError.
    """

    seq: Sequence[T]
    index: int = 0

    category: ClassVar[CursorCategory] = CursorCategory.RANDOM_ACCESS

    def _check_bounds(self) -> None:
        if not 0 <= self.index < len(self.seq):
            raise IndexError(f"Cursor at {self.index} is outside [0, {len(self.seq)})")

    def _check_same(self, other: SequenceCursor[Any]) -> None:
        if other.seq is not self.seq:
            raise ValueError("Cursors belong to different sequences")

    def get(self) -> T:
        self._check_bounds()
        return self.seq[self.index]

    def set(self, value: T) -> None:
        self._check_bounds()
        cast(MutableSequence[T], self.seq)[self.index] = value

    def next(self) -> SequenceCursor[T]:
        return SequenceCursor(self.seq, self.index + 1)

    def prev(self) -> SequenceCursor[T]:
        return SequenceCursor(self.seq, self.index - 1)

    def __add__(self, offset: int) -> SequenceCursor[T]:
        return SequenceCursor(self.seq, self.index + offset)

    def __radd__(self, offset: int) -> SequenceCursor[T]:
        return self + offset

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, int):
            return SequenceCursor(self.seq, self.index - other)
        if isinstance(other, SequenceCursor):
            self._check_same(other)
            return self.index - other.index
        return NotImplemented

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, SequenceCursor):
            return NotImplemented
        self._check_same(other)
        return self.index < other.index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SequenceCursor):
            return NotImplemented
        return other.seq is self.seq and other.index == self.index

    def __hash__(self) -> int:
        return hash((id(self.seq), self.index))

    def __repr__(self) -> str:
        return f"SequenceCursor(index={self.index}, len={len(self.seq)})"


def begin(seq: Sequence[T]) -> SequenceCursor[T]:
    """Cursor at the first element of `seq`."""
    return SequenceCursor(seq, 0)


def end(seq: Sequence[T]) -> SequenceCursor[T]:
    """Cursor one past the last element of `seq`. Never dereference it."""
    return SequenceCursor(seq, len(seq))


def bounds(seq: Sequence[T]) -> tuple[SequenceCursor[T], SequenceCursor[T]]:
    """The half-open range covering all of `seq`."""
    return begin(seq), end(seq)


class _Stream(Generic[T]):
    """Shared read-ahead state behind every cursor of one stream."""

    __slots__ = ("_iterator", "position", "value", "exhausted")

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iterator: Iterator[T] = iter(iterable)
        self.position = 0
        self.value: T | None = None
        self.exhausted = False
        self._pull()

    def _pull(self) -> None:
        try:
            self.value = next(self._iterator)
        except StopIteration:
            self.value = None
            self.exhausted = True

    def advance(self, position: int) -> None:
        if position != self.position:
            raise StaleCursorError(
                f"Stream already advanced to {self.position}, cannot advance from {position}"
            )
        if self.exhausted:
            raise IndexError("Cannot advance past the end of a stream")
        self.position += 1
        self._pull()


@dataclass(frozen=True, slots=True, eq=False)
class StreamCursor(Generic[T]):
    """Single-pass input cursor over any iterable.

    All cursors of a stream share one iterator. Advancing any of them consumes
    the current element, after which older cursors are stale. The end sentinel
    (position None) equals whichever cursor sits on the exhausted stream.
    """

    stream: _Stream[T]
    position: int | None = 0

    category: ClassVar[CursorCategory] = CursorCategory.INPUT

    def _is_current(self) -> bool:
        return self.position == self.stream.position

    def get(self) -> T:
        if self.position is None or (self._is_current() and self.stream.exhausted):
            raise IndexError("Cannot dereference the end of a stream")
        if not self._is_current():
            raise StaleCursorError(
                f"Position {self.position} was consumed, stream is at {self.stream.position}"
            )
        return cast(T, self.stream.value)

    def next(self) -> StreamCursor[T]:
        if self.position is None:
            raise IndexError("Cannot advance the end of a stream")
        self.stream.advance(self.position)
        return StreamCursor(self.stream, self.position + 1)

    def _at_end(self) -> bool:
        return self.position is None or (self._is_current() and self.stream.exhausted)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StreamCursor):
            return NotImplemented
        if other.stream is not self.stream:
            return False
        if self.position is None or other.position is None:
            return self._at_end() and other._at_end()
        return self.position == other.position

    def __hash__(self) -> int:
        # Equality with the end sentinel depends on shared stream state
        return hash(id(self.stream))


def stream(iterable: Iterable[T]) -> tuple[StreamCursor[T], StreamCursor[T]]:
    """Wrap an iterable as a single-pass range.

    Returns:
        (first, last) where last is the end sentinel.
    """
    state = _Stream(iterable)
    return StreamCursor(state, 0), StreamCursor(state, None)


@dataclass(frozen=True, slots=True, eq=False)
class AppendCursor(Generic[T]):
    """Output cursor that appends every written value to a list."""

    target: list[T]
    written: int = 0

    category: ClassVar[CursorCategory] = CursorCategory.OUTPUT

    def set(self, value: T) -> None:
        self.target.append(value)

    def next(self) -> AppendCursor[T]:
        return AppendCursor(self.target, self.written + 1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AppendCursor):
            return NotImplemented
        return other.target is self.target and other.written == self.written

    def __hash__(self) -> int:
        return hash((id(self.target), self.written))


def back_inserter(target: list[T]) -> AppendCursor[T]:
    """Output cursor appending to `target`."""
    return AppendCursor(target)


@dataclass(slots=True)
class Ref(Generic[T]):
    """Mutable cell holding one value, so plain values can be swapped."""

    value: T

    def get(self) -> T:
        return self.value

    def set(self, value: T) -> None:
        self.value = value
