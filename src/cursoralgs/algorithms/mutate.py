"""Copying and in-place rearrangement of cursor ranges.

None of these functions grow or shrink the underlying container. The copying
algorithms write through an output cursor supplied by the caller. The removing
algorithms compact survivors to the front and return the new logical end;
whatever sits between that end and the old one is left as is.
"""

from __future__ import annotations

from typing import Any, TypeVar

from cursoralgs.algorithms.checks import requires
from cursoralgs.algorithms.values import swap
from cursoralgs.core.types import Predicate
from cursoralgs.cursor.models import (
    BidirectionalCursor,
    CursorCategory,
    ForwardCursor,
    InputCursor,
    OutputCursor,
)

T = TypeVar("T")
O = TypeVar("O", bound=OutputCursor[Any])  # noqa: E741
F = TypeVar("F", bound=ForwardCursor[Any])
B = TypeVar("B", bound=BidirectionalCursor[Any])

INPUT = CursorCategory.INPUT
OUTPUT = CursorCategory.OUTPUT
FORWARD = CursorCategory.FORWARD
BIDIRECTIONAL = CursorCategory.BIDIRECTIONAL


@requires(b=INPUT, e=INPUT, d=OUTPUT)
def copy(b: InputCursor[T], e: InputCursor[T], d: O) -> O:
    """Write every element of `[b, e)` to successive positions from `d`.

    Copies front to back, so `d` must not overwrite source elements that are
    still to be read.

    Returns:
        Output cursor one past the last written position.
    """
    while b != e:
        d.set(b.get())
        d = d.next()
        b = b.next()
    return d


@requires(b=INPUT, e=INPUT, d=OUTPUT)
def remove_copy(b: InputCursor[T], e: InputCursor[T], d: O, x: Any) -> O:
    """Copy the elements of `[b, e)` not equal to `x` to `d`, keeping their order.

    Returns:
        Output cursor one past the last written position.
    """
    while b != e:
        value = b.get()
        if value != x:
            d.set(value)
            d = d.next()
        b = b.next()
    return d


@requires(b=INPUT, e=INPUT, d=OUTPUT)
def remove_copy_if(b: InputCursor[T], e: InputCursor[T], d: O, p: Predicate[T]) -> O:
    """Copy the elements of `[b, e)` failing `p` to `d`, keeping their order.

    Returns:
        Output cursor one past the last written position.
    """
    while b != e:
        value = b.get()
        if not p(value):
            d.set(value)
            d = d.next()
        b = b.next()
    return d


@requires(b=FORWARD, e=FORWARD)
def replace(b: ForwardCursor[T], e: ForwardCursor[T], x: T, y: T) -> None:
    """Overwrite every element of `[b, e)` equal to `x` with `y`."""
    while b != e:
        if b.get() == x:
            b.set(y)
        b = b.next()


@requires(b=FORWARD, e=FORWARD)
def remove(b: F, e: F, x: Any) -> F:
    """Compact `[b, e)` in place, dropping every element equal to `x`.

    Survivors keep their relative order. Elements from the returned cursor up to
    `e` hold unspecified leftovers, typically duplicates of kept values.

    Returns:
        The new logical end of the range.
    """
    result = b
    while b != e:
        value = b.get()
        if not value == x:
            if result != b:
                result.set(value)
            result = result.next()
        b = b.next()
    return result


@requires(b=FORWARD, e=FORWARD)
def remove_if(b: F, e: F, p: Predicate[Any]) -> F:
    """Compact `[b, e)` in place, dropping every element satisfying `p`.

    Same contract as `remove`.
    """
    result = b
    while b != e:
        value = b.get()
        if not p(value):
            if result != b:
                result.set(value)
            result = result.next()
        b = b.next()
    return result


@requires(b=BIDIRECTIONAL, e=BIDIRECTIONAL)
def reverse(b: BidirectionalCursor[Any], e: BidirectionalCursor[Any]) -> None:
    """Reverse `[b, e)` in place by swapping pairs inward from both ends."""
    while b != e:
        e = e.prev()
        if b != e:
            swap(b, e)
            b = b.next()


@requires(b=BIDIRECTIONAL, e=BIDIRECTIONAL)
def partition(b: B, e: B, p: Predicate[Any]) -> B:
    """Move the elements satisfying `p` in front of those that do not.

    Unstable: order inside either group is not preserved. `b` scans forward over
    elements that already satisfy `p`, `e` scans backward over elements that
    already fail it, and the two misplaced elements they stop on are swapped.

    Returns:
        Cursor at the first element of the group failing `p`.
    """
    while b != e:
        while p(b.get()):
            b = b.next()
            if b == e:
                return b
        while True:
            e = e.prev()
            if b == e:
                return b
            if p(e.get()):
                break
        swap(b, e)
        b = b.next()
    return b
