"""Traversal and folding over cursor ranges."""

from __future__ import annotations

from collections.abc import Callable
from copy import copy as copy_value
from typing import Any, TypeVar

from cursoralgs.algorithms.checks import requires
from cursoralgs.cursor.models import CursorCategory, InputCursor

A = TypeVar("A")
Op = TypeVar("Op", bound=Callable[[Any], object])


@requires(b=CursorCategory.INPUT, e=CursorCategory.INPUT)
def for_each(b: InputCursor[Any], e: InputCursor[Any], op: Op) -> Op:
    """Apply `op` to each element of `[b, e)` in order, exactly once.

    Returns:
        `op` itself, so a stateful callable can report what it collected.
    """
    while b != e:
        op(b.get())
        b = b.next()
    return op


@requires(b=CursorCategory.INPUT, e=CursorCategory.INPUT)
def accumulate(b: InputCursor[Any], e: InputCursor[Any], a: A) -> A:
    """Fold `[b, e)` into `a` with `a += element`, left to right.

    The seed is never defaulted and the caller's object is not modified: the fold
    runs on a shallow copy. An empty range returns an equal value.
    """
    a = copy_value(a)
    while b != e:
        a += b.get()  # type: ignore[operator]
        b = b.next()
    return a
