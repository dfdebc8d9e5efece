"""Scalar helpers that work on values rather than ranges."""

from __future__ import annotations

from typing import TypeVar

from cursoralgs.cursor.models import Slot

T = TypeVar("T")


def swap(x: Slot[T], y: Slot[T]) -> None:
    """Exchange the values held by two slots through a temporary.

    Slots are cursors or `Ref` cells. Swapping a slot with itself is a no-op.
    """
    t = x.get()
    x.set(y.get())
    y.set(t)


def max(x: T, y: T) -> T:  # noqa: A001
    """Larger of two values by `>`. Returns `y` when they tie."""
    return x if x > y else y  # type: ignore[operator]


def min(x: T, y: T) -> T:  # noqa: A001
    """Smaller of two values by `<`. Returns `y` when they tie."""
    return x if x < y else y  # type: ignore[operator]
