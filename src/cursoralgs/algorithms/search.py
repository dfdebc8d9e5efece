"""Search and comparison over cursor ranges.

Every function takes a half-open range `[b, e)`. `e` is only compared against,
never dereferenced. Input-cursor scans stop on cursor equality; `binary_search`
uses `<` between random-access cursors.
"""

from __future__ import annotations

import sys
import warnings
from typing import Any, TypeVar

from cursoralgs.algorithms.checks import requires
from cursoralgs.config import get_settings
from cursoralgs.core.errors import RecursionBoundError
from cursoralgs.core.types import Predicate
from cursoralgs.cursor.models import (
    CursorCategory,
    ForwardCursor,
    InputCursor,
    RandomAccessCursor,
)

T = TypeVar("T")
C = TypeVar("C", bound=InputCursor[Any])
F = TypeVar("F", bound=ForwardCursor[Any])

# Frames left for whatever is already on the stack when rfind is called
STACK_HEADROOM = 100

INPUT = CursorCategory.INPUT
FORWARD = CursorCategory.FORWARD


@requires(b=INPUT, e=INPUT)
def find(b: C, e: C, x: Any) -> C:
    """First cursor in `[b, e)` whose element equals `x`, or `e` if none does."""
    while b != e and b.get() != x:
        b = b.next()
    return b


@requires(b=INPUT, e=INPUT)
def rfind(b: C, e: C, x: Any, *, max_depth: int | None = None) -> C:
    """Recursive form of `find` with identical results.

    Each element scanned before a match costs one stack frame, so the range is
    bounded by `max_depth` (default: `AlgorithmSettings.rfind_max_depth`). The
    bound only protects the stack when it sits well below the interpreter
    recursion limit, since the caller's own frames count too; a bound within
    `STACK_HEADROOM` frames of the limit triggers a RuntimeWarning.

    Args:
        b: Start of the range.
        e: End of the range.
        x: Value to look for.
        max_depth: Most elements that may be stepped past before giving up.

    Returns:
        Cursor at the first element equal to `x`, or `e`.

    Raises:
        RecursionBoundError: If more than `max_depth` elements would be scanned.
    """
    if max_depth is None:
        max_depth = get_settings().rfind_max_depth
    limit = sys.getrecursionlimit()
    if max_depth >= limit - STACK_HEADROOM:
        warnings.warn(
            f"rfind bound {max_depth} leaves fewer than {STACK_HEADROOM} frames under the "
            f"interpreter recursion limit {limit}; long ranges may raise a plain "
            f"RecursionError before RecursionBoundError.",
            RuntimeWarning,
            stacklevel=2,
        )
    return _rfind(b, e, x, max_depth)


def _rfind(b: C, e: C, x: Any, budget: int) -> C:
    if b == e or b.get() == x:
        return b
    if budget <= 0:
        raise RecursionBoundError("rfind scanned more elements than its recursion bound allows")
    return _rfind(b.next(), e, x, budget - 1)


@requires(b=INPUT, e=INPUT)
def find_if(b: C, e: C, p: Predicate[Any]) -> C:
    """First cursor in `[b, e)` whose element satisfies `p`, or `e` if none does."""
    while b != e and not p(b.get()):
        b = b.next()
    return b


@requires(b1=FORWARD, e1=FORWARD, b2=FORWARD, e2=FORWARD)
def search(b1: F, e1: F, b2: ForwardCursor[Any], e2: ForwardCursor[Any]) -> F:
    """Find the leftmost occurrence of `[b2, e2)` inside `[b1, e1)`.

    An empty needle matches at `b1`. The needle is rescanned from `b2` for every
    candidate start, which is why both ranges need multi-pass cursors.

    Returns:
        Cursor in the first range where the match starts, or `e1` if there is none.
    """
    if b2 == e2:
        return b1
    while b1 != e1:
        it1 = b1
        it2 = b2
        while it1.get() == it2.get():
            it1 = it1.next()
            it2 = it2.next()
            if it2 == e2:
                return b1
            if it1 == e1:
                # Haystack ran out mid-match; no later start can fit either
                return e1
        b1 = b1.next()
    return e1


@requires(b=CursorCategory.RANDOM_ACCESS, e=CursorCategory.RANDOM_ACCESS)
def binary_search(b: RandomAccessCursor[T], e: RandomAccessCursor[T], x: T) -> bool:
    """Check if `x` is present in a range sorted ascending by `<`.

    Only `<` is applied to values, in both directions, so equality is inferred
    from neither value being less than the other. The midpoint is found by
    halving the distance before offsetting from `b`. The result is undefined for
    an unsorted range.
    """
    while b < e:
        mid = b + (e - b) // 2
        value = mid.get()
        if x < value:  # type: ignore[operator]
            e = mid
        elif value < x:  # type: ignore[operator]
            b = mid + 1
        else:
            return True
    return False


@requires(b1=INPUT, e=INPUT, b2=INPUT)
def equal(b1: InputCursor[Any], e: InputCursor[Any], b2: InputCursor[Any]) -> bool:
    """Compare `[b1, e)` element-wise with the range starting at `b2`.

    The second range must hold at least as many elements as the first; its end
    is never checked.
    """
    while b1 != e:
        if b1.get() != b2.get():
            return False
        b1 = b1.next()
        b2 = b2.next()
    return True
