"""Cursor capability protocols and categories.

A cursor is an immutable position in a sequence. Moving a cursor returns a new
cursor and leaves the original untouched, so copies behave like values. The five
capability levels nest as follows:

    INPUT          get, next, ==          (single pass, read)
    OUTPUT         set, next              (single pass, write)
    FORWARD        INPUT + OUTPUT         (multi pass)
    BIDIRECTIONAL  FORWARD + prev
    RANDOM_ACCESS  BIDIRECTIONAL + offset, distance, <

Usage:
    from cursoralgs import CursorCategory, category_of

    category_of(begin([1, 2, 3]))  # CursorCategory.RANDOM_ACCESS
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Protocol, Self, TypeVar, runtime_checkable

from cursoralgs.core.errors import CursorCategoryError

T = TypeVar("T")


class CursorCategory(Enum):
    """Capability level of a cursor."""

    INPUT = auto()
    OUTPUT = auto()
    FORWARD = auto()
    BIDIRECTIONAL = auto()
    RANDOM_ACCESS = auto()

    def satisfies(self, required: CursorCategory) -> bool:
        """Check if a cursor of this category can be used where `required` is expected.

        Args:
            required: Category demanded by an algorithm parameter.

        Returns:
            True if every capability of `required` is present in this category.
        """
        if self is required:
            return True
        # INPUT and OUTPUT are siblings; FORWARD and above imply both
        if self in (CursorCategory.INPUT, CursorCategory.OUTPUT):
            return False
        if required in (CursorCategory.INPUT, CursorCategory.OUTPUT):
            return True
        return self.value >= required.value


@runtime_checkable
class Slot(Protocol[T]):
    """Anything holding one readable and writable value."""

    def get(self) -> T: ...

    def set(self, value: T) -> None: ...


@runtime_checkable
class InputCursor(Protocol[T]):
    """Readable, advanceable position. Single pass.

    Implementations must also define `==` against cursors of the same range.
    """

    def get(self) -> T:
        """Read the element at this position."""
        ...

    def next(self) -> Self:
        """Cursor one position further."""
        ...


@runtime_checkable
class OutputCursor(Protocol[T]):
    """Writable, advanceable position. Single pass."""

    def set(self, value: T) -> None:
        """Write an element at this position."""
        ...

    def next(self) -> Self:
        """Cursor one position further."""
        ...


@runtime_checkable
class ForwardCursor(InputCursor[T], OutputCursor[T], Protocol[T]):
    """Read-write cursor whose copies may be revisited."""


@runtime_checkable
class BidirectionalCursor(ForwardCursor[T], Protocol[T]):
    """Forward cursor that can also step backwards."""

    def prev(self) -> Self:
        """Cursor one position back."""
        ...


@runtime_checkable
class RandomAccessCursor(BidirectionalCursor[T], Protocol[T]):
    """Bidirectional cursor with offset arithmetic, distance and ordering."""

    def __add__(self, offset: int) -> Self: ...

    def __sub__(self, other: Any) -> Any:
        """Distance to another cursor, or a cursor moved back by an int offset."""
        ...

    def __lt__(self, other: Any) -> bool: ...


# Strongest first, so the first structural match wins
_STRUCTURAL_CHECKS: tuple[tuple[type, CursorCategory], ...] = (
    (RandomAccessCursor, CursorCategory.RANDOM_ACCESS),
    (BidirectionalCursor, CursorCategory.BIDIRECTIONAL),
    (ForwardCursor, CursorCategory.FORWARD),
    (InputCursor, CursorCategory.INPUT),
    (OutputCursor, CursorCategory.OUTPUT),
)


def category_of(cursor: object) -> CursorCategory:
    """Determine the strongest category a cursor supports.

    A `category` attribute holding a CursorCategory takes precedence. Without one,
    the cursor is matched structurally against the protocols, which only checks
    that the methods exist.

    Args:
        cursor: Object to classify.

    Returns:
        The declared or inferred category.

    Raises:
        CursorCategoryError: If the object has none of the cursor methods.
    """
    declared = getattr(cursor, "category", None)
    if isinstance(declared, CursorCategory):
        return declared
    for protocol, category in _STRUCTURAL_CHECKS:
        if isinstance(cursor, protocol):
            return category
    raise CursorCategoryError(f"{type(cursor).__name__} is not a cursor")
