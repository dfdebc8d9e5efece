"""Core definitions shared by cursors and algorithms: callable aliases and errors."""

from cursoralgs.core.errors import (
    CursorCategoryError,
    CursorError,
    RecursionBoundError,
    StaleCursorError,
)
from cursoralgs.core.types import Predicate

__all__ = [
    # Types
    "Predicate",
    # Errors
    "CursorError",
    "CursorCategoryError",
    "StaleCursorError",
    "RecursionBoundError",
]
