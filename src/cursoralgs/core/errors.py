"""Exceptions raised by cursors and by the opt-in algorithm checks.

Malformed ranges are never reported: an unreachable end, an unsorted range given
to `binary_search` or a short second range given to `equal` are caller errors
with undefined results. The classes below cover the few failures that are
detected.
"""


class CursorError(Exception):
    """Base class for cursor library errors."""


class CursorCategoryError(CursorError, TypeError):
    """Cursor lacks a capability the algorithm requires.

    Only raised when `AlgorithmSettings.check_categories` is enabled.
    """


class StaleCursorError(CursorError, ValueError):
    """Single-pass cursor used after its position was consumed."""


class RecursionBoundError(CursorError, RecursionError):
    """Recursive scan would descend deeper than the configured bound."""
