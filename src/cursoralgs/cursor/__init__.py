"""Cursor protocols and concrete cursors over Python containers."""

from cursoralgs.cursor.models import (
    BidirectionalCursor,
    CursorCategory,
    ForwardCursor,
    InputCursor,
    OutputCursor,
    RandomAccessCursor,
    Slot,
    category_of,
)
from cursoralgs.cursor.sequence import (
    AppendCursor,
    Ref,
    SequenceCursor,
    StreamCursor,
    back_inserter,
    begin,
    bounds,
    end,
    stream,
)

__all__ = [
    # Protocols
    "InputCursor",
    "OutputCursor",
    "ForwardCursor",
    "BidirectionalCursor",
    "RandomAccessCursor",
    "Slot",
    "CursorCategory",
    "category_of",
    # Concrete cursors
    "SequenceCursor",
    "StreamCursor",
    "AppendCursor",
    "Ref",
    "begin",
    "end",
    "bounds",
    "stream",
    "back_inserter",
]
