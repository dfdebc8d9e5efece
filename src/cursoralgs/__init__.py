"""cursoralgs: generic sequence algorithms over abstract cursors.

Usage:
    from cursoralgs import begin, end, find, partition, reverse

    data = list(range(10))
    hit = find(begin(data), end(data), 3)       # SequenceCursor(index=3, len=10)

    reverse(begin(data), end(data))              # data == [9, 8, ..., 0]

    middle = partition(begin(data), end(data), lambda v: v % 2 == 0)
    # every even value now precedes `middle`, every odd value follows it
"""

__version__ = "0.1.0"

# Algorithms
from cursoralgs.algorithms import (  # noqa: A004
    accumulate,
    binary_search,
    copy,
    equal,
    find,
    find_if,
    for_each,
    max,
    min,
    partition,
    remove,
    remove_copy,
    remove_copy_if,
    remove_if,
    replace,
    reverse,
    rfind,
    search,
    swap,
)

# Configuration
from cursoralgs.config import AlgorithmSettings, get_settings

# Core
from cursoralgs.core import (
    CursorCategoryError,
    CursorError,
    Predicate,
    RecursionBoundError,
    StaleCursorError,
)

# Cursors
from cursoralgs.cursor import (
    AppendCursor,
    BidirectionalCursor,
    CursorCategory,
    ForwardCursor,
    InputCursor,
    OutputCursor,
    RandomAccessCursor,
    Ref,
    SequenceCursor,
    Slot,
    StreamCursor,
    back_inserter,
    begin,
    bounds,
    category_of,
    end,
    stream,
)

__all__ = [
    # Version
    "__version__",
    # Algorithms
    "for_each",
    "find",
    "rfind",
    "find_if",
    "search",
    "binary_search",
    "equal",
    "copy",
    "remove_copy",
    "remove_copy_if",
    "replace",
    "remove",
    "remove_if",
    "reverse",
    "partition",
    "accumulate",
    "swap",
    # Cursors
    "InputCursor",
    "OutputCursor",
    "ForwardCursor",
    "BidirectionalCursor",
    "RandomAccessCursor",
    "Slot",
    "CursorCategory",
    "category_of",
    "SequenceCursor",
    "StreamCursor",
    "AppendCursor",
    "Ref",
    "begin",
    "end",
    "bounds",
    "stream",
    "back_inserter",
    # Configuration
    "AlgorithmSettings",
    "get_settings",
    # Core
    "Predicate",
    "CursorError",
    "CursorCategoryError",
    "StaleCursorError",
    "RecursionBoundError",
]
