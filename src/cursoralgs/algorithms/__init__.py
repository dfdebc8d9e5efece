"""Generic algorithms over cursor ranges.

Architecture Note:
    Every algorithm is a stateless free function. The only shared piece is
    `swap`, which `reverse` and `partition` use to exchange cursor targets.
"""

from cursoralgs.algorithms.checks import require_category, requires
from cursoralgs.algorithms.mutate import (
    copy,
    partition,
    remove,
    remove_copy,
    remove_copy_if,
    remove_if,
    replace,
    reverse,
)
from cursoralgs.algorithms.numeric import accumulate, for_each
from cursoralgs.algorithms.search import (
    binary_search,
    equal,
    find,
    find_if,
    rfind,
    search,
)
from cursoralgs.algorithms.values import max, min, swap  # noqa: A004

__all__ = [
    # Traversal
    "for_each",
    # Search
    "find",
    "rfind",
    "find_if",
    "search",
    "binary_search",
    # Comparison
    "equal",
    # Copying
    "copy",
    "remove_copy",
    "remove_copy_if",
    # In-place mutation
    "replace",
    "remove",
    "remove_if",
    "reverse",
    "partition",
    # Reduction
    "accumulate",
    # Scalar helpers (max and min stay out so star imports keep the builtins)
    "swap",
    # Checks
    "requires",
    "require_category",
]
