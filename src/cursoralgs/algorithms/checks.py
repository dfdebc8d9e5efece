"""Opt-in verification of cursor capabilities at algorithm entry.

Algorithms declare what each cursor parameter needs with `@requires`. The check
only runs when `AlgorithmSettings.check_categories` is enabled; otherwise the
wrapper forwards the call untouched.

Usage:
    @requires(b=CursorCategory.INPUT, e=CursorCategory.INPUT)
    def find(b, e, x): ...
"""

from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Callable
from typing import ParamSpec, TypeVar

from cursoralgs.config import get_settings
from cursoralgs.core.errors import CursorCategoryError
from cursoralgs.cursor.models import CursorCategory, category_of

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def require_category(cursor: object, required: CursorCategory, where: str) -> None:
    """Raise if `cursor` cannot serve as a `required` cursor.

    Args:
        cursor: Cursor passed by the caller.
        required: Category the parameter demands.
        where: Name used in the error message, e.g. "reverse(b)".

    Raises:
        CursorCategoryError: If the cursor's category does not satisfy `required`.
    """
    actual = category_of(cursor)
    if actual.satisfies(required):
        return
    logger.debug("%s got %s cursor %r, needs %s", where, actual.name, cursor, required.name)
    raise CursorCategoryError(
        f"{where} requires a {required.name} cursor, got {type(cursor).__name__} ({actual.name})"
    )


def requires(**categories: CursorCategory) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Declare the cursor category each named parameter needs.

    Args:
        **categories: Parameter name to required category.

    Returns:
        Decorator that checks the bound arguments when checking is enabled.
    """

    def decorate(func: Callable[P, R]) -> Callable[P, R]:
        signature = inspect.signature(func)
        unknown = set(categories) - set(signature.parameters)
        if unknown:
            raise ValueError(f"{func.__name__} has no parameters {sorted(unknown)}")

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            if get_settings().check_categories:
                bound = signature.bind(*args, **kwargs)
                for name, required in categories.items():
                    require_category(bound.arguments[name], required, f"{func.__name__}({name})")
            return func(*args, **kwargs)

        return wrapper

    return decorate
