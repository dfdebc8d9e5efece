"""Callable shapes accepted by the algorithms."""

from collections.abc import Callable

type Predicate[T] = Callable[[T], bool]
"""Pure unary test over an element value.

Algorithms call it once per element they inspect and assume the answer only
depends on the argument.
"""
