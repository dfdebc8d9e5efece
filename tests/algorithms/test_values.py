"""Tests for swap, max and min."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

import cursoralgs
from cursoralgs import Ref, begin, swap


def test_swap_ints() -> None:
    x, y = Ref(69), Ref(420)

    swap(x, y)

    assert x.value == 420
    assert y.value == 69


def test_swap_chars() -> None:
    u, v = Ref("u"), Ref("v")

    swap(u, v)

    assert (u.value, v.value) == ("v", "u")


def test_swap_with_itself_is_noop() -> None:
    x = Ref(5)

    swap(x, x)

    assert x.value == 5


def test_swap_cursor_targets() -> None:
    data = [1, 2, 3]
    first = begin(data)

    swap(first, first + 2)

    assert data == [3, 2, 1]


@given(a=st.integers(), b=st.integers())
def test_swap_is_an_involution(a: int, b: int) -> None:
    x, y = Ref(a), Ref(b)

    swap(x, y)
    swap(x, y)

    assert (x.value, y.value) == (a, b)


@pytest.mark.parametrize(
    ("x", "y", "expected"), [(1, 2, 2), (2, 1, 2), (-1, -5, -1), ("a", "b", "b")]
)
def test_max(x, y, expected) -> None:
    assert cursoralgs.max(x, y) == expected


@pytest.mark.parametrize(
    ("x", "y", "expected"), [(1, 2, 1), (2, 1, 1), (-1, -5, -5), ("a", "b", "a")]
)
def test_min(x, y, expected) -> None:
    assert cursoralgs.min(x, y) == expected


class _Keyed:
    """Orders by key only, so ties are distinguishable by identity."""

    def __init__(self, key: int) -> None:
        self.key = key

    def __lt__(self, other: "_Keyed") -> bool:
        return self.key < other.key

    def __gt__(self, other: "_Keyed") -> bool:
        return self.key > other.key


def test_ties_return_second_argument() -> None:
    first, second = _Keyed(1), _Keyed(1)

    assert cursoralgs.max(first, second) is second
    assert cursoralgs.min(first, second) is second


def test_star_import_keeps_builtin_max_and_min() -> None:
    namespace: dict[str, object] = {}

    exec("from cursoralgs import *", namespace)

    assert "max" not in namespace
    assert "min" not in namespace
    assert "swap" in namespace
    assert cursoralgs.max is not max
