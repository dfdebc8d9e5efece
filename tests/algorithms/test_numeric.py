"""Tests for for_each and accumulate."""

import functools
import operator

from hypothesis import given
from hypothesis import strategies as st

from cursoralgs import accumulate, bounds, for_each, stream


class Collector:
    """Stateful callable recording every value it sees."""

    def __init__(self) -> None:
        self.seen: list[int] = []

    def __call__(self, value: int) -> None:
        self.seen.append(value)


def test_for_each_returns_the_operation_with_its_state(ascending: list[int]) -> None:
    op = Collector()

    result = for_each(*bounds(ascending), op)

    assert result is op
    assert op.seen == ascending


def test_for_each_does_not_modify_elements(ascending: list[int]) -> None:
    for_each(*bounds(ascending), lambda v: 2 * v)

    assert ascending == list(range(10))


def test_for_each_empty_range_never_calls() -> None:
    op = Collector()

    for_each(*bounds([]), op)

    assert op.seen == []


def test_for_each_over_stream_visits_once() -> None:
    op = Collector()

    for_each(*stream(iter([3, 1, 2])), op)

    assert op.seen == [3, 1, 2]


def test_accumulate_sums_range(ascending: list[int]) -> None:
    assert accumulate(*bounds(ascending), 0) == 45


def test_accumulate_empty_range_returns_seed() -> None:
    assert accumulate(*bounds([]), 0) == 0
    assert accumulate(*bounds([]), 17) == 17


def test_accumulate_uses_in_place_addition() -> None:
    assert accumulate(*bounds(["b", "c"]), "a") == "abc"
    assert accumulate(*bounds([[1], [2]]), []) == [1, 2]


def test_accumulate_leaves_caller_seed_untouched() -> None:
    seed = [0]

    result = accumulate(*bounds([[1], [2]]), seed)

    assert result == [0, 1, 2]
    assert seed == [0]
    assert result is not seed


@given(data=st.lists(st.integers(), max_size=30), seed=st.integers())
def test_accumulate_matches_reduce(data: list[int], seed: int) -> None:
    """PROPERTY: a left fold with + from the seed."""
    assert accumulate(*bounds(data), seed) == functools.reduce(operator.add, data, seed)
