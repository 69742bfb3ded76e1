"""Tests for combine_map, combine_map_with, combine and combine_with."""

import time

from hypothesis import given
from hypothesis import strategies as st
from klaw_loadable import (
    combine,
    combine_map,
    combine_map_with,
    combine_with,
    fail,
    loading,
    not_asked,
    succeed,
)

from tests.strategies import integers


def concat(a, b):
    return a + b


class TestCombineMap:
    """combine_map collects successes and short-circuits on the first non-success."""

    def test_all_succeed(self):
        assert combine_map(succeed, [1, 2, 3]) == succeed([1, 2, 3])

    def test_empty_sequence(self):
        assert combine_map(succeed, []) == succeed([])

    @given(st.lists(integers, max_size=20))
    def test_preserves_order(self, items):
        assert combine_map(lambda x: succeed(x * 2), items) == succeed([x * 2 for x in items])

    def test_single_error(self, fail_if_odd):
        """Only one error surfaces: the leftmost failing item's."""
        assert combine_map(fail_if_odd, [1, 2, 3]) == fail('1')

    def test_empty_item_before_failure(self):
        def f(x):
            return not_asked() if x == 1 else fail(str(x))

        assert combine_map(f, [1, 2]) == not_asked()

    def test_calls_every_item_last_first(self):
        calls = []

        def f(x):
            calls.append(x)
            return fail(str(x)) if x == 2 else succeed(x)

        combine_map(f, [1, 2, 3])
        assert calls == [3, 2, 1]

    def test_refreshing_item_marks_result(self):
        def f(x):
            return succeed(x).to_loading() if x == 2 else succeed(x)

        result = combine_map(f, [1, 2, 3])
        assert result == succeed([1, 2, 3]).to_loading()

    def test_accepts_tuples(self):
        assert combine_map(succeed, (1, 2)) == succeed([1, 2])

    def test_large_input_is_linear(self):
        """Each fold step is constant time, so long sequences stay fast."""
        items = range(200_000)
        start = time.perf_counter()
        result = combine_map(succeed, items)
        elapsed = time.perf_counter() - start
        assert result == succeed(list(items))
        assert elapsed < 5.0


class TestCombineMapWith:
    """combine_map_with accumulates every failure."""

    def test_accumulates_in_order(self, fail_if_odd):
        assert combine_map_with(concat, fail_if_odd, [1, 2, 3]) == fail('13')

    def test_accumulates_all(self, fail_if_odd):
        assert combine_map_with(concat, fail_if_odd, [1, 3, 5, 7]) == fail('1357')

    def test_all_succeed(self, fail_if_odd):
        assert combine_map_with(concat, fail_if_odd, [2, 4]) == succeed([2, 4])

    def test_list_errors(self):
        def f(x):
            return fail([x]) if x < 0 else succeed(x)

        assert combine_map_with(concat, f, [-1, 0, -2, 3, -3]) == fail([-1, -2, -3])

    def test_failure_beats_empty(self):
        def f(x):
            return not_asked() if x == 1 else fail(str(x))

        assert combine_map_with(concat, f, [1, 2]) == fail('2')

    def test_flags_from_every_item(self):
        def f(x):
            return fail(str(x)) if x == 1 else loading()

        result = combine_map_with(concat, f, [1, 2])
        assert result == fail('1').to_loading()

    def test_large_input_accumulates(self):
        def f(n):
            return fail(1) if n % 2 else succeed(n)

        assert combine_map_with(lambda a, b: a + b, f, range(50_000)) == fail(25_000)

    @given(st.lists(integers, max_size=20))
    def test_matches_combine_map_without_failures(self, items):
        assert combine_map_with(concat, succeed, items) == combine_map(succeed, items)


class TestCombine:
    """combine / combine_with over ready-made Loadables."""

    def test_combine(self):
        assert combine([succeed(1), succeed(2)]) == succeed([1, 2])

    def test_combine_failure(self):
        assert combine([succeed(1), fail('a'), fail('b')]) == fail('a')

    def test_combine_with(self):
        assert combine_with(concat, [fail('a'), succeed(1), fail('b')]) == fail('ab')

    def test_combine_with_loading(self):
        assert combine_with(concat, [succeed(1), loading()]) == loading()
