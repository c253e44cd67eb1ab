import pytest
from hypothesis import given
from hypothesis import strategies as st

from sortbench.divide import (
    heap_sort,
    heapify,
    merge,
    merge_sort,
    natural_merge_sort,
    quick_sort,
    reverse_range,
    std_sort,
)

int_lists = st.lists(st.integers(min_value=-10**9, max_value=10**9), max_size=200)


def _is_max_heap(arr, n):
    return all(arr[(i - 1) // 2] >= arr[i] for i in range(1, n))


@given(data=int_lists)
def test_sorts_match_builtin(data):
    expected = sorted(data)

    a = list(data)
    heap_sort(a)
    assert a == expected

    b = list(data)
    merge_sort(b, 0, len(b) - 1)
    assert b == expected

    c = list(data)
    natural_merge_sort(c)
    assert c == expected

    d = list(data)
    quick_sort(d, 0, len(d) - 1)
    assert d == expected

    e = list(data)
    std_sort(e)
    assert e == expected


@pytest.mark.parametrize(
    "data",
    [[], [7], [2, 1], [3, 3, 3], list(range(50, 0, -1)), [5, 1] * 20],
)
def test_sorts_edge_cases(data):
    expected = sorted(data)

    a = list(data)
    heap_sort(a)
    assert a == expected

    b = list(data)
    merge_sort(b, 0, len(b) - 1)
    assert b == expected

    c = list(data)
    natural_merge_sort(c)
    assert c == expected

    d = list(data)
    quick_sort(d, 0, len(d) - 1)
    assert d == expected

    e = list(data)
    std_sort(e)
    assert e == expected


def test_heapify_restores_heap_at_root():
    arr = [1, 5, 3, 4, 2]
    heapify(arr, len(arr), 0)
    assert arr[0] == max(arr)
    assert _is_max_heap(arr, len(arr))
    assert sorted(arr) == [1, 2, 3, 4, 5]


def test_heapify_ignores_elements_beyond_n():
    arr = [0, 1, 9]
    heapify(arr, 2, 0)
    assert arr == [1, 0, 9]


def test_merge_two_sorted_halves():
    arr = [1, 4, 7, 2, 3, 9]
    merge(arr, 0, 2, 5)
    assert arr == sorted([1, 4, 7, 2, 3, 9])


def test_merge_only_touches_range():
    arr = [9, 1, 3, 2, 4, 0]
    merge(arr, 1, 2, 4)
    assert arr[0] == 9 and arr[5] == 0
    assert arr[1:5] == sorted([1, 3, 2, 4])


def test_merge_sort_subrange():
    arr = [9, 5, 4, 3, 2, 0]
    merge_sort(arr, 1, 4)
    assert arr[0] == 9 and arr[5] == 0
    assert arr[1:5] == sorted([5, 4, 3, 2])


def test_quick_sort_subrange():
    arr = [9, 5, 4, 3, 2, 0]
    quick_sort(arr, 1, 4)
    assert arr[0] == 9 and arr[5] == 0
    assert arr[1:5] == sorted([5, 4, 3, 2])


def test_reverse_range_inclusive():
    arr = [1, 2, 3, 4, 5]
    reverse_range(arr, 1, 3)
    assert arr == [1, 4, 3, 2, 5]


def test_reverse_range_empty_span_is_noop():
    arr = [1, 2, 3]
    reverse_range(arr, 2, 1)
    assert arr == [1, 2, 3]


def test_natural_merge_sort_many_short_runs():
    data = [1, 0] * 4 + [1]
    arr = list(data)
    natural_merge_sort(arr)
    assert arr == sorted(data)


@given(data=int_lists)
def test_natural_merge_sort_keeps_multiset(data):
    arr = list(data)
    natural_merge_sort(arr)
    assert sorted(arr) == sorted(data) and len(arr) == len(data)


def test_std_sort_large_input():
    data = [(i * 7919) % 1000 for i in range(500)]
    arr = list(data)
    std_sort(arr)
    assert arr == sorted(data)