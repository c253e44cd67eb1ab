"""Distribution sorts over integer keys, working in place."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

__all__ = ["find_max", "counting_sort_by_digit", "radix_sort", "counting_sort"]

_U64 = 1 << 64
_U64_MAX = _U64 - 1


def find_max(arr: Sequence[int]) -> int:
    """Return the largest element of ``arr``; raise ValueError if it is empty."""
    if not arr:
        raise ValueError("find_max() of an empty sequence")
    return max(arr)


def _digit(value: int, exp: int) -> int:
    # Values are keyed by their unsigned 64-bit representation.
    return (value % _U64) // exp % 10


def counting_sort_by_digit(arr: MutableSequence[int], exp: int) -> None:
    """Stably sort ``arr`` in place by the decimal digit selected by ``exp``."""
    buckets: list[list[int]] = [[] for _ in range(10)]
    for value in arr:
        buckets[_digit(value, exp)].append(value)
    arr[:] = [value for bucket in buckets for value in bucket]


def radix_sort(arr: MutableSequence[int]) -> None:
    """Sort ``arr`` in place by least-significant-digit radix sort.

    Keys are the values' unsigned 64-bit representations, so inputs that
    are all non-negative or all negative come out in ascending order.
    """
    if not arr:
        return
    top = find_max(arr) % _U64
    exp = 1
    while top // exp > 0:
        if exp > _U64_MAX // 10:
            break
        counting_sort_by_digit(arr, exp)
        exp *= 10


def counting_sort(arr: MutableSequence[int]) -> None:
    """Sort non-negative integers in place by counting occurrences.

    Raises ValueError if any value is negative.
    """
    if not arr:
        return
    if min(arr) < 0:
        raise ValueError("counting_sort() requires non-negative values")
    counts = [0] * (max(0, max(arr)) + 1)
    for value in arr:
        counts[value] += 1
    arr[:] = [value for value, count in enumerate(counts) for _ in range(count)]