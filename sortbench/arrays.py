"""Test-data generators and a sortedness check for the sorting benchmarks."""

from __future__ import annotations

import random
from collections.abc import Sequence
from itertools import pairwise

__all__ = [
    "is_sorted",
    "random_array",
    "sorted_array",
    "reverse_sorted_array",
    "nearly_sorted_array",
]


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _ramp(n: int, k: int) -> list[int]:
    """Evenly spread ``n`` values from 0 up to ``k``."""
    if n == 1:
        raise ValueError("an evenly spaced array needs n != 1")
    return [_trunc_div(i * k, n - 1) for i in range(n)]


def is_sorted(arr: Sequence[int]) -> bool:
    """Return True if ``arr`` is in non-decreasing order."""
    return all(a <= b for a, b in pairwise(arr))


def random_array(n: int, k: int, rng: random.Random | None = None) -> list[int]:
    """Return ``n`` integers drawn uniformly from ``0..k`` inclusive."""
    rng = rng or random.Random()
    return [rng.randint(0, k) for _ in range(n)]


def sorted_array(n: int, k: int) -> list[int]:
    """Return ``n`` evenly spaced integers rising from 0 to ``k``."""
    return _ramp(n, k)


def reverse_sorted_array(n: int, k: int) -> list[int]:
    """Return ``n`` evenly spaced integers falling from ``k`` to 0."""
    return [k - value for value in _ramp(n, k)]


def nearly_sorted_array(
    n: int, k: int, rng: random.Random | None = None
) -> list[int]:
    """Return a sorted array in which ``n // 20`` random pairs were swapped."""
    arr = _ramp(n, k)
    rng = rng or random.Random()
    for _ in range(n // 20):
        x = rng.randint(0, n - 1)
        y = rng.randint(0, n - 1)
        arr[x], arr[y] = arr[y], arr[x]
    return arr