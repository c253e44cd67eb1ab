"""Divide-and-conquer and heap based sorts, all working in place."""

from __future__ import annotations

import heapq
import math
from collections.abc import MutableSequence

from sortbench.simple import insertion_sort

__all__ = [
    "heapify",
    "heap_sort",
    "merge",
    "merge_sort",
    "reverse_range",
    "natural_merge_sort",
    "quick_sort",
    "std_sort",
]

_SMALL_SIZE = 16


def heapify(arr: MutableSequence[int], n: int, i: int) -> None:
    """Sift ``arr[i]`` down so the subtree rooted at ``i`` is a max-heap.

    Only the first ``n`` elements of ``arr`` belong to the heap.
    """
    while True:
        largest = i
        left, right = 2 * i + 1, 2 * i + 2
        if left < n and arr[left] > arr[largest]:
            largest = left
        if right < n and arr[right] > arr[largest]:
            largest = right
        if largest == i:
            return
        arr[i], arr[largest] = arr[largest], arr[i]
        i = largest


def heap_sort(arr: MutableSequence[int]) -> None:
    """Sort ``arr`` in place with a binary max-heap."""
    n = len(arr)
    for i in range(n // 2 - 1, -1, -1):
        heapify(arr, n, i)
    for i in range(n - 1, -1, -1):
        arr[0], arr[i] = arr[i], arr[0]
        heapify(arr, i, 0)


def merge(arr: MutableSequence[int], lo: int, mid: int, hi: int) -> None:
    """Merge the sorted runs ``arr[lo..mid]`` and ``arr[mid+1..hi]`` stably."""
    left = arr[lo : mid + 1]
    right = arr[mid + 1 : hi + 1]
    arr[lo : hi + 1] = list(heapq.merge(left, right))


def merge_sort(arr: MutableSequence[int], lo: int = 0, hi: int | None = None) -> None:
    """Sort ``arr[lo..hi]`` (inclusive) in place by top-down merge sort."""
    if hi is None:
        hi = len(arr) - 1
    if lo < hi:
        mid = (lo + hi) // 2
        merge_sort(arr, lo, mid)
        merge_sort(arr, mid + 1, hi)
        merge(arr, lo, mid, hi)


def reverse_range(arr: MutableSequence[int], start: int, end: int) -> None:
    """Reverse ``arr[start..end]`` (inclusive) in place."""
    if start < end:
        arr[start : end + 1] = arr[start : end + 1][::-1]


def _find_runs(arr: MutableSequence[int]) -> list[tuple[int, int]]:
    """Split ``arr`` into ascending runs, reversing strictly descending ones."""
    n = len(arr)
    runs: list[tuple[int, int]] = []
    i = 0
    while i < n:
        start = i
        if i + 1 < n and arr[i] <= arr[i + 1]:
            while i + 1 < n and arr[i] <= arr[i + 1]:
                i += 1
        elif i + 1 < n:
            while i + 1 < n and arr[i] > arr[i + 1]:
                i += 1
            reverse_range(arr, start, i)
        runs.append((start, i))
        i += 1
    return runs


def natural_merge_sort(arr: MutableSequence[int]) -> None:
    """Sort ``arr`` in place by merging its naturally occurring runs."""
    if len(arr) <= 1:
        return
    while True:
        runs = _find_runs(arr)
        count = len(runs)
        if count == 1:
            return
        width = 1
        while width < count:
            for k in range(0, count, 2 * width):
                if k + width >= count:
                    continue
                left = runs[k][0]
                mid = runs[k + width - 1][1]
                right = runs[min(k + 2 * width, count) - 1][1]
                if mid < right:
                    merge(arr, left, mid, right)
            width *= 2


def quick_sort(arr: MutableSequence[int], lo: int = 0, hi: int | None = None) -> None:
    """Sort ``arr[lo..hi]`` (inclusive) in place by quicksort with a middle pivot."""
    if hi is None:
        hi = len(arr) - 1
    pending = [(lo, hi)]
    while pending:
        left, right = pending.pop()
        if left >= right:
            continue
        i, j = left, right
        pivot = arr[left + (right - left) // 2]
        while i <= j:
            while arr[i] < pivot:
                i += 1
            while arr[j] > pivot:
                j -= 1
            if i <= j:
                arr[i], arr[j] = arr[j], arr[i]
                i += 1
                j -= 1
        if i < right:
            pending.append((i, right))
        if j > left:
            pending.append((left, j))


def _sort_recursive(arr: MutableSequence[int], lo: int, hi: int, limit: int) -> None:
    if hi - lo + 1 <= _SMALL_SIZE:
        insertion_sort(arr)
        return
    if limit == 0:
        heap_sort(arr)
        return
    if lo < hi:
        quick_sort(arr, lo, hi)


def std_sort(arr: MutableSequence[int]) -> None:
    """Sort ``arr`` in place: insertion sort for small inputs, else quicksort
    with a heap sort fallback once the depth limit is exhausted."""
    n = len(arr)
    if n <= _SMALL_SIZE:
        insertion_sort(arr)
        return
    limit = int(2 * math.log2(n))
    _sort_recursive(arr, 0, n - 1, limit)