"""Quadratic and shell sorts, all working in place."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

__all__ = [
    "selection_sort",
    "insertion_sort",
    "binary_search",
    "binary_insertion_sort",
    "bubble_sort",
    "shaker_sort",
    "shell_sort",
]


def selection_sort(arr: MutableSequence[int]) -> None:
    """Sort ``arr`` in place by repeatedly selecting the minimum."""
    n = len(arr)
    for i in range(n - 1):
        smallest = min(range(i, n), key=arr.__getitem__)
        arr[i], arr[smallest] = arr[smallest], arr[i]


def insertion_sort(arr: MutableSequence[int]) -> None:
    """Sort ``arr`` in place by straight insertion."""
    for i in range(1, len(arr)):
        value = arr[i]
        index = i
        while index > 0 and arr[index - 1] > value:
            arr[index] = arr[index - 1]
            index -= 1
        arr[index] = value


def binary_search(arr: Sequence[int], value: int, lo: int, hi: int) -> int:
    """Return where ``value`` belongs in the sorted slice ``arr[lo..hi]``.

    If an equal element is found, the position just after it is returned.
    """
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if arr[mid] == value:
            return mid + 1
        if arr[mid] < value:
            lo = mid + 1
        else:
            hi = mid - 1
    return lo


def binary_insertion_sort(arr: MutableSequence[int]) -> None:
    """Sort ``arr`` in place, finding insertion points by binary search."""
    for i in range(1, len(arr)):
        value = arr[i]
        index = binary_search(arr, value, 0, i - 1)
        arr[index + 1 : i + 1] = arr[index:i]
        arr[index] = value


def bubble_sort(arr: MutableSequence[int]) -> None:
    """Sort ``arr`` in place by bubbling the largest element to the end."""
    n = len(arr)
    for i in range(n - 1):
        for j in range(n - i - 1):
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]


def shaker_sort(arr: MutableSequence[int]) -> None:
    """Sort ``arr`` in place with alternating forward and backward passes."""
    lo, hi = 0, len(arr) - 1
    while True:
        swapped = False
        for i in range(lo, hi):
            if arr[i] > arr[i + 1]:
                arr[i], arr[i + 1] = arr[i + 1], arr[i]
                swapped = True
        hi -= 1
        if not swapped:
            return
        swapped = False
        for i in range(hi, lo, -1):
            if arr[i] < arr[i - 1]:
                arr[i], arr[i - 1] = arr[i - 1], arr[i]
                swapped = True
        lo += 1
        if not swapped:
            return


def shell_sort(arr: MutableSequence[int]) -> None:
    """Sort ``arr`` in place using Shell's halving gap sequence."""
    n = len(arr)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            value = arr[i]
            j = i
            while j >= gap and arr[j - gap] > value:
                arr[j] = arr[j - gap]
                j -= gap
            arr[j] = value
        gap //= 2