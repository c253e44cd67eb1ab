"""Command-line benchmark that times a sorting algorithm on random arrays."""

from __future__ import annotations

import argparse
import random
from collections.abc import Callable, Iterable, Iterator, MutableSequence

from sortbench.arrays import is_sorted, random_array
from sortbench.distribution import counting_sort, radix_sort
from sortbench.divide import (
    heap_sort,
    merge_sort,
    natural_merge_sort,
    quick_sort,
    std_sort,
)
from sortbench.simple import (
    binary_insertion_sort,
    bubble_sort,
    insertion_sort,
    selection_sort,
    shaker_sort,
    shell_sort,
)
from sortbench.timing import measure_execution_time

__all__ = ["benchmark", "main"]

SortFunc = Callable[[MutableSequence[int]], None]

_ALGORITHMS: dict[str, SortFunc] = {
    "selection": selection_sort,
    "insertion": insertion_sort,
    "binary-insertion": binary_insertion_sort,
    "bubble": bubble_sort,
    "shaker": shaker_sort,
    "shell": shell_sort,
    "heap": heap_sort,
    "merge": merge_sort,
    "natural-merge": natural_merge_sort,
    "quick": quick_sort,
    "std": std_sort,
    "radix": radix_sort,
    "counting": counting_sort,
}

_DEFAULT_SIZES = [1, 2, 4, 6, 8, 10, 12, 14, 16, 20]
_MILLION = 1_000_000


def benchmark(
    sort: SortFunc,
    sizes: Iterable[int],
    runs: int = 5,
    max_value: int = 1_000_000_000,
    rng: random.Random | None = None,
) -> Iterator[tuple[int, float]]:
    """Yield ``(size, average_ms)`` for each size, timing ``sort`` on copies
    of one random array per size.

    Raises RuntimeError if a run leaves its array unsorted.
    """
    if runs < 1:
        raise ValueError("runs must be at least 1")
    for size in sizes:
        arr = random_array(size, max_value, rng)
        total = 0.0
        for _ in range(runs):
            work = list(arr)
            total += measure_execution_time(sort, work)
            if not is_sorted(work):
                raise RuntimeError("Unsorted array detected.")
        yield size, total / runs


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sortbench",
        description="Time a sorting algorithm on random integer arrays.",
    )
    parser.add_argument(
        "--algorithm", choices=sorted(_ALGORITHMS), default="heap",
        help="sorting algorithm to time (default: heap)",
    )
    parser.add_argument(
        "--sizes", type=int, nargs="+", default=_DEFAULT_SIZES,
        help="array sizes, in units of --scale elements",
    )
    parser.add_argument(
        "--scale", type=int, default=_MILLION,
        help="elements per size unit (default: 1000000)",
    )
    parser.add_argument("--runs", type=int, default=5, help="runs per size (default: 5)")
    parser.add_argument(
        "--max-value", type=int, default=1_000_000_000,
        help="largest random value (default: 1000000000)",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the benchmark and print the average time for each size."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.runs < 1:
        parser.error("--runs must be at least 1")
    if args.scale < 1:
        parser.error("--scale must be at least 1")

    sort = _ALGORITHMS[args.algorithm]
    rng = random.Random(args.seed)
    units = {num * args.scale: num for num in args.sizes}
    try:
        for size, average in benchmark(
            sort, (num * args.scale for num in args.sizes),
            args.runs, args.max_value, rng,
        ):
            label = f"{units[size]}*10^6" if args.scale == _MILLION else str(size)
            print(
                f"Average time taken to sort ({args.runs} runs, {label} elements): "
                f"{average:g} ms"
            )
    except RuntimeError as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())