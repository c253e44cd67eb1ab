# sortbench

Classic sorting algorithms, generators for test arrays and a small timing
harness to compare them. Pure Python, no dependencies.

Every sorting function sorts a mutable sequence of integers in place and
returns `None`.

## Algorithms

`sortbench.simple`

- `selection_sort`, `insertion_sort`, `bubble_sort`, `shaker_sort`,
  `shell_sort` (halving gap sequence)
- `binary_insertion_sort`, with its helper
  `binary_search(arr, value, lo, hi)`, which returns the insertion point for
  `value` in the sorted slice `arr[lo..hi]` (just after an equal element if
  one is found)

`sortbench.divide`

- `heap_sort`, `natural_merge_sort`
- `merge_sort(arr, lo=0, hi=None)` and `quick_sort(arr, lo=0, hi=None)` sort
  the inclusive range `arr[lo..hi]`; with no bounds they sort the whole list
- `std_sort`: insertion sort for inputs of at most 16 elements, otherwise
  quicksort, falling back to heap sort when the depth limit
  `int(2 * log2(n))` is zero
- building blocks: `heapify(arr, n, i)`, `merge(arr, lo, mid, hi)` (stable
  merge of two adjacent sorted runs) and `reverse_range(arr, start, end)`

`sortbench.distribution`

- `radix_sort`: least-significant-digit radix sort on the values' unsigned
  64-bit representation, so inputs that are all non-negative or all negative
  come out ascending
- `counting_sort`: for non-negative integers; raises `ValueError` on a
  negative value
- `counting_sort_by_digit(arr, exp)`: one stable pass by the decimal digit
  selected by `exp`
- `find_max(arr)`: largest element; raises `ValueError` on an empty sequence

```python
from sortbench.divide import merge_sort, quick_sort

data = [5, 3, 9, 1]
merge_sort(data)
assert data == [1, 3, 5, 9]

data = [4, 3, 2, 1]
quick_sort(data, 1, 3)      # sort only data[1..3]
assert data == [4, 1, 2, 3]
```

## Test arrays

`sortbench.arrays` builds input data whose values lie between `0` and `k`:

- `random_array(n, k, rng=None)`: `n` values drawn uniformly from `0..k`
- `sorted_array(n, k)`: `n` evenly spaced values rising from `0` to `k`
- `reverse_sorted_array(n, k)`: the same values falling from `k` to `0`
- `nearly_sorted_array(n, k, rng=None)`: a sorted array in which `n // 20`
  random pairs of positions have been swapped
- `is_sorted(arr)`: `True` if `arr` is in non-decreasing order

The evenly spaced generators raise `ValueError` for `n == 1`. Pass a
`random.Random` as `rng` for reproducible data.

```python
import random
from sortbench.arrays import nearly_sorted_array, random_array, sorted_array, is_sorted

rng = random.Random(42)
data = random_array(1000, 10**6, rng)
nearly = nearly_sorted_array(1000, 10**6, rng)
assert is_sorted(sorted_array(1000, 10**6))
```

## Timing

`sortbench.timing.measure_execution_time(func, *args, **kwargs)` calls the
function once and returns the elapsed wall-clock time in milliseconds, at
microsecond resolution.

`sortbench.cli.benchmark(sort, sizes, runs=5, max_value=1_000_000_000, rng=None)`
generates one random array per size, sorts `runs` copies of it, and yields
`(size, average_ms)` for each size. It raises `RuntimeError` if a run leaves
its array unsorted and `ValueError` if `runs` is less than 1.

```python
import random
from sortbench.cli import benchmark
from sortbench.divide import heap_sort

for size, ms in benchmark(heap_sort, [1000, 2000], runs=3, rng=random.Random(1)):
    print(size, ms)
```

## Command line

```
sortbench
```

Times heap sort on random arrays of 1, 2, 4, 6, 8, 10, 12, 14, 16 and 20
million elements, five runs each, and prints one line per size:

```
Average time taken to sort (5 runs, 1*10^6 elements): ... ms
```

Options:

- `--algorithm NAME`: one of `binary-insertion`, `bubble`, `counting`,
  `heap`, `insertion`, `merge`, `natural-merge`, `quick`, `radix`,
  `selection`, `shaker`, `shell`, `std` (default `heap`)
- `--sizes N [N ...]`: array sizes in units of `--scale` elements
- `--scale N`: elements per size unit (default 1000000); with any other
  scale the line shows the plain element count
- `--runs N`: runs per size (default 5)
- `--max-value N`: largest random value (default 1000000000)
- `--seed N`: random seed for reproducible arrays

For example, `sortbench --algorithm shell --sizes 1 2 5 --scale 1000 --seed 7`.

The command exits with status 1 and prints `Unsorted array detected.` if a
sort leaves its array unsorted.