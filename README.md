# dsakit

A collection of classic algorithms and data structures. The functions take
plain Python values (lists, strings, tuples, small dataclass records) and
return new values; none of them changes the sequence it is given. The package
needs nothing beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.arrays`

`max_profit`, `longest_consecutive`, `rotate_by_one`, `factorial_digits`,
`common_elements` (distinct values shared by three sorted sequences),
`max_subarray_sum` (Kadane), `majority_element` (Boyer-Moore vote),
`majority_elements` (values occurring more than `len(nums) // 3` times),
`max_product_subarray`, `merge_intervals`, `next_permutation` (wraps round to
the smallest permutation), `rearrange_alternately`, `is_subset`,
`three_way_partition`, `trap_rain_water`.

### `dsakit.greedy`

`duplicate_characters`, `max_meetings`, `meeting_order` (1-based positions of
the chosen meetings), `choose_and_swap`, `fractional_knapsack`,
`job_scheduling` (returns `(jobs_done, profit)`), `max_abs_difference`,
`max_stopped_trains`, `min_rope_cost`, `sjf_order` (non-preemptive
shortest-job-first), `candy_store` (returns `(least, greatest)` spend). The
records `Item(value, weight)`, `Job(id, deadline, profit)`,
`Train(arrival, departure, platform)` and `Process(pid, arrival, burst)` are
frozen dataclasses.

### `dsakit.huffman`

`build_tree(frequencies)` returns the root `HuffmanNode`; leaves carry the
position of their weight as the symbol. `huffman_codes(frequencies)` lists the
leaf codes in pre-order, and `huffman_table(symbols, frequencies)` maps each
symbol to its code.

### `dsakit.lru_cache`

- `LRUCache(capacity)`: `get(key)` returns the value, or `-1` when the key is
  absent; `put(key, value)` evicts the least recently used entry when full.
- `PageCache(capacity)`: `refer(key)` records a reference; `contents()` lists
  the cached keys, most recently referenced first.

Both support `len()` and `in`, and reject a capacity below 1.

### `dsakit.min_heap`

`MinHeap(capacity)` with `insert`, `decrease_key`, `delete` (by array index,
returning the removed key), `extract_min`, `minimum` and `height` (`-1` when
empty). Inserting into a full heap raises `OverflowError`; reading from an
empty one raises `IndexError`. The heap iterates in array order.

### `dsakit.heaps`

`MedianStream` (`add`, `median`), `kth_largest_subarray_sum`, `kth_smallest`,
`kth_largest` (quickselect), `kth_smallest_distinct`. An out-of-range `k`
raises `ValueError`.

### `dsakit.matrix`

`max_rectangle_area(matrix)`: area of the largest all-ones rectangle in a
binary matrix.

### `dsakit.searching`

`four_sum`, `aggressive_cows`, `soldiers_defeated` (for each query, the number
of soldiers beaten and their total power), `allocate_pages`,
`count_zero_sum_subarrays`, `max_sawblade_height`, `longest_zero_sum_subarray`,
`product_except_self`, `min_prata_time`, `count_subset_sums` (subsets whose sum
lies in `[low, high]`, empty subset included), `double_helix_max_sum`,
`trailing_zeros`.

### `dsakit.sorting`

`count_inversions`, `merge_sort` (stable) and `quick_sort`, each returning a
new list.

### `dsakit.strings`

`first_repeated_word` (`None` when no word repeats), `valid_ip_addresses`,
`common_prefix`, `minimum_bracket_swaps` (only `[` and `]` are accepted),
`rabin_karp` (index of the first match, or `-1`), `second_most_frequent`.

Where an answer is undefined, for example an empty input to `max_subarray_sum`
or `common_prefix`, the functions raise `ValueError`.

## Examples

```python
from dsakit.arrays import max_profit, merge_intervals, trap_rain_water
from dsakit.heaps import MedianStream, kth_largest_subarray_sum
from dsakit.lru_cache import LRUCache
from dsakit.sorting import quick_sort
from dsakit.strings import common_prefix, rabin_karp, valid_ip_addresses

max_profit([7, 1, 5, 3, 6, 4])                          # 5
merge_intervals([[1, 3], [2, 6], [8, 10]])              # [[1, 6], [8, 10]]
trap_rain_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])   # 6
kth_largest_subarray_sum([10, -10, 20, -40], 6)         # -10
quick_sort([5, 6, 87, 33, 45])                          # [5, 6, 33, 45, 87]

common_prefix(["geeksforgeeks", "geeks", "geek", "geezer"])  # "gee"
rabin_karp("ababcabdab", "abd")                              # 5
valid_ip_addresses("25525511135")  # ["255.255.11.135", "255.255.111.35"]

stream = MedianStream()
for value in (5, 15, 1, 3):
    stream.add(value)
stream.median()   # 4.0

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)   # 1
cache.put(3, 3)
cache.get(2)   # -1, the least recently used key was evicted
```

## What it does not do

`dsakit` is a library only. It has no command-line program, does not read
problem input from standard input, and has no interactive menu for the heap;
call the functions and classes from Python instead.