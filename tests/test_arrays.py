import itertools
import math

import pytest

from dsakit.arrays import (
    common_elements,
    factorial_digits,
    is_subset,
    longest_consecutive,
    majority_element,
    majority_elements,
    max_product_subarray,
    max_profit,
    max_subarray_sum,
    merge_intervals,
    next_permutation,
    rearrange_alternately,
    rotate_by_one,
    three_way_partition,
    trap_rain_water,
)


def test_max_profit_example():
    assert max_profit([7, 1, 5, 3, 6, 4]) == 5


def test_max_profit_falling_prices_and_empty():
    assert max_profit([7, 6, 4, 3, 1]) == 0
    assert max_profit([]) == 0


def test_max_profit_is_achievable_pair_difference():
    prices = [3, 8, 2, 9, 1, 4]
    profit = max_profit(prices)
    pairs = {
        prices[j] - prices[i]
        for i in range(len(prices))
        for j in range(i + 1, len(prices))
    }
    assert profit in pairs
    assert profit <= max(prices) - min(prices)


def test_longest_consecutive_full_range_shuffled():
    values = [5, 2, 9, 0, 7, 1, 3, 8, 6, 4]
    assert longest_consecutive(values) == len(values)


def test_longest_consecutive_duplicates_and_empty():
    assert longest_consecutive([1, 1, 2]) == 2
    assert longest_consecutive([]) == 0


def test_rotate_by_one():
    assert rotate_by_one([1, 2, 3, 4]) == [4, 1, 2, 3]
    assert rotate_by_one([]) == []


def test_rotate_full_cycle_restores():
    original = [9, 8, 7, 6, 5]
    values = original
    for _ in original:
        values = rotate_by_one(values)
    assert values == original


@pytest.mark.parametrize("n", [0, 1, 2, 5, 10, 25, 100])
def test_factorial_digits_match_factorial(n):
    digits = factorial_digits(n)
    assert int("".join(map(str, digits))) == math.factorial(n)
    assert digits[0] != 0


def test_factorial_digits_large_length():
    n = 2000
    digits = factorial_digits(n)
    assert len(digits) == math.floor(math.lgamma(n + 1) / math.log(10)) + 1
    assert all(0 <= d <= 9 for d in digits)


def test_common_elements_example():
    assert common_elements(
        [1, 5, 10, 20, 40, 80],
        [6, 7, 20, 80, 100],
        [3, 4, 15, 20, 30, 70, 80, 120],
    ) == [20, 80]


def test_common_elements_removes_duplicates():
    assert common_elements([1, 1, 2], [1, 1, 2], [1, 2, 2]) == [1, 2]


def test_common_elements_none_shared():
    assert common_elements([1, 2], [3, 4], [5, 6]) == []


def test_max_subarray_sum_all_negative():
    assert max_subarray_sum([-5, -2, -9]) == -2


def test_max_subarray_sum_positive_whole():
    values = [1, 2, 3]
    assert max_subarray_sum(values) == sum(values)


def test_max_subarray_sum_empty_raises():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_majority_element():
    assert majority_element([3, 2, 3]) == 3
    assert majority_element([2, 2, 1, 1, 1, 2, 2]) == 2


def test_majority_element_empty_raises():
    with pytest.raises(ValueError):
        majority_element([])


def test_majority_elements():
    assert majority_elements([3, 2, 3]) == [3]
    assert majority_elements([1, 2]) == [1, 2]
    assert majority_elements([1, 1, 1, 3, 3, 2, 2, 2]) == [1, 2]
    assert majority_elements([]) == []


def test_majority_elements_exceed_threshold():
    nums = [4, 4, 4, 1, 2, 3, 4, 5, 4]
    for value in majority_elements(nums):
        assert nums.count(value) > len(nums) // 3


def test_max_product_subarray_source_example():
    assert max_product_subarray([1, -6, -1, 3, 4, -1, 0]) == 72


def test_max_product_subarray_single_values():
    assert max_product_subarray([0]) == 0
    assert max_product_subarray([-2]) == -2


def test_max_product_subarray_empty_raises():
    with pytest.raises(ValueError):
        max_product_subarray([])


def test_merge_intervals():
    assert merge_intervals([[1, 3], [2, 6], [8, 10], [15, 18]]) == [[1, 6], [8, 10], [15, 18]]
    assert merge_intervals([[4, 5], [1, 4]]) == [[1, 5]]
    assert merge_intervals([]) == []


def test_merge_intervals_leaves_input_unchanged():
    intervals = [[5, 7], [1, 3], [2, 4]]
    merge_intervals(intervals)
    assert intervals == [[5, 7], [1, 3], [2, 4]]


def test_next_permutation_examples():
    assert next_permutation([1, 2, 3]) == [1, 3, 2]
    assert next_permutation([3, 2, 1]) == [1, 2, 3]
    assert next_permutation([1, 1, 5]) == [1, 5, 1]
    assert next_permutation([]) == []


def test_next_permutation_walks_lexicographic_order():
    ordered = [list(p) for p in itertools.permutations([1, 2, 3, 4])]
    for current, following in zip(ordered, ordered[1:]):
        assert next_permutation(current) == following
    assert next_permutation(ordered[-1]) == ordered[0]


def test_rearrange_alternately():
    assert rearrange_alternately([1, 2, 3, 4, 5, 6]) == [6, 1, 5, 2, 4, 3]
    assert rearrange_alternately(
        [10, 20, 30, 40, 50, 60, 70, 80, 90, 100, 110]
    ) == [110, 10, 100, 20, 90, 30, 80, 40, 70, 50, 60]


def test_rearrange_alternately_is_permutation():
    values = [1, 3, 3, 8, 12, 15, 20]
    assert sorted(rearrange_alternately(values)) == values


def test_is_subset():
    assert is_subset([11, 1, 13, 21, 3, 7], [11, 3, 7, 1]) is True
    assert is_subset([1, 2, 3], [1, 2, 4]) is False
    assert is_subset([1], [1, 1]) is True


def _band(value, low, high):
    if value < low:
        return 0
    if value > high:
        return 2
    return 1


@pytest.mark.parametrize(
    "values, low, high",
    [
        ([1, 2, 3, 3, 4], 1, 2),
        ([1, 4, 3, 6, 2, 1], 1, 3),
        ([87, 78, 16, 94, 98, 3, 54, 32, 44, 51], 30, 60),
        ([], 0, 1),
    ],
)
def test_three_way_partition_groups(values, low, high):
    result = three_way_partition(values, low, high)
    assert sorted(result) == sorted(values)
    bands = [_band(v, low, high) for v in result]
    assert bands == sorted(bands)


def test_trap_rain_water_example():
    assert trap_rain_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) == 6


def test_trap_rain_water_no_basin():
    assert trap_rain_water([]) == 0
    assert trap_rain_water([1, 2, 3, 4]) == 0
    assert trap_rain_water([4, 3, 2, 1]) == 0


def test_trap_rain_water_symmetric():
    heights = [3, 0, 2, 0, 4, 1, 5]
    assert trap_rain_water(heights) == trap_rain_water(heights[::-1])