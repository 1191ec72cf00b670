import statistics

import pytest

from dsakit.heaps import (
    MedianStream,
    kth_largest,
    kth_largest_subarray_sum,
    kth_smallest,
    kth_smallest_distinct,
)

STREAM = [5, 15, 1, 3, 2, 8, 7, 9, 10, 6, 11, 4]


def test_median_tracks_statistics_median():
    stream = MedianStream()
    seen = []
    for value in STREAM:
        stream.add(value)
        seen.append(value)
        assert stream.median() == statistics.median(seen)
    assert len(stream) == len(STREAM)


def test_median_with_duplicates_and_negatives():
    stream = MedianStream()
    seen = []
    for value in [-3, -3, 7, 0, -3, 12, 7, 7]:
        stream.add(value)
        seen.append(value)
        assert stream.median() == statistics.median(seen)


def test_median_of_empty_stream_raises():
    with pytest.raises(ValueError):
        MedianStream().median()


def test_kth_largest_subarray_sum_worked_example():
    assert kth_largest_subarray_sum([10, -10, 20, -40], 6) == -10


def test_kth_largest_subarray_sum_first_is_max():
    values = [2, -1, 3, -4, 5]
    sums = [sum(values[i:j]) for i in range(len(values)) for j in range(i + 1, len(values) + 1)]
    assert kth_largest_subarray_sum(values, 1) == max(sums)
    assert kth_largest_subarray_sum(values, len(sums)) == min(sums)


def test_kth_largest_subarray_sum_is_non_increasing():
    values = [4, -2, 7, 1, -5, 3]
    total = len(values) * (len(values) + 1) // 2
    results = [kth_largest_subarray_sum(values, k) for k in range(1, total + 1)]
    assert results == sorted(results, reverse=True)


def test_kth_largest_subarray_sum_bad_k():
    with pytest.raises(ValueError):
        kth_largest_subarray_sum([1, 2], 4)
    with pytest.raises(ValueError):
        kth_largest_subarray_sum([1, 2], 0)


VALUES = [7, 10, 4, 3, 20, 15, 4, -2]


@pytest.mark.parametrize("k", range(1, len(VALUES) + 1))
def test_kth_smallest_rank_invariant(k):
    result = kth_smallest(VALUES, k)
    assert result in VALUES
    assert sum(v < result for v in VALUES) < k <= sum(v <= result for v in VALUES)


@pytest.mark.parametrize("k", range(1, len(VALUES) + 1))
def test_kth_largest_rank_invariant(k):
    result = kth_largest(VALUES, k)
    assert result in VALUES
    assert sum(v > result for v in VALUES) < k <= sum(v >= result for v in VALUES)


@pytest.mark.parametrize("k", range(1, len(VALUES) + 1))
def test_kth_largest_mirrors_kth_smallest(k):
    assert kth_largest(VALUES, k) == kth_smallest(VALUES, len(VALUES) + 1 - k)


def test_kth_largest_does_not_modify_input():
    values = list(VALUES)
    kth_largest(values, 3)
    assert values == VALUES


def test_kth_smallest_and_largest_bad_k():
    with pytest.raises(ValueError):
        kth_smallest([1, 2, 3], 4)
    with pytest.raises(ValueError):
        kth_largest([], 1)


def test_kth_smallest_distinct_worked_example():
    assert kth_smallest_distinct([12, 3, 5, 7, 19], 4) == 12


def test_kth_smallest_distinct_ignores_duplicates():
    values = [5, 5, 1, 1, 9]
    assert kth_smallest_distinct(values, 2) == 5
    with pytest.raises(ValueError):
        kth_smallest_distinct(values, 4)