import random

import pytest

from algobox.sorting import (
    bubble_sort,
    comb_sort,
    counting_sort,
    dutch_flag_sort,
    heap_sort,
    insertion_sort,
    next_comb_gap,
    quick_sort,
    selection_sort,
    shell_sort,
)

SAMPLE = [3, 7, 9, 10, 12, 6, 5, 2, 1, 18]
QUICK_SAMPLE = [3, 7, 9, 10, 12, 6, 5, 2, 11, 18]


def _random_lists(seed, count=25, low=0, high=50):
    rng = random.Random(seed)
    return [[rng.randint(low, high) for _ in range(rng.randint(0, 30))] for _ in range(count)]


@pytest.mark.parametrize("values", [SAMPLE, QUICK_SAMPLE])
def test_sorts_source_sample(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert selection_sort(values) == expected
    assert shell_sort(values) == expected
    assert quick_sort(values) == expected
    assert comb_sort(values) == expected
    assert heap_sort(values) == expected
    assert counting_sort(values) == expected


def test_sorts_random_lists():
    for values in _random_lists(seed=123):
        expected = sorted(values)
        assert bubble_sort(values) == expected
        assert insertion_sort(values) == expected
        assert selection_sort(values) == expected
        assert shell_sort(values) == expected
        assert quick_sort(values) == expected
        assert comb_sort(values) == expected
        assert heap_sort(values) == expected
        assert counting_sort(values) == expected


@pytest.mark.parametrize(
    "values, expected",
    [
        ([], []),
        ([4], [4]),
        ([5, 5, 5], [5, 5, 5]),
        ([9, 8, 7, 6], [6, 7, 8, 9]),
    ],
)
def test_sorts_edge_inputs(values, expected):
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert selection_sort(values) == expected
    assert shell_sort(values) == expected
    assert quick_sort(values) == expected
    assert comb_sort(values) == expected
    assert heap_sort(values) == expected
    assert counting_sort(values) == expected


def test_sorts_do_not_mutate_input():
    values = list(SAMPLE)
    expected = sorted(SAMPLE)
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert selection_sort(values) == expected
    assert shell_sort(values) == expected
    assert quick_sort(values) == expected
    assert comb_sort(values) == expected
    assert heap_sort(values) == expected
    assert counting_sort(values) == expected
    assert values == SAMPLE


@pytest.mark.parametrize(
    "values",
    [[-3, 4, -10, 0, 2, -3], ["pear", "apple", "fig", "banana"]],
)
def test_comparison_sorts_handle_negatives_and_strings(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert selection_sort(values) == expected
    assert shell_sort(values) == expected
    assert quick_sort(values) == expected
    assert comb_sort(values) == expected
    assert heap_sort(values) == expected


def test_counting_sort_rejects_negatives():
    with pytest.raises(ValueError):
        counting_sort([3, -1, 2])


def test_next_comb_gap_floor_is_one():
    assert next_comb_gap(1) == 1
    assert next_comb_gap(0) == 1


def test_next_comb_gap_shrinks():
    for gap in range(2, 200):
        shrunk = next_comb_gap(gap)
        assert 1 <= shrunk < gap


def test_dutch_flag_sort_source_sample():
    values = [0, 1, 1, 0, 1, 2, 1, 2, 0, 0, 0, 1]
    assert dutch_flag_sort(values) == sorted(values)


def test_dutch_flag_sort_random():
    rng = random.Random(7)
    for _ in range(30):
        values = [rng.randint(0, 2) for _ in range(rng.randint(0, 25))]
        assert dutch_flag_sort(values) == sorted(values)


def test_dutch_flag_sort_rejects_other_values():
    with pytest.raises(ValueError):
        dutch_flag_sort([0, 1, 3])