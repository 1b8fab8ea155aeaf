import pytest

from dsakit.problems_arrays import (
    advantage,
    barrels_max_difference,
    basketball_wins,
    choose_two_numbers,
    contains_duplicate,
    height_checker,
    intersection,
    kth_largest,
    maximum_product,
    minimum_difference_pairs,
    search_insert_index,
    smaller_numbers_than_current,
    sorted_adjacent_differences,
    trimmed_mean,
)


@pytest.mark.parametrize(
    "nums, expected",
    [([1, 2, 3, 1], True), ([1, 2, 3], False), ([], False), ([7, 7], True)],
)
def test_contains_duplicate(nums, expected):
    assert contains_duplicate(nums) is expected


def test_height_checker_sorted_input_needs_no_moves():
    assert height_checker([1, 2, 2, 5, 9]) == 0


def test_height_checker_bounded_by_length():
    heights = [5, 1, 2, 3, 4]
    assert height_checker(heights) == len(heights)


def test_smaller_numbers_equal_values():
    assert smaller_numbers_than_current([5, 5, 5]) == [0, 0, 0]


def test_smaller_numbers_of_distinct_values_are_ranks():
    nums = [30, 10, 20]
    result = smaller_numbers_than_current(nums)
    assert sorted(result) == [0, 1, 2]
    assert result[nums.index(max(nums))] == len(nums) - 1


def test_intersection_distinct_and_sorted():
    assert intersection([1, 2, 2, 1], [2, 2]) == [2]
    assert intersection([9, 4, 5], [4, 9, 9, 8]) == [4, 9]


def test_intersection_disjoint():
    assert intersection([1, 2], [3, 4]) == []


def test_kth_largest_extremes():
    values = [3, 2, 1, 5, 6, 4]
    assert kth_largest(values, 1) == max(values)
    assert kth_largest(values, 6) == min(values)


def test_kth_largest_ignores_duplicates():
    assert kth_largest([2, 2, 1], 2) == 1


@pytest.mark.parametrize("k", [0, 4, -1])
def test_kth_largest_invalid_k(k):
    with pytest.raises(ValueError):
        kth_largest([1, 2, 3], k)


def test_maximum_product_source_example():
    assert maximum_product([-10, -10, 5, 2]) == 500


def test_maximum_product_three_values_multiplies_all():
    assert maximum_product([2, 3, 4]) == 2 * 3 * 4


def test_maximum_product_too_few():
    with pytest.raises(ValueError):
        maximum_product([1, 2])


def test_trimmed_mean_constant():
    assert trimmed_mean([7] * 20) == 7


def test_trimmed_mean_drops_outliers():
    assert trimmed_mean([0] + [5] * 18 + [1000]) == 5


def test_trimmed_mean_empty():
    with pytest.raises(ValueError):
        trimmed_mean([])


def test_minimum_difference_pairs():
    assert minimum_difference_pairs([4, 2, 1, 3]) == [(1, 2), (2, 3), (3, 4)]
    assert minimum_difference_pairs([1, 1, 1]) == [(1, 1)]


def test_minimum_difference_pairs_too_few():
    with pytest.raises(ValueError):
        minimum_difference_pairs([3])


def test_barrels_without_pouring_is_spread():
    amounts = [1, 4, 2]
    assert barrels_max_difference(amounts, 0) == max(amounts) - min(amounts)


def test_barrels_pouring_into_last():
    assert barrels_max_difference([5, 5, 5, 5], 2) == 15


@pytest.mark.parametrize("pourings", [-1, 4, 10])
def test_barrels_invalid_pourings(pourings):
    with pytest.raises(ValueError):
        barrels_max_difference([1, 2, 3, 4], pourings)


@pytest.mark.parametrize(
    "values",
    [[5, -2, 4, 8, 6, 5], [8, 1, 4, 2], [3], [], [1, 1, 1, 1, 1], [10, -7, 0, 3, 3, 9, 2]],
)
def test_sorted_adjacent_differences_property(values):
    result = sorted_adjacent_differences(values)
    assert sorted(result) == sorted(values)
    gaps = [abs(b - a) for a, b in zip(result, result[1:])]
    assert gaps == sorted(gaps)


def test_basketball_empty():
    assert basketball_wins([], 10) == 0


def test_basketball_everyone_stronger():
    assert basketball_wins([20, 30, 40], 10) == 3


def test_basketball_single_weak_player():
    assert basketball_wins([1], 5) == 0


def test_advantage_shape():
    strengths = [4, 7, 3, 5]
    result = advantage(strengths)
    ordered = sorted(strengths)
    assert len(result) == len(strengths)
    assert result[-1] == ordered[-1] - ordered[-2]
    assert all(value <= 0 for value in result[:-1])


def test_advantage_too_few():
    with pytest.raises(ValueError):
        advantage([3])


def test_choose_two_numbers_pair_sum_absent():
    a, b = [2, 1, 7], [3, 2]
    pair = choose_two_numbers(a, b)
    assert pair is not None
    x, y = pair
    assert x in a and y in b
    assert x + y not in a and x + y not in b


def test_choose_two_numbers_simple():
    assert choose_two_numbers([1], [1]) == (1, 1)


def test_choose_two_numbers_none():
    assert choose_two_numbers([0], [0]) is None


def test_search_insert_index_present():
    values = [1, 3, 5, 6]
    assert search_insert_index(values, 5) == values.index(5)


def test_search_insert_index_unsorted_input():
    values = [6, 1, 5, 3]
    assert search_insert_index(values, 5) == sorted(values).index(5)


def test_search_insert_index_smallest():
    assert search_insert_index([1, 3, 5, 6], 0) == 0


def test_search_insert_index_beyond_range():
    assert search_insert_index([1, 3, 5, 6], 7) is None
    assert search_insert_index([], 1) is None