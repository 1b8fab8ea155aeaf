"""Array puzzles built on sorting, counting and pairwise comparison."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence

from dsakit.sorting import insertion_sort

_TRIM_FRACTION = 5 / 100.0


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Tell whether any value occurs at least twice."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def height_checker(heights: Sequence[int]) -> int:
    """Count positions whose height differs from the sorted order's."""
    expected = insertion_sort(heights)
    return sum(actual != wanted for actual, wanted in zip(heights, expected))


def smaller_numbers_than_current(nums: Sequence[int]) -> list[int]:
    """For each value, count the other values strictly smaller than it."""
    ordered = sorted(nums)
    return [bisect_left(ordered, value) for value in nums]


def intersection(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Return the distinct values found in both inputs, in ascending order."""
    return sorted(set(nums1) & set(nums2))


def kth_largest(values: Iterable[int], k: int) -> int:
    """Return the k-th largest distinct value, counting from 1."""
    distinct = sorted(set(values), reverse=True)
    if not 1 <= k <= len(distinct):
        raise ValueError(f"k must be between 1 and {len(distinct)}, got {k}")
    return distinct[k - 1]


def maximum_product(nums: Iterable[int]) -> int:
    """Return the largest product of three of the values."""
    items = sorted(nums)
    if len(items) < 3:
        raise ValueError("at least three numbers are required")
    top_three = items[-1] * items[-2] * items[-3]
    two_lowest_and_top = items[0] * items[1] * items[-1]
    return max(top_three, two_lowest_and_top)


def trimmed_mean(values: Iterable[int]) -> int:
    """Drop the smallest and largest 5% of the values and return the integer mean.

    The count dropped at each end is 5% of the size rounded down, and the
    mean is truncated toward zero.
    """
    items = insertion_sort(values)
    trim = int(_TRIM_FRACTION * len(items))
    remaining = items[trim:len(items) - trim]
    if not remaining:
        raise ValueError("no values remain to average")
    total = sum(remaining)
    quotient = abs(total) // len(remaining)
    return quotient if total >= 0 else -quotient


def minimum_difference_pairs(values: Iterable[int]) -> list[tuple[int, int]]:
    """Return adjacent sorted pairs whose gap is the smallest one.

    Pairs are ordered by their first value, and only the first pair for any
    given first value is kept.
    """
    items = insertion_sort(values)
    if len(items) < 2:
        raise ValueError("at least two values are needed for a difference")
    neighbours = list(zip(items, items[1:]))
    smallest = min(b - a for a, b in neighbours)
    pairs: dict[int, int] = {}
    for a, b in neighbours:
        if b - a == smallest:
            pairs.setdefault(a, b)
    return sorted(pairs.items())


def barrels_max_difference(amounts: Sequence[int], pourings: int) -> int:
    """Pour barrels 1..pourings into the last barrel, then return max minus min.

    Barrels are addressed by their position in the input; each pouring adds
    the barrel's water to the last barrel and empties it.
    """
    items = list(amounts)
    if not items:
        raise ValueError("there must be at least one barrel")
    if not 0 <= pourings < len(items):
        raise ValueError(f"pourings must be between 0 and {len(items) - 1}")
    for index in range(1, pourings + 1):
        items[-1] += items[index]
        items[index] -= items[index]
    items = insertion_sort(items)
    return items[-1] - items[0]


def sorted_adjacent_differences(values: Iterable[int]) -> list[int]:
    """Arrange values so the gaps between neighbours never shrink."""
    items = insertion_sort(values)
    n = len(items)
    from_the_end: list[int] = []
    for i in range(n // 2):
        from_the_end.append(items[n - 1 - i])
        from_the_end.append(items[i])
    if n % 2:
        from_the_end.append(items[n // 2])
    return from_the_end[::-1]


def basketball_wins(powers: Iterable[int], enemy_power: int) -> int:
    """Count the wins when the strongest remaining player is backed by the weakest.

    A team led by the strongest player gains that player's power again for
    every weak player added, until its power exceeds the enemy's.
    """
    items = insertion_sort(powers)
    if not items:
        return 0
    wins = 0
    low = -1
    high = len(items) - 1
    current = items[high]
    while low < high:
        if current <= enemy_power:
            low += 1
            current += items[high]
        else:
            wins += 1
            high -= 1
            if high >= 0:
                current = items[high]
    return wins


def advantage(strengths: Iterable[int]) -> list[int]:
    """Return, in sorted order, each strength minus the best of the others."""
    items = insertion_sort(strengths)
    if len(items) < 2:
        raise ValueError("at least two participants are required")
    best = items[-1]
    differences = [value - best for value in items[:-1]]
    differences.append(items[-1] - items[-2])
    return differences


def choose_two_numbers(a: Iterable[int], b: Iterable[int]) -> tuple[int, int] | None:
    """Return the first pair (x from a, y from b) whose sum lies in neither list.

    Both lists are scanned in ascending order; None means no pair qualifies.
    """
    first = insertion_sort(a)
    second = insertion_sort(b)
    present = set(first) | set(second)
    for x in first:
        for y in second:
            if x + y not in present:
                return x, y
    return None


def search_insert_index(values: Sequence[int], target: int) -> int | None:
    """Return where target sits, or would be inserted, in the sorted values.

    Only positions inside the original list are reported: a target larger
    than every value, or an empty list, gives None.
    """
    items = insertion_sort(values)
    index = bisect_left(items, target)
    return index if index < len(items) else None