"""Greedy and counting puzzles that become simple once the input is sorted."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Any

_MAX_TOWER_LENGTH = 1000


def can_defeat_dragons(strength: int, dragons: Iterable[tuple[int, int]]) -> bool:
    """Tell whether every dragon is beaten when they are fought in the given order.

    Each dragon is a pair (x, y): it is beaten when the current strength is
    strictly greater than x, and beating it adds y to the strength. A dragon
    that cannot be beaten is skipped, and the fights go on.
    """
    beaten = 0
    total = 0
    for x, y in dragons:
        total += 1
        if strength > x:
            beaten += 1
            strength += y
    return beaten == total


def equal_candies(boxes: Iterable[int]) -> int:
    """Return how many candies must be eaten so every box holds the smallest amount."""
    items = sorted(boxes)
    if not items:
        raise ValueError("there must be at least one box")
    smallest = items[0]
    return sum(box - smallest for box in items[1:])


def grow_the_tree(lengths: Iterable[int]) -> int:
    """Return x*x + y*y, where y sums the shorter half of the sticks and x the rest.

    With an odd number of sticks the longer group gets the extra stick.
    """
    items = sorted(lengths)
    mid = len(items) // 2
    y = sum(items[:mid])
    x = sum(items[mid:])
    return x * x + y * y


def min_strength_difference(strengths: Iterable[int]) -> int:
    """Return the smallest difference between two athletes' strengths."""
    items = sorted(strengths)
    if not items:
        raise ValueError("the number of athletes must be positive")
    if len(items) < 2:
        raise ValueError("at least two athletes are needed to compare differences")
    return min(b - a for a, b in zip(items, items[1:]))


def make_equal_operations(a: Sequence[int], b: Sequence[int]) -> int:
    """Count the bit flips needed in a for it to match b after both are sorted.

    Both sequences must be the same length and hold only 0 and 1.
    """
    if len(a) != len(b):
        raise ValueError("both sequences must have the same length")
    for value in (*a, *b):
        if value not in (0, 1):
            raise ValueError(f"value {value!r} is not 0 or 1")
    if list(a) == list(b):
        return 0
    return sum(x != y for x, y in zip(sorted(a), sorted(b)))


def medium_number(a: Any, b: Any, c: Any) -> Any:
    """Return the middle one of three values."""
    return sorted((a, b, c))[1]


def can_reduce_to_one(values: Iterable[int]) -> bool:
    """Tell whether repeatedly removing the smaller of two values that differ
    by at most one leaves a single value.

    Values are sorted first and scanned pairwise from the smallest; an empty
    input can never be reduced to one value.
    """
    items = sorted(values)
    i = 0
    while i < len(items):
        j = i + 1
        while j < len(items):
            if items[j] - items[i] <= 1:
                if items[i] < items[j]:
                    del items[i]
                else:
                    del items[j]
            else:
                j += 1
        if len(items) == 1:
            return True
        i += 1
    return False


def min_total_distance(points: Iterable[int]) -> int:
    """Return the least total distance three friends travel to meet at one point."""
    items = sorted(points)
    if len(items) != 3:
        raise ValueError("exactly three points are required")
    low, middle, high = items
    return (high - middle) + (middle - low)


def towers(lengths: Iterable[int]) -> tuple[int, int]:
    """Stack bars of equal length; return (tallest tower, number of towers).

    Bar lengths must lie between 1 and 1000.
    """
    counts = Counter()
    for length in lengths:
        if not 1 <= length <= _MAX_TOWER_LENGTH:
            raise ValueError(
                f"bar length {length} is outside the range 1..{_MAX_TOWER_LENGTH}"
            )
        counts[length] += 1
    if not counts:
        return 0, 0
    return max(counts.values()), len(counts)


def first_triple(values: Sequence[Any]) -> Any | None:
    """Return the first value, in input order, that occurs at least three times."""
    counts = Counter(values)
    return next((value for value in values if counts[value] >= 3), None)


def twins_min_coins(coins: Iterable[int]) -> int:
    """Return the fewest coins whose sum is strictly more than half the total.

    Half the total is rounded down, and coins are taken largest first.
    """
    items = sorted(coins, reverse=True)
    half = sum(items) // 2
    selected = 0
    taken = 0
    for coin in items:
        selected += coin
        taken += 1
        if selected > half:
            break
    return taken


def lantern_radius(positions: Iterable[int], length: int) -> float:
    """Return the least light radius for lanterns to light the street 0..length."""
    items = sorted(positions)
    if not items:
        raise ValueError("there must be at least one lantern")
    max_gap = max((b - a for a, b in zip(items, items[1:])), default=0)
    edge_gap = max(items[0], length - items[-1])
    return float(max(max_gap / 2.0, edge_gap))


def max_teams(skills: Iterable[int], x: int) -> int:
    """Return how many teams can be formed whose size times weakest skill is at least x.

    Programmers are added to the current team strongest first, and a team is
    closed as soon as it meets the restriction.
    """
    teams = 0
    members = 0
    for skill in sorted(skills, reverse=True):
        members += 1
        if members * skill >= x:
            teams += 1
            members = 0
    return teams


def max_wealthy(savings: Iterable[int], x: float) -> int:
    """Return the most people who can each hold at least x after redistribution.

    The group grows from the richest person down while its average stays at
    least x.
    """
    wealthy = 0
    total = 0.0
    count = 0
    for amount in sorted(savings, reverse=True):
        total += amount
        count += 1
        if total / count >= x:
            wealthy = count
        else:
            break
    return wealthy