"""Classic comparison and distribution sorts.

Every function returns a new sorted list and leaves its argument untouched.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def bubble_sort(data: Iterable[T]) -> list[T]:
    """Sort by repeatedly swapping adjacent out-of-order items."""
    items = list(data)
    size = len(items)
    for passes in range(size - 1):
        for ptr in range(size - passes - 1):
            if items[ptr] > items[ptr + 1]:
                items[ptr], items[ptr + 1] = items[ptr + 1], items[ptr]
    return items


def _insertion_sort_in_place(items: list) -> None:
    for i in range(1, len(items)):
        value = items[i]
        j = i - 1
        while j >= 0 and items[j] > value:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = value


def insertion_sort(data: Iterable[T]) -> list[T]:
    """Sort by inserting each item into the sorted prefix before it."""
    items = list(data)
    _insertion_sort_in_place(items)
    return items


def selection_sort(data: Iterable[T]) -> list[T]:
    """Sort by moving the smallest remaining item to the front on each pass."""
    items = list(data)
    size = len(items)
    for i in range(size - 1):
        min_index = min(range(i, size), key=items.__getitem__)
        if min_index != i:
            items[i], items[min_index] = items[min_index], items[i]
    return items


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(data: Iterable[T]) -> list[T]:
    """Stable top-down merge sort."""
    items = list(data)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list, start: int, end: int) -> int:
    pivot = items[end]
    i = start - 1
    for j in range(start, end):
        if items[j] < pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    i += 1
    items[i], items[end] = items[end], items[i]
    return i


def quick_sort(data: Iterable[T]) -> list[T]:
    """Quicksort with the last element of each range as pivot."""
    items = list(data)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if end <= start:
            continue
        pivot = _partition(items, start, end)
        pending.append((start, pivot - 1))
        pending.append((pivot + 1, end))
    return items


def _count_by_digit(items: list[int], place: int) -> list[int]:
    counts = [0] * 10
    for value in items:
        counts[(value // place) % 10] += 1
    for digit in range(1, 10):
        counts[digit] += counts[digit - 1]
    output = [0] * len(items)
    for value in reversed(items):
        digit = (value // place) % 10
        counts[digit] -= 1
        output[counts[digit]] = value
    return output


def radix_sort(data: Iterable[int]) -> list[int]:
    """LSD radix sort in base 10 for non-negative integers."""
    items = list(data)
    if not items:
        return items
    if any(value < 0 for value in items):
        raise ValueError("radix sort requires non-negative integers")
    largest = max(items)
    place = 1
    while largest // place > 0:
        items = _count_by_digit(items, place)
        place *= 10
    return items


def counting_sort(data: Iterable[int], k: int) -> list[int]:
    """Stable counting sort for integers in the range 0..k."""
    items = list(data)
    if k < 0:
        raise ValueError("k must be non-negative")
    for value in items:
        if not 0 <= value <= k:
            raise ValueError(f"value {value} is outside the range 0..{k}")
    counts = [0] * (k + 1)
    for value in items:
        counts[value] += 1
    for i in range(1, k + 1):
        counts[i] += counts[i - 1]
    output = [0] * len(items)
    for value in reversed(items):
        output[counts[value] - 1] = value
        counts[value] -= 1
    return output


def bucket_sort(data: Iterable[float]) -> list[float]:
    """Bucket sort for numbers in the half-open range [0, 1)."""
    items = list(data)
    n = len(items)
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"value {value} is outside the range [0, 1)")
    buckets: list[list[float]] = [[] for _ in range(n)]
    for value in items:
        buckets[int(n * value)].append(value)
    result: list[float] = []
    for bucket in buckets:
        _insertion_sort_in_place(bucket)
        result.extend(bucket)
    return result


def shell_sort(data: Iterable[T]) -> list[T]:
    """Shell sort with gaps halving from n // 2 down to 1."""
    items = list(data)
    n = len(items)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            temp = items[i]
            j = i
            while j >= gap and items[j - gap] > temp:
                items[j] = items[j - gap]
                j -= gap
            items[j] = temp
        gap //= 2
    return items