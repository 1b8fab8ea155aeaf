"""Linear, binary and interpolation search over sequences.

Each search returns the index of a matching item, or None when there is none.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def linear_search(data: Sequence[Any], value: Any) -> int | None:
    """Return the index of the first item equal to value."""
    for index, item in enumerate(data):
        if item == value:
            return index
    return None


def binary_search(data: Sequence[Any], item: Any) -> int | None:
    """Search an ascending sequence by halving the range each step."""
    low, high = 0, len(data) - 1
    while low <= high:
        mid = (low + high) // 2
        if data[mid] == item:
            return mid
        if item < data[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return None


def interpolation_search(data: Sequence[int], value: int) -> int | None:
    """Search an ascending integer sequence, probing by linear interpolation."""
    low, high = 0, len(data) - 1
    while low <= high and data[low] <= value <= data[high]:
        span = data[high] - data[low]
        if span == 0:
            probe = low
        else:
            probe = low + (high - low) * (value - data[low]) // span
        if data[probe] == value:
            return probe
        if data[probe] < value:
            low = probe + 1
        else:
            high = probe - 1
    return None