"""Array-backed binary max-heaps and min-heaps.

The heap is kept in a plain list in level order. Index 0 is the root, and
the children of index i are at 2*i + 1 and 2*i + 2. Iterating a heap yields
its items in that stored order.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Callable

_Before = Callable[[Any, Any], bool]


def _greater(a: Any, b: Any) -> bool:
    return a > b


def _less(a: Any, b: Any) -> bool:
    return a < b


def _sift_up(items: list, index: int, before: _Before) -> None:
    while index > 0:
        parent = (index - 1) // 2
        if not before(items[index], items[parent]):
            break
        items[index], items[parent] = items[parent], items[index]
        index = parent


def _sift_down(items: list, index: int, size: int, before: _Before) -> None:
    while True:
        left, right = 2 * index + 1, 2 * index + 2
        best = index
        if left < size and before(items[left], items[best]):
            best = left
        if right < size and before(items[right], items[best]):
            best = right
        if best == index:
            return
        items[index], items[best] = items[best], items[index]
        index = best


def _heapify(values: Iterable[Any], before: _Before) -> list:
    items = list(values)
    size = len(items)
    for index in range(size // 2 - 1, -1, -1):
        _sift_down(items, index, size, before)
    return items


def _push(items: list, value: Any, before: _Before) -> None:
    items.append(value)
    _sift_up(items, len(items) - 1, before)


def _pop(items: list, before: _Before, kind: str) -> Any:
    if not items:
        raise IndexError(f"pop from an empty {kind}")
    root = items[0]
    last = items.pop()
    if items:
        items[0] = last
        _sift_down(items, 0, len(items), before)
    return root


def _peek(items: list, kind: str) -> Any:
    if not items:
        raise IndexError(f"peek at an empty {kind}")
    return items[0]


class MaxHeap:
    """Binary heap whose root is its largest item."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list = []
        for value in values:
            self.push(value)

    def push(self, value: Any) -> None:
        """Add a value, moving it up until the heap order holds."""
        _push(self._items, value, _greater)

    def pop(self) -> Any:
        """Remove and return the largest item, refilling the root from the last slot."""
        return _pop(self._items, _greater, "max-heap")

    def peek(self) -> Any:
        """Return the largest item without removing it."""
        return _peek(self._items, "max-heap")

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"MaxHeap({self._items!r})"


class MinHeap:
    """Binary heap whose root is its smallest item."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list = []
        for value in values:
            self.push(value)

    def push(self, value: Any) -> None:
        """Add a value, moving it up until the heap order holds."""
        _push(self._items, value, _less)

    def pop(self) -> Any:
        """Remove and return the smallest item, refilling the root from the last slot."""
        return _pop(self._items, _less, "min-heap")

    def peek(self) -> Any:
        """Return the smallest item without removing it."""
        return _peek(self._items, "min-heap")

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"MinHeap({self._items!r})"


def build_max_heap(values: Iterable[Any]) -> list:
    """Rearrange values bottom-up into max-heap order and return the list."""
    return _heapify(values, _greater)


def build_min_heap(values: Iterable[Any]) -> list:
    """Rearrange values bottom-up into min-heap order and return the list."""
    return _heapify(values, _less)