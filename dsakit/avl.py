"""Self-balancing AVL binary search tree."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _AVLNode:
    key: Any
    left: _AVLNode | None = None
    right: _AVLNode | None = None
    height: int = 1


def _height(node: _AVLNode | None) -> int:
    return node.height if node is not None else 0


def _balance(node: _AVLNode | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _update_height(node: _AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y: _AVLNode) -> _AVLNode:
    x = y.left
    y.left = x.right
    x.right = y
    _update_height(y)
    _update_height(x)
    return x


def _rotate_left(y: _AVLNode) -> _AVLNode:
    x = y.right
    y.right = x.left
    x.left = y
    _update_height(y)
    _update_height(x)
    return x


def _insert(node: _AVLNode | None, key: Any) -> _AVLNode:
    if node is None:
        return _AVLNode(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    elif key > node.key:
        node.right = _insert(node.right, key)
    else:
        return node

    _update_height(node)
    balance = _balance(node)

    if balance > 1 and key < node.left.key:
        return _rotate_right(node)
    if balance < -1 and key > node.right.key:
        return _rotate_left(node)
    if balance > 1 and key > node.left.key:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and key < node.right.key:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLTree:
    """An AVL tree of distinct keys; inserting a present key does nothing."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: _AVLNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, key: Any) -> None:
        """Insert key, rebalancing with rotations on the way back up."""
        self.root = _insert(self.root, key)

    def preorder(self) -> list[Any]:
        """Return the keys in node, left, right order."""
        result: list[Any] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.key)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result