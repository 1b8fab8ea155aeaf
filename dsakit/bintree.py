"""Binary tree nodes, traversals and binary-search-tree helpers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A binary tree node holding a value and two optional children."""

    data: Any
    left: Node | None = None
    right: Node | None = None


def inorder(root: Node | None) -> list[Any]:
    """Return values in left, node, right order."""
    result: list[Any] = []
    stack: list[Node] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        result.append(current.data)
        current = current.right
    return result


def preorder(root: Node | None) -> list[Any]:
    """Return values in node, left, right order."""
    result: list[Any] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def postorder(root: Node | None) -> list[Any]:
    """Return values in left, right, node order."""
    reversed_order: list[Any] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        reversed_order.append(node.data)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    reversed_order.reverse()
    return reversed_order


def max_depth(root: Node | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    depth = 0
    level = deque([root] if root is not None else [])
    while level:
        depth += 1
        for _ in range(len(level)):
            node = level.popleft()
            if node.left is not None:
                level.append(node.left)
            if node.right is not None:
                level.append(node.right)
    return depth


def bst_insert(root: Node | None, value: Any) -> Node:
    """Insert value into a BST and return its root.

    Values equal to a node go into its right subtree.
    """
    new_node = Node(value)
    if root is None:
        return new_node
    current = root
    while True:
        if value >= current.data:
            if current.right is None:
                current.right = new_node
                return root
            current = current.right
        else:
            if current.left is None:
                current.left = new_node
                return root
            current = current.left


def bst_search(root: Node | None, value: Any) -> Node | None:
    """Return the node holding value, or None if the BST has none."""
    current = root
    while current is not None and current.data != value:
        current = current.left if value < current.data else current.right
    return current


def bst_from_preorder(values: Iterable[Any]) -> Node | None:
    """Rebuild a BST from its preorder sequence.

    A value equal to the node before it becomes that node's left child.
    """
    root: Node | None = None
    stack: list[Node] = []
    for value in values:
        node = Node(value)
        if root is None:
            root = node
        else:
            parent = None
            while stack and stack[-1].data < value:
                parent = stack.pop()
            if parent is not None:
                parent.right = node
            else:
                stack[-1].left = node
        stack.append(node)
    return root