"""Trees stored as undirected adjacency lists, with traversals and a CLI."""

from __future__ import annotations

import argparse
from collections import defaultdict
from collections.abc import Iterable, Iterator
from pathlib import Path


class AdjacencyTree:
    """An undirected tree kept as adjacency lists in edge insertion order.

    For every edge (u, v) added, v is recorded as a child of u.
    """

    def __init__(self, edges: Iterable[tuple[int, int]] = ()) -> None:
        self.adjacency: defaultdict[int, list[int]] = defaultdict(list)
        self.parent: dict[int, int] = {}
        for u, v in edges:
            self.add_edge(u, v)

    def add_edge(self, u: int, v: int) -> None:
        """Connect u and v in both directions, recording u as v's parent."""
        self.adjacency[u].append(v)
        self.adjacency[v].append(u)
        self.parent[v] = u

    def find_root(self, n: int) -> int:
        """Return the first of the nodes 1..n that has no parent."""
        for node in range(1, n + 1):
            if node not in self.parent:
                return node
        raise ValueError(f"every node from 1 to {n} has a parent")

    def _children(self, node: int, parent: int | None) -> list[int]:
        return [child for child in self.adjacency.get(node, ()) if child != parent]

    def dfs(self, start: int) -> list[int]:
        """Return nodes in depth-first visiting order from start."""
        visited = {start}
        order = [start]
        stack: list[Iterator[int]] = [iter(self.adjacency.get(start, ()))]
        while stack:
            for child in stack[-1]:
                if child not in visited:
                    visited.add(child)
                    order.append(child)
                    stack.append(iter(self.adjacency.get(child, ())))
                    break
            else:
                stack.pop()
        return order

    def _preorder(self, node: int, parent: int | None) -> Iterator[int]:
        yield node
        for child in self._children(node, parent):
            yield from self._preorder(child, node)

    def _postorder(self, node: int, parent: int | None) -> Iterator[int]:
        for child in self._children(node, parent):
            yield from self._postorder(child, node)
        yield node

    def _inorder(self, node: int, parent: int | None) -> Iterator[int]:
        first, *rest = self._children(node, parent) or [None]
        if first is not None:
            yield from self._inorder(first, node)
        yield node
        for child in rest:
            yield from self._inorder(child, node)

    def preorder(self, root: int) -> list[int]:
        """Return each node before its children."""
        return list(self._preorder(root, None))

    def postorder(self, root: int) -> list[int]:
        """Return each node after its children."""
        return list(self._postorder(root, None))

    def inorder(self, root: int) -> list[int]:
        """Return the first child's subtree, then the node, then the rest."""
        return list(self._inorder(root, None))


def load_edges(path: str | Path) -> list[tuple[int, int]]:
    """Read edges, one 'u v' pair of integers per line; blank lines are skipped."""
    edges: list[tuple[int, int]] = []
    with open(path, encoding="utf-8") as handle:
        for number, line in enumerate(handle, start=1):
            fields = line.split()
            if not fields:
                continue
            if len(fields) < 2:
                raise ValueError(f"line {number}: expected two node numbers")
            try:
                edges.append((int(fields[0]), int(fields[1])))
            except ValueError:
                raise ValueError(f"line {number}: node numbers must be integers") from None
    return edges


def main(argv: list[str] | None = None) -> int:
    """Read a tree's edges from a file and print a DFS from node 0."""
    parser = argparse.ArgumentParser(description="Depth-first traversal of a tree file.")
    parser.add_argument("path", nargs="?", default="tree.txt", help="file of 'u v' edges")
    args = parser.parse_args(argv)

    path = Path(args.path)
    edges = load_edges(path) if path.is_file() else []
    tree = AdjacencyTree(edges)

    print("DFS traversal from root node 0:")
    for node in tree.dfs(0):
        print(f"Visited node: {node}")
    return 0