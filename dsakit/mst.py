"""Minimum spanning trees: a disjoint-set forest, Kruskal's and Prim's algorithms.

Edges are (u, v, weight) triples over vertices numbered 0..n-1 and are
treated as undirected.
"""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from typing import Any

Edge = tuple[int, int, Any]


class DisjointSet:
    """Union-find over the elements 0..n-1 with path compression and union by rank."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("the number of elements must be non-negative")
        self.parent = list(range(n))
        self.rank = [0] * n

    def _check(self, u: int) -> None:
        if not 0 <= u < len(self.parent):
            raise ValueError(f"element {u} is outside the range 0..{len(self.parent) - 1}")

    def find(self, u: int) -> int:
        """Return the representative of the set holding u."""
        self._check(u)
        root = u
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[u] != root:
            self.parent[u], u = root, self.parent[u]
        return root

    def union(self, u: int, v: int) -> bool:
        """Merge the sets of u and v; return False if they were already one set."""
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return False
        if self.rank[root_u] < self.rank[root_v]:
            self.parent[root_u] = root_v
        elif self.rank[root_v] < self.rank[root_u]:
            self.parent[root_v] = root_u
        else:
            self.parent[root_v] = root_u
            self.rank[root_u] += 1
        return True


def _validated(n: int, edges: Iterable[Edge]) -> list[Edge]:
    if n < 0:
        raise ValueError("the number of vertices must be non-negative")
    checked: list[Edge] = []
    for u, v, weight in edges:
        for vertex in (u, v):
            if not 0 <= vertex < n:
                raise ValueError(f"vertex {vertex} is outside the range 0..{n - 1}")
        checked.append((u, v, weight))
    return checked


def kruskal(n: int, edges: Iterable[Edge]) -> tuple[Any, list[Edge]]:
    """Return the total weight and the chosen edges of a minimum spanning forest.

    Each chosen edge is reported as (smaller vertex, larger vertex, weight), in
    the order the edges were accepted: by weight, then by vertex numbers.
    Self-loops are ignored.
    """
    candidates = sorted(
        ((weight, min(u, v), max(u, v)) for u, v, weight in _validated(n, edges) if u != v)
    )
    sets = DisjointSet(n)
    total: Any = 0
    chosen: list[Edge] = []
    for weight, u, v in candidates:
        if sets.union(u, v):
            total += weight
            chosen.append((u, v, weight))
    return total, chosen


def kruskal_cost(n: int, edges: Iterable[Edge]) -> Any:
    """Return the minimum spanning tree cost, stopping once n - 1 edges are taken."""
    ordered = sorted(_validated(n, edges), key=lambda edge: edge[2])
    sets = DisjointSet(n)
    cost: Any = 0
    taken = 0
    for u, v, weight in ordered:
        if sets.union(u, v):
            cost += weight
            taken += 1
            if taken == n - 1:
                break
    return cost


def _prim(adjacency: Sequence[Sequence[tuple[int, Any]]]) -> Any:
    visited = [False] * len(adjacency)
    pending: list[tuple[Any, int]] = [(0, 0)]
    total: Any = 0
    while pending:
        weight, node = heapq.heappop(pending)
        if visited[node]:
            continue
        visited[node] = True
        total += weight
        for neighbour, edge_weight in adjacency[node]:
            if not visited[neighbour]:
                heapq.heappush(pending, (edge_weight, neighbour))
    return total


def prim(n: int, edges: Iterable[Edge]) -> Any:
    """Return the weight of the minimum spanning tree grown from vertex 0."""
    checked = _validated(n, edges)
    if n < 1:
        raise ValueError("Prim's algorithm needs at least one vertex")
    adjacency: list[list[tuple[int, Any]]] = [[] for _ in range(n)]
    for u, v, weight in checked:
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))
    return _prim(adjacency)


def prim_from_adjacency(adjacency: Sequence[Iterable[Sequence[Any]]]) -> Any:
    """Run Prim's algorithm from vertex 0 on lists of (neighbour, weight) pairs."""
    lists = [[(int(pair[0]), pair[1]) for pair in neighbours] for neighbours in adjacency]
    if not lists:
        raise ValueError("Prim's algorithm needs at least one vertex")
    for neighbours in lists:
        for neighbour, _ in neighbours:
            if not 0 <= neighbour < len(lists):
                raise ValueError(f"vertex {neighbour} is outside the range 0..{len(lists) - 1}")
    return _prim(lists)