import pytest

from dsakit.mst import DisjointSet, kruskal, kruskal_cost, prim, prim_from_adjacency

FOUR_VERTEX_EDGES = [(0, 1, 10), (1, 3, 15), (2, 3, 4), (2, 0, 6), (0, 3, 5)]
TRIANGLE_EDGES = [(0, 1, 5), (1, 2, 3), (0, 2, 1)]
FIVE_VERTEX_EDGES = [(0, 1, 2), (0, 3, 6), (1, 2, 3), (1, 3, 8), (1, 4, 5), (2, 4, 7)]


def _adjacency(n, edges):
    adjacency = [[] for _ in range(n)]
    for u, v, w in edges:
        adjacency[u].append([v, w])
        adjacency[v].append([u, w])
    return adjacency


def test_disjoint_set_starts_with_singletons():
    sets = DisjointSet(5)
    assert [sets.find(i) for i in range(5)] == list(range(5))


def test_disjoint_set_union_joins_and_reports():
    sets = DisjointSet(4)
    assert sets.union(0, 1) is True
    assert sets.union(2, 3) is True
    assert sets.find(0) == sets.find(1)
    assert sets.find(0) != sets.find(2)
    assert sets.union(1, 0) is False
    assert sets.union(1, 3) is True
    assert len({sets.find(i) for i in range(4)}) == 1


def test_disjoint_set_rejects_out_of_range():
    sets = DisjointSet(3)
    with pytest.raises(ValueError):
        sets.find(3)
    with pytest.raises(ValueError):
        sets.union(-1, 0)


def test_kruskal_cost_four_vertex_example():
    assert kruskal_cost(4, FOUR_VERTEX_EDGES) == 19


def test_prim_triangle_example():
    assert prim(3, TRIANGLE_EDGES) == 4


def test_prim_from_adjacency_five_vertex_example():
    assert prim_from_adjacency(_adjacency(5, FIVE_VERTEX_EDGES)) == 16


@pytest.mark.parametrize(
    "n, edges",
    [(4, FOUR_VERTEX_EDGES), (3, TRIANGLE_EDGES), (5, FIVE_VERTEX_EDGES)],
)
def test_algorithms_agree(n, edges):
    total, chosen = kruskal(n, edges)
    assert kruskal_cost(n, edges) == total
    assert prim(n, edges) == total
    assert prim_from_adjacency(_adjacency(n, edges)) == total


@pytest.mark.parametrize(
    "n, edges",
    [(4, FOUR_VERTEX_EDGES), (3, TRIANGLE_EDGES), (5, FIVE_VERTEX_EDGES)],
)
def test_kruskal_edges_form_spanning_tree(n, edges):
    total, chosen = kruskal(n, edges)
    assert len(chosen) == n - 1
    assert sum(w for _, _, w in chosen) == total
    normalized = {(min(u, v), max(u, v), w) for u, v, w in edges}
    assert set(chosen) <= normalized
    weights = [w for _, _, w in chosen]
    assert weights == sorted(weights)
    sets = DisjointSet(n)
    assert all(sets.union(u, v) for u, v, _ in chosen)


def test_kruskal_ignores_self_loops():
    edges = TRIANGLE_EDGES + [(1, 1, 0)]
    assert kruskal(3, edges) == kruskal(3, TRIANGLE_EDGES)


def test_kruskal_on_forest_keeps_components_apart():
    edges = [(0, 1, 7), (2, 3, 9)]
    total, chosen = kruskal(4, edges)
    assert chosen == edges
    assert total == 7 + 9


def test_prim_covers_only_component_of_vertex_zero():
    edges = [(0, 1, 7), (2, 3, 9)]
    assert prim(4, edges) == prim(2, [(0, 1, 7)])
    assert prim(2, [(0, 1, 7)]) == 7


def test_rejects_vertices_out_of_range():
    with pytest.raises(ValueError):
        kruskal(2, [(0, 2, 1)])
    with pytest.raises(ValueError):
        kruskal_cost(2, [(0, 5, 1)])
    with pytest.raises(ValueError):
        prim(2, [(3, 0, 1)])
    with pytest.raises(ValueError):
        prim_from_adjacency([[[4, 1]]])


def test_prim_needs_a_vertex():
    with pytest.raises(ValueError):
        prim(0, [])
    with pytest.raises(ValueError):
        prim_from_adjacency([])