from functools import lru_cache

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from algokit.matching import BipartiteMatching


@st.composite
def bipartite_graphs(draw):
    n = draw(st.integers(0, 5))
    m = draw(st.integers(0, 5))
    if n == 0 or m == 0:
        return n, m, []
    edges = draw(
        st.lists(st.tuples(st.integers(0, n - 1), st.integers(0, m - 1)), max_size=12)
    )
    return n, m, edges


def _brute_matching(n, edges):
    adj = [sorted({b for a, b in edges if a == left}) for left in range(n)]

    @lru_cache(maxsize=None)
    def best(i, used):
        if i == n:
            return 0
        result = best(i + 1, used)
        for right in adj[i]:
            if right not in used:
                result = max(result, 1 + best(i + 1, used | frozenset([right])))
        return result

    return best(0, frozenset())


def _build(n, m, edges):
    graph = BipartiteMatching(n, m)
    for a, b in edges:
        graph.add_edge(a, b)
    return graph


@settings(max_examples=150)
@given(bipartite_graphs())
def test_matching_size_is_maximum(graph_data):
    n, m, edges = graph_data
    graph = _build(n, m, edges)
    assert graph.match() == _brute_matching(n, edges)


@settings(max_examples=150)
@given(bipartite_graphs())
def test_matching_is_consistent(graph_data):
    n, m, edges = graph_data
    graph = _build(n, m, edges)
    size = graph.match()
    pairs = [(i, r) for i, r in enumerate(graph.partner_of_left) if r >= 0]
    assert len(pairs) == size
    edge_set = set(edges)
    for left, right in pairs:
        assert (left, right) in edge_set
        assert graph.partner_of_right[right] == left


@settings(max_examples=150)
@given(bipartite_graphs())
def test_vertex_cover_covers_every_edge(graph_data):
    n, m, edges = graph_data
    graph = _build(n, m, edges)
    size = graph.match()
    cover = set(graph.min_vertex_cover())
    assert len(cover) == size
    for a, b in edges:
        assert a in cover or n + b in cover


@settings(max_examples=150)
@given(bipartite_graphs())
def test_independent_set_has_no_edges(graph_data):
    n, m, edges = graph_data
    graph = _build(n, m, edges)
    size = graph.match()
    independent = set(graph.max_independent_set())
    assert len(independent) + size == n + m
    for a, b in edges:
        assert not (a in independent and n + b in independent)


def test_no_edges_gives_empty_matching():
    graph = BipartiteMatching(3, 2)
    assert graph.match() == 0
    assert graph.min_vertex_cover() == []
    assert graph.max_independent_set() == [0, 1, 2, 3, 4]


def test_match_can_be_repeated():
    graph = _build(3, 3, [(0, 0), (0, 1), (1, 0), (2, 2)])
    first = graph.match()
    assert graph.match() == first


def test_cover_before_match_raises():
    graph = BipartiteMatching(2, 2)
    graph.add_edge(0, 1)
    with pytest.raises(RuntimeError):
        graph.min_vertex_cover()
    with pytest.raises(RuntimeError):
        graph.max_independent_set()


@pytest.mark.parametrize("a, b", [(-1, 0), (2, 0), (0, -1), (0, 3)])
def test_add_edge_out_of_range(a, b):
    graph = BipartiteMatching(2, 3)
    with pytest.raises(ValueError):
        graph.add_edge(a, b)