from itertools import combinations

from hypothesis import given, settings
from hypothesis import strategies as st

from algokit.manhattan_mst import MSTEdge, manhattan_mst


def _l1(a, b):
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def _brute_total(points):
    n = len(points)
    parent = list(range(n))

    def find(x):
        while parent[x] != x:
            x = parent[x]
        return x

    pairs = sorted(combinations(range(n), 2), key=lambda ij: _l1(points[ij[0]], points[ij[1]]))
    total = 0
    for i, j in pairs:
        ri, rj = find(i), find(j)
        if ri != rj:
            parent[ri] = rj
            total += _l1(points[i], points[j])
    return total


def _spans(n, edges):
    parent = list(range(n))

    def find(x):
        while parent[x] != x:
            x = parent[x]
        return x

    for e in edges:
        parent[find(e.index1)] = find(e.index2)
    return len({find(i) for i in range(n)}) <= 1


def test_empty_input_gives_no_edges():
    assert manhattan_mst([]) == []


def test_single_point_gives_no_edges():
    assert manhattan_mst([(5, -3)]) == []


def test_two_points():
    edges = manhattan_mst([(0, 0), (3, 4)])
    assert len(edges) == 1
    edge = edges[0]
    assert {edge.index1, edge.index2} == {0, 1}
    assert edge.dist == _l1((0, 0), (3, 4))


def test_edges_sorted_by_distance():
    points = [(0, 0), (10, 1), (2, 7), (-5, 3), (4, 4), (9, -6)]
    edges = manhattan_mst(points)
    dists = [e.dist for e in edges]
    assert dists == sorted(dists)
    assert all(isinstance(e, MSTEdge) for e in edges)


@settings(max_examples=150, deadline=None)
@given(st.lists(st.tuples(st.integers(-20, 20), st.integers(-20, 20)), min_size=0, max_size=12))
def test_matches_brute_force(points):
    edges = manhattan_mst(points)
    assert len(edges) == max(len(points) - 1, 0)
    assert _spans(len(points), edges)
    for e in edges:
        assert e.dist == _l1(points[e.index1], points[e.index2])
    assert sum(e.dist for e in edges) == _brute_total(points)