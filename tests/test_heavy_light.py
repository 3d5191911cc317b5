import random

import pytest

from algokit.heavy_light import SubtreeHeavyLight
from algokit.segment_tree import Segment, SegmentChange


def _random_tree(n, seed):
    rng = random.Random(seed)
    parents = [-1] + [rng.randrange(i) for i in range(1, n)]
    edges = [(i, parents[i]) for i in range(1, n)]
    rng.shuffle(edges)
    edges = [(a, b) if rng.random() < 0.5 else (b, a) for a, b in edges]
    return parents, edges


def _depths(parents):
    depth = [0] * len(parents)
    for i in range(1, len(parents)):
        depth[i] = depth[parents[i]] + 1
    return depth


def _naive_path(u, v, parents, depth):
    left, right = [], []
    while depth[u] > depth[v]:
        left.append(u)
        u = parents[u]
    while depth[v] > depth[u]:
        right.append(v)
        v = parents[v]
    while u != v:
        left.append(u)
        right.append(v)
        u, v = parents[u], parents[v]
    return left + right, u


def _naive_subtree(v, parents):
    members = []
    for w in range(len(parents)):
        x = w
        while x >= 0 and x != v:
            x = parents[x]
        if x == v:
            members.append(w)
    return members


def _check(seg, values):
    if values:
        assert seg.maximum == max(values)
        assert seg.total == sum(values)
    else:
        assert seg.is_empty()


def _hld(n, edges, vertex_mode):
    hld = SubtreeHeavyLight(n, vertex_mode)
    for a, b in edges:
        hld.add_edge(a, b)
    hld.build(Segment(0, 0))
    return hld


def test_lca_matches_naive():
    n = 40
    parents, edges = _random_tree(n, 3)
    depth = _depths(parents)
    hld = _hld(n, edges, True)
    rng = random.Random(4)
    for _ in range(200):
        u, v = rng.randrange(n), rng.randrange(n)
        assert hld.get_lca(u, v) == _naive_path(u, v, parents, depth)[1]


def test_lca_on_small_tree():
    hld = _hld(4, [(0, 1), (0, 2), (1, 3)], False)
    assert hld.get_lca(3, 2) == 0
    assert hld.get_lca(3, 1) == 1
    assert hld.get_lca(2, 2) == 2


def test_parents_follow_root_zero():
    n = 25
    parents, edges = _random_tree(n, 11)
    hld = _hld(n, edges, True)
    assert hld.parent == parents
    assert hld.depth == _depths(parents)


@pytest.mark.parametrize("vertex_mode", [True, False])
@pytest.mark.parametrize("seed", [1, 2, 5])
def test_random_operations_match_model(vertex_mode, seed):
    n = 30
    parents, edges = _random_tree(n, seed)
    depth = _depths(parents)
    hld = _hld(n, edges, vertex_mode)
    values = [0] * n
    rng = random.Random(seed * 101)

    def path_nodes(u, v):
        nodes, lca = _naive_path(u, v, parents, depth)
        return nodes + [lca] if vertex_mode else nodes

    def subtree_nodes(v):
        nodes = _naive_subtree(v, parents)
        return nodes if vertex_mode else [w for w in nodes if w != v]

    for _ in range(300):
        kind = rng.randrange(7)
        u, v = rng.randrange(n), rng.randrange(n)
        x = rng.randint(-10, 10)
        if kind == 0:
            hld.update_path(u, v, SegmentChange(to_add=x))
            for w in path_nodes(u, v):
                values[w] += x
        elif kind == 1:
            hld.update_path(u, v, SegmentChange(to_set=x))
            for w in path_nodes(u, v):
                values[w] = x
        elif kind == 2:
            hld.update_subtree(u, SegmentChange(to_add=x))
            for w in subtree_nodes(u):
                values[w] += x
        elif kind == 3:
            hld.update_subtree(u, SegmentChange(to_set=x))
            for w in subtree_nodes(u):
                values[w] = x
        elif kind == 4:
            hld.update_single(u, Segment(x, x))
            values[u] = x
        elif kind == 5:
            _check(hld.query_path(u, v), [values[w] for w in path_nodes(u, v)])
        else:
            _check(hld.query_subtree(u), [values[w] for w in subtree_nodes(u)])


def test_edge_mode_path_to_self_is_empty():
    hld = _hld(3, [(0, 1), (1, 2)], False)
    hld.update_path(0, 2, SegmentChange(to_add=4))
    assert hld.query_path(1, 1).is_empty()
    _check(hld.query_path(0, 2), [4, 4])


def test_different_components_raise():
    hld = _hld(4, [(0, 1), (2, 3)], True)
    with pytest.raises(ValueError):
        hld.get_lca(1, 3)


def test_add_edge_out_of_range_raises():
    hld = SubtreeHeavyLight(3, True)
    with pytest.raises(ValueError):
        hld.add_edge(0, 3)