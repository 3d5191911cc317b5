# algokit

A collection of algorithms and data structures in plain Python:
network flow, bipartite matching, integer geometry and convex-hull tricks,
a Manhattan minimum spanning tree, graph helpers, polynomial hashing,
segment trees with lazy propagation and heavy-light decomposition.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.maxflow` | `Dinic` maximum flow with `min_cut` and `find_edge`, `EdgeType`, `CutEdge` |
| `algokit.mincostflow` | `MinCostFlow`, `assignment_problem` |
| `algokit.closure` | `MaxWeightClosure`, `ProjectsAndTools` |
| `algokit.matching` | `BipartiteMatching` with `min_vertex_cover` and `max_independent_set` |
| `algokit.point` | `Point` and integer geometry helpers (`cross`, `dot`, `cross_sign`, `left_turn_strict`, `distance_to_line`, `angle_compare`, ...) |
| `algokit.hull_dp` | `DPHull` and `MonotonicDPHull` for maximum of `a*x + b` queries |
| `algokit.manhattan_mst` | `manhattan_mst`, `MSTEdge` |
| `algokit.graphs` | `BipartiteChecker`, `topological_sort` |
| `algokit.intmath` | `floor_div`, `ceil_div`, `highest_bit` |
| `algokit.segment_tree` | `Segment`, `SegmentChange`, `SegTree` (range add/assign, maximum/sum, `find_last_subarray`) |
| `algokit.heavy_light` | `SubtreeHeavyLight` path and subtree updates and queries |
| `algokit.float_matrix` | `FloatMatrix`, `FloatColumnVector` |
| `algokit.array_hash` | `ArrayHash`, `splitmix64` |
| `algokit.string_hash` | `StringHash`, `hash_sequence`, `concat_hashes`, `first_mismatch`, `hash_compare` |
| `algokit.sequences` | `closest_left`, `closest_right`, `compress_array`, `format_vector` |

## Examples

Maximum flow and minimum cut:

```python
from algokit.maxflow import Dinic

graph = Dinic(4)
graph.add_directional_edge(0, 1, 3)
graph.add_directional_edge(0, 2, 2)
graph.add_directional_edge(1, 3, 2)
graph.add_directional_edge(2, 3, 3)
print(graph.flow(0, 3))        # 4
print(graph.min_cut(0))        # CutEdge values crossing the cut
```

Assignment problem:

```python
from algokit.mincostflow import assignment_problem

total, assignment = assignment_problem([[4, 1, 3], [2, 0, 5], [3, 2, 2]])
print(total, assignment)       # assignment[i] is the column of row i, or -1
```

Line container queries:

```python
from algokit.hull_dp import DPHull

hull = DPHull()
hull.insert(1, 0)
hull.insert(-1, 5)
print(hull.query(3))  # max(1*3 + 0, -1*3 + 5) = 3
```

Substring hashing:

```python
from algokit.string_hash import StringHash

h = StringHash("abacaba")
print(h.is_palindrome(0, 7))   # True
print(h.equal(0, 4, 3))        # True: "aba" == "aba"
```

Hash values from `StringHash` and `ArrayHash` use bases chosen at random when
the module is imported, so they are stable within one process only.

Integer division that rounds the right way for negatives:

```python
from algokit.intmath import floor_div, ceil_div

print(floor_div(-7, 2), ceil_div(-7, 2))  # -4 -3
```

## Errors

Invalid arguments such as out-of-range vertices, negative capacities or an
empty hull raise `ValueError` or `IndexError`. Asking for a minimum cut before
`flow`, or for a vertex cover before `match`, raises `RuntimeError`.

## What it does not do

algokit is a library only: it has no command-line programs and reads no input
files. It has no online convex hull with area and containment queries, and no
finder for bridges, cut vertices or biconnected components.