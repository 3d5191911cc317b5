import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from algokit.closure import MaxWeightClosure, ProjectsAndTools


def _valid_closure(chosen, dependencies):
    return all(not (a in chosen and b not in chosen) for a, b in dependencies)


def _best_closure(projects, dependencies):
    n = len(projects)
    best = 0
    for mask in range(1 << n):
        chosen = {i for i in range(n) if mask >> i & 1}
        if _valid_closure(chosen, dependencies):
            best = max(best, sum(projects[i] for i in chosen))
    return best


@st.composite
def _closure_instances(draw):
    n = draw(st.integers(min_value=1, max_value=6))
    projects = draw(st.lists(st.integers(-10, 10), min_size=n, max_size=n))
    deps = draw(
        st.lists(st.tuples(st.integers(0, n - 1), st.integers(0, n - 1)), max_size=10)
    )
    return projects, deps


@settings(max_examples=150, deadline=None)
@given(_closure_instances())
def test_closure_matches_exhaustive_search(instance):
    projects, deps = instance
    solver = MaxWeightClosure(projects)
    for a, b in deps:
        solver.add_dependency(a, b)
    answer = solver.solve()
    assert answer == _best_closure(projects, deps)

    chosen = solver.chosen_projects()
    assert sum(projects[i] for i in chosen) == answer
    assert _valid_closure(set(chosen), deps)
    assert chosen == sorted(chosen)


def test_closure_simple_dependency():
    solver = MaxWeightClosure([5, -3])
    solver.add_dependency(0, 1)
    assert solver.solve() == 2
    assert solver.chosen_projects() == [0, 1]


def test_closure_unprofitable_dependency_skipped():
    solver = MaxWeightClosure([2, -7])
    solver.add_dependency(0, 1)
    assert solver.solve() == 0
    assert solver.chosen_projects() == []


def test_closure_cycle_all_or_nothing():
    solver = MaxWeightClosure([4, -1, -2])
    solver.add_dependency(0, 1)
    solver.add_dependency(1, 2)
    solver.add_dependency(2, 0)
    answer = solver.solve()
    assert answer == _best_closure([4, -1, -2], [(0, 1), (1, 2), (2, 0)])
    assert solver.chosen_projects() == [0, 1, 2]


def test_closure_incremental_dependency():
    solver = MaxWeightClosure([6, -4, -4])
    solver.add_dependency(0, 1)
    first = solver.solve()
    assert first == _best_closure([6, -4, -4], [(0, 1)])
    solver.add_dependency(0, 2)
    second = solver.solve()
    assert second == _best_closure([6, -4, -4], [(0, 1), (0, 2)])
    assert second <= first


def test_closure_dependency_out_of_range():
    solver = MaxWeightClosure([1, 2])
    with pytest.raises(ValueError):
        solver.add_dependency(0, 2)
    with pytest.raises(ValueError):
        solver.add_dependency(-1, 0)


def test_closure_chosen_before_solve_raises():
    solver = MaxWeightClosure([1, -1])
    with pytest.raises(RuntimeError):
        solver.chosen_projects()


def _project_set_value(chosen, projects, tools, needs, project_deps):
    closure = set(chosen)
    changed = True
    while changed:
        changed = False
        for p1, p2 in project_deps:
            if p1 in closure and p2 not in closure:
                closure.add(p2)
                changed = True
    needed = {t for p, t in needs if p in closure}
    needed |= {t for t, cost in enumerate(tools) if cost < 0}
    return sum(projects[p] for p in chosen) - sum(tools[t] for t in needed)


def _best_projects(projects, tools, needs, project_deps):
    count = len(projects)
    return max(
        _project_set_value(
            [p for p in range(count) if mask >> p & 1], projects, tools, needs, project_deps
        )
        for mask in range(1 << count)
    )


@st.composite
def _tool_instances(draw):
    p = draw(st.integers(min_value=1, max_value=5))
    t = draw(st.integers(min_value=1, max_value=4))
    projects = draw(st.lists(st.integers(0, 10), min_size=p, max_size=p))
    tools = draw(st.lists(st.integers(-5, 10), min_size=t, max_size=t))
    needs = draw(st.lists(st.tuples(st.integers(0, p - 1), st.integers(0, t - 1)), max_size=8))
    project_deps = draw(
        st.lists(st.tuples(st.integers(0, p - 1), st.integers(0, p - 1)), max_size=4)
    )
    return projects, tools, needs, project_deps


@settings(max_examples=150, deadline=None)
@given(_tool_instances())
def test_projects_and_tools_match_exhaustive_search(instance):
    projects, tools, needs, project_deps = instance
    solver = ProjectsAndTools(projects, tools)
    for p, t in needs:
        solver.add_dependency(p, t)
    for p1, p2 in project_deps:
        solver.add_project_dependency(p1, p2)
    answer = solver.solve()
    assert answer == _best_projects(projects, tools, needs, project_deps)

    chosen = solver.chosen_projects()
    assert _project_set_value(chosen, projects, tools, needs, project_deps) == answer


def _graph_problem(weights, edges):
    solver = ProjectsAndTools([w for _, _, w in edges], weights)
    for i, (u, v, _) in enumerate(edges):
        solver.add_dependency(i, u - 1)
        solver.add_dependency(i, v - 1)
    return solver


def test_projects_and_tools_subgraph_example():
    solver = _graph_problem([1, 5, 2, 2], [(1, 3, 4), (1, 4, 4), (3, 4, 5), (3, 2, 2), (4, 2, 2)])
    assert solver.solve() == 8
    assert solver.chosen_projects() == [0, 1, 2]


def test_projects_and_tools_nothing_worth_doing():
    solver = _graph_problem([9, 7, 8], [(1, 2, 1), (2, 3, 2), (1, 3, 3)])
    assert solver.solve() == 0
    assert solver.chosen_projects() == []


def test_projects_and_tools_negative_tool_is_a_gain():
    solver = ProjectsAndTools([0], [-3])
    solver.add_dependency(0, 0)
    assert solver.solve() == 3


def test_projects_and_tools_index_errors():
    solver = ProjectsAndTools([1, 2], [3])
    with pytest.raises(ValueError):
        solver.add_dependency(2, 0)
    with pytest.raises(ValueError):
        solver.add_dependency(0, 1)
    with pytest.raises(ValueError):
        solver.add_project_dependency(0, 5)


def test_projects_and_tools_chosen_before_solve_raises():
    solver = ProjectsAndTools([1], [1])
    with pytest.raises(RuntimeError):
        solver.chosen_projects()