"""Maximum-weight closure and project/tool selection via minimum cut."""

from __future__ import annotations

from collections.abc import Sequence

from .maxflow import Dinic


class MaxWeightClosure:
    """Choose projects to maximise total gain while respecting dependencies.

    Project ``i`` is worth ``projects[i]``, which is negative for a loss.
    ``add_dependency(a, b)`` means doing ``a`` requires also doing ``b``.
    Cyclic dependencies are allowed. A strongly connected group is then
    done entirely or not at all.
    """

    def __init__(self, projects: Sequence[int]) -> None:
        self.projects = list(projects)
        self.n = len(self.projects)
        self._source = self.n
        self._sink = self.n + 1
        self._graph = Dinic(self.n + 2)
        self._infinite = sum(abs(p) for p in self.projects) + 1
        self._flow = 0
        self.positive_total = 0

        for i, value in enumerate(self.projects):
            if value >= 0:
                self._graph.add_directional_edge(self._source, i, value)
                self.positive_total += value
            else:
                self._graph.add_directional_edge(i, self._sink, -value)

    def _check_project(self, index: int) -> None:
        if not 0 <= index < self.n:
            raise ValueError(f"project {index} out of range [0, {self.n})")

    def add_dependency(self, a: int, b: int) -> None:
        """Record that project ``a`` depends on project ``b``."""
        self._check_project(a)
        self._check_project(b)
        self._graph.add_directional_edge(a, b, self._infinite)

    def solve(self) -> int:
        """Return the largest total gain that a valid choice of projects reaches."""
        self._flow += self._graph.flow(self._source, self._sink)
        return self.positive_total - self._flow

    def chosen_projects(self) -> list[int]:
        """Return the sorted indices of an optimal choice; ``solve`` must run first."""
        chosen = [value >= 0 for value in self.projects]
        for edge in self._graph.min_cut(self._source):
            if edge.from_node == self._source:
                chosen[edge.to_node] = False
            elif edge.to_node == self._sink:
                chosen[edge.from_node] = True
        return [i for i, taken in enumerate(chosen) if taken]


class ProjectsAndTools:
    """Choose projects, each needing some tools, to maximise reward minus tool cost.

    Project ``i`` rewards ``projects[i]``. Tool ``j`` costs ``tools[j]``, and a
    negative cost is a gain. A purchased tool serves any number of projects.
    """

    def __init__(self, projects: Sequence[int], tools: Sequence[int]) -> None:
        self.projects = list(projects)
        self.tools = list(tools)
        self.project_count = len(self.projects)
        self.tool_count = len(self.tools)
        vertices = self.project_count + self.tool_count + 2
        self._source = vertices - 2
        self._sink = vertices - 1
        self._graph = Dinic(vertices)
        self._infinite = sum(abs(p) for p in self.projects) + sum(abs(t) for t in self.tools) + 1
        self._flow = 0
        self.project_total = 0

        for i, reward in enumerate(self.projects):
            if reward >= 0:
                self._graph.add_directional_edge(self._source, i, reward)
                self.project_total += reward

        for j, cost in enumerate(self.tools):
            if cost >= 0:
                self._graph.add_directional_edge(self.project_count + j, self._sink, cost)
            else:
                self.project_total += -cost

    def _check_project(self, project: int) -> None:
        if not 0 <= project < self.project_count:
            raise ValueError(f"project {project} out of range [0, {self.project_count})")

    def add_dependency(self, project: int, tool: int) -> None:
        """Record that ``project`` needs ``tool``."""
        self._check_project(project)
        if not 0 <= tool < self.tool_count:
            raise ValueError(f"tool {tool} out of range [0, {self.tool_count})")
        self._graph.add_directional_edge(project, self.project_count + tool, self._infinite)

    def add_project_dependency(self, p1: int, p2: int) -> None:
        """Record that project ``p1`` also needs every tool that ``p2`` needs."""
        self._check_project(p1)
        self._check_project(p2)
        self._graph.add_directional_edge(p1, p2, self._infinite)

    def solve(self) -> int:
        """Return the largest total profit reachable."""
        self._flow += self._graph.flow(self._source, self._sink)
        return self.project_total - self._flow

    def chosen_projects(self) -> list[int]:
        """Return the sorted indices of the projects in an optimal choice; ``solve`` must run first."""
        chosen = [True] * self.project_count
        for edge in self._graph.min_cut(self._source):
            if edge.from_node == self._source:
                chosen[edge.to_node] = False
        return [i for i, taken in enumerate(chosen) if taken]