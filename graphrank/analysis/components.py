"""
Weak Component Analyzer

Groups nodes that are connected when edge direction is ignored, using a
union-find structure over the graph's dense node indexes.
"""

from dataclasses import dataclass

from graphrank.common.observability import get_logger
from graphrank.graph.models import DirectedMultigraph

logger = get_logger(__name__)


@dataclass(frozen=True)
class Component:
    """
    A weakly connected component.

    Attributes:
        members: Node labels in graph (first-seen) order
    """

    members: tuple[str, ...]

    @property
    def nodes(self) -> frozenset[str]:
        return frozenset(self.members)

    def __len__(self) -> int:
        return len(self.members)

    def __contains__(self, label: object) -> bool:
        return label in self.members


class _DisjointSet:
    """Union-find with path halving and union by size."""

    def __init__(self, size: int):
        self.parent = list(range(size))
        self.size = [1] * size

    def find(self, x: int) -> int:
        parent = self.parent
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    def union(self, a: int, b: int) -> None:
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return
        if self.size[root_a] < self.size[root_b]:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a
        self.size[root_a] += self.size[root_b]


class WeakComponentAnalyzer:
    """
    Compute weakly connected components of a directed graph.

    Components are ordered by the position of their earliest member in the
    graph's node order, so results are reproducible for a given input.
    """

    def analyze(self, graph: DirectedMultigraph) -> list[Component]:
        """
        Partition the graph's nodes into weak components.

        Args:
            graph: Graph to analyze

        Returns:
            Components in first-seen order; empty list for an empty graph
        """
        disjoint = _DisjointSet(graph.node_count)
        for edge in graph.edges():
            disjoint.union(graph.index_of(edge.source), graph.index_of(edge.target))

        groups: dict[int, list[str]] = {}
        for index, label in enumerate(graph.labels()):
            groups.setdefault(disjoint.find(index), []).append(label)

        components = [Component(members=tuple(members)) for members in groups.values()]
        logger.debug("weak_components_computed", nodes=graph.node_count, components=len(components))
        return components

    def count(self, graph: DirectedMultigraph) -> int:
        return len(self.analyze(graph))


def weak_components(graph: DirectedMultigraph) -> list[Component]:
    """Shortcut for ``WeakComponentAnalyzer().analyze(graph)``."""
    return WeakComponentAnalyzer().analyze(graph)
