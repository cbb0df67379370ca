"""
Graph Adapter for PageRank

Converts a DirectedMultigraph into flat numpy arrays indexed by the graph's
dense node indexes:

1. Edge source / target index arrays (one entry per edge, parallel edges kept)
2. Out-degree per node, counting every edge
3. Dangling mask (nodes without out-edges)
"""

from dataclasses import dataclass

import numpy as np

from graphrank.graph.models import DirectedMultigraph


@dataclass(frozen=True)
class EdgeArrays:
    """
    Array view of a graph for vectorized ranking.

    Attributes:
        node_count: Number of nodes (N)
        sources: int array of length E with source indexes
        targets: int array of length E with target indexes
        out_degree: float array of length N
    """

    node_count: int
    sources: np.ndarray
    targets: np.ndarray
    out_degree: np.ndarray

    @property
    def dangling(self) -> np.ndarray:
        """Boolean mask of nodes with no outgoing edges."""
        return self.out_degree == 0

    @property
    def inverse_out_degree(self) -> np.ndarray:
        """1 / out-degree, 0 for dangling nodes."""
        inverse = np.zeros(self.node_count, dtype=np.float64)
        np.divide(1.0, self.out_degree, out=inverse, where=~self.dangling)
        return inverse


class GraphAdapter:
    """
    Adapt DirectedMultigraph for PageRank computation.
    """

    def build_arrays(self, graph: DirectedMultigraph) -> EdgeArrays:
        """
        Build edge index arrays from a graph.

        Args:
            graph: Source graph

        Returns:
            EdgeArrays in dense index space
        """
        edge_count = graph.edge_count
        sources = np.fromiter(
            (graph.index_of(edge.source) for edge in graph.edges()),
            dtype=np.intp,
            count=edge_count,
        )
        targets = np.fromiter(
            (graph.index_of(edge.target) for edge in graph.edges()),
            dtype=np.intp,
            count=edge_count,
        )
        out_degree = np.bincount(sources, minlength=graph.node_count).astype(np.float64)

        return EdgeArrays(
            node_count=graph.node_count,
            sources=sources,
            targets=targets,
            out_degree=out_degree,
        )

    def get_degree_stats(self, graph: DirectedMultigraph) -> dict[str, dict[str, int]]:
        """
        Get in-degree and out-degree for all nodes.

        Args:
            graph: Source graph

        Returns:
            Dict mapping node label to {in_degree, out_degree}
        """
        stats = {}
        for label in graph.nodes():
            stats[label] = {
                "in_degree": graph.in_degree(label),
                "out_degree": graph.out_degree(label),
            }
        return stats
