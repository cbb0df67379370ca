"""
PageRank Engine

Power-iteration PageRank over a DirectedMultigraph.

Each iteration computes, for every node v:

    new(v) = (1 - d) / N + d * sum(score(u) / out_degree(u) for u -> v)
             [+ d * dangling_mass / N   when dangling redistribution is on]

Parallel edges each carry a share of the source's score. Iteration stops when
the residual between successive vectors drops below the tolerance or the
iteration cap is reached.
"""

from collections.abc import Iterator, Mapping

import numpy as np

from graphrank.common.observability import get_logger
from graphrank.exceptions import InvalidArgumentError, NodeNotFoundError
from graphrank.graph.models import DirectedMultigraph
from graphrank.models import ConvergenceNorm, PageRankConfig

from .graph_adapter import GraphAdapter

logger = get_logger(__name__)


class RankVector(Mapping[str, float]):
    """
    Read-only mapping from node label to PageRank score.

    Iteration follows the graph's node order.
    """

    def __init__(
        self,
        labels: tuple[str, ...],
        scores: np.ndarray,
        iterations: int = 0,
        converged: bool = True,
        delta: float = 0.0,
    ):
        if len(labels) != len(scores):
            raise ValueError(f"{len(labels)} labels for {len(scores)} scores")
        self._labels = labels
        self._scores = np.array(scores, dtype=np.float64)
        self._scores.flags.writeable = False
        self._position = {label: i for i, label in enumerate(labels)}
        self.iterations = iterations
        self.converged = converged
        self.delta = delta

    @classmethod
    def empty(cls) -> "RankVector":
        return cls((), np.zeros(0, dtype=np.float64))

    def __getitem__(self, label: str) -> float:
        try:
            return float(self._scores[self._position[label]])
        except KeyError:
            raise NodeNotFoundError(label) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)

    def __len__(self) -> int:
        return len(self._labels)

    def as_array(self) -> np.ndarray:
        """Scores in dense index order (read-only view)."""
        return self._scores

    def total(self) -> float:
        return float(self._scores.sum())

    def __repr__(self) -> str:
        return f"RankVector(nodes={len(self)}, iterations={self.iterations}, converged={self.converged})"


class PageRankEngine:
    """
    Compute PageRank scores for a directed multigraph.

    PageRank measures the importance of nodes based on
    their position in the graph topology.
    """

    def __init__(self, config: PageRankConfig | None = None):
        """
        Initialize PageRank engine.

        Args:
            config: PageRank configuration (defaults to PageRankConfig())
        """
        self.config = config or PageRankConfig()
        self.adapter = GraphAdapter()

    def validate(self, damping: float | None = None) -> float:
        """
        Check ranking parameters.

        Args:
            damping: Damping factor override, config value when None

        Returns:
            Effective damping factor

        Raises:
            InvalidArgumentError: If damping, tolerance or iteration cap is out of range
        """
        d = self.config.damping if damping is None else damping
        if not 0.0 < d < 1.0:
            raise InvalidArgumentError("damping", d, "0 < damping < 1")
        if not self.config.tolerance > 0.0:
            raise InvalidArgumentError("tolerance", self.config.tolerance, "tolerance > 0")
        if self.config.max_iterations < 1:
            raise InvalidArgumentError("max_iterations", self.config.max_iterations, "max_iterations >= 1")
        return d

    def rank(self, graph: DirectedMultigraph, damping: float | None = None) -> RankVector:
        """
        Compute PageRank for all nodes in graph.

        Args:
            graph: Graph to rank
            damping: Damping factor override

        Returns:
            RankVector with one non-negative score per node

        Raises:
            InvalidArgumentError: If parameters are out of range
        """
        d = self.validate(damping)

        n = graph.node_count
        if n == 0:
            return RankVector.empty()

        arrays = self.adapter.build_arrays(graph)
        inverse_out = arrays.inverse_out_degree
        dangling = arrays.dangling
        teleport = (1.0 - d) / n

        scores = np.full(n, 1.0 / n, dtype=np.float64)
        delta = float("inf")
        converged = False
        iterations = 0

        while iterations < self.config.max_iterations:
            iterations += 1
            shares = scores[arrays.sources] * inverse_out[arrays.sources]
            # bincount yields int64 when there are no edges to weight
            updated = np.bincount(arrays.targets, weights=shares, minlength=n).astype(np.float64, copy=False)
            updated *= d
            updated += teleport
            if self.config.redistribute_dangling:
                updated += d * scores[dangling].sum() / n

            delta = self._residual(updated, scores)
            scores = updated
            if delta < self.config.tolerance:
                converged = True
                break

        if converged:
            logger.info("pagerank_converged", iterations=iterations, delta=delta, nodes=n)
        else:
            logger.warning(
                "pagerank_not_converged",
                iterations=iterations,
                delta=delta,
                tolerance=self.config.tolerance,
            )

        return RankVector(graph.labels(), scores, iterations=iterations, converged=converged, delta=delta)

    def _residual(self, updated: np.ndarray, previous: np.ndarray) -> float:
        diff = np.abs(updated - previous)
        if self.config.convergence_norm == ConvergenceNorm.LINF:
            return float(diff.max())
        return float(diff.sum())

    def compute_with_degree(self, graph: DirectedMultigraph) -> dict[str, dict[str, float]]:
        """
        Compute PageRank along with in/out degree.

        Args:
            graph: Graph to rank

        Returns:
            Dict mapping node label to {pagerank, in_degree, out_degree}
        """
        scores = self.rank(graph)
        degrees = self.adapter.get_degree_stats(graph)

        return {
            label: {
                "pagerank": scores[label],
                "in_degree": degrees[label]["in_degree"],
                "out_degree": degrees[label]["out_degree"],
            }
            for label in graph.nodes()
        }

    def get_top_nodes(self, graph: DirectedMultigraph, top_n: int = 20) -> list[tuple[str, float]]:
        """
        Get top N nodes by PageRank score.

        Args:
            graph: Graph to rank
            top_n: Number of top nodes to return

        Returns:
            List of (label, score) tuples sorted by score descending, ties in node order
        """
        scores = self.rank(graph)
        # sorted() is stable, so equal scores keep node order
        ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
        return ranked[:top_n]
