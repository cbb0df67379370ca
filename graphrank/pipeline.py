"""
Analysis Pipeline

load adjacency list -> weak components -> PageRank -> report
"""

from dataclasses import dataclass
from pathlib import Path

from graphrank.analysis.components import Component, WeakComponentAnalyzer
from graphrank.common.observability import LogPerformance, get_logger
from graphrank.graph.loader import LoadResult, load_adjacency_list
from graphrank.graph.models import DirectedMultigraph
from graphrank.models import GraphReport, PageRankConfig, ReportOrder
from graphrank.pagerank.engine import PageRankEngine, RankVector
from graphrank.report.reporter import Reporter

logger = get_logger(__name__)


@dataclass
class AnalysisResult:
    """Everything computed for one input graph."""

    load: LoadResult
    components: list[Component]
    ranks: RankVector
    damping: float

    @property
    def graph(self) -> DirectedMultigraph:
        return self.load.graph


def analyze(path: str | Path, config: PageRankConfig | None = None) -> AnalysisResult:
    """
    Load a graph file, compute its weak components and PageRank.

    Parameters are validated before the file is read.

    Args:
        path: Adjacency-list file
        config: PageRank configuration

    Returns:
        AnalysisResult

    Raises:
        InvalidArgumentError: If the PageRank configuration is out of range
        GraphLoadError: If the file cannot be read
    """
    engine = PageRankEngine(config)
    damping = engine.validate()

    with LogPerformance(logger, "load_graph", path=str(path)):
        load = load_adjacency_list(path)

    components = WeakComponentAnalyzer().analyze(load.graph)

    with LogPerformance(logger, "pagerank", nodes=load.graph.node_count, edges=load.graph.edge_count):
        ranks = engine.rank(load.graph, damping)

    return AnalysisResult(load=load, components=components, ranks=ranks, damping=damping)


def build_report(
    result: AnalysisResult,
    order: ReportOrder = ReportOrder.INPUT,
    top: int | None = None,
) -> GraphReport:
    """Build the report for an analysis result."""
    return Reporter(order=order, top=top).build(
        result.components,
        result.ranks,
        edge_count=result.graph.edge_count,
        skipped_lines=result.load.skipped_count,
        damping=result.damping,
    )
