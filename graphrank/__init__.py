"""
GraphRank

Weakly connected components and PageRank for directed graphs loaded from
tab-separated adjacency lists.
"""

from graphrank.analysis.components import Component, WeakComponentAnalyzer, weak_components
from graphrank.exceptions import (
    GraphFrozenError,
    GraphLoadError,
    GraphRankError,
    InvalidArgumentError,
    NodeNotFoundError,
)
from graphrank.graph.loader import LoadResult, load_adjacency_list, parse_adjacency_lines
from graphrank.graph.models import DirectedMultigraph, Edge
from graphrank.models import ConvergenceNorm, GraphReport, NodeScore, PageRankConfig, ReportFormat, ReportOrder
from graphrank.pagerank.engine import PageRankEngine, RankVector

__version__ = "0.1.0"

__all__ = [
    "Component",
    "ConvergenceNorm",
    "DirectedMultigraph",
    "Edge",
    "GraphFrozenError",
    "GraphLoadError",
    "GraphRankError",
    "GraphReport",
    "InvalidArgumentError",
    "LoadResult",
    "NodeNotFoundError",
    "NodeScore",
    "PageRankConfig",
    "PageRankEngine",
    "RankVector",
    "ReportFormat",
    "ReportOrder",
    "WeakComponentAnalyzer",
    "load_adjacency_list",
    "parse_adjacency_lines",
    "weak_components",
]
