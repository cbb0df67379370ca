"""
PageRank Computation

Components:
- GraphAdapter: DirectedMultigraph -> numpy edge arrays
- PageRankEngine: power-iteration PageRank
- RankVector: label -> score mapping returned by the engine
"""

from .engine import PageRankEngine, RankVector
from .graph_adapter import EdgeArrays, GraphAdapter

__all__ = [
    "EdgeArrays",
    "GraphAdapter",
    "PageRankEngine",
    "RankVector",
]
