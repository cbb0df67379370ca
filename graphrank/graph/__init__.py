"""
Graph Store and adjacency-list loading.

Components:
- DirectedMultigraph: label-keyed multigraph with dense node indexes
- NodeIndex: label <-> index lookup table
- parse_adjacency_lines / load_adjacency_list: text records -> graph
"""

from .loader import LoadResult, load_adjacency_list, parse_adjacency_lines
from .models import DirectedMultigraph, Edge, NodeIndex

__all__ = [
    "DirectedMultigraph",
    "Edge",
    "NodeIndex",
    "LoadResult",
    "load_adjacency_list",
    "parse_adjacency_lines",
]
