"""
Graph Adapter Tests
"""

import numpy as np

from graphrank.graph.models import DirectedMultigraph
from graphrank.pagerank.graph_adapter import GraphAdapter


def test_edge_arrays_use_dense_indexes(make_graph):
    arrays = GraphAdapter().build_arrays(make_graph("A\tB\tC", "B\tC"))

    assert arrays.node_count == 3
    assert arrays.sources.tolist() == [0, 0, 1]
    assert arrays.targets.tolist() == [1, 2, 2]
    assert arrays.out_degree.tolist() == [2.0, 1.0, 0.0]
    assert arrays.dangling.tolist() == [False, False, True]


def test_inverse_out_degree_counts_parallel_edges(make_graph):
    arrays = GraphAdapter().build_arrays(make_graph("A\tB\tB\tC\tD"))

    inverse = arrays.inverse_out_degree
    assert inverse[0] == 0.25
    assert np.all(inverse[1:] == 0.0)


def test_empty_graph_arrays():
    arrays = GraphAdapter().build_arrays(DirectedMultigraph())

    assert arrays.node_count == 0
    assert arrays.sources.size == 0
    assert arrays.out_degree.size == 0


def test_degree_stats(make_graph):
    stats = GraphAdapter().get_degree_stats(make_graph("A\tB", "B\tA", "B\tC"))

    assert stats["B"] == {"in_degree": 1, "out_degree": 2}
    assert stats["C"] == {"in_degree": 1, "out_degree": 0}
