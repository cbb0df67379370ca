"""
Pipeline Integration Tests

load -> weak components -> PageRank -> report
"""

import pytest

from graphrank.exceptions import GraphLoadError, InvalidArgumentError
from graphrank.models import PageRankConfig, ReportOrder
from graphrank.pipeline import analyze, build_report


def test_chain_scenario(write_graph_file):
    result = analyze(write_graph_file("A\tB\tC\nB\tC\n"))

    assert list(result.graph.nodes()) == ["A", "B", "C"]
    assert [(e.source, e.target) for e in result.graph.edges()] == [("A", "B"), ("A", "C"), ("B", "C")]
    assert len(result.components) == 1
    assert result.ranks.total() == pytest.approx(1.0, abs=1e-6)


def test_two_components_scenario(write_graph_file):
    result = analyze(write_graph_file("A\tB\nC\tD\n"))

    assert set(result.graph.nodes()) == {"A", "B", "C", "D"}
    assert len(result.components) == 2


def test_empty_file(write_graph_file):
    result = analyze(write_graph_file(""))
    report = build_report(result)

    assert result.graph.node_count == 0
    assert report.component_count == 0
    assert report.scores == []


def test_components_and_scores_cover_same_nodes(write_graph_file):
    result = analyze(write_graph_file("a\tb\tc\nd\te\nf\tf\nc\ta\n"))

    component_nodes = set().union(*(c.nodes for c in result.components))
    assert component_nodes == set(result.ranks)


def test_report_carries_load_stats(write_graph_file):
    result = analyze(write_graph_file("A\tB\nbroken\nB\tA\n"))
    report = build_report(result, order=ReportOrder.SCORE, top=1)

    assert report.skipped_lines == 1
    assert report.edge_count == 2
    assert report.node_count == 2
    assert len(report.scores) == 1


def test_invalid_damping_checked_before_reading(tmp_path):
    # The file does not exist; the damping error must win
    with pytest.raises(InvalidArgumentError):
        analyze(tmp_path / "missing.tsv", PageRankConfig(damping=0.0))


def test_missing_file(tmp_path):
    with pytest.raises(GraphLoadError):
        analyze(tmp_path / "missing.tsv")


def test_custom_damping_recorded(write_graph_file):
    result = analyze(write_graph_file("A\tB\n"), PageRankConfig(damping=0.5))

    assert result.damping == 0.5
    assert build_report(result).damping == 0.5
