"""
Reporter Tests
"""

import json

import numpy as np
import pytest
from rich.console import Console

from graphrank.analysis.components import Component
from graphrank.models import GraphReport, ReportOrder
from graphrank.pagerank.engine import RankVector
from graphrank.report.reporter import Reporter


@pytest.fixture
def ranks():
    return RankVector(("A", "B", "C"), np.array([0.2, 0.5, 0.3]), iterations=12, converged=True)


@pytest.fixture
def components():
    return [Component(members=("A", "B", "C"))]


class TestBuildReport:
    def test_input_order_by_default(self, components, ranks):
        report = Reporter().build(components, ranks, edge_count=3, skipped_lines=1, damping=0.85)

        assert report.component_count == 1
        assert report.node_count == 3
        assert report.edge_count == 3
        assert report.skipped_lines == 1
        assert report.iterations == 12
        assert report.converged
        assert [s.label for s in report.scores] == ["A", "B", "C"]

    def test_score_order(self, components, ranks):
        report = Reporter(order=ReportOrder.SCORE).build(components, ranks)

        assert [s.label for s in report.scores] == ["B", "C", "A"]
        assert report.order == ReportOrder.SCORE

    def test_score_order_ties_keep_input_order(self, components):
        tied = RankVector(("A", "B", "C"), np.array([0.25, 0.5, 0.25]))

        report = Reporter(order=ReportOrder.SCORE).build(components, tied)

        assert [s.label for s in report.scores] == ["B", "A", "C"]

    def test_top_truncates_after_ordering(self, components, ranks):
        report = Reporter(order=ReportOrder.SCORE, top=2).build(components, ranks)

        assert [s.label for s in report.scores] == ["B", "C"]
        # Counts still describe the whole graph
        assert report.node_count == 3

    def test_empty(self):
        report = Reporter().build([], RankVector.empty())

        assert report.component_count == 0
        assert report.scores == []


class TestRender:
    def test_text(self, components, ranks):
        text = Reporter.render_text(Reporter().build(components, ranks))

        assert text.splitlines() == [
            "Number of components: 1",
            "A 0.2",
            "B 0.5",
            "C 0.3",
        ]

    def test_text_empty_report(self):
        assert Reporter.render_text(GraphReport()) == "Number of components: 0\n"

    def test_text_uses_full_precision(self, components):
        ranks = RankVector(("A",), np.array([1.0 / 3]))

        text = Reporter.render_text(Reporter().build(components, ranks))

        assert text.splitlines()[1] == f"A {1.0 / 3!r}"

    def test_json(self, components, ranks):
        payload = json.loads(Reporter.render_json(Reporter().build(components, ranks, damping=0.5)))

        assert payload["component_count"] == 1
        assert payload["damping"] == 0.5
        assert payload["order"] == "input"
        assert payload["scores"][1] == {"label": "B", "score": 0.5}

    def test_table(self, components, ranks):
        console = Console(record=True, width=80)

        Reporter.render_table(Reporter().build(components, ranks), console)

        output = console.export_text()
        assert "Components" in output
        assert "0.50000000" in output

    def test_table_escapes_markup_in_labels(self, components):
        ranks = RankVector(("[bold]x[/bold]",), np.array([1.0]))
        console = Console(record=True, width=80)

        Reporter.render_table(Reporter().build(components, ranks), console)

        assert "[bold]x[/bold]" in console.export_text()
