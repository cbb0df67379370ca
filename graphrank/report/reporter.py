"""
Reporter

Turns component analysis and PageRank results into a GraphReport and renders
it as plain text, JSON or a rich table.

Text format:

    Number of components: <N>
    <label> <score>
    ...
"""

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from graphrank.analysis.components import Component
from graphrank.models import GraphReport, NodeScore, ReportOrder
from graphrank.pagerank.engine import RankVector


class Reporter:
    """
    Build and render deterministic graph reports.

    Node order is the graph's first-seen order unless ``order`` is
    ReportOrder.SCORE, in which case nodes are sorted by descending score and
    ties keep first-seen order.
    """

    def __init__(self, order: ReportOrder = ReportOrder.INPUT, top: int | None = None):
        self.order = order
        self.top = top

    def build(
        self,
        components: Sequence[Component],
        ranks: RankVector,
        *,
        edge_count: int = 0,
        skipped_lines: int = 0,
        damping: float = 0.85,
    ) -> GraphReport:
        """
        Assemble a report.

        Args:
            components: Weak components of the graph
            ranks: PageRank scores
            edge_count: Number of edges in the graph
            skipped_lines: Malformed input records
            damping: Damping factor used for ranking

        Returns:
            GraphReport
        """
        scores = [NodeScore(label=label, score=score) for label, score in ranks.items()]
        if self.order == ReportOrder.SCORE:
            scores.sort(key=lambda s: s.score, reverse=True)
        if self.top is not None:
            scores = scores[: self.top]

        return GraphReport(
            component_count=len(components),
            node_count=len(ranks),
            edge_count=edge_count,
            skipped_lines=skipped_lines,
            damping=damping,
            iterations=ranks.iterations,
            converged=ranks.converged,
            order=self.order,
            scores=scores,
        )

    @staticmethod
    def render_text(report: GraphReport) -> str:
        lines = [f"Number of components: {report.component_count}"]
        lines.extend(f"{s.label} {s.score!r}" for s in report.scores)
        return "\n".join(lines) + "\n"

    @staticmethod
    def render_json(report: GraphReport) -> str:
        return report.model_dump_json(indent=2) + "\n"

    @staticmethod
    def render_table(report: GraphReport, console: Console) -> None:
        """Print a human-friendly summary and score table."""
        summary = Table(title="Graph Summary", show_header=False)
        summary.add_column("Metric", style="cyan")
        summary.add_column("Value", style="white")
        summary.add_row("Components", str(report.component_count))
        summary.add_row("Nodes", str(report.node_count))
        summary.add_row("Edges", str(report.edge_count))
        summary.add_row("Skipped Lines", str(report.skipped_lines))
        summary.add_row("Damping", str(report.damping))
        summary.add_row("Iterations", str(report.iterations))
        summary.add_row("Converged", "yes" if report.converged else "[yellow]no[/yellow]")
        console.print(summary)

        scores = Table(title="PageRank")
        scores.add_column("Node", style="cyan")
        scores.add_column("Score", justify="right")
        for s in report.scores:
            scores.add_row(escape(s.label), f"{s.score:.8f}")
        console.print(scores)
