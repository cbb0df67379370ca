"""
GraphRank CLI

Computes weak components and PageRank for a tab-separated adjacency list:

    graphrank graph.tsv [--damping 0.85] [--format text|json|table]

Usage errors (missing or extra positional arguments) exit with code 1.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from graphrank.common.observability import (
    LogFormat,
    LogLevel,
    add_context,
    clear_context,
    get_logger,
    log_error,
    setup_logging,
)
from graphrank.exceptions import GraphRankError
from graphrank.models import ConvergenceNorm, PageRankConfig, ReportFormat, ReportOrder
from graphrank.pipeline import analyze, build_report
from graphrank.report.reporter import Reporter

logger = get_logger(__name__)

app = typer.Typer(
    name="graphrank",
    help="Weak components and PageRank for a directed adjacency-list graph",
    add_completion=False,
)

err_console = Console(stderr=True)

USAGE_ERROR_EXIT_CODE = 2


@app.command()
def rank(
    input_path: Path = typer.Argument(..., metavar="INPUT", help="Adjacency-list file: source<TAB>target<TAB>..."),
    damping: float = typer.Option(0.85, "--damping", "-d", help="Probability of following an edge (0 < d < 1)"),
    max_iter: int = typer.Option(100, "--max-iter", help="Maximum power iterations"),
    tol: float = typer.Option(1e-6, "--tol", help="Convergence threshold"),
    norm: ConvergenceNorm = typer.Option(ConvergenceNorm.L1, "--norm", help="Residual norm"),
    redistribute_dangling: bool = typer.Option(
        True,
        "--redistribute-dangling/--drop-dangling",
        help="Spread the score of nodes without out-edges over all nodes",
    ),
    order: ReportOrder = typer.Option(ReportOrder.INPUT, "--order", help="Node order in the report"),
    top: int | None = typer.Option(None, "--top", min=1, help="Only report the first N nodes"),
    output_format: ReportFormat = typer.Option(ReportFormat.TEXT, "--format", "-f", help="Report format"),
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING, "--log-level", case_sensitive=False, help="Log level for stderr diagnostics"
    ),
    log_format: LogFormat = typer.Option(LogFormat.CONSOLE, "--log-format", help="Log format"),
):
    """
    Rank the nodes of a graph.

    Prints the number of weakly connected components followed by one
    "<node> <score>" line per node.
    """
    setup_logging(level=log_level.value, format=log_format.value)
    add_context(input=str(input_path))

    config = PageRankConfig(
        damping=damping,
        max_iterations=max_iter,
        tolerance=tol,
        convergence_norm=norm,
        redistribute_dangling=redistribute_dangling,
    )

    try:
        result = analyze(input_path, config)
    except GraphRankError as e:
        log_error(logger, "graphrank_failed", error=e)
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)
    finally:
        clear_context()

    report = build_report(result, order=order, top=top)

    if output_format == ReportFormat.JSON:
        typer.echo(Reporter.render_json(report), nl=False)
    elif output_format == ReportFormat.TABLE:
        Reporter.render_table(report, Console())
    else:
        typer.echo(Reporter.render_text(report), nl=False)


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point.

    Args:
        argv: Arguments without the program name (sys.argv[1:] when None)

    Returns:
        Process exit code
    """
    try:
        app(args=argv, prog_name="graphrank")
    except SystemExit as e:
        if e.code is None:
            return 0
        if not isinstance(e.code, int):
            return 1
        # Usage errors exit with 2 in standalone mode
        return 1 if e.code == USAGE_ERROR_EXIT_CODE else e.code
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
