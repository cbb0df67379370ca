"""
Adjacency List Loader

Builds a DirectedMultigraph from tab-separated adjacency records:

    <source>\t<target1>\t<target2>\t...

Each (source, target_i) pair becomes one edge. Records with fewer than two
fields, or with an empty source label, are skipped and logged; they do not
create nodes.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from graphrank.common.observability import get_logger
from graphrank.exceptions import GraphLoadError
from graphrank.graph.models import DirectedMultigraph

logger = get_logger(__name__)

FIELD_SEPARATOR = "\t"


@dataclass
class LoadResult:
    """
    Outcome of parsing an adjacency list.

    Attributes:
        graph: Frozen graph built from the records
        lines_read: Number of physical lines seen
        skipped_lines: 1-based line numbers of malformed records
    """

    graph: DirectedMultigraph
    lines_read: int = 0
    skipped_lines: list[int] = field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped_lines)


def parse_adjacency_lines(lines: Iterable[str]) -> LoadResult:
    """
    Parse adjacency records into a frozen graph.

    Args:
        lines: Raw lines, with or without trailing line terminators

    Returns:
        LoadResult with the graph and skip statistics
    """
    graph = DirectedMultigraph()
    result = LoadResult(graph=graph)

    for line_no, raw in enumerate(lines, start=1):
        result.lines_read = line_no
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue

        fields = line.split(FIELD_SEPARATOR)
        source = fields[0]
        if len(fields) < 2 or not source:
            result.skipped_lines.append(line_no)
            logger.warning(
                "malformed_line",
                line_no=line_no,
                field_count=len(fields),
                reason="empty source" if not source else "no targets",
            )
            continue

        for target in fields[1:]:
            # Consecutive separators leave empty fields behind
            if target:
                graph.add_edge(source, target)

    graph.freeze()
    logger.info(
        "graph_loaded",
        nodes=graph.node_count,
        edges=graph.edge_count,
        lines=result.lines_read,
        skipped=result.skipped_count,
    )
    return result


def load_adjacency_list(path: str | Path) -> LoadResult:
    """
    Read an adjacency-list file into a frozen graph.

    Args:
        path: UTF-8 text file, one source node per line; a leading BOM is dropped

    Returns:
        LoadResult

    Raises:
        GraphLoadError: If the file is missing, unreadable or not valid UTF-8
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8-sig") as handle:
            return parse_adjacency_lines(handle)
    except OSError as e:
        raise GraphLoadError(str(path), e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise GraphLoadError(str(path), f"not valid UTF-8 ({e.reason} at byte {e.start})") from e
