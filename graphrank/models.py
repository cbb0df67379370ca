"""
GraphRank Data Models

Configuration for the PageRank engine and the report produced for a graph.
"""

from enum import Enum

from pydantic import BaseModel, Field


class ConvergenceNorm(str, Enum):
    """Residual norm between successive rank vectors"""

    L1 = "l1"
    LINF = "linf"


class PageRankConfig(BaseModel):
    """
    Configuration for PageRank computation.

    Ranges are checked by PageRankEngine, which raises InvalidArgumentError.
    """

    damping: float = 0.85
    """Probability of following an outgoing edge instead of teleporting"""

    max_iterations: int = 100
    """Maximum power iterations"""

    tolerance: float = 1e-6
    """Convergence threshold on the residual between successive vectors"""

    convergence_norm: ConvergenceNorm = ConvergenceNorm.L1
    """Norm used for the residual"""

    redistribute_dangling: bool = True
    """Spread the mass of nodes without out-edges uniformly over all nodes"""


class ReportOrder(str, Enum):
    """Node ordering in a report"""

    INPUT = "input"  # First-seen order from the adjacency list
    SCORE = "score"  # Descending score, ties in input order


class ReportFormat(str, Enum):
    """Report rendering format"""

    TEXT = "text"
    JSON = "json"
    TABLE = "table"


class NodeScore(BaseModel):
    """PageRank score of a single node."""

    label: str
    score: float


class GraphReport(BaseModel):
    """
    Result of analyzing one graph.

    Node scores are ordered according to ``order``.
    """

    component_count: int = 0
    """Number of weakly connected components"""

    node_count: int = 0
    edge_count: int = 0

    skipped_lines: int = 0
    """Malformed input records that were ignored"""

    damping: float = 0.85
    iterations: int = 0
    converged: bool = True

    order: ReportOrder = ReportOrder.INPUT
    scores: list[NodeScore] = Field(default_factory=list)
