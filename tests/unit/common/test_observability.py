"""
Observability Helper Tests
"""

import pytest
from structlog.testing import capture_logs

from graphrank.common.observability import LogPerformance, get_logger, log_error, log_performance

logger = get_logger(__name__)


def test_log_performance_fast_operation():
    with capture_logs() as logs:
        log_performance(logger, "pagerank", 12.5, nodes=3)

    assert logs == [
        {"event": "operation_complete", "log_level": "info", "operation": "pagerank", "duration_ms": 12.5, "nodes": 3}
    ]


def test_log_performance_slow_operation():
    with capture_logs() as logs:
        log_performance(logger, "load_graph", 2500.0)

    assert logs[0]["event"] == "slow_operation"
    assert logs[0]["log_level"] == "warning"
    assert logs[0]["slow"] is True


def test_log_error_shape():
    with capture_logs() as logs:
        log_error(logger, "graphrank_failed", error=ValueError("bad damping"), stage="rank")

    assert logs[0]["error_type"] == "ValueError"
    assert logs[0]["error_message"] == "bad damping"
    assert logs[0]["stage"] == "rank"


def test_log_performance_context_manager_success():
    with capture_logs() as logs:
        with LogPerformance(logger, "load_graph", path="g.tsv"):
            pass

    assert logs[0]["operation"] == "load_graph"
    assert logs[0]["path"] == "g.tsv"


def test_log_performance_context_manager_failure_reraises():
    with capture_logs() as logs:
        with pytest.raises(RuntimeError):
            with LogPerformance(logger, "load_graph"):
                raise RuntimeError("disk gone")

    assert logs[0]["event"] == "load_graph_failed"
    assert logs[0]["error_message"] == "disk gone"
