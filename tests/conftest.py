"""
Global test configuration and fixtures
"""

import time
from pathlib import Path

import pytest
import structlog

from graphrank.graph.loader import parse_adjacency_lines

# Slow test thresholds (seconds)
SLOW_TEST_THRESHOLD = 5.0
WARNING_TEST_THRESHOLD = 2.0


@pytest.fixture(autouse=True)
def track_test_duration(request):
    """Track test duration and warn about slow tests"""
    start_time = time.time()

    yield

    duration = time.time() - start_time
    test_name = request.node.nodeid

    if duration > SLOW_TEST_THRESHOLD:
        print(f"\nSLOW TEST ({duration:.2f}s): {test_name}")
        print("   Consider marking with @pytest.mark.slow or optimizing")
    elif duration > WARNING_TEST_THRESHOLD:
        print(f"\nSlow ({duration:.2f}s): {test_name}")


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo logging configuration done by CLI runs"""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def make_graph():
    """Build a frozen graph from adjacency records, e.g. make_graph("A\\tB", "B\\tC")."""

    def _make(*lines: str):
        return parse_adjacency_lines(lines).graph

    return _make


@pytest.fixture
def write_graph_file(tmp_path):
    """Write adjacency records to a temp file and return its path."""

    def _write(content: str, name: str = "graph.tsv") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


# Pytest hooks
def pytest_configure(config):
    """pytest configuration"""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (medium speed)")
    config.addinivalue_line("markers", "slow: Slow tests (>5s)")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test path"""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
