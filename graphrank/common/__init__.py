"""
Common utilities shared by all graphrank layers.
"""

from graphrank.common.observability import (
    LogFormat,
    LogLevel,
    LogPerformance,
    add_context,
    clear_context,
    get_logger,
    log_error,
    log_performance,
    setup_logging,
)

__all__ = [
    "LogFormat",
    "LogLevel",
    "LogPerformance",
    "add_context",
    "clear_context",
    "get_logger",
    "log_error",
    "log_performance",
    "setup_logging",
]
