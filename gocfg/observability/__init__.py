"""
Observability

Structured logging shared by every layer.
"""

from .logging import LogPerformance, get_logger, log_performance, setup_logging

__all__ = [
    "LogPerformance",
    "get_logger",
    "log_performance",
    "setup_logging",
]
