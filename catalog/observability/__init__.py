"""
Observability module.

Provides logging configuration, correlation ID tracking and request
logging middleware.
"""

from catalog.observability.correlation import get_correlation_id, set_correlation_id
from catalog.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "get_correlation_id",
    "set_correlation_id",
]
