"""
Shared utilities for logging and timestamps.
"""

from src.core.utils.logging import configure_logging, log_operation
from src.core.utils.timestamps import utc_timestamp

__all__ = [
    "configure_logging",
    "log_operation",
    "utc_timestamp",
]
