"""
Utility functions and logging configuration.
"""
from utils.logging_config import (
    JSONFormatter,
    StandardFormatter,
    get_logger,
    log_extra,
    setup_logging,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "log_extra",
    "JSONFormatter",
    "StandardFormatter",
]
