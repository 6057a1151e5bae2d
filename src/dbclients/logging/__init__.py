"""Logging infrastructure for dbclients.

This module provides structured logging with JSON output and stage
context tracking.
"""

from dbclients.logging.filters import ContextFilter, stage_context
from dbclients.logging.logger import CustomJsonFormatter, get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "stage_context",
    "CustomJsonFormatter",
    "ContextFilter",
]
