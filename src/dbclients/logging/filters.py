"""Logging filters for context injection.

This module provides filters that inject context variables into log records,
so every line emitted during startup names the stage that produced it.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional
from dbclients.__version__ import __version__

stage_var: ContextVar[Optional[str]] = ContextVar("stage", default=None)

class ContextFilter(logging.Filter):
    """Logging filter that adds context variables to log records.

    This filter extracts values from context variables and adds them to
    log records, enabling log correlation across async operations.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Add context variables to the log record.

        Args:
            record: Log record to enhance

        Returns:
            Always True (doesn't filter out any records)
        """
        setattr(record, "stage", stage_var.get())
        setattr(record, "sdk_name", "dbclients")
        setattr(record, "sdk_version", __version__)

        return True


def set_stage(stage: Optional[str]) -> None:
    """Set the current initialization stage."""
    stage_var.set(stage)


def clear_stage() -> None:
    """Clear the current initialization stage."""
    stage_var.set(None)


@contextmanager
def stage_context(stage: str) -> Iterator[None]:
    """Scope log records emitted inside the block to ``stage``."""
    token = stage_var.set(stage)
    try:
        yield
    finally:
        stage_var.reset(token)
