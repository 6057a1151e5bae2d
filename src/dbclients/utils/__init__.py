"""Utility helpers for dbclients."""

from dbclients.utils.decorators import (
    traced,
    with_timeout,
)

__all__ = [
    "traced",
    "with_timeout",
]
