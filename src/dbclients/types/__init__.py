"""Type definitions for dbclients.

This module provides the base model and the Result type that every
initialization stage returns.
"""

from .base import DBBaseModel
from .result import Failure, Result, Success, is_failure, is_success

__all__ = [
    # Base model
    'DBBaseModel',
    # Result
    'Result',
    'Success',
    'Failure',
    'is_success',
    'is_failure',
]
