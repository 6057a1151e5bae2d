"""Protocol definitions for dbclients.

Protocols provide type-safe interfaces without requiring inheritance,
following Python's structural subtyping (duck typing with type hints).
"""

from .providers import RandomSource, SecretProvider, Sleep

__all__ = [
    "SecretProvider",
    "Sleep",
    "RandomSource",
]
