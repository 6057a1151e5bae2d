"""Result type used as the only currency between initialization stages.

A stage never lets an exception escape to the stage that depends on it.
Instead it returns either ``Success(value)`` or ``Failure(messages)`` and
downstream stages branch with :func:`is_success` / :func:`is_failure`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Tuple, TypeVar, Union


T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful variant of a Result, carrying a value."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True)
class Failure:
    """Failed variant of a Result, carrying an ordered list of messages.

    The message list is never empty: every failure site contributes at
    least one message.
    """
    messages: Tuple[str, ...]

    def __post_init__(self) -> None:
        if isinstance(self.messages, str):
            raise TypeError("Failure messages must be a sequence of strings, not a string")
        messages = tuple(self.messages)
        if not messages:
            raise ValueError("Failure requires at least one message")
        object.__setattr__(self, "messages", messages)

    @classmethod
    def of(cls, message: str, *more: str) -> "Failure":
        """Build a Failure from one or more messages."""
        return cls((message, *more))

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


Result = Union[Success[T], Failure]


def is_success(result: "Result[T]") -> bool:
    """Return True iff ``result`` holds a value."""
    return isinstance(result, Success)


def is_failure(result: "Result[T]") -> bool:
    """Return True iff ``result`` holds a failure list."""
    return isinstance(result, Failure)
