"""Structured outcomes for calls to the recipe provider."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class MalformedResponseError(ValueError):
    """Raised when a provider payload does not have the expected shape."""


@dataclass(frozen=True)
class Success(Generic[T]):
    """A provider call that produced a usable value."""

    value: T


@dataclass(frozen=True)
class Failure:
    """A provider call that failed, with a user-facing message."""

    message: str
    status_code: int | None = None


Outcome = Success[T] | Failure
