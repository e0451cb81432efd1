from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .exceptions import StoreError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a store operation: a value on success, an error on failure.

    ``value`` may legitimately be ``None`` on success (e.g. an unknown id).
    On failure ``value`` is always ``None`` and ``error`` carries the cause.

    >>> Result.success(3).unwrap()
    3
    >>> Result.failure(StoreError("boom")).reason
    'boom'
    """

    value: Optional[T] = None
    error: Optional[StoreError] = None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: StoreError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def reason(self) -> str | None:
        return None if self.error is None else str(self.error)

    def unwrap(self) -> Optional[T]:
        """Return the value or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value
