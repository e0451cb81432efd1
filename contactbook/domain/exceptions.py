from __future__ import annotations

from pathlib import Path


class StoreError(RuntimeError):
    """Raised when a contact store operation fails.

    Wraps lower-level exceptions (``OSError``, ``json.JSONDecodeError``, ...)
    to provide a stable, domain-friendly API. The original exception is kept as
    ``__cause__``.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class StoreNotFoundError(StoreError):
    """The store file does not exist."""


class StoreReadError(StoreError):
    """The store file exists but could not be read."""


class StoreCorruptError(StoreError):
    """The store file is not a JSON array of contact records."""


class StoreWriteError(StoreError):
    """Persisting the collection failed."""


class ConcurrentModificationError(StoreWriteError):
    """The store file changed between load and save."""


class InvalidContactError(StoreError):
    """The given fields cannot form a contact (e.g. a non-text name)."""


class IdGenerationError(StoreError):
    """A new id could not be derived from the existing records."""
