from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from contactbook.domain.entities import Contact

# Opaque token identifying one exact version of the stored collection.
VersionStamp = str


@dataclass
class Snapshot:
    contacts: list[Contact] = field(default_factory=list)
    version: Optional[VersionStamp] = None


class ContactsRepo(ABC):
    """Repository interface for the persisted contact collection.

    Implementations raise :class:`contactbook.domain.exceptions.StoreError`
    subclasses and never swallow failures.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Return whether the backing store has been created."""

    @abstractmethod
    def initialize(self) -> bool:
        """Create an empty store if missing. Return ``True`` if one was created."""

    @abstractmethod
    def snapshot(self) -> Snapshot:
        """Load every contact together with the version it was read at."""

    @abstractmethod
    def save(self, contacts: list[Contact], *, expected_version: Optional[VersionStamp] = None) -> None:
        """Replace the stored collection.

        When ``expected_version`` is given the write is refused if the store
        no longer matches it.
        """

    def load(self) -> list[Contact]:
        """Load every contact in stored order."""
        return self.snapshot().contacts
