from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Optional, TypeVar

from pydantic import ValidationError

from contactbook.domain.entities import Contact
from contactbook.domain.exceptions import InvalidContactError, StoreError
from contactbook.domain.interfaces.id_strategies import IdStrategy, MaxPlusOneIdStrategy, strategy_for
from contactbook.domain.result import Result
from contactbook.domain.value_objects.ids import ContactId
from contactbook.logging_config import get_logger
from contactbook.repositories.contacts import ContactsRepo
from contactbook.repositories.json_file.contacts_json import ContactsRepoJson

if TYPE_CHECKING:  # pragma: no cover - import for type checkers only
    from contactbook.config.settings import Settings

T = TypeVar("T")


class ContactStore:
    """Create, read and delete contacts kept in a single JSON store file.

    - Every call re-reads the store; mutations load, change and rewrite the
      whole collection.
    - Calls on one instance are serialized by a re-entrant lock. Writes made
      by anyone else between load and save are detected and refused.
    - No :class:`StoreError` escapes: each operation returns a :class:`Result`
      and failures are logged to the ``contactbook`` logger.
    """

    def __init__(
        self,
        repo: ContactsRepo | Path | str,
        id_strategy: Optional[IdStrategy] = None,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._repo = repo if isinstance(repo, ContactsRepo) else ContactsRepoJson(repo)
        self._ids = id_strategy if id_strategy is not None else MaxPlusOneIdStrategy()
        self._logger = logger if logger is not None else get_logger()
        self._lock = threading.RLock()

    @classmethod
    def from_settings(
        cls,
        settings: Optional["Settings"] = None,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> "ContactStore":
        """Build a store for the configured path and id strategy."""
        if settings is None:
            # Lazy import so that constructing a store from an explicit path never reads the environment
            from contactbook.config.settings import settings as _settings

            settings = _settings
        repo = ContactsRepoJson(settings.store_path, indent=settings.indent)
        return cls(repo, strategy_for(settings.id_strategy), logger=logger)

    @property
    def repo(self) -> ContactsRepo:
        return self._repo

    @property
    def id_strategy(self) -> IdStrategy:
        return self._ids

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def list_contacts(self) -> Result[list[Contact]]:
        """Return every stored contact in insertion order."""

        def _list() -> list[Contact]:
            contacts = self._repo.load()
            self._logger.debug("Listed contacts", extra={"count": len(contacts)})
            return contacts

        return self._run("list_contacts", _list)

    def get_contact_by_id(self, contact_id: ContactId) -> Result[Contact | None]:
        """Return the first contact whose id equals ``contact_id``, or ``None``."""
        with self._lock:
            listed = self.list_contacts()
            if listed.error is not None:
                return Result.failure(listed.error)
            found = next((c for c in listed.value or [] if _same_id(c.id, contact_id)), None)
            return Result.success(found)

    def add_contact(self, name: str, email: str, phone: str) -> Result[Contact]:
        """Store a new contact and return it with its assigned id."""

        def _add() -> Contact:
            snap = self._repo.snapshot()
            new_id = self._ids.next_id(snap.contacts)
            try:
                contact = Contact(id=new_id, name=name, email=email, phone=phone)
            except ValidationError as exc:
                raise InvalidContactError(f"Invalid contact fields: {exc}") from exc
            self._repo.save([*snap.contacts, contact], expected_version=snap.version)
            self._logger.info("Added contact", extra={"contact_id": contact.id})
            return contact

        return self._run("add_contact", _add)

    def remove_contact(self, contact_id: ContactId) -> Result[Contact | None]:
        """Delete the first contact with ``contact_id`` and return it.

        An unknown id returns ``None`` and leaves the store file untouched.
        """

        def _remove() -> Contact | None:
            snap = self._repo.snapshot()
            idx = next(
                (i for i, c in enumerate(snap.contacts) if _same_id(c.id, contact_id)), None
            )
            if idx is None:
                return None
            contacts = list(snap.contacts)
            removed = contacts.pop(idx)
            self._repo.save(contacts, expected_version=snap.version)
            self._logger.info("Removed contact", extra={"contact_id": removed.id})
            return removed

        return self._run("remove_contact", _remove)

    def initialize(self) -> Result[None]:
        """Create an empty store file if none exists yet."""

        def _init() -> None:
            if self._repo.initialize():
                self._logger.info("Created empty contact store")

        return self._run("initialize", _init)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _run(self, operation: str, fn: Callable[[], T]) -> Result[T]:
        with self._lock:
            try:
                return Result.success(fn())
            except StoreError as exc:
                self._logger.error(
                    "%s failed: %s",
                    operation,
                    exc,
                    extra={"operation": operation, "path": str(exc.path) if exc.path else None},
                )
                return Result.failure(exc)


def _same_id(stored: ContactId, wanted: ContactId) -> bool:
    # Strict: 1 never matches "1" (nor True).
    return type(stored) is type(wanted) and stored == wanted
