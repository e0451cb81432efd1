from __future__ import annotations

import hashlib
import json
import os
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from contactbook.domain.entities import Contact
from contactbook.domain.exceptions import (
    ConcurrentModificationError,
    StoreCorruptError,
    StoreNotFoundError,
    StoreReadError,
    StoreWriteError,
)

from ..contacts import ContactsRepo, Snapshot, VersionStamp

JSON_INDENT = 2


def _version_of(raw: bytes) -> VersionStamp:
    return hashlib.sha256(raw).hexdigest()


class ContactsRepoJson(ContactsRepo):
    """JSON file implementation of :class:`ContactsRepo`.

    The whole collection lives in one UTF-8 file holding a JSON array. Every
    call goes to disk; nothing is cached between calls.
    """

    def __init__(self, path: Path | str, *, indent: int = JSON_INDENT) -> None:
        self._path = Path(path)
        self._indent = indent

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def initialize(self) -> bool:
        if self._path.exists():
            return False
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StoreWriteError(f"Cannot create store directory: {exc}", path=self._path) from exc
        self._write([])
        return True

    def snapshot(self) -> Snapshot:
        raw = self._read_bytes()
        if raw is None:
            raise StoreNotFoundError(f"Store file not found: {self._path}", path=self._path)
        return Snapshot(contacts=self._parse(raw), version=_version_of(raw))

    def save(self, contacts: list[Contact], *, expected_version: Optional[VersionStamp] = None) -> None:
        if expected_version is not None:
            current = self._read_bytes()
            if current is None or _version_of(current) != expected_version:
                raise ConcurrentModificationError(
                    f"Store file changed since it was read: {self._path}", path=self._path
                )
        self._write(contacts)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _read_bytes(self) -> bytes | None:
        try:
            return self._path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise StoreReadError(f"Cannot read store file: {exc}", path=self._path) from exc

    def _parse(self, raw: bytes) -> list[Contact]:
        try:
            data: Any = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise StoreCorruptError(f"Store file is not valid JSON: {exc}", path=self._path) from exc
        if not isinstance(data, list):
            raise StoreCorruptError(
                f"Store file must hold a JSON array, got {type(data).__name__}", path=self._path
            )

        contacts: list[Contact] = []
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                raise StoreCorruptError(f"Record #{index} is not an object", path=self._path)
            try:
                contacts.append(Contact.from_record(item))
            except ValidationError as exc:
                raise StoreCorruptError(f"Record #{index} is malformed: {exc}", path=self._path) from exc
        return contacts

    def _write(self, contacts: list[Contact]) -> None:
        text = json.dumps(
            [c.to_record() for c in contacts], indent=self._indent, ensure_ascii=False
        )
        try:
            data = text.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise StoreWriteError(f"Cannot encode store file as UTF-8: {exc}", path=self._path) from exc

        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp.write_bytes(data)
            os.replace(tmp, self._path)
        except OSError as exc:
            tmp.unlink(missing_ok=True)
            raise StoreWriteError(f"Cannot write store file: {exc}", path=self._path) from exc
