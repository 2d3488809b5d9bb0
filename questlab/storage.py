"""
Whole-document persistence of the tracker state.

The state is serialized as one JSON document and kept under a single key of a
key-value storage. Every save replaces the value; there is no merging or
versioning, so two writers sharing a key simply overwrite each other.
"""

from __future__ import annotations

import json
import logging

from .errors import CorruptStoreError
from .models import AppState, StorageEntry, db

logger = logging.getLogger(__name__)

STORAGE_KEY = "cs-quest-lab-data"


class MemoryStorage:
    """Dict-backed storage for scripts and tests."""

    def __init__(self, initial: dict | None = None):
        self._data = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class SqlStorage:
    """Key-value storage on the ``storage`` table. Needs an app context."""

    def get(self, key: str) -> str | None:
        entry = db.session.get(StorageEntry, key)
        return entry.value if entry else None

    def set(self, key: str, value: str) -> None:
        entry = db.session.get(StorageEntry, key)
        if entry is None:
            db.session.add(StorageEntry(key=key, value=value))
        else:
            entry.value = value
        db.session.commit()


def empty_document() -> dict:
    return {"accounts": {}, "activeAccount": None}


class Store:
    def __init__(self, storage, key: str = STORAGE_KEY, strict: bool = False):
        self.storage = storage
        self.key = key
        self.strict = strict

    def raw(self) -> dict:
        """Return the stored document as plain data, or an empty one."""
        text = self.storage.get(self.key)
        if not text:
            return empty_document()
        try:
            data = json.loads(text)
        except ValueError as exc:
            return self._unreadable(f"invalid JSON ({exc})")
        if not isinstance(data, dict):
            return self._unreadable(f"root is {type(data).__name__}, expected object")
        return data

    def _unreadable(self, reason: str) -> dict:
        if self.strict:
            raise CorruptStoreError(f"Stored progress data under {self.key!r} is unreadable: {reason}")
        logger.warning("Ignoring unreadable document under %r: %s", self.key, reason)
        return empty_document()

    def load(self) -> AppState:
        # Unreadable account records are dropped one by one inside from_dict.
        return AppState.from_dict(self.raw())

    def save(self, state: AppState) -> None:
        self.storage.set(self.key, json.dumps(state.to_dict(), sort_keys=True))
