"""Game persistence — a generic string key-value store and the snapshot codec.

The game keeps exactly one record, under ``settings.storage_key``. The
store has no authority of its own: the state machine writes through on
every mutation and reads once at startup.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from meeting_bingo.config import settings
from meeting_bingo.database import KeyValueEntry, SessionLocal, init_db
from meeting_bingo.errors import MalformedSnapshot, PersistenceWriteFailure
from meeting_bingo.models.game import GameSnapshot

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value stored under *key*, or None when absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store *value* under *key*. Raises PersistenceWriteFailure."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete *key*; absent keys are ignored."""


class InMemoryKeyValueStore(KeyValueStore):
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data


class SqlKeyValueStore(KeyValueStore):
    """Key-value store on the ``kv_entries`` table."""

    def __init__(self, session_factory: sessionmaker[Session] | None = None) -> None:
        if session_factory is None:
            init_db()
            session_factory = SessionLocal
        self._session_factory = session_factory

    def get(self, key: str) -> str | None:
        try:
            with self._session_factory() as db:
                entry = db.get(KeyValueEntry, key)
                return entry.value if entry is not None else None
        except SQLAlchemyError:
            logger.exception("Failed to read key %s", key)
            return None

    def set(self, key: str, value: str) -> None:
        try:
            with self._session_factory() as db:
                entry = db.get(KeyValueEntry, key)
                if entry is None:
                    db.add(KeyValueEntry(key=key, value=value))
                else:
                    entry.value = value
                db.commit()
        except SQLAlchemyError as exc:
            raise PersistenceWriteFailure(f"could not write {key!r}: {exc}") from exc

    def remove(self, key: str) -> None:
        try:
            with self._session_factory() as db:
                entry = db.get(KeyValueEntry, key)
                if entry is not None:
                    db.delete(entry)
                    db.commit()
        except SQLAlchemyError as exc:
            raise PersistenceWriteFailure(f"could not remove {key!r}: {exc}") from exc


def encode_snapshot(snapshot: GameSnapshot) -> str:
    return snapshot.model_dump_json(by_alias=True)


def decode_snapshot(raw: str) -> GameSnapshot:
    """Parse a persisted snapshot.

    Raises:
        MalformedSnapshot: the text is not JSON or does not validate.
    """
    try:
        return GameSnapshot.model_validate_json(raw)
    except ValidationError as exc:
        raise MalformedSnapshot(str(exc)) from exc


class GamePersistenceStore:
    """Reads and writes the single game snapshot record."""

    def __init__(self, store: KeyValueStore, key: str | None = None) -> None:
        self.store = store
        self.key = key or settings.storage_key

    def load(self) -> GameSnapshot:
        """Return the stored snapshot, or the default one if absent or malformed."""
        raw = self.store.get(self.key)
        if raw is None:
            return GameSnapshot()
        try:
            return decode_snapshot(raw)
        except MalformedSnapshot as exc:
            logger.warning("Discarding malformed game snapshot: %s", exc)
            return GameSnapshot()

    def save(self, snapshot: GameSnapshot) -> bool:
        """Write *snapshot*; returns False (and logs) when the store rejects it."""
        try:
            self.store.set(self.key, encode_snapshot(snapshot))
        except PersistenceWriteFailure:
            logger.exception("Game snapshot not persisted; continuing in memory")
            return False
        return True

    def clear(self) -> bool:
        try:
            self.store.remove(self.key)
        except PersistenceWriteFailure:
            logger.exception("Could not clear persisted game snapshot")
            return False
        return True
