"""SQLite database engine and the key-value table backing game persistence.

Uses SQLAlchemy 2.x with the synchronous driver for simplicity in a
local-first deployment.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from sqlalchemy import Column, DateTime, String, Text, create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from meeting_bingo.config import settings

# Ensure data directory exists
if settings.database_url.startswith("sqlite:///"):
    _db_path = settings.database_url.replace("sqlite:///", "")
    Path(_db_path).parent.mkdir(parents=True, exist_ok=True)

engine = create_engine(settings.database_url, echo=settings.debug)
SessionLocal = sessionmaker(bind=engine)


class Base(DeclarativeBase):
    pass


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class KeyValueEntry(Base):
    """One string value stored under a string key (last write wins)."""

    __tablename__ = "kv_entries"

    key = Column(String(256), primary_key=True)
    value = Column(Text, nullable=False, default="")
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow)


def init_db(bind=None) -> None:
    """Create all tables if they do not exist."""
    Base.metadata.create_all(bind=bind or engine)
