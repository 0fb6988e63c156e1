"""Error taxonomy for the bingo game."""

from __future__ import annotations


class BingoError(Exception):
    pass


class UnknownCategory(BingoError):
    def __init__(self, category_id: str) -> None:
        super().__init__(f"Unknown category: {category_id!r}")
        self.category_id = category_id


class InsufficientWordPool(BingoError):
    def __init__(self, category_id: str, pool_size: int, required: int) -> None:
        super().__init__(
            f"Category {category_id!r} has {pool_size} words, needs at least {required}"
        )
        self.category_id = category_id
        self.pool_size = pool_size
        self.required = required


class MalformedSnapshot(BingoError):
    """Persisted game state could not be decoded or failed validation."""


class PersistenceWriteFailure(BingoError):
    """The key-value store rejected a write (quota, locked database, ...)."""


class SpeechCaptureError(BingoError):
    """The speech capture session reported an error."""
