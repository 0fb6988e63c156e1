"""Process-wide game state machine, built once from settings."""

from __future__ import annotations

import logging
from functools import lru_cache

from sqlalchemy.exc import SQLAlchemyError

from meeting_bingo.services.persistence import (
    GamePersistenceStore,
    InMemoryKeyValueStore,
    KeyValueStore,
    SqlKeyValueStore,
)
from meeting_bingo.services.speech_capture import MistralRealtimeCapture
from meeting_bingo.services.state_machine import GameStateMachine

logger = logging.getLogger(__name__)


def open_store() -> KeyValueStore:
    """SQL-backed store, or an in-memory one when the database cannot be opened."""
    try:
        return SqlKeyValueStore()
    except SQLAlchemyError:
        logger.exception("Game database unavailable; game state will not survive a restart")
        return InMemoryKeyValueStore()


@lru_cache(maxsize=1)
def get_machine() -> GameStateMachine:
    """Return the game machine, reconciled from the persisted snapshot."""
    machine = GameStateMachine.restore(
        GamePersistenceStore(open_store()),
        MistralRealtimeCapture(),
    )
    logger.info("Game restored on %s screen", machine.screen)
    return machine
