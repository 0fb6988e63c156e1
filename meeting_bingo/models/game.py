"""Game state models — persisted snapshot, speech session, and API views."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from meeting_bingo.models.card import CamelModel, Card, WinningLine
from meeting_bingo.models.category import CategorySummary

Screen = Literal["landing", "category", "game", "win"]


class GameSnapshot(CamelModel):
    """The exact persisted shape of the game.

    ``filled_words`` is stored as a list for JSON; its order carries no
    meaning and it is rebuilt as a set on load.
    """

    screen: Screen = "landing"
    category: str | None = None
    card: Card | None = None
    filled_words: list[str] = Field(default_factory=list)
    started_at: int | None = None  # epoch milliseconds


class SpeechSessionState(CamelModel):
    """Observed state of the speech capture driver (read-only to the game)."""

    supported: bool = False
    listening: bool = False
    transcript: str = ""
    interim_transcript: str = ""
    error: str | None = None


class GameView(CamelModel):
    """Everything a client needs to render the current screen."""

    screen: Screen
    category: CategorySummary | None = None
    card: Card | None = None
    found_words: list[str] = Field(default_factory=list)
    started_at: int | None = None
    winning_line: WinningLine | None = None
    speech: SpeechSessionState = Field(default_factory=SpeechSessionState)
    persistence_ok: bool = True


class SelectCategoryRequest(CamelModel):
    category_id: str


class TranscriptRequest(CamelModel):
    text: str


class ShareResponse(CamelModel):
    text: str
