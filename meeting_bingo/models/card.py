"""Bingo card models — squares, the 5×5 card, and winning lines.

Field names are snake_case in Python and camelCase on the wire
(``isFilled``, ``filledAt`` …) so that persisted snapshots keep the
same shape the web client reads.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

GRID_SIZE = 5
CENTER = GRID_SIZE // 2
WORDS_PER_CARD = GRID_SIZE * GRID_SIZE - 1
FREE_SPACE_WORD = "FREE"


def square_id(row: int, col: int) -> str:
    return f"{row}-{col}"


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Square(CamelModel):
    """One cell of the card."""

    id: str
    word: str
    is_filled: bool = False
    is_free_space: bool = False
    is_auto_filled: bool = False
    filled_at: int | None = None  # epoch milliseconds
    row: int = Field(ge=0, lt=GRID_SIZE)
    col: int = Field(ge=0, lt=GRID_SIZE)


class Card(CamelModel):
    """A generated 5×5 grid plus the 24 non-free words it uses."""

    squares: list[list[Square]]
    words: list[str]

    @model_validator(mode="after")
    def _check_shape(self) -> Card:
        if len(self.squares) != GRID_SIZE or any(len(row) != GRID_SIZE for row in self.squares):
            raise ValueError("card must be a 5x5 grid")
        if len(self.words) != WORDS_PER_CARD:
            raise ValueError(f"card must carry exactly {WORDS_PER_CARD} words")

        free = []
        for r, row in enumerate(self.squares):
            for c, sq in enumerate(row):
                if sq.id != square_id(r, c) or (sq.row, sq.col) != (r, c):
                    raise ValueError(f"square at ({r},{c}) has id {sq.id!r}")
                if sq.is_free_space:
                    free.append(sq)
        if len(free) != 1 or free[0].id != square_id(CENTER, CENTER) or not free[0].is_filled:
            raise ValueError("card must have exactly one filled free space at the center")

        # Found words are tracked lower-cased, so each word must own exactly one square.
        words = sorted(w.lower() for w in self.words)
        if len(set(words)) != WORDS_PER_CARD:
            raise ValueError("card words must be distinct ignoring case")
        on_grid = sorted(sq.word.lower() for sq in self.iter_squares() if not sq.is_free_space)
        if on_grid != words:
            raise ValueError("card words do not match the words on its squares")
        return self

    def iter_squares(self):
        for row in self.squares:
            yield from row

    def find(self, sid: str) -> Square | None:
        return next((sq for sq in self.iter_squares() if sq.id == sid), None)

    def filled_words(self) -> set[str]:
        """Lower-cased words of every filled, non-free square."""
        return {sq.word.lower() for sq in self.iter_squares() if sq.is_filled and not sq.is_free_space}

    def filled_count(self) -> int:
        return sum(1 for sq in self.iter_squares() if sq.is_filled and not sq.is_free_space)


class WinningLine(CamelModel):
    """A completed row, column, or diagonal.

    For diagonals, index 0 is the main diagonal and 1 the anti-diagonal.
    """

    type: Literal["row", "column", "diagonal"]
    index: int = Field(ge=0, lt=GRID_SIZE)
    squares: list[str]
