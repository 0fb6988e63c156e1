"""Card generation — draw 24 buzzwords and lay them out around the free space."""

from __future__ import annotations

import logging
import random
import time

from meeting_bingo.data.categories import get_category
from meeting_bingo.errors import InsufficientWordPool, UnknownCategory
from meeting_bingo.models.card import (
    CENTER,
    FREE_SPACE_WORD,
    GRID_SIZE,
    WORDS_PER_CARD,
    Card,
    Square,
    square_id,
)

logger = logging.getLogger(__name__)


def now_ms() -> int:
    return time.time_ns() // 1_000_000


def generate_card(
    category_id: str,
    *,
    rng: random.Random | None = None,
    timestamp: int | None = None,
) -> Card:
    """Build a fresh card for *category_id*.

    Raises:
        UnknownCategory: no category is registered under *category_id*.
        InsufficientWordPool: the category has fewer than 24 words.
    """
    category = get_category(category_id)
    if category is None:
        raise UnknownCategory(category_id)
    if len(category.words) < WORDS_PER_CARD:
        raise InsufficientWordPool(category_id, len(category.words), WORDS_PER_CARD)

    rng = rng or random.SystemRandom()
    words = rng.sample(list(category.words), WORDS_PER_CARD)
    rng.shuffle(words)

    created_at = now_ms() if timestamp is None else timestamp
    remaining = iter(words)
    squares: list[list[Square]] = []
    for row in range(GRID_SIZE):
        cells = []
        for col in range(GRID_SIZE):
            if (row, col) == (CENTER, CENTER):
                cells.append(
                    Square(
                        id=square_id(row, col),
                        word=FREE_SPACE_WORD,
                        is_filled=True,
                        is_free_space=True,
                        filled_at=created_at,
                        row=row,
                        col=col,
                    )
                )
            else:
                cells.append(Square(id=square_id(row, col), word=next(remaining), row=row, col=col))
        squares.append(cells)

    logger.debug("Generated card for category %s", category_id)
    return Card(squares=squares, words=words)
