from __future__ import annotations

import random

import pytest

from meeting_bingo.data.categories import CATEGORIES, get_category
from meeting_bingo.errors import InsufficientWordPool, UnknownCategory
from meeting_bingo.models.card import FREE_SPACE_WORD, Card
from meeting_bingo.models.category import Category
from meeting_bingo.services import card_generator
from meeting_bingo.services.card_generator import generate_card


def _layout(card: Card) -> list[str]:
    return [sq.word for row in card.squares for sq in row]


class TestGridStructure:
    def test_five_by_five(self) -> None:
        card = generate_card("agile")
        assert len(card.squares) == 5
        assert all(len(row) == 5 for row in card.squares)

    def test_square_ids_follow_position(self) -> None:
        card = generate_card("agile")
        ids = [sq.id for row in card.squares for sq in row]
        assert len(set(ids)) == 25
        for r, row in enumerate(card.squares):
            for c, sq in enumerate(row):
                assert sq.id == f"{r}-{c}"
                assert (sq.row, sq.col) == (r, c)


class TestFreeSpace:
    def test_single_free_space_at_center(self) -> None:
        card = generate_card("agile", timestamp=42)
        free = [sq for sq in card.iter_squares() if sq.is_free_space]
        assert len(free) == 1
        center = card.squares[2][2]
        assert center.is_free_space
        assert center.is_filled
        assert not center.is_auto_filled
        assert center.word == FREE_SPACE_WORD
        assert center.filled_at == 42

    def test_other_squares_start_empty(self) -> None:
        card = generate_card("tech")
        for sq in card.iter_squares():
            if sq.is_free_space:
                continue
            assert not sq.is_filled
            assert not sq.is_auto_filled
            assert sq.filled_at is None


class TestWordSelection:
    @pytest.mark.parametrize("category", CATEGORIES, ids=lambda c: c.id)
    def test_24_unique_words_from_the_pool(self, category: Category) -> None:
        card = generate_card(category.id)
        words = [sq.word for sq in card.iter_squares() if not sq.is_free_space]
        assert len(words) == 24
        assert len(set(words)) == 24
        assert sorted(words) == sorted(card.words)
        assert set(words) <= set(category.words)

    def test_consecutive_cards_differ(self) -> None:
        layouts = {tuple(_layout(generate_card("agile"))) for _ in range(5)}
        assert len(layouts) > 1

    def test_seeded_rng_is_reproducible(self) -> None:
        first = generate_card("corporate", rng=random.Random(7))
        second = generate_card("corporate", rng=random.Random(7))
        assert _layout(first) == _layout(second)


class TestFailures:
    def test_unknown_category(self) -> None:
        with pytest.raises(UnknownCategory):
            generate_card("no-such-category")

    def test_small_pool(self, monkeypatch: pytest.MonkeyPatch) -> None:
        tiny = Category(id="tiny", name="Tiny", words=tuple(f"w{i}" for i in range(23)))
        monkeypatch.setattr(card_generator, "get_category", lambda cid: tiny if cid == "tiny" else None)
        with pytest.raises(InsufficientWordPool) as exc_info:
            generate_card("tiny")
        assert exc_info.value.pool_size == 23


def test_shipped_pools_are_large_enough() -> None:
    for category in CATEGORIES:
        assert len(category.words) >= 24
        assert len({w.lower() for w in category.words}) == len(category.words)
        assert get_category(category.id) is category
