"""Share text for a finished game."""

from __future__ import annotations

from meeting_bingo.models.card import WORDS_PER_CARD

_TIERS = ((20, "🏆"), (15, "🎯"))
_BASE_TIER = "🎲"


def tier_emoji(filled_count: int) -> str:
    return next((emoji for threshold, emoji in _TIERS if filled_count >= threshold), _BASE_TIER)


def generate_share_text(category_name: str, filled_count: int, elapsed_ms: int) -> str:
    """Build the text block posted when a player shares their bingo."""
    minutes = max(elapsed_ms, 0) // 60_000
    return (
        f"{tier_emoji(filled_count)} Meeting Bingo!\n"
        f"I got BINGO in {minutes} min playing {category_name}!\n"
        f"{filled_count}/{WORDS_PER_CARD} squares filled\n"
        "\n"
        "#MeetingBingo"
    )
