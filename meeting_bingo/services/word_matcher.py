"""Buzzword detection in transcript fragments.

Matching works on normalised text: a single word must appear as a whole
word (``sprint`` never fires on ``sprinting``) and a phrase must appear
as a contiguous run of whole words. Candidates are always treated as
literal text.
"""

from __future__ import annotations

import re
from collections.abc import Collection, Iterable, Sequence
from functools import lru_cache

from meeting_bingo.services.text_normalizer import normalize

# Keyed by the *normalised* candidate ("ci/cd" -> "ci cd").
WORD_ALIASES: dict[str, tuple[str, ...]] = {
    "ci cd": ("continuous integration", "cicd", "continuous deployment"),
    "mvp": ("minimum viable product",),
    "roi": ("return on investment",),
    "kpi": ("key performance indicator", "key performance indicators"),
    "sla": ("service level agreement",),
    "api": ("application programming interface",),
    "a b test": ("ab test", "split test"),
    "pos": ("point of sale",),
}


@lru_cache(maxsize=1024)
def _word_pattern(word: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(word)}\b")


def _contains_phrase(fragment: str, phrase: str) -> bool:
    # Both sides are normalised: words separated by exactly one space.
    return f" {phrase} " in f" {fragment} "


def _matches(fragment: str, candidate: str) -> bool:
    if not candidate:
        return False
    if " " in candidate:
        return _contains_phrase(fragment, candidate)
    return _word_pattern(candidate).search(fragment) is not None


def _pending(candidates: Iterable[str], already_found: Collection[str]) -> list[str]:
    found = {w.lower() for w in already_found}
    return [c for c in candidates if c.lower() not in found]


def detect(
    fragment: str,
    candidates: Sequence[str],
    already_found: Collection[str] = (),
) -> list[str]:
    """Return the candidates spoken in *fragment*, in candidate order.

    Candidates already in *already_found* (case-insensitive) are skipped.
    The original candidate strings are returned, casing preserved.
    """
    text = normalize(fragment)
    if not text:
        return []
    return [c for c in _pending(candidates, already_found) if _matches(text, normalize(c))]


def detect_with_aliases(
    fragment: str,
    candidates: Sequence[str],
    already_found: Collection[str] = (),
) -> list[str]:
    """Like :func:`detect`, but an alias phrase also counts for its candidate."""
    detected = detect(fragment, candidates, already_found)
    text = normalize(fragment)
    if not text:
        return detected

    hits = set(detected)
    for candidate in _pending(candidates, already_found):
        if candidate in hits:
            continue
        aliases = WORD_ALIASES.get(normalize(candidate), ())
        if any(_contains_phrase(text, alias) for alias in aliases):
            detected.append(candidate)
            hits.add(candidate)
    return detected
