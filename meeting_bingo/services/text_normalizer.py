"""Canonical text form used for buzzword matching."""

from __future__ import annotations

import re

# Anything that is not a letter, digit or whitespace. ``\w`` also admits
# the underscore, so it is listed separately.
_NON_WORD = re.compile(r"[^\w\s]|_")
_WHITESPACE = re.compile(r"\s+")


def normalize(text: str) -> str:
    """Lower-case *text*, turn punctuation into spaces, collapse whitespace.

    >>> normalize("  Hello,   World!  ")
    'hello world'
    """
    if not text:
        return ""
    lowered = _NON_WORD.sub(" ", text.lower())
    return _WHITESPACE.sub(" ", lowered).strip()
