"""Thin wrapper around the Mistral Python SDK.

Provides the singleton client used by the speech services. Without an
API key there is no client and voice features report themselves as
unsupported; manual play keeps working.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from mistralai import Mistral

from meeting_bingo.config import settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_client() -> Any:
    """Return a lazily-initialised Mistral client (or *None* without a key)."""
    if not settings.mistral_api_key:
        logger.info("No MISTRAL_API_KEY configured; speech capture disabled")
        return None
    return Mistral(api_key=settings.mistral_api_key)
