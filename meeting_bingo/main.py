"""FastAPI application — Meeting Bingo backend.

Start with::

    uvicorn meeting_bingo.main:app --reload --port 8000

Or::

    python -m meeting_bingo.main
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from meeting_bingo.config import settings
from meeting_bingo.routers import categories, game, voice
from meeting_bingo.services.game_instance import get_machine

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
)

app = FastAPI(
    title="Meeting Bingo API",
    description=(
        "Backend API for Meeting Bingo — turns a live meeting transcript "
        "into progress on a 5×5 buzzword card. Provides category listing, "
        "card dealing, transcript word detection, manual square toggles, "
        "win detection, resumable game state, and share text."
    ),
    version="1.0.0",
)

# Local frontend dev servers
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Register route modules ──────────────────────────────────────────────
app.include_router(categories.router)
app.include_router(game.router)
app.include_router(voice.router)


@app.on_event("startup")
async def _startup() -> None:
    machine = get_machine()
    logging.getLogger(__name__).info("Game state loaded (%s) — server ready", machine.screen)


@app.get("/api/health")
async def health():
    """Simple health-check endpoint."""
    return {"status": "ok", "speech_configured": bool(settings.mistral_api_key)}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "meeting_bingo.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
