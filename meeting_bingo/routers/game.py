"""Game flow endpoints — screens, transcript deltas, square toggles, sharing.

Transitions that do not apply to the current screen are ignored and the
unchanged view is returned.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from meeting_bingo.errors import UnknownCategory
from meeting_bingo.models.game import (
    GameView,
    SelectCategoryRequest,
    ShareResponse,
    TranscriptRequest,
)
from meeting_bingo.services.game_instance import get_machine
from meeting_bingo.services.state_machine import GameStateMachine

router = APIRouter(prefix="/api/game", tags=["game"])

Machine = Annotated[GameStateMachine, Depends(get_machine)]


@router.get("/", response_model=GameView)
def current(machine: Machine):
    """Current game view."""
    return machine.view()


@router.post("/start", response_model=GameView)
def start(machine: Machine):
    machine.start()
    return machine.view()


@router.post("/category", response_model=GameView)
def select_category(body: SelectCategoryRequest, machine: Machine):
    """Deal a new card for the chosen category."""
    try:
        machine.select_category(body.category_id)
    except UnknownCategory as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return machine.view()


@router.post("/enter", response_model=GameView)
def enter(category: str, machine: Machine):
    """Direct category link. Replaces any game in progress."""
    try:
        machine.enter_via_link(category)
    except UnknownCategory as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return machine.view()


@router.post("/transcript", response_model=GameView)
def transcript(body: TranscriptRequest, machine: Machine):
    """Feed a final transcript delta."""
    machine.handle_transcript(body.text)
    return machine.view()


@router.post("/squares/{square_id}/toggle", response_model=GameView)
def toggle_square(square_id: str, machine: Machine):
    machine.manual_toggle(square_id)
    return machine.view()


@router.post("/listening/start", response_model=GameView)
def start_listening(machine: Machine):
    machine.start_listening()
    return machine.view()


@router.post("/listening/stop", response_model=GameView)
def stop_listening(machine: Machine):
    machine.stop_listening()
    return machine.view()


@router.post("/play-again", response_model=GameView)
def play_again(machine: Machine):
    machine.play_again()
    return machine.view()


@router.get("/share", response_model=ShareResponse)
def share(machine: Machine):
    """Share text for the current game."""
    text = machine.share_text()
    if text is None:
        raise HTTPException(status_code=404, detail="No game to share yet.")
    return ShareResponse(text=text)
