"""Voice transcription endpoint."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile

from meeting_bingo.errors import SpeechCaptureError
from meeting_bingo.models.card import CamelModel
from meeting_bingo.models.game import GameView
from meeting_bingo.services.game_instance import get_machine
from meeting_bingo.services.state_machine import GameStateMachine
from meeting_bingo.services.voice_transcriber import transcribe_audio

router = APIRouter(prefix="/api/voice", tags=["voice"])

Machine = Annotated[GameStateMachine, Depends(get_machine)]


class TranscribeResponse(CamelModel):
    text: str = ""
    detected: list[str] = []
    error: str | None = None
    game: GameView


@router.post("/transcribe", response_model=TranscribeResponse)
def transcribe(machine: Machine, file: UploadFile = File(...)):
    """Transcribe an audio clip and feed it to the game as one delta."""
    audio_bytes = file.file.read()
    try:
        text = transcribe_audio(audio_bytes, mime_type=file.content_type or "audio/webm")
    except SpeechCaptureError as exc:
        machine.report_speech_error(str(exc))
        return TranscribeResponse(error=str(exc), game=machine.view())
    detected = machine.handle_transcript(text)
    return TranscribeResponse(text=text, detected=detected, game=machine.view())
