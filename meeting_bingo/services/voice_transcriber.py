"""Voice transcription service.

Wraps the Mistral audio transcription endpoint for uploaded clips. The
resulting text is fed to the game as one final transcript delta.
"""

from __future__ import annotations

import logging

from meeting_bingo.config import settings
from meeting_bingo.errors import SpeechCaptureError
from meeting_bingo.services.mistral_client import get_client

logger = logging.getLogger(__name__)


def transcribe_audio(audio_bytes: bytes, mime_type: str = "audio/webm", client=None) -> str:
    """Transcribe an audio clip to text.

    Raises:
        SpeechCaptureError: transcription is unavailable or failed.
    """
    client = client if client is not None else get_client()
    if client is None:
        raise SpeechCaptureError("Speech transcription is not configured")
    if not audio_bytes:
        return ""

    try:
        response = client.audio.transcriptions.complete(
            model=settings.voxtral_model,
            file={"content": audio_bytes, "file_name": f"recording.{_ext(mime_type)}"},
            language=settings.locale.split("-")[0],
        )
    except Exception as exc:
        logger.exception("Voice transcription failed")
        raise SpeechCaptureError(f"Transcription failed: {exc}") from exc
    return response.text or ""


def _ext(mime: str) -> str:
    match mime:
        case "audio/webm":
            return "webm"
        case "audio/wav" | "audio/x-wav":
            return "wav"
        case "audio/mp3" | "audio/mpeg":
            return "mp3"
        case "audio/ogg":
            return "ogg"
        case _:
            return "webm"
