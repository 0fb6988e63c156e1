"""Speech capture drivers.

A driver turns microphone audio into *final* transcript deltas and
hands them to a callback. The game only ever sets intent (start/stop)
and reacts to the deltas and errors the driver reports.
"""

from __future__ import annotations

import asyncio
import logging
import re
import threading
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Callable
from typing import Any

from meeting_bingo.config import settings
from meeting_bingo.models.game import SpeechSessionState
from meeting_bingo.services.mistral_client import get_client

logger = logging.getLogger(__name__)

DeltaCallback = Callable[[str], None]
ErrorCallback = Callable[[str], None]
AudioSource = Callable[[Callable[[], bool]], AsyncIterator[bytes]]

# A buffered segment is final once it ends a sentence.
_SEGMENT_END = re.compile(r"[.!?\n]\s*$")
_RESTART_DELAY_S = 0.25


class SpeechCapture(ABC):
    """Interface the game uses to drive a capture session."""

    @property
    @abstractmethod
    def supported(self) -> bool: ...

    @property
    @abstractmethod
    def state(self) -> SpeechSessionState: ...

    @abstractmethod
    def start(self, on_final_delta: DeltaCallback, on_error: ErrorCallback | None = None) -> None:
        """Begin delivering final transcript deltas to *on_final_delta*."""

    @abstractmethod
    def stop(self) -> None:
        """Stop delivery. Safe to call when not started; idempotent."""


class NullSpeechCapture(SpeechCapture):
    """Driver for environments without speech recognition."""

    @property
    def supported(self) -> bool:
        return False

    @property
    def state(self) -> SpeechSessionState:
        return SpeechSessionState(supported=False)

    def start(self, on_final_delta: DeltaCallback, on_error: ErrorCallback | None = None) -> None:
        return

    def stop(self) -> None:
        return


def microphone_source(sample_rate: int, chunk_duration_ms: int) -> AudioSource:
    """Return an audio source yielding 16-bit mono PCM chunks via PyAudio."""

    async def _iter(keep_running: Callable[[], bool]) -> AsyncIterator[bytes]:
        import pyaudio

        p = pyaudio.PyAudio()
        chunk_samples = int(sample_rate * chunk_duration_ms / 1000)
        stream = p.open(
            format=pyaudio.paInt16,
            channels=1,
            rate=sample_rate,
            input=True,
            frames_per_buffer=chunk_samples,
        )
        loop = asyncio.get_running_loop()
        try:
            while keep_running():
                # stream.read is blocking; run it off-thread
                data = await loop.run_in_executor(None, stream.read, chunk_samples, False)
                yield data
        finally:
            stream.stop_stream()
            stream.close()
            p.terminate()

    return _iter


class MistralRealtimeCapture(SpeechCapture):
    """Streams microphone audio to Mistral realtime transcription.

    The stream runs on a background thread with its own event loop.
    ``_should_listen`` is the caller's intent; ``state.listening`` is
    what is actually happening. When the stream ends on its own while
    the intent is still set, it is restarted. Every start/stop bumps a
    generation counter, and text from an older generation is dropped.
    """

    def __init__(
        self,
        client: Any = None,
        audio_source: AudioSource | None = None,
        *,
        model: str | None = None,
        sample_rate: int | None = None,
        chunk_duration_ms: int | None = None,
    ) -> None:
        self._client = client if client is not None else get_client()
        self._model = model or settings.voxtral_realtime_model
        self._sample_rate = sample_rate or settings.audio_sample_rate
        self._audio_source = audio_source or microphone_source(
            self._sample_rate, chunk_duration_ms or settings.audio_chunk_ms
        )
        self._lock = threading.Lock()
        self._generation = 0
        self._should_listen = False
        self._on_delta: DeltaCallback | None = None
        self._on_error: ErrorCallback | None = None
        self._thread: threading.Thread | None = None
        self._state = SpeechSessionState(supported=self._client is not None)

    @property
    def supported(self) -> bool:
        return self._client is not None

    @property
    def state(self) -> SpeechSessionState:
        with self._lock:
            return self._state.model_copy()

    @property
    def should_listen(self) -> bool:
        return self._should_listen

    def start(self, on_final_delta: DeltaCallback, on_error: ErrorCallback | None = None) -> None:
        with self._lock:
            if not self.supported:
                return
            self._generation += 1
            generation = self._generation
            self._should_listen = True
            self._on_delta = on_final_delta
            self._on_error = on_error
            self._state = self._state.model_copy(
                update={"listening": True, "transcript": "", "interim_transcript": "", "error": None}
            )
        self._thread = threading.Thread(
            target=self._run, args=(generation,), name="speech-capture", daemon=True
        )
        self._thread.start()
        logger.info("Speech capture started (generation %d)", generation)

    def stop(self) -> None:
        with self._lock:
            if not self._should_listen and not self._state.listening:
                return
            self._should_listen = False
            self._generation += 1
            self._on_delta = None
            self._on_error = None
            self._state = self._state.model_copy(update={"listening": False, "interim_transcript": ""})
        logger.info("Speech capture stopped")

    # ── Stream handling ──────────────────────────────────────────────────

    def _is_current(self, generation: int) -> bool:
        return self._should_listen and generation == self._generation

    def _run(self, generation: int) -> None:
        asyncio.run(self._stream(generation))

    async def _stream(self, generation: int) -> None:
        from mistralai.models import (
            AudioFormat,
            RealtimeTranscriptionError,
            TranscriptionStreamDone,
            TranscriptionStreamTextDelta,
        )

        audio_format = AudioFormat(encoding="pcm_s16le", sample_rate=self._sample_rate)
        while self._is_current(generation):
            try:
                async for event in self._client.audio.realtime.transcribe_stream(
                    audio_stream=self._audio_source(lambda: self._is_current(generation)),
                    model=self._model,
                    audio_format=audio_format,
                ):
                    if not self._is_current(generation):
                        return
                    if isinstance(event, TranscriptionStreamTextDelta):
                        self._on_text(generation, event.text)
                    elif isinstance(event, TranscriptionStreamDone):
                        self._flush(generation)
                    elif isinstance(event, RealtimeTranscriptionError):
                        self._on_failure(generation, str(event))
                        return
            except Exception as exc:
                logger.exception("Realtime transcription stream failed")
                self._on_failure(generation, str(exc))
                return
            self._flush(generation)
            if self._is_current(generation):
                logger.info("Transcription stream ended while listening; restarting")
                await asyncio.sleep(_RESTART_DELAY_S)

    def _on_text(self, generation: int, text: str) -> None:
        with self._lock:
            if not self._is_current(generation):
                return
            interim = self._state.interim_transcript + text
            self._state = self._state.model_copy(update={"interim_transcript": interim})
            final = _SEGMENT_END.search(interim) is not None
        if final:
            self._flush(generation)

    def _flush(self, generation: int) -> None:
        with self._lock:
            if not self._is_current(generation):
                return
            segment = self._state.interim_transcript
            if not segment.strip():
                return
            self._state = self._state.model_copy(
                update={"transcript": self._state.transcript + segment, "interim_transcript": ""}
            )
            callback = self._on_delta
        # Called outside the lock: the callback may call stop(). A stop() racing
        # this check can still see one delivery, so consumers gate on their own session.
        if callback is not None and self._is_current(generation):
            callback(segment)

    def _on_failure(self, generation: int, message: str) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self._should_listen = False
            self._state = self._state.model_copy(
                update={"listening": False, "interim_transcript": "", "error": message}
            )
            callback = self._on_error
            self._on_delta = None
            self._on_error = None
        logger.warning("Speech capture error: %s", message)
        if callback is not None:
            callback(message)
