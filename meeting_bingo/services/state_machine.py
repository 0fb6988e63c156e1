"""Game state machine — the single owner of the live card and found words.

Screens flow ``landing → category → game → win`` and back to
``category`` on play-again. Every accepted transition runs to completion
under one lock and then writes the derived snapshot through to the
persistence store. Transitions whose preconditions do not hold are
silent no-ops and return False.
"""

from __future__ import annotations

import logging
import random
import threading
from collections.abc import Callable

from meeting_bingo.data.categories import get_category
from meeting_bingo.models.card import GRID_SIZE, Card, WinningLine, square_id
from meeting_bingo.models.category import CategorySummary
from meeting_bingo.models.game import GameSnapshot, GameView, Screen
from meeting_bingo.services.card_generator import generate_card, now_ms
from meeting_bingo.services.persistence import GamePersistenceStore
from meeting_bingo.services.share import generate_share_text
from meeting_bingo.services.speech_capture import NullSpeechCapture, SpeechCapture
from meeting_bingo.services.win_detector import check_for_bingo
from meeting_bingo.services.word_matcher import detect_with_aliases

logger = logging.getLogger(__name__)

_IN_PLAY: tuple[Screen, ...] = ("game", "win")


class GameStateMachine:
    def __init__(
        self,
        persistence: GamePersistenceStore,
        capture: SpeechCapture | None = None,
        *,
        clock: Callable[[], int] = now_ms,
        rng: random.Random | None = None,
    ) -> None:
        self._lock = threading.RLock()
        self._persistence = persistence
        self._capture = capture or NullSpeechCapture()
        self._clock = clock
        self._rng = rng
        # Identifies the capture session whose deltas are accepted.
        self._capture_token: object | None = None

        self.screen: Screen = "landing"
        self.category_id: str | None = None
        self.card: Card | None = None
        self.found_words: set[str] = set()
        self.started_at: int | None = None
        self.winning_line: WinningLine | None = None
        self.speech_error: str | None = None
        self.persistence_ok = True

    @classmethod
    def restore(
        cls,
        persistence: GamePersistenceStore,
        capture: SpeechCapture | None = None,
        **kwargs,
    ) -> GameStateMachine:
        """Build a machine from whatever the store holds (startup path)."""
        machine = cls(persistence, capture, **kwargs)
        machine._reconcile(persistence.load())
        return machine

    # ── Transitions ──────────────────────────────────────────────────────

    def start(self) -> bool:
        with self._lock:
            if self.screen != "landing":
                return False
            self.screen = "category"
            self._commit()
            return True

    def select_category(self, category_id: str) -> bool:
        """Deal a fresh card for *category_id* and enter the game.

        Raises:
            UnknownCategory: before any state is touched.
        """
        with self._lock:
            if self.screen != "category":
                return False
            card = generate_card(category_id, rng=self._rng, timestamp=self._clock())
            self._begin_game(category_id, card)
            return True

    def enter_via_link(self, category_id: str) -> bool:
        """Direct category link: discard any stored game and start fresh.

        Raises:
            UnknownCategory: before any state is touched.
        """
        with self._lock:
            card = generate_card(category_id, rng=self._rng, timestamp=self._clock())
            if self.card is not None:
                logger.info("Category link replaces game in progress (%s)", self.category_id)
            self._persistence.clear()
            self._begin_game(category_id, card)
            return True

    def handle_transcript(self, text: str) -> list[str]:
        """Apply a final transcript delta; returns the newly found words."""
        with self._lock:
            return self._apply_transcript(text)

    def manual_toggle(self, sid: str) -> bool:
        with self._lock:
            if self.screen != "game" or self.card is None:
                return False
            square = self.card.find(sid)
            if square is None or square.is_free_space:
                return False

            filled = not square.is_filled
            updated = square.model_copy(
                update={
                    "is_filled": filled,
                    "is_auto_filled": False,
                    "filled_at": self._clock() if filled else None,
                }
            )
            word = square.word.lower()
            found = set(self.found_words)
            if filled:
                found.add(word)
            else:
                found.discard(word)

            self._replace_squares({sid: updated}, found)
            self._check_win()
            self._commit()
            return True

    def toggle_square_at(self, row: int, col: int) -> bool:
        if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
            return False
        return self.manual_toggle(square_id(row, col))

    def play_again(self) -> bool:
        """Drop the current card and go back to category selection."""
        with self._lock:
            if self.screen not in _IN_PLAY:
                return False
            self._stop_capture()
            self._persistence.clear()
            self.screen = "category"
            self.category_id = None
            self.card = None
            self.found_words = set()
            self.started_at = None
            self.winning_line = None
            self.speech_error = None
            self._commit()
            return True

    def start_listening(self) -> bool:
        with self._lock:
            if self.screen != "game" or not self._capture.supported:
                return False
            self.speech_error = None
            self._start_capture()
            return True

    def stop_listening(self) -> bool:
        with self._lock:
            self._stop_capture()
            return True

    def report_speech_error(self, message: str) -> None:
        """Record a speech failure as the visible status; capture stays stopped."""
        with self._lock:
            self._stop_capture()
            self.speech_error = message

    # ── Read side ────────────────────────────────────────────────────────

    def snapshot(self) -> GameSnapshot:
        with self._lock:
            return GameSnapshot(
                screen=self.screen,
                category=self.category_id,
                card=self.card,
                filled_words=sorted(self.found_words),
                started_at=self.started_at,
            )

    def view(self) -> GameView:
        with self._lock:
            category = get_category(self.category_id) if self.category_id else None
            speech = self._capture.state
            if self.speech_error and not speech.error:
                speech = speech.model_copy(update={"error": self.speech_error, "listening": False})
            return GameView(
                screen=self.screen,
                category=CategorySummary.from_category(category) if category else None,
                card=self.card,
                found_words=sorted(self.found_words),
                started_at=self.started_at,
                winning_line=self.winning_line,
                speech=speech,
                persistence_ok=self.persistence_ok,
            )

    def share_text(self, now: int | None = None) -> str | None:
        with self._lock:
            if not self.category_id or self.started_at is None:
                return None
            category = get_category(self.category_id)
            name = category.name if category else self.category_id
            filled = self.card.filled_count() if self.card else 0
            elapsed = (self._clock() if now is None else now) - self.started_at
            return generate_share_text(name, filled, elapsed)

    # ── Internals ────────────────────────────────────────────────────────

    def _begin_game(self, category_id: str, card: Card) -> None:
        self._stop_capture()
        self.category_id = category_id
        self.card = card
        self.found_words = set()
        self.winning_line = None
        self.started_at = self._clock()
        self.speech_error = None
        self.screen = "game"
        self._commit()
        logger.info("New %s game started", category_id)
        self._start_capture()

    def _apply_transcript(self, text: str) -> list[str]:
        if self.screen != "game" or self.card is None:
            return []
        detected = detect_with_aliases(text, self.card.words, self.found_words)
        if not detected:
            return []

        hits = set(detected)
        now = self._clock()
        updates = {
            sq.id: sq.model_copy(update={"is_filled": True, "is_auto_filled": True, "filled_at": now})
            for sq in self.card.iter_squares()
            if sq.word in hits and not sq.is_filled and not sq.is_free_space
        }
        found = self.found_words | {word.lower() for word in detected}

        self._replace_squares(updates, found)
        logger.info("Heard %s", ", ".join(detected))
        self._check_win()
        self._commit()
        return detected

    def _replace_squares(self, updates: dict, found: set[str]) -> None:
        # Card and found words are swapped in together.
        squares = [[updates.get(sq.id, sq) for sq in row] for row in self.card.squares]
        self.card = self.card.model_copy(update={"squares": squares})
        self.found_words = found

    def _check_win(self) -> None:
        if self.screen != "game" or self.card is None:
            return
        line = check_for_bingo(self.card.squares)
        if line is None:
            return
        self.winning_line = line
        self.screen = "win"
        self._stop_capture()
        logger.info("BINGO on %s %d", line.type, line.index)

    def _reconcile(self, snapshot: GameSnapshot) -> None:
        with self._lock:
            if snapshot.screen not in _IN_PLAY:
                self.screen = snapshot.screen
                return
            if snapshot.card is None:
                logger.warning("Stored %s screen has no card; back to category selection", snapshot.screen)
                self.screen = "category"
                self._commit()
                return

            self.screen = snapshot.screen
            self.category_id = snapshot.category
            self.card = snapshot.card
            self.started_at = snapshot.started_at
            self.found_words = snapshot.card.filled_words()
            repaired = self.found_words != {word.lower() for word in snapshot.filled_words}
            if repaired:
                logger.warning("Stored found words disagree with the card; using the card")

            self.winning_line = check_for_bingo(self.card.squares)
            if self.winning_line is not None and self.screen == "game":
                logger.info("Restored card already has a bingo; showing win screen")
                self.screen = "win"
            if repaired or self.screen != snapshot.screen:
                self._commit()

    def _start_capture(self) -> None:
        if not self._capture.supported:
            return
        token = object()
        self._capture_token = token
        self._capture.start(
            lambda text: self._on_capture_delta(token, text),
            lambda message: self._on_capture_error(token, message),
        )

    def _stop_capture(self) -> None:
        self._capture_token = None
        self._capture.stop()

    def _on_capture_delta(self, token: object, text: str) -> None:
        with self._lock:
            if token is not self._capture_token:
                logger.debug("Dropping transcript from a stopped capture session")
                return
            self._apply_transcript(text)

    def _on_capture_error(self, token: object, message: str) -> None:
        with self._lock:
            if token is not self._capture_token:
                return
            self._capture_token = None
            self.speech_error = message

    def _commit(self) -> None:
        self.persistence_ok = self._persistence.save(self.snapshot())
