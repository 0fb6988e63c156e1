from __future__ import annotations

import random

import pytest
from fastapi.testclient import TestClient

from meeting_bingo.errors import SpeechCaptureError
from meeting_bingo.main import app
from meeting_bingo.routers import voice
from meeting_bingo.services.game_instance import get_machine
from meeting_bingo.services.state_machine import GameStateMachine
from tests.factories import START_MS, make_card, seed_snapshot


@pytest.fixture
def client(machine: GameStateMachine):
    app.dependency_overrides[get_machine] = lambda: machine
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def in_game(kv_store, persistence, capture, clock) -> GameStateMachine:
    seed_snapshot(kv_store, screen="game", category="agile", card=make_card(), started_at=START_MS)
    return GameStateMachine.restore(persistence, capture, clock=clock, rng=random.Random(7))


@pytest.fixture
def game_client(in_game: GameStateMachine):
    app.dependency_overrides[get_machine] = lambda: in_game
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestCategoriesApi:
    def test_lists_all_packs(self, client: TestClient) -> None:
        resp = client.get("/api/categories/")
        assert resp.status_code == 200
        ids = [c["id"] for c in resp.json()]
        assert ids[:3] == ["agile", "corporate", "tech"]
        assert all(c["wordCount"] >= 24 for c in resp.json())
        assert "words" not in resp.json()[0]


class TestGameFlowApi:
    def test_landing_to_game(self, client: TestClient) -> None:
        assert client.get("/api/game/").json()["screen"] == "landing"
        assert client.post("/api/game/start").json()["screen"] == "category"

        body = client.post("/api/game/category", json={"categoryId": "tech"}).json()
        assert body["screen"] == "game"
        assert body["category"]["id"] == "tech"
        squares = body["card"]["squares"]
        assert len(squares) == 5
        assert squares[2][2]["isFreeSpace"] is True
        assert body["speech"]["listening"] is True

    def test_unknown_category_is_404(self, client: TestClient) -> None:
        client.post("/api/game/start")
        resp = client.post("/api/game/category", json={"categoryId": "nope"})
        assert resp.status_code == 404
        assert client.get("/api/game/").json()["screen"] == "category"

    def test_direct_entry(self, client: TestClient) -> None:
        assert client.post("/api/game/enter", params={"category": "corporate"}).json()["screen"] == "game"
        assert client.post("/api/game/enter", params={"category": "bogus"}).status_code == 404

    def test_transcript_and_toggle(self, game_client: TestClient) -> None:
        body = game_client.post("/api/game/transcript", json={"text": "word00 and word01"}).json()
        assert body["foundWords"] == ["word00", "word01"]

        body = game_client.post("/api/game/squares/0-0/toggle").json()
        assert body["foundWords"] == ["word01"]
        assert body["card"]["squares"][0][0]["isFilled"] is False

    def test_win_share_and_play_again(self, game_client: TestClient) -> None:
        body = game_client.post("/api/game/transcript", json={"text": "word10 word11 word12 word13 word14"}).json()
        assert body["screen"] == "win"
        assert body["winningLine"] == {
            "type": "row",
            "index": 1,
            "squares": ["1-0", "1-1", "1-2", "1-3", "1-4"],
        }

        share = game_client.get("/api/game/share")
        assert share.status_code == 200
        assert "5/24 squares filled" in share.json()["text"]

        assert game_client.post("/api/game/play-again").json()["screen"] == "category"
        assert game_client.get("/api/game/share").status_code == 404

    def test_view_is_camel_case(self, game_client: TestClient) -> None:
        body = game_client.get("/api/game/").json()
        assert set(body) == {
            "screen",
            "category",
            "card",
            "foundWords",
            "startedAt",
            "winningLine",
            "speech",
            "persistenceOk",
        }
        assert "interimTranscript" in body["speech"]
        assert "wordCount" in body["category"]

    def test_snake_case_request_body_still_accepted(self, client: TestClient) -> None:
        client.post("/api/game/start")
        assert client.post("/api/game/category", json={"category_id": "agile"}).json()["screen"] == "game"

    def test_listening_toggles(self, game_client: TestClient) -> None:
        assert game_client.post("/api/game/listening/start").json()["speech"]["listening"] is True
        assert game_client.post("/api/game/listening/stop").json()["speech"]["listening"] is False


class TestVoiceApi:
    def test_transcribed_clip_fills_squares(self, game_client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(voice, "transcribe_audio", lambda audio, mime_type="audio/webm": "so word22 and word44")
        resp = game_client.post(
            "/api/voice/transcribe", files={"file": ("clip.webm", b"\x00\x01", "audio/webm")}
        )
        body = resp.json()
        assert resp.status_code == 200
        assert body["detected"] == ["word44"]
        assert body["error"] is None
        assert "word44" in body["game"]["foundWords"]

    def test_failure_is_reported(self, game_client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
        def _fail(audio, mime_type="audio/webm"):
            raise SpeechCaptureError("Speech transcription is not configured")

        monkeypatch.setattr(voice, "transcribe_audio", _fail)
        body = game_client.post(
            "/api/voice/transcribe", files={"file": ("clip.webm", b"\x00", "audio/webm")}
        ).json()
        assert body["error"] == "Speech transcription is not configured"
        assert body["game"]["speech"]["error"] == body["error"]


def test_health(client: TestClient) -> None:
    assert client.get("/api/health").json()["status"] == "ok"
