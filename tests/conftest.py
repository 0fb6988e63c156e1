from __future__ import annotations

import random

import pytest

from meeting_bingo.services.persistence import GamePersistenceStore, InMemoryKeyValueStore
from meeting_bingo.services.state_machine import GameStateMachine
from tests.factories import STORAGE_KEY, FakeCapture, StepClock


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def persistence(kv_store: InMemoryKeyValueStore) -> GamePersistenceStore:
    return GamePersistenceStore(kv_store, key=STORAGE_KEY)


@pytest.fixture
def capture() -> FakeCapture:
    return FakeCapture()


@pytest.fixture
def clock() -> StepClock:
    return StepClock()


@pytest.fixture
def machine(persistence, capture, clock) -> GameStateMachine:
    return GameStateMachine.restore(persistence, capture, clock=clock, rng=random.Random(1234))
