# tests/conftest.py
import random
from datetime import datetime, timedelta, timezone

import pytest

from agents.assistant.agent import AssistantAgent
from core.config import Settings
from core.store import ReadingStore

class FixedClock:
    """Clock that only moves when told to"""

    def __init__(self, start: datetime = datetime(2025, 12, 1, 6, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)

@pytest.fixture
def settings():
    return Settings(_env_file=None)

@pytest.fixture
def clock():
    return FixedClock()

@pytest.fixture
def store(clock):
    return ReadingStore(clock=clock, rng=random.Random(7))

@pytest.fixture
def assistant(settings, store):
    return AssistantAgent(settings, store=store)

def make_assistant(settings: Settings) -> AssistantAgent:
    """Fresh assistant over a store with a fixed clock"""
    return AssistantAgent(settings, store=ReadingStore(clock=FixedClock(), rng=random.Random(7)))
