import os
import tempfile
from datetime import datetime

# Keep test logs out of the working tree; must run before lexi is imported
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="lexi-logs-"))

import pytest

from lexi import create_app
from lexi.config import TestingConfig
from lexi.services import (
    DailyWordSelector, DayClock, MemoryStore, PersistenceGateway,
    PuzzleStateMachine, StatsAggregator, WordBank,
)

TEST_WORDS = [
    "allow", "allot", "lowly", "lolly", "crane", "slate",
    "ghost", "fuzzy", "about", "plumb", "drink", "trust",
]

FIXED_NOW = datetime(2026, 10, 19, 9, 30)


@pytest.fixture
def clock():
    return DayClock(now=lambda: FIXED_NOW)


@pytest.fixture
def today(clock):
    return clock.today_number()


@pytest.fixture
def word_bank():
    return WordBank(TEST_WORDS)


@pytest.fixture
def selector(word_bank):
    return DailyWordSelector(word_bank)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def gateway(store):
    return PersistenceGateway(store)


@pytest.fixture
def stats(gateway):
    return StatsAggregator(gateway)


@pytest.fixture
def machine(word_bank, selector, gateway, stats, clock):
    return PuzzleStateMachine(word_bank, selector, gateway, stats, clock)


def wrong_words(word_bank, target, count):
    """First `count` bank words that are not the target."""
    words = [word for word in word_bank if word != target]
    assert len(words) >= count
    return words[:count]


@pytest.fixture
def app(clock):
    app, _ = create_app(TestingConfig, store=MemoryStore(), clock=clock)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
