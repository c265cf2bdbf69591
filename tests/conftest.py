"""Shared fixtures."""

import pytest

from unifrng import Engine
from unifrng.core import random as default_engine


@pytest.fixture
def engine():
    return Engine()


@pytest.fixture
def fixed_time_seed(monkeypatch):
    """Pin the time-derived seed so re-seeding paths are reproducible."""
    seed = 20171107
    monkeypatch.setattr("unifrng.core.timeseed.time_seed", lambda: seed)
    return seed


@pytest.fixture(autouse=True)
def fresh_default_engine():
    previous = default_engine.set_engine(None)
    yield
    default_engine.set_engine(previous)
