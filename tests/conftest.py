"""Shared test fixtures."""

import random

import pytest

from tests.fakes import FakeClock, RecordingPerformer


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(now=1_000.0)


@pytest.fixture
def performer() -> RecordingPerformer:
    return RecordingPerformer()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
