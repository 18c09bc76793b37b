"""Pytest configuration and shared fixtures."""

import random
from datetime import datetime, timezone

import pytest

from countdown_app.app import CountdownApp
from countdown_app.config.defaults import get_default_config
from countdown_app.persistence.date_store import MemoryDateStore
from countdown_app.presentation.recording import RecordingView
from countdown_app.state.machine import Machine
from countdown_app.timing.clock import ManualClock
from countdown_app.timing.scheduler import ManualScheduler
from countdown_app.utils.time import from_timestamp_ms

START_MS = int(datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc).timestamp() * 1000)


@pytest.fixture
def clock() -> ManualClock:
    """Clock frozen at 2024-01-01 12:00 UTC until advanced."""
    return ManualClock(START_MS)


@pytest.fixture
def scheduler(clock: ManualClock) -> ManualScheduler:
    return ManualScheduler(clock)


@pytest.fixture
def store() -> MemoryDateStore:
    return MemoryDateStore()


@pytest.fixture
def view() -> RecordingView:
    return RecordingView()


@pytest.fixture
def config():
    return get_default_config()


@pytest.fixture
def machine(store, view, clock, scheduler, config) -> Machine:
    return Machine(
        store=store,
        view=view,
        clock=clock,
        scheduler=scheduler,
        config=config,
        rng=random.Random(7),
    )


@pytest.fixture
def app(store, view, clock, scheduler, config) -> CountdownApp:
    return CountdownApp(
        config=config,
        store=store,
        view=view,
        clock=clock,
        scheduler=scheduler,
        rng=random.Random(7),
    )


@pytest.fixture
def start_ms() -> int:
    return START_MS


@pytest.fixture
def at():
    """Build the datetime ``seconds`` after the clock's starting instant."""

    def _at(seconds: float):
        return from_timestamp_ms(START_MS + seconds * 1000)

    return _at
