import asyncio
from typing import Dict, Iterable, List, Optional

import pytest

from dbclients.resolution import state
from dbclients.secret_vault import FaultInjector
from dbclients.settings import ClientSettings, SecretsManagerSettings, Settings


class ScriptedRandom:
    """Random source that replays a fixed sequence of draws."""

    def __init__(self, draws: Iterable[float]):
        self._draws = list(draws)
        self.calls = 0

    def __call__(self) -> float:
        if self.calls >= len(self._draws):
            raise AssertionError(f"Unexpected draw #{self.calls + 1}")
        draw = self._draws[self.calls]
        self.calls += 1
        return draw


class RecordingSleep:
    """Async sleep replacement that records requested delays."""

    def __init__(self):
        self.delays: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


class RecordingProvider:
    """Secret provider that records every requested key."""

    def __init__(self, values: Optional[Dict[str, str]] = None, fail_on: Iterable[str] = ()):
        self.values = values or {}
        self.fail_on = set(fail_on)
        self.calls: List[str] = []

    async def get_secret(self, key: str) -> str:
        self.calls.append(key)
        if key in self.fail_on:
            raise RuntimeError(f"backend refused {key}")
        return self.values.get(key, f"secret:{key}")


class SlowProvider:
    """Secret provider whose lookups take longer than any test timeout."""

    def __init__(self, delay: float = 1.0):
        self.delay = delay

    async def get_secret(self, key: str) -> str:
        await asyncio.sleep(self.delay)
        return f"secret:{key}"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate every test from process state and the host environment."""
    monkeypatch.delenv("DBCLIENTS_TEST_MODE", raising=False)
    state.reset()
    yield
    state.reset()


@pytest.fixture
def settings() -> Settings:
    """Settings with the simulated delays disabled."""
    return Settings(
        secrets=SecretsManagerSettings(setup_delay_seconds=0.0, fetch_delay_seconds=0.0),
        client=ClientSettings(),
    )


@pytest.fixture
def make_faults():
    """Build a fault injector replaying the given draws."""

    def _make(*draws: float) -> FaultInjector:
        return FaultInjector(sleep=RecordingSleep(), random_source=ScriptedRandom(draws))

    return _make


@pytest.fixture
def recording_provider():
    return RecordingProvider


@pytest.fixture
def slow_provider():
    return SlowProvider
