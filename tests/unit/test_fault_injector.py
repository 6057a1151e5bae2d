"""Tests for the fault injection hooks of the simulated secrets manager."""

import pytest

from dbclients.common.exceptions import ErrorCode, SecretRetrievalError, SimulatedFaultError
from dbclients.secret_vault import FaultInjector, no_faults
from dbclients.settings import SecretsManagerSettings


def _injector(draw: float, **kwargs) -> FaultInjector:
    return FaultInjector(random_source=lambda: draw, **kwargs)


class TestFailureWindow:
    """A draw fails only when strictly inside the window."""

    @pytest.mark.parametrize("draw", [0.0, 0.005, 0.01, 0.11, 0.5, 0.999])
    def test_draws_outside_window_pass(self, draw):
        assert _injector(draw).should_fail() is False

    @pytest.mark.parametrize("draw", [0.0100001, 0.05, 0.1099999])
    def test_draws_inside_window_fail(self, draw):
        assert _injector(draw).should_fail() is True

    def test_custom_window(self):
        assert _injector(0.7, window_low=0.6, window_high=0.8).should_fail() is True
        assert _injector(0.05, window_low=0.6, window_high=0.8).should_fail() is False

    def test_invalid_window_is_rejected(self):
        with pytest.raises(ValueError):
            FaultInjector(window_low=0.5, window_high=0.5)

    def test_disabled_injector_never_draws(self):
        def _draw():
            raise AssertionError("random source must not be consulted")

        injector = FaultInjector(random_source=_draw, enabled=False)
        assert injector.should_fail() is False
        injector.maybe_fail("never raised")


class TestMaybeFail:

    def test_raises_simulated_fault_with_descriptor(self):
        with pytest.raises(SimulatedFaultError) as exc_info:
            _injector(0.05).maybe_fail("something timed out")
        assert exc_info.value.message == "something timed out"
        assert exc_info.value.error_code == ErrorCode.SIMULATED_FAULT

    def test_uses_error_factory(self):
        with pytest.raises(SecretRetrievalError):
            _injector(0.05).maybe_fail("lookup failed", SecretRetrievalError)

    def test_no_raise_outside_window(self):
        _injector(0.5).maybe_fail("not raised")


class TestWait:

    @pytest.mark.asyncio
    async def test_wait_uses_injected_sleep(self):
        delays = []

        async def _sleep(seconds):
            delays.append(seconds)

        injector = FaultInjector(sleep=_sleep)
        await injector.wait(3.0)
        await injector.wait(0.0)
        assert delays == [3.0]

    @pytest.mark.asyncio
    async def test_no_faults_is_instant_and_safe(self):
        injector = no_faults()
        await injector.wait(3.0)
        assert injector.should_fail() is False


def test_from_settings_copies_window():
    settings = SecretsManagerSettings(
        failure_window_low=0.2,
        failure_window_high=0.3,
        fault_injection_enabled=False,
    )
    injector = FaultInjector.from_settings(settings)
    assert injector.window_low == 0.2
    assert injector.window_high == 0.3
    assert injector.enabled is False
