"""Tests for one-shot, process-wide initialization."""

import pytest

from dbclients.common.exceptions import ClientInitError, ErrorCode
from dbclients.resolution import state
from dbclients.types import is_failure, is_success

SUCCESS_DRAW = 0.5
FAILURE_DRAW = 0.05


class TestInitialize:

    @pytest.mark.asyncio
    async def test_memoizes_both_results(self, settings, make_faults):
        faults = make_faults(SUCCESS_DRAW, SUCCESS_DRAW, SUCCESS_DRAW)

        first = await state.initialize(settings, faults)
        second = await state.initialize(settings, faults)

        assert is_success(first)
        assert second is first
        assert state.get_resolved_clients() is first
        assert is_success(state.get_resolved_secret_provider())
        # One draw for setup and one per secret; the second call drew nothing
        assert faults._random.calls == 3

    @pytest.mark.asyncio
    async def test_memoizes_failure(self, settings, make_faults):
        first = await state.initialize(settings, make_faults(FAILURE_DRAW))
        second = await state.initialize(settings, make_faults())

        assert is_failure(first)
        assert second is first
        assert state.get_resolved_secret_provider().messages == first.messages

    @pytest.mark.asyncio
    async def test_reset_allows_a_fresh_run(self, settings, make_faults):
        failed = await state.initialize(settings, make_faults(FAILURE_DRAW))
        state.reset()
        succeeded = await state.initialize(settings, make_faults(SUCCESS_DRAW, SUCCESS_DRAW, SUCCESS_DRAW))

        assert is_failure(failed)
        assert is_success(succeeded)

    @pytest.mark.asyncio
    async def test_uses_singleton_settings_when_omitted(self, settings, make_faults, monkeypatch):
        monkeypatch.setattr("dbclients.resolution.secrets.get_settings", lambda: settings)
        monkeypatch.setattr("dbclients.resolution.clients.get_settings", lambda: settings)
        result = await state.initialize(faults=make_faults(SUCCESS_DRAW, SUCCESS_DRAW, SUCCESS_DRAW))
        assert result.value.write.db == "secret:readWriteUrl"


class TestAccessBeforeInitialize:

    def test_clients_not_initialized(self):
        assert state.is_initialized() is False
        with pytest.raises(ClientInitError) as exc_info:
            state.get_resolved_clients()
        assert exc_info.value.error_code == ErrorCode.NOT_INITIALIZED

    def test_secret_provider_not_initialized(self):
        with pytest.raises(ClientInitError) as exc_info:
            state.get_resolved_secret_provider()
        assert exc_info.value.error_code == ErrorCode.NOT_INITIALIZED

    def test_import_has_no_side_effects(self):
        import importlib
        import dbclients

        importlib.reload(dbclients)
        assert state.is_initialized() is False


class TestInvalidConfiguration:

    @pytest.mark.asyncio
    async def test_initialize_returns_failure(self, monkeypatch):
        monkeypatch.setattr("dbclients.settings.main._settings", None)
        monkeypatch.setenv("CLIENT_ERROR_FORMAT", "fancy")

        result = await state.initialize()

        assert is_failure(result)
        assert "error_format" in result.messages[0]
        assert state.get_resolved_secret_provider() == result
