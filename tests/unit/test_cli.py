"""End-to-end tests of the process entry point."""

import io

import pytest

from dbclients import cli
from dbclients.client import ClientFactory
from dbclients.resolution import initialize
from dbclients.types import Failure, Success

SUCCESS_DRAW = 0.5
FAILURE_DRAW = 0.05


@pytest.fixture
def run_main(monkeypatch, settings):
    """Run ``cli.main`` against a scripted fault injector."""

    def _run(faults):
        monkeypatch.setattr(cli, "get_settings", lambda: settings)
        monkeypatch.setattr(cli, "setup_logging", lambda level: None)
        monkeypatch.setattr(cli, "initialize", lambda s: initialize(s, faults))
        cli.main()

    return _run


class TestReport:

    def test_success_report(self):
        out, err = io.StringIO(), io.StringIO()
        clients = ClientFactory.create_pair("secret:readWriteUrl", "secret:readOnlyUrl")

        status = cli.report(Success(clients), out=out, err=err)

        assert status == 0
        assert out.getvalue().splitlines() == [
            "prisma.write is secret:readWriteUrl",
            "prisma.read is secret:readOnlyUrl",
        ]
        assert err.getvalue() == ""

    def test_failure_report_lists_every_message(self):
        out, err = io.StringIO(), io.StringIO()

        status = cli.report(Failure(("first", "second")), out=out, err=err)

        assert status == 1
        assert out.getvalue() == ""
        assert err.getvalue().splitlines() == [
            "Failed to initialize prisma:",
            "  - first",
            "  - second",
        ]


class TestMain:

    def test_scenario_all_succeed(self, run_main, make_faults, capsys):
        run_main(make_faults(SUCCESS_DRAW, SUCCESS_DRAW, SUCCESS_DRAW))

        captured = capsys.readouterr()
        assert "prisma.write is secret:readWriteUrl" in captured.out
        assert "prisma.read is secret:readOnlyUrl" in captured.out

    def test_scenario_provider_fails(self, run_main, make_faults, capsys, monkeypatch):
        def _no_clients(*args, **kwargs):
            raise AssertionError("clients must not be constructed")

        monkeypatch.setattr("dbclients.resolution.clients.ClientFactory.create_pair", _no_clients)

        with pytest.raises(SystemExit) as exc_info:
            run_main(make_faults(FAILURE_DRAW))

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert "SecretsManager initialization timed out" in captured.err
        assert "prisma." not in captured.out

    def test_scenario_second_fetch_fails(self, run_main, make_faults, capsys):
        with pytest.raises(SystemExit) as exc_info:
            run_main(make_faults(SUCCESS_DRAW, SUCCESS_DRAW, FAILURE_DRAW))

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        reported = [line for line in captured.err.splitlines() if line.startswith("  - ")]
        assert "Failed to initialize prisma:" in captured.err
        assert reported == ["  - Secret retrieval failed for readOnlyUrl"]
        assert captured.out == ""

    def test_invalid_configuration_exits_non_zero(self, monkeypatch, capsys):
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        monkeypatch.setattr("dbclients.settings.main._settings", None)

        with pytest.raises(SystemExit) as exc_info:
            cli.main()

        assert exc_info.value.code == 1
        assert "Invalid configuration" in capsys.readouterr().err
