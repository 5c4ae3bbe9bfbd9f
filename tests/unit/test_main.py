"""Unit tests for the server entry point."""

import pytest
import pytest_check as check

from contact_extractor import main as entry
from contact_extractor.main import ServerOptions, ui_process_env


def _options(**overrides) -> ServerOptions:
    values = {
        "host": "0.0.0.0",
        "port": 8500,
        "ui_port": 8600,
        "log_level": "info",
        "mode": "separate",
    }
    values.update(overrides)
    return ServerOptions(**values)


class TestServerOptions:
    """Tests for environment-driven process settings."""

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOST", "127.0.0.1")
        monkeypatch.setenv("PORT", "9001")
        monkeypatch.setenv("UI_PORT", "9002")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("RUN_MODE", "Separate")

        options = ServerOptions.from_env()

        check.equal(options.host, "127.0.0.1")
        check.equal(options.port, 9001)
        check.equal(options.ui_port, 9002)
        check.equal(options.log_level, "debug")
        check.equal(options.mode, "separate")

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("HOST", "PORT", "UI_PORT", "LOG_LEVEL", "RUN_MODE"):
            monkeypatch.delenv(name, raising=False)

        options = ServerOptions.from_env()

        check.equal(options.port, 8000)
        check.equal(options.ui_port, 8080)
        check.equal(options.mode, "integrated")

    @pytest.mark.parametrize("host", ["0.0.0.0", "::", ""])
    def test_wildcard_host_maps_to_localhost(self, host: str) -> None:
        assert _options(host=host).api_base_url == "http://localhost:8500"

    def test_explicit_host_is_kept(self) -> None:
        assert _options(host="10.0.0.5").api_base_url == "http://10.0.0.5:8500"


def test_ui_process_env_points_at_configured_api(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """The UI child process reaches the API on the configured port."""
    monkeypatch.setenv("API_BASE_URL", "http://stale:1")
    monkeypatch.setenv("PREVIEW_LIMIT", "3")

    env = ui_process_env(_options())

    check.equal(env["API_BASE_URL"], "http://localhost:8500")
    check.equal(env["UI_PORT"], "8600")
    check.equal(env["PREVIEW_LIMIT"], "3")


class TestMain:
    """Tests for run-mode dispatch."""

    def test_unknown_mode_exits(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RUN_MODE", "cluster")

        with pytest.raises(SystemExit, match="Unknown RUN_MODE 'cluster'"):
            entry.main()

    @pytest.mark.parametrize(
        ("mode", "runner"),
        [("integrated", "run_integrated"), ("separate", "run_separate")],
    )
    def test_dispatches_by_mode(
        self, monkeypatch: pytest.MonkeyPatch, mode: str, runner: str
    ) -> None:
        calls: list[ServerOptions] = []
        monkeypatch.setenv("RUN_MODE", mode)
        monkeypatch.setenv("PORT", "8123")
        monkeypatch.setattr(entry, runner, calls.append)

        entry.main()

        assert len(calls) == 1
        check.equal(calls[0].mode, mode)
        check.equal(calls[0].port, 8123)
