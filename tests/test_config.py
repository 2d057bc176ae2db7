"""Tests for core.config.Settings and the process entry point."""
from __future__ import annotations

import pytest

import main
from core.config import Settings
from core.errors import ConfigurationError


def test_defaults() -> None:
    settings = Settings.from_env({"TMDB_ACCESS_TOKEN": "abc"})
    assert settings == Settings(access_token="abc")
    assert settings.base_url == "https://api.themoviedb.org/3"
    assert settings.transport == "stdio"


@pytest.mark.parametrize("environ", [{}, {"TMDB_ACCESS_TOKEN": ""}, {"TMDB_ACCESS_TOKEN": "   "}])
def test_missing_token_is_fatal(environ: dict[str, str]) -> None:
    with pytest.raises(ConfigurationError, match="TMDB_ACCESS_TOKEN"):
        Settings.from_env(environ)


def test_overrides() -> None:
    settings = Settings.from_env({
        "TMDB_ACCESS_TOKEN": "abc",
        "TMDB_API_BASE_URL": "http://localhost:8080/3/",
        "MCP_TRANSPORT": "HTTP",
        "HOST": "0.0.0.0",
        "PORT": "8000",
        "LOG_LEVEL": "debug",
    })
    assert settings.base_url == "http://localhost:8080/3"
    assert settings.transport == "http"
    assert (settings.host, settings.port) == ("0.0.0.0", 8000)
    assert settings.log_level == "DEBUG"


def test_unknown_transport_is_rejected() -> None:
    with pytest.raises(ConfigurationError, match="MCP_TRANSPORT"):
        Settings.from_env({"TMDB_ACCESS_TOKEN": "abc", "MCP_TRANSPORT": "websocket"})


def test_non_numeric_port_is_rejected() -> None:
    with pytest.raises(ConfigurationError, match="PORT"):
        Settings.from_env({"TMDB_ACCESS_TOKEN": "abc", "PORT": "eighty"})


def test_main_refuses_to_start_without_token(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.delenv("TMDB_ACCESS_TOKEN", raising=False)
    monkeypatch.setattr(main, "load_dotenv", lambda: False)
    started = []
    monkeypatch.setattr(main, "run_server", lambda *a, **kw: started.append(True))

    assert main.main([]) == 1
    assert "TMDB_ACCESS_TOKEN" in capsys.readouterr().err
    assert started == []


def test_main_serves_with_cli_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("MCP_TRANSPORT", "HOST", "PORT", "TMDB_API_BASE_URL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("TMDB_ACCESS_TOKEN", "abc")
    monkeypatch.setattr(main, "load_dotenv", lambda: False)
    monkeypatch.setattr(main, "configure_logging", lambda level: None)
    calls = []
    monkeypatch.setattr(main, "run_server", lambda server, **kw: calls.append((server, kw)))

    assert main.main(["--transport", "http", "--port", "9000"]) == 0

    server, kwargs = calls[0]
    assert server.name == "tmdb-mcp-server"
    assert kwargs == {"transport": "http", "host": "127.0.0.1", "port": 9000}


def test_main_honours_explicit_falsy_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TMDB_ACCESS_TOKEN", "abc")
    monkeypatch.setenv("HOST", "0.0.0.0")
    monkeypatch.setenv("PORT", "8000")
    monkeypatch.setattr(main, "load_dotenv", lambda: False)
    monkeypatch.setattr(main, "configure_logging", lambda level: None)
    calls = []
    monkeypatch.setattr(main, "run_server", lambda server, **kw: calls.append(kw))

    assert main.main(["--transport", "http", "--host", "", "--port", "0"]) == 0

    assert calls[0]["host"] == ""
    assert calls[0]["port"] == 0
