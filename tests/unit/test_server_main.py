# tests/unit/test_server_main.py
from __future__ import annotations

import io
import logging

import pytest
from pydantic import ValidationError

from express_mcp import main as main_mod
from express_mcp.core.config import AppSettings, get_settings
from express_mcp.core.logging import normalize_level, setup_logging
from express_mcp.server import SERVER_NAME, create_server


@pytest.fixture
def no_credentials_env(monkeypatch):
    monkeypatch.delenv("EXPRESS_CUSTOMER", raising=False)
    monkeypatch.delenv("EXPRESS_AUTH_KEY", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.mark.asyncio
async def test_server_exposes_two_tools():
    mcp = create_server(AppSettings(EXPRESS_CUSTOMER="c", EXPRESS_AUTH_KEY="k"))
    assert mcp.name == SERVER_NAME

    listed = await mcp.list_tools()
    by_name = {t.name: t for t in listed}
    assert set(by_name) == {"query_express", "compare_price"}
    assert {"com", "num"} <= set(by_name["query_express"].inputSchema["properties"])
    assert {"origin", "destination", "weight"} <= set(by_name["compare_price"].inputSchema["properties"])


def test_missing_credentials():
    s = AppSettings(EXPRESS_CUSTOMER="", EXPRESS_AUTH_KEY=" ")
    assert s.missing_credentials() == ["customer", "auth_key"]
    assert AppSettings(EXPRESS_CUSTOMER="c", EXPRESS_AUTH_KEY="k").missing_credentials() == []


def test_main_exits_without_auth_key(no_credentials_env, monkeypatch):
    started = []
    monkeypatch.setattr(main_mod, "create_server", lambda settings: started.append(settings))

    with pytest.raises(SystemExit) as ei:
        main_mod.main(["--customer=C1"])
    assert ei.value.code == 2
    assert started == []


def test_main_runs_server_with_cli_credentials(no_credentials_env, monkeypatch):
    captured = {}

    class FakeServer:
        def run(self):
            captured["ran"] = True

    def fake_create_server(settings):
        captured["settings"] = settings
        return FakeServer()

    monkeypatch.setattr(main_mod, "create_server", fake_create_server)
    main_mod.main(["--customer=C1", "--auth_key=K1"])

    assert captured["ran"] is True
    assert captured["settings"].EXPRESS_CUSTOMER == "C1"
    assert captured["settings"].EXPRESS_AUTH_KEY == "K1"


def test_main_rejects_unknown_log_level(no_credentials_env, monkeypatch):
    started = []
    monkeypatch.setattr(main_mod, "create_server", lambda settings: started.append(settings))

    with pytest.raises(SystemExit) as ei:
        main_mod.main(["--customer=C1", "--auth_key=K1", "--log-level=foo"])
    assert ei.value.code == 2
    assert started == []


def test_main_accepts_lowercase_log_level(no_credentials_env, monkeypatch):
    captured = {}

    class FakeServer:
        def run(self):
            pass

    def fake_create_server(settings):
        captured["settings"] = settings
        return FakeServer()

    monkeypatch.setattr(main_mod, "create_server", fake_create_server)
    main_mod.main(["--customer=C1", "--auth_key=K1", "--log-level=debug"])

    assert captured["settings"].LOG_LEVEL == "DEBUG"
    assert logging.getLogger().level == logging.DEBUG


def test_settings_log_level_validated():
    assert AppSettings(LOG_LEVEL=" warning ").LOG_LEVEL == "WARNING"
    with pytest.raises(ValidationError):
        AppSettings(LOG_LEVEL="verbose")


def test_normalize_level():
    assert normalize_level("info") == "INFO"
    with pytest.raises(ValueError):
        normalize_level("")


def test_setup_logging_writes_to_given_stream():
    buf = io.StringIO()
    setup_logging("INFO", stream=buf)

    logging.getLogger("express_mcp.test").info("hello")
    logging.getLogger("express_mcp.test").debug("hidden")

    out = buf.getvalue()
    assert "INFO express_mcp.test hello" in out
    assert "hidden" not in out
    assert logging.getLogger("httpx").level == logging.WARNING
