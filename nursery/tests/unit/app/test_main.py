from __future__ import annotations

import json

from nursery.adapters.env_config import StaticConfigProvider
from nursery.adapters.token_store import MemoryTokenStore
from nursery.app import main as app_main
from nursery.app.main import build_services
from nursery.tests.helpers import FakeResponse, FakeSession


def test_build_services_shares_one_session_and_config() -> None:
    services = build_services(
        StaticConfigProvider(site_origin="https://shop.example.com"),
        tokens=MemoryTokenStore(),
    )

    assert services.config.base_url == "/api"
    assert services.orders.api is services.session
    assert services.reports.api is services.session
    assert services.session.config is services.config


def test_cli_resolve_prints_base_url(capsys) -> None:
    code = app_main.main(["--api-url", "https://api.example.com", "resolve"])

    assert code == 0
    assert capsys.readouterr().out.strip() == "https://api.example.com"


def test_cli_resolve_uses_origin_flag(capsys, monkeypatch) -> None:
    monkeypatch.delenv("NURSERY_API_URL", raising=False)

    app_main.main(["--origin", "https://shop.example.com", "resolve"])

    assert capsys.readouterr().out.strip() == "/api"


def test_cli_get_prints_json_and_sends_stored_token(tmp_path, capsys, monkeypatch) -> None:
    (tmp_path / "session.json").write_text(json.dumps({"authToken": "tok", "user": {}}), encoding="utf-8")
    fake = FakeSession([FakeResponse(200, [{"id": 1}])])
    real_build = app_main.build_services

    def _build(provider, **kwargs):
        services = real_build(provider, **kwargs)
        services.session.session = fake
        return services

    monkeypatch.setattr(app_main, "build_services", _build)

    code = app_main.main(
        ["--api-url", "https://api.example.com", "--session-dir", str(tmp_path), "get", "/orders"]
    )

    assert code == 0
    assert json.loads(capsys.readouterr().out) == [{"id": 1}]
    assert fake.calls[0]["url"] == "https://api.example.com/orders"
    assert fake.calls[0]["headers"]["Authorization"] == "Bearer tok"


def test_cli_reports_http_errors_with_exit_code(tmp_path, capsys, monkeypatch) -> None:
    fake = FakeSession([FakeResponse(500, {"error": "Internal server error"})])
    real_build = app_main.build_services

    def _build(provider, **kwargs):
        services = real_build(provider, **kwargs)
        services.session.session = fake
        return services

    monkeypatch.setattr(app_main, "build_services", _build)

    code = app_main.main(
        ["--api-url", "https://api.example.com", "--session-dir", str(tmp_path), "get", "/orders"]
    )

    assert code == 1
    assert "SERVER_ERROR" in capsys.readouterr().err


def test_cli_rejects_invalid_json_body(tmp_path, capsys) -> None:
    code = app_main.main(
        ["--api-url", "https://api.example.com", "--session-dir", str(tmp_path), "post", "/orders", "--json", "{nope"]
    )

    assert code == 1
    assert "INVALID_JSON" in capsys.readouterr().err
