from __future__ import annotations

import json

from nursery.adapters.env_config import (
    DEFAULT_SITE_ORIGIN,
    EnvConfigProvider,
    StaticConfigProvider,
)
from nursery.adapters.token_store import LocalTokenStore, MemoryTokenStore
from nursery.domain.api_config import ApiConfig


def test_env_provider_reads_override_and_origin() -> None:
    provider = EnvConfigProvider(
        {"NURSERY_API_URL": " https://api.example.com ", "NURSERY_SITE_ORIGIN": "https://shop.example.com"}
    )

    assert provider.get_override() == "https://api.example.com"
    assert provider.get_site_origin() == "https://shop.example.com"
    assert provider.get_current_host() == "shop.example.com"


def test_env_provider_defaults_to_local_frontend_origin() -> None:
    provider = EnvConfigProvider({})

    assert provider.get_override() is None
    assert provider.get_site_origin() == DEFAULT_SITE_ORIGIN
    assert ApiConfig.from_provider(provider).base_url == "http://localhost:5000/api"


def test_env_provider_uses_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("NURSERY_SITE_ORIGIN", "https://nursery.example.org")
    monkeypatch.delenv("NURSERY_API_URL", raising=False)

    config = ApiConfig.from_provider(EnvConfigProvider())

    assert config.base_url == "/api"
    assert config.site_origin == "https://nursery.example.org"


def test_static_provider_host_override() -> None:
    provider = StaticConfigProvider(site_origin="https://shop.example.com", host="localhost")

    assert provider.get_current_host() == "localhost"


def test_local_token_store_round_trip(tmp_path) -> None:
    store = LocalTokenStore(root_dir=str(tmp_path / "state"))
    assert store.load_token() is None
    assert store.load_user() is None

    store.save_session("abc.def", {"email": "m@nursery.test", "role": "manager"})

    with open(store.path, "r", encoding="utf-8") as fh:
        persisted = json.load(fh)
    assert persisted == {"authToken": "abc.def", "user": {"email": "m@nursery.test", "role": "manager"}}
    assert store.load_token() == "abc.def"
    assert store.load_user() == {"email": "m@nursery.test", "role": "manager"}


def test_local_token_store_clear(tmp_path) -> None:
    store = LocalTokenStore(root_dir=str(tmp_path))
    store.save_session("t", {})

    store.clear()
    store.clear()

    assert store.load_token() is None


def test_memory_token_store() -> None:
    store = MemoryTokenStore()
    store.save_session("t1", {"id": 4})

    assert store.load_token() == "t1"
    assert store.load_user() == {"id": 4}

    store.clear()
    assert store.load_token() is None
    assert store.load_user() is None
