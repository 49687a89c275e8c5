from __future__ import annotations

import dataclasses

import pytest

from alpaca_rest.auth import Alpaca
from alpaca_rest.config import Settings, TradingType
from alpaca_rest.errors import MissingCredentialError


def test_explicit_construction_defaults_to_paper() -> None:
    client = Alpaca(api_key="key", api_secret="secret")

    assert client.trading_type is TradingType.PAPER
    assert client.trading_url == "https://paper-api.alpaca.markets"
    assert not client.is_live


def test_live_client_targets_live_host() -> None:
    client = Alpaca(api_key="key", api_secret="secret", trading_type=TradingType.LIVE)

    assert client.trading_url == "https://api.alpaca.markets"
    assert client.is_live


def test_auth_headers_carry_key_and_secret() -> None:
    client = Alpaca(api_key="key", api_secret="secret")

    assert client.auth_headers() == {
        "APCA-API-KEY-ID": "key",
        "APCA-API-SECRET-KEY": "secret",
    }


def test_handle_is_immutable_and_hides_secret() -> None:
    client = Alpaca(api_key="key", api_secret="secret")

    with pytest.raises(dataclasses.FrozenInstanceError):
        client.api_key = "other"  # type: ignore[misc]
    assert "secret" not in repr(client)


def test_from_env_uses_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("alpaca_rest.config.load_dotenv", lambda *args, **kwargs: None)
    monkeypatch.setenv("APCA_API_KEY_ID", "env_key")
    monkeypatch.setenv("APCA_API_SECRET_KEY", "env_secret")

    client = Alpaca.from_env(TradingType.LIVE)

    assert client.api_key == "env_key"
    assert client.api_secret == "env_secret"
    assert client.is_live


def test_from_env_fails_without_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("alpaca_rest.config.load_dotenv", lambda *args, **kwargs: None)
    for key in ("APCA_API_KEY_ID", "APCA_API_SECRET_KEY", "ALPACA_API_KEY", "ALPACA_SECRET_KEY"):
        monkeypatch.delenv(key, raising=False)

    with pytest.raises(MissingCredentialError):
        Alpaca.from_env()


def test_from_settings_copies_timeout_and_data_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("alpaca_rest.config.load_dotenv", lambda *args, **kwargs: None)
    monkeypatch.setenv("APCA_API_KEY_ID", "env_key")
    monkeypatch.setenv("APCA_API_SECRET_KEY", "env_secret")
    settings = Settings(timeout=3.0, data_url="https://data.example.test")

    client = Alpaca.from_settings(settings)

    assert client.timeout == 3.0
    assert client.data_url == "https://data.example.test"
