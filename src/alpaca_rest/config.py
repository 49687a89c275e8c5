"""Environment-driven credential and client configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Self

from dotenv import load_dotenv

from alpaca_rest.errors import ConfigError, MissingCredentialError

API_KEY_ENV = "APCA_API_KEY_ID"
API_SECRET_ENV = "APCA_API_SECRET_KEY"
LEGACY_API_KEY_ENV = "ALPACA_API_KEY"
LEGACY_API_SECRET_ENV = "ALPACA_SECRET_KEY"

PAPER_TRADING_URL = "https://paper-api.alpaca.markets"
LIVE_TRADING_URL = "https://api.alpaca.markets"
DATA_URL = "https://data.alpaca.markets"
DEFAULT_TIMEOUT_SECONDS = 20.0


class TradingType(StrEnum):
    """Target trading environment."""

    PAPER = "paper"
    LIVE = "live"

    @property
    def trading_url(self) -> str:
        if self is TradingType.LIVE:
            return LIVE_TRADING_URL
        return PAPER_TRADING_URL


@dataclass(frozen=True)
class Credentials:
    """Resolved API key pair."""

    api_key: str
    api_secret: str = field(repr=False)


def _read_env(primary: str, legacy: str) -> str:
    value = os.getenv(primary)
    if value is None or not value.strip():
        value = os.getenv(legacy)
    return (value or "").strip()


def load_credentials() -> Credentials:
    """Read the API key pair from the environment (and a `.env` file, if present).

    Raises MissingCredentialError naming the first variable that is unset or blank.
    """
    load_dotenv()
    api_key = _read_env(API_KEY_ENV, LEGACY_API_KEY_ENV)
    if not api_key:
        raise MissingCredentialError(API_KEY_ENV)
    api_secret = _read_env(API_SECRET_ENV, LEGACY_API_SECRET_ENV)
    if not api_secret:
        raise MissingCredentialError(API_SECRET_ENV)
    return Credentials(api_key=api_key, api_secret=api_secret)


def parse_trading_type(value: str | None, default: TradingType = TradingType.PAPER) -> TradingType:
    """Parse `paper`/`live` selector strings."""
    if value is None or not value.strip():
        return default
    candidate = value.strip().lower()
    try:
        return TradingType(candidate)
    except ValueError as exc:
        raise ConfigError(f"APCA_TRADING_TYPE must be one of paper, live (got {value!r}).") from exc


def parse_timeout(value: str | None) -> float:
    if value is None or not value.strip():
        return DEFAULT_TIMEOUT_SECONDS
    try:
        parsed = float(value.strip())
    except ValueError as exc:
        raise ConfigError("APCA_TIMEOUT_SECONDS must be a number.") from exc
    if parsed <= 0:
        raise ConfigError("APCA_TIMEOUT_SECONDS must be positive.")
    return parsed


@dataclass(frozen=True)
class Settings:
    """Non-secret client settings loaded from environment variables."""

    trading_type: TradingType = TradingType.PAPER
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    data_url: str = DATA_URL
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Self:
        """Build settings from environment variables."""
        load_dotenv()
        return cls(
            trading_type=parse_trading_type(os.getenv("APCA_TRADING_TYPE")),
            timeout=parse_timeout(os.getenv("APCA_TIMEOUT_SECONDS")),
            data_url=str(os.getenv("APCA_DATA_URL") or DATA_URL).strip().rstrip("/"),
            log_level=str(os.getenv("LOG_LEVEL", "INFO")).strip().upper() or "INFO",
        )
