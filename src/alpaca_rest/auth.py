"""Authenticated client handle passed to every endpoint function."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Self

from alpaca_rest.config import (
    DATA_URL,
    DEFAULT_TIMEOUT_SECONDS,
    Settings,
    TradingType,
    load_credentials,
)


@dataclass(frozen=True)
class Alpaca:
    """Immutable credentials plus target environment.

    The handle holds no connection or session state, so one instance can be
    shared by any number of concurrent calls.
    """

    api_key: str
    api_secret: str = field(repr=False)
    trading_type: TradingType = TradingType.PAPER
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    data_url: str = DATA_URL

    @classmethod
    def from_env(cls, trading_type: TradingType = TradingType.PAPER) -> Self:
        """Resolve credentials from APCA_API_KEY_ID / APCA_API_SECRET_KEY."""
        credentials = load_credentials()
        return cls(
            api_key=credentials.api_key,
            api_secret=credentials.api_secret,
            trading_type=trading_type,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> Self:
        credentials = load_credentials()
        return cls(
            api_key=credentials.api_key,
            api_secret=credentials.api_secret,
            trading_type=settings.trading_type,
            timeout=settings.timeout,
            data_url=settings.data_url,
        )

    @property
    def trading_url(self) -> str:
        return self.trading_type.trading_url

    @property
    def is_live(self) -> bool:
        return self.trading_type is TradingType.LIVE

    def auth_headers(self) -> dict[str, str]:
        """Headers Alpaca requires on every request."""
        return {
            "APCA-API-KEY-ID": self.api_key,
            "APCA-API-SECRET-KEY": self.api_secret,
        }
