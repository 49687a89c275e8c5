"""Typed async client for the Alpaca trading and market data REST APIs."""

import logging

from alpaca_rest.auth import Alpaca
from alpaca_rest.config import Credentials, Settings, TradingType, load_credentials
from alpaca_rest.errors import (
    AlpacaError,
    ApiError,
    ConfigError,
    MissingCredentialError,
    TransportError,
    ValidationError,
)

logging.getLogger("alpaca_rest").addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Alpaca",
    "AlpacaError",
    "ApiError",
    "ConfigError",
    "Credentials",
    "MissingCredentialError",
    "Settings",
    "TradingType",
    "TransportError",
    "ValidationError",
    "load_credentials",
]
