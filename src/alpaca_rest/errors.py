"""Exception types raised by the Alpaca client."""

from __future__ import annotations

import json
from typing import Any


class AlpacaError(Exception):
    """Base exception for all client errors."""


class ConfigError(AlpacaError):
    """Raised when environment configuration is invalid."""


class MissingCredentialError(ConfigError):
    """Raised when an API key or secret is absent from the environment."""

    def __init__(self, variable: str) -> None:
        super().__init__(f"{variable} is not set or empty.")
        self.variable = variable


class ValidationError(AlpacaError):
    """Raised when a request value is missing required fields or is inconsistent."""


class TransportError(AlpacaError):
    """Raised on connection, timeout, or response decoding failures."""


class ApiError(AlpacaError):
    """Raised when Alpaca answers with a non-success HTTP status."""

    def __init__(
        self,
        status_code: int,
        message: str,
        code: int | None = None,
        path: str = "",
    ) -> None:
        super().__init__(f"Alpaca API error {status_code} for {path}: {message}")
        self.status_code = status_code
        self.message = message
        self.code = code
        self.path = path

    @classmethod
    def from_body(cls, status_code: int, body: str, path: str) -> ApiError:
        """Build an error from a raw response body, keeping the upstream text verbatim."""
        detail = body.strip()
        payload: Any = None
        if detail:
            try:
                payload = json.loads(detail)
            except ValueError:
                payload = None
        if isinstance(payload, dict) and "message" in payload:
            raw_code = payload.get("code")
            code = raw_code if isinstance(raw_code, int) else None
            return cls(status_code, str(payload["message"]), code=code, path=path)
        return cls(status_code, detail or "No response body.", path=path)
