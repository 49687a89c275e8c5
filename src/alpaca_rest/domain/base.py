"""Field-for-field mapping between Alpaca JSON objects and dataclasses."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import MISSING, field, fields
from typing import Any, Self


def wire(
    name: str | None = None,
    *,
    parse: Callable[[Any], Any] | None = None,
    default: Any = MISSING,
    default_factory: Any = MISSING,
) -> Any:
    """Declare a model field, optionally under a different JSON key or with a converter."""
    metadata = {"wire": name, "parse": parse}
    if default_factory is not MISSING:
        return field(default_factory=default_factory, metadata=metadata)
    return field(default=default, metadata=metadata)


def list_of(model: type[Any]) -> Callable[[Any], list[Any]]:
    def _parse(raw: Any) -> list[Any]:
        return [model.from_api(item) for item in raw]

    return _parse


def map_of(model: type[Any], many: bool = False) -> Callable[[Any], dict[str, Any]]:
    """Parse `{symbol: object}` or, with many=True, `{symbol: [object, ...]}`."""

    def _parse(raw: Any) -> dict[str, Any]:
        if many:
            return {key: [model.from_api(item) for item in value or []] for key, value in raw.items()}
        return {key: model.from_api(value) for key, value in raw.items()}

    return _parse


class ApiModel:
    """Mixin for frozen dataclasses built from Alpaca responses.

    Keys missing from the payload fall back to the field default; unknown
    keys are ignored. A JSON null on a field with a default factory (lists,
    maps) yields the empty default instead of None.
    """

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> Self:
        if not isinstance(payload, Mapping):
            raise TypeError(f"{cls.__name__} expects a JSON object, got {type(payload).__name__}")
        values: dict[str, Any] = {}
        for item in fields(cls):  # type: ignore[arg-type]
            key = item.metadata.get("wire") or item.name
            if key not in payload:
                continue
            raw = payload[key]
            if raw is None:
                if item.default_factory is not MISSING:
                    continue
                values[item.name] = None
                continue
            parse = item.metadata.get("parse")
            values[item.name] = parse(raw) if parse is not None else raw
        return cls(**values)
