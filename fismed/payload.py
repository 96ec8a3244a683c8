"""Request decoding and the reply type shared by the HTTP handlers."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any
from urllib.parse import parse_qs

FORM_CONTENT_TYPES = frozenset(
    {
        "application/x-www-form-urlencoded",
        "application/x-www-form-urlencoded; charset=utf-8",
    }
)


@dataclass
class Reply:
    """An HTTP status with its JSON body; a body of None means an empty response."""

    status: int
    body: Any = None


class ApiError(Exception):
    """A request that cannot be served, with the status and body to answer with."""

    def __init__(self, message: str, status: int = 400, body: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.body = body


@dataclass
class RequestData:
    """Flattened request headers together with the decoded JSON body."""

    headers: dict[str, str] = field(default_factory=dict)
    body: dict[str, Any] | None = None


def format_headers(headers: Mapping[str, Any]) -> dict[str, str]:
    """Keep only the first value of every header."""
    return {
        key: values if isinstance(values, str) else values[0]
        for key, values in headers.items()
    }


def _decode_json(body: Any) -> Any:
    if body is None or isinstance(body, Mapping):
        return body
    if isinstance(body, (bytes, bytearray)):
        body = bytes(body).decode("utf-8")
    if not body.strip():
        raise ApiError("EOF")
    try:
        return json.loads(body)
    except json.JSONDecodeError as exc:
        raise ApiError(str(exc)) from exc


def parse_request(headers: Mapping[str, Any], body: Any) -> RequestData:
    """Decode a JSON object body and flatten the headers."""
    decoded = _decode_json(body)
    if decoded is not None and not isinstance(decoded, Mapping):
        raise ApiError(
            f"json: cannot unmarshal {type(decoded).__name__} into an object"
        )
    return RequestData(
        headers=format_headers(headers),
        body=dict(decoded) if decoded is not None else None,
    )


def _string_map(mapping: Mapping[str, Any]) -> dict[str, str]:
    result: dict[str, str] = {}
    for key, value in mapping.items():
        if not isinstance(value, str):
            raise TypeError(f"value for key '{key}' is not a string")
        result[key] = value
    return result


def interface_to_map_or_slice_of_map(data: Any) -> dict[str, str] | list[dict[str, str]]:
    """Narrow decoded JSON to a string map or a list of string maps."""
    if isinstance(data, Mapping):
        return _string_map(data)
    if isinstance(data, list):
        result = []
        for item in data:
            if not isinstance(item, Mapping):
                raise TypeError("item in array is not of type map[string]interface{}")
            result.append(_string_map(item))
        return result
    raise TypeError("data is neither map[string]interface{} nor []interface{}")


def _form_values(model: type, body: Any) -> dict[str, Any]:
    text = bytes(body).decode("utf-8") if isinstance(body, (bytes, bytearray)) else body
    form = parse_qs(text, keep_blank_values=True)
    values: dict[str, Any] = {}
    for f in fields(model):
        name = f.metadata["json"]
        kind = f.metadata["kind"]
        if name not in form or kind is list:
            continue
        raw = form[name][0]
        if kind is int:
            try:
                values[name] = int(raw) if raw else 0
            except ValueError as exc:
                raise ApiError(f"invalid integer for '{name}': {raw!r}") from exc
        else:
            values[name] = raw
    return values


def bind_input(model: type, content_type: str | None, body: Any) -> Any:
    """Bind a form or JSON body, or an already decoded mapping, to a model record."""
    if isinstance(body, model):
        return body
    if content_type in FORM_CONTENT_TYPES and isinstance(body, (bytes, bytearray, str)):
        values = _form_values(model, body)
    else:
        values = _decode_json(body)
    if values is None:
        return model()
    try:
        return model.from_dict(values)
    except (TypeError, ValueError) as exc:
        raise ApiError(str(exc)) from exc