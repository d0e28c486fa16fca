"""Helpers for compact JSON serialization used for token segments."""

from __future__ import annotations

import math
import re
from typing import Any, Union

import orjson

# Keys keep insertion order. No OPT_STRICT_INTEGER: claims may hold 64-bit
# ids beyond 2**53.
_ORJSON_OPTIONS = orjson.OPT_NAIVE_UTC

# orjson's exact integer range; wider literals decode as lossy floats.
INT_MIN = -(2**63 - 1)
INT_MAX = 2**64 - 1

# Strings first so digits inside them are skipped.
_STRING_OR_NUMBER = re.compile(rb'"(?:[^"\\]|\\.)*"|-?[0-9][0-9.eE+-]*')


JsonType = Union[str, int, float, bool, None, list["JsonType"], dict[str, "JsonType"]]


class UnsupportedJsonValue(ValueError):
    """Raised when a value cannot pass through JSON exactly."""


def _check_encodable(value: Any) -> None:
    if isinstance(value, bool) or value is None or isinstance(value, str):
        return
    if isinstance(value, int):
        if not INT_MIN <= value <= INT_MAX:
            raise UnsupportedJsonValue(f"integer {value} outside the 64-bit range")
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise UnsupportedJsonValue(f"{value} has no JSON representation")
    elif isinstance(value, dict):
        for item in value.values():
            _check_encodable(item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _check_encodable(item)


def compact_dumps(payload: Any) -> bytes:
    """Return JSON bytes without whitespace, keys in insertion order.

    Integers must fit in 64 bits and floats must be finite; anything else
    raises ``UnsupportedJsonValue`` rather than being written lossily.
    """
    _check_encodable(payload)
    try:
        return orjson.dumps(payload, option=_ORJSON_OPTIONS)
    except orjson.JSONEncodeError as exc:
        raise UnsupportedJsonValue(str(exc)) from exc


def compact_loads(raw: bytes | str) -> JsonType:
    data = orjson.loads(raw)
    text = raw.encode("utf-8") if isinstance(raw, str) else raw
    for match in _STRING_OR_NUMBER.finditer(text):
        token = match.group()
        if token.startswith(b'"') or any(char in token for char in b".eE"):
            continue
        if not INT_MIN <= int(token) <= INT_MAX:
            raise UnsupportedJsonValue(f"integer literal {token.decode()} outside the 64-bit range")
    return data
