"""Claim containers for token payloads."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Protocol, TypeVar

from ..transport.canonical_json import JsonType, compact_dumps

REGISTERED_CLAIMS: dict[str, type] = {
    "iss": str,
    "sub": str,
    "aud": str,
    "exp": int,
    "nbf": int,
    "iat": int,
    "jti": str,
}

ClaimsT = TypeVar("ClaimsT", bound="DecodableClaims")


class PayloadDecodeError(ValueError):
    """Raised when decoded claims do not fit the requested payload type."""


class DecodableClaims(Protocol):
    def to_claims(self) -> dict[str, JsonType]: ...

    @classmethod
    def from_claims(cls: type[ClaimsT], claims: Mapping[str, Any]) -> ClaimsT: ...


@dataclass
class JwtPayload:
    """RFC 7519 registered claims plus an open map of custom claims.

    Subclasses may declare further claim fields; they are emitted after the
    registered claims and before ``extra``. On a key collision the custom
    claim wins and keeps the position of the field it replaces. Claims whose
    value is ``None`` are never emitted.
    """

    iss: str | None = None
    sub: str | None = None
    aud: str | None = None
    exp: int | None = None
    nbf: int | None = None
    iat: int | None = None
    jti: str | None = None
    extra: dict[str, JsonType] = field(default_factory=dict)

    def add_claim(self, key: str, value: JsonType) -> None:
        self.extra[key] = value

    def to_claims(self) -> dict[str, JsonType]:
        claims: dict[str, JsonType] = {}
        for item in fields(self):
            if item.name != "extra":
                claims[item.name] = getattr(self, item.name)
        claims.update(self.extra)
        return {key: value for key, value in claims.items() if value is not None}

    def serialize(self) -> bytes:
        return compact_dumps(self.to_claims())

    @classmethod
    def from_claims(cls: type[ClaimsT], claims: Mapping[str, Any]) -> ClaimsT:
        if not isinstance(claims, Mapping):
            raise PayloadDecodeError(
                f"payload must be a JSON object, got {type(claims).__name__}"
            )
        declared = {item.name for item in fields(cls) if item.init and item.name != "extra"}
        values: dict[str, Any] = {}
        extra: dict[str, JsonType] = {}
        for key, value in claims.items():
            if key in declared:
                values[key] = value
            else:
                extra[key] = value
        for key, expected in REGISTERED_CLAIMS.items():
            value = values.get(key)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, expected):
                raise PayloadDecodeError(
                    f"claim {key} must be {expected.__name__}, got {type(value).__name__}"
                )
        try:
            return cls(**values, extra=extra)
        except TypeError as exc:  # pragma: no cover - subclass with custom __init__
            raise PayloadDecodeError(str(exc)) from exc
