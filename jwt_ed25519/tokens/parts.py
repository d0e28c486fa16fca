"""Decomposition of a compact token into its three segments."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property

from ..transport import base64url


class MalformedToken(ValueError):
    """Raised when a token is not three decodable segments."""


@dataclass(frozen=True)
class TokenParts:
    header: str
    payload: str
    signature: str

    @property
    def signing_input(self) -> bytes:
        return f"{self.header}.{self.payload}".encode("utf-8")

    @cached_property
    def decoded_header(self) -> bytes:
        return _decode_segment("header", self.header)

    @cached_property
    def decoded_payload(self) -> bytes:
        return _decode_segment("payload", self.payload)

    @cached_property
    def decoded_signature(self) -> bytes:
        return _decode_segment("signature", self.signature)


def _decode_segment(name: str, segment: str) -> bytes:
    try:
        return base64url.decode(segment)
    except base64url.DecodeError as exc:
        raise MalformedToken(f"{name} segment: {exc}") from exc


def parse_token(token: str) -> TokenParts:
    if not isinstance(token, str):
        raise MalformedToken("token must be a string")
    segments = token.split(".")
    if len(segments) != 3:
        raise MalformedToken(f"expected 3 segments, got {len(segments)}")
    if not all(segments):
        raise MalformedToken("token segments must not be empty")
    return TokenParts(*segments)
