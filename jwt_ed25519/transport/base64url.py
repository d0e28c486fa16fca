"""Unpadded URL-safe Base64 used for every token segment."""

from __future__ import annotations

import base64
import binascii
import re

_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")


class DecodeError(ValueError):
    """Raised when a Base64URL segment is malformed."""


def encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def decode(text: str) -> bytes:
    """Decode unpadded Base64URL text.

    Only the canonical spelling of a byte string is accepted: text whose
    unused trailing bits are set is rejected, so no two distinct segments
    decode to the same bytes.
    """
    if not isinstance(text, str):
        raise DecodeError("segment must be text")
    if not _ALPHABET.fullmatch(text):
        raise DecodeError("segment contains characters outside the base64url alphabet")
    if len(text) % 4 == 1:
        raise DecodeError(f"impossible base64url length {len(text)}")
    padded = text + "=" * (-len(text) % 4)
    try:
        data = base64.urlsafe_b64decode(padded.encode("ascii"))
    except binascii.Error as exc:  # pragma: no cover - alphabet checked above
        raise DecodeError("segment is not base64url") from exc
    if encode(data) != text:
        raise DecodeError("segment is not canonical base64url")
    return data
