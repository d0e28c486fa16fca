"""Compact token construction and validation."""

from __future__ import annotations

import logging
from typing import Any, Mapping, NamedTuple, Union

import orjson

from ..transport import base64url
from ..transport.canonical_json import UnsupportedJsonValue, compact_dumps, compact_loads
from ..transport.signatures import (
    InvalidSignatureLength,
    PrivateKeyLike,
    PublicKeyLike,
    sign,
    verify,
)
from .header import HEADER, JwtHeader
from .parts import MalformedToken, parse_token
from .payload import DecodableClaims, JwtPayload, PayloadDecodeError

logger = logging.getLogger(__name__)

_ENCODED_HEADER = base64url.encode(HEADER.serialize())


class ValidationResult(NamedTuple):
    valid: bool
    payload: Any


def build_token(
    payload: Union[DecodableClaims, Mapping[str, Any]], private_key: PrivateKeyLike
) -> str:
    if isinstance(payload, Mapping):
        raw = compact_dumps({key: value for key, value in payload.items() if value is not None})
    else:
        raw = compact_dumps(payload.to_claims())
    signing_input = f"{_ENCODED_HEADER}.{base64url.encode(raw)}"
    signature = sign(signing_input.encode("utf-8"), private_key)
    return f"{signing_input}.{base64url.encode(signature)}"


def validate_token(
    token: str,
    public_key: PublicKeyLike,
    payload_type: type[DecodableClaims] = JwtPayload,
) -> ValidationResult:
    """Verify ``token`` and decode its claims into ``payload_type``.

    Structural problems raise ``MalformedToken``; claims that do not fit
    ``payload_type`` raise ``PayloadDecodeError``. A signature or algorithm
    mismatch is reported through ``valid=False`` with the claims still
    decoded, so callers can inspect what was presented.
    """
    parts = parse_token(token)
    try:
        sig_valid = verify(parts.signing_input, parts.decoded_signature, public_key)
    except InvalidSignatureLength as exc:
        raise MalformedToken(f"signature segment: {exc}") from exc

    header = JwtHeader.from_json(parts.decoded_header)

    try:
        claims = compact_loads(parts.decoded_payload)
    except orjson.JSONDecodeError as exc:
        raise MalformedToken("payload is not valid JSON") from exc
    except UnsupportedJsonValue as exc:
        raise PayloadDecodeError(f"payload: {exc}") from exc
    payload = payload_type.from_claims(claims)

    if not sig_valid:
        logger.debug("token rejected: signature mismatch")
    elif not header.is_supported:
        logger.debug("token rejected: unsupported header alg=%s typ=%s", header.alg, header.typ)
    return ValidationResult(sig_valid and header.is_supported, payload)
