"""Compact JWT-shaped tokens signed with Ed25519."""

from .service import TokenService
from .tokens.codec import ValidationResult, build_token, validate_token
from .tokens.header import HEADER, JwtHeader
from .tokens.parts import MalformedToken, TokenParts, parse_token
from .tokens.payload import DecodableClaims, JwtPayload, PayloadDecodeError
from .transport.base64url import DecodeError
from .transport.canonical_json import UnsupportedJsonValue
from .transport.keys import InvalidKeyFormat, KeySource, load_private_key, load_public_key
from .transport.signatures import InvalidKeyMaterial, InvalidSignatureLength

__all__ = [
    "TokenService",
    "ValidationResult",
    "build_token",
    "validate_token",
    "HEADER",
    "JwtHeader",
    "TokenParts",
    "parse_token",
    "DecodableClaims",
    "JwtPayload",
    "KeySource",
    "load_private_key",
    "load_public_key",
    "DecodeError",
    "InvalidKeyFormat",
    "InvalidKeyMaterial",
    "InvalidSignatureLength",
    "MalformedToken",
    "PayloadDecodeError",
    "UnsupportedJsonValue",
]
