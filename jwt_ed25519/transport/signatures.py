"""Signature utilities based on Ed25519 public key cryptography."""

from __future__ import annotations

from typing import Union

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

KEY_LENGTH = 32
SIGNATURE_LENGTH = 64

PrivateKeyLike = Union[Ed25519PrivateKey, bytes]
PublicKeyLike = Union[Ed25519PublicKey, bytes]


class InvalidKeyMaterial(ValueError):
    """Raised when raw key bytes cannot form an Ed25519 key."""


class InvalidSignatureLength(ValueError):
    """Raised when a signature is not exactly 64 bytes."""


def as_private_key(key: PrivateKeyLike) -> Ed25519PrivateKey:
    if isinstance(key, Ed25519PrivateKey):
        return key
    if not isinstance(key, (bytes, bytearray)) or len(key) != KEY_LENGTH:
        raise InvalidKeyMaterial(f"private key must be {KEY_LENGTH} bytes")
    return Ed25519PrivateKey.from_private_bytes(bytes(key))


def as_public_key(key: PublicKeyLike) -> Ed25519PublicKey:
    if isinstance(key, Ed25519PublicKey):
        return key
    if not isinstance(key, (bytes, bytearray)) or len(key) != KEY_LENGTH:
        raise InvalidKeyMaterial(f"public key must be {KEY_LENGTH} bytes")
    try:
        return Ed25519PublicKey.from_public_bytes(bytes(key))
    except ValueError as exc:  # pragma: no cover - delegated to cryptography
        raise InvalidKeyMaterial("public key is not a valid Ed25519 point") from exc


def sign(message: bytes, private_key: PrivateKeyLike) -> bytes:
    """Return the deterministic 64-byte Ed25519 signature of ``message``."""
    return as_private_key(private_key).sign(message)


def verify(message: bytes, signature: bytes, public_key: PublicKeyLike) -> bool:
    """Check ``signature`` over ``message``.

    A signature that simply does not match yields ``False``; wrongly sized
    keys or signatures raise, so callers can tell bad input from a forgery.
    """
    key = as_public_key(public_key)
    if len(signature) != SIGNATURE_LENGTH:
        raise InvalidSignatureLength(
            f"signature must be {SIGNATURE_LENGTH} bytes, got {len(signature)}"
        )
    try:
        key.verify(bytes(signature), message)
    except InvalidSignature:
        return False
    return True
