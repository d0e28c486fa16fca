"""PEM loading for Ed25519 key material."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

logger = logging.getLogger(__name__)


class InvalidKeyFormat(ValueError):
    """Raised when PEM data does not hold an Ed25519 key of the expected kind."""


class KeySource(str, Enum):
    STRING = "string"
    FILE = "file"


def _read_pem(data_or_path: str | Path, source: KeySource) -> bytes:
    if source == KeySource.FILE:
        path = Path(data_or_path)
        if not path.exists():
            raise FileNotFoundError(path)
        logger.info("reading PEM key from %s", path)
        return path.read_bytes()
    if not data_or_path:
        raise InvalidKeyFormat("key data missing")
    return str(data_or_path).encode("utf-8")


def load_private_key(
    data_or_path: str | Path, source: KeySource = KeySource.STRING
) -> Ed25519PrivateKey:
    pem = _read_pem(data_or_path, KeySource(source))
    try:
        key = serialization.load_pem_private_key(pem, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise InvalidKeyFormat("Invalid Ed25519 private key format") from exc
    if not isinstance(key, Ed25519PrivateKey):
        raise InvalidKeyFormat(f"expected Ed25519 private key, got {type(key).__name__}")
    return key


def load_public_key(
    data_or_path: str | Path, source: KeySource = KeySource.STRING
) -> Ed25519PublicKey:
    pem = _read_pem(data_or_path, KeySource(source))
    try:
        key = serialization.load_pem_public_key(pem)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise InvalidKeyFormat("Invalid Ed25519 public key format") from exc
    if not isinstance(key, Ed25519PublicKey):
        raise InvalidKeyFormat(f"expected Ed25519 public key, got {type(key).__name__}")
    return key


def private_key_bytes(key: Ed25519PrivateKey) -> bytes:
    """Return the raw 32-byte seed of ``key``."""
    return key.private_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PrivateFormat.Raw,
        encryption_algorithm=serialization.NoEncryption(),
    )


def public_key_bytes(key: Ed25519PublicKey) -> bytes:
    return key.public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )
