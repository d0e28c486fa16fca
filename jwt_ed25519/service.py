"""Token service bound to configured key material."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Union

from .config import TokenConfig
from .tokens.codec import ValidationResult, build_token, validate_token
from .tokens.payload import DecodableClaims, JwtPayload
from .transport.keys import KeySource, load_private_key, load_public_key
from .transport.signatures import PrivateKeyLike, PublicKeyLike

logger = logging.getLogger(__name__)


@dataclass
class TokenService:
    """Issue and validate tokens with a fixed key pair.

    Either key may be omitted: a verifier only needs the public key, an
    issuer only the private one.
    """

    private_key: PrivateKeyLike | None = None
    public_key: PublicKeyLike | None = None

    @classmethod
    def from_config(cls, config: TokenConfig) -> "TokenService":
        keys = config.keys
        private_key = (
            load_private_key(keys.private_key_path, KeySource.FILE)
            if keys.private_key_path
            else None
        )
        public_key = (
            load_public_key(keys.public_key_path, KeySource.FILE)
            if keys.public_key_path
            else None
        )
        if private_key is None and public_key is None:
            logger.warning("token service configured without any key")
        return cls(private_key=private_key, public_key=public_key)

    def build(self, payload: Union[DecodableClaims, Mapping[str, Any]]) -> str:
        if self.private_key is None:
            raise ValueError("private key not configured")
        return build_token(payload, self.private_key)

    def validate(
        self, token: str, payload_type: type[DecodableClaims] = JwtPayload
    ) -> ValidationResult:
        if self.public_key is None:
            raise ValueError("public key not configured")
        return validate_token(token, self.public_key, payload_type)
