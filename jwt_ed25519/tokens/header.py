"""Fixed JOSE header for EdDSA tokens."""

from __future__ import annotations

from dataclasses import dataclass

import orjson

from ..transport.canonical_json import UnsupportedJsonValue, compact_dumps, compact_loads
from .parts import MalformedToken


@dataclass(frozen=True)
class JwtHeader:
    alg: str
    typ: str

    algorithm = "EdDSA"
    type = "JWT"

    @classmethod
    def default(cls) -> "JwtHeader":
        return cls(alg=cls.algorithm, typ=cls.type)

    @classmethod
    def from_json(cls, raw: bytes | str) -> "JwtHeader":
        try:
            data = compact_loads(raw)
        except orjson.JSONDecodeError as exc:
            raise MalformedToken("header is not valid JSON") from exc
        except UnsupportedJsonValue as exc:
            raise MalformedToken(f"header: {exc}") from exc
        if not isinstance(data, dict):
            raise MalformedToken("header must be a JSON object")
        alg = data.get("alg")
        typ = data.get("typ")
        if not isinstance(alg, str) or not isinstance(typ, str):
            raise MalformedToken("header alg and typ must be strings")
        return cls(alg=alg, typ=typ)

    @property
    def is_supported(self) -> bool:
        return self.alg == self.algorithm and self.typ == self.type

    def serialize(self) -> bytes:
        # alg before typ; the header bytes are part of the signing input.
        return compact_dumps({"alg": self.alg, "typ": self.typ})


HEADER = JwtHeader.default()
