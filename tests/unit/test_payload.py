"""Unit tests for claim containers."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from jwt_ed25519.tokens.payload import JwtPayload, PayloadDecodeError
from jwt_ed25519.transport.canonical_json import UnsupportedJsonValue


@dataclass
class TenantPayload(JwtPayload):
    tenant: str | None = None


class TestSerialize:
    def test_empty_payload(self):
        assert JwtPayload().serialize() == b"{}"

    def test_registered_claim_order(self):
        payload = JwtPayload(jti="id", iat=3, nbf=2, exp=1, aud="a", sub="s", iss="i")
        assert payload.serialize() == (
            b'{"iss":"i","sub":"s","aud":"a","exp":1,"nbf":2,"iat":3,"jti":"id"}'
        )

    def test_null_claims_omitted(self):
        payload = JwtPayload(sub="alice", exp=None)
        assert payload.serialize() == b'{"sub":"alice"}'

    def test_custom_claims_follow_registered(self):
        payload = JwtPayload(sub="alice")
        payload.add_claim("role", "admin")
        payload.add_claim("scopes", ["read", "write"])
        assert payload.serialize() == b'{"sub":"alice","role":"admin","scopes":["read","write"]}'

    def test_large_integer_claim(self):
        payload = JwtPayload()
        payload.add_claim("custom_claim", 1325650983061250049)
        assert payload.serialize() == b'{"custom_claim":1325650983061250049}'

    @pytest.mark.parametrize("value", [float("nan"), float("-inf"), 2**64])
    def test_unrepresentable_claim_rejected(self, value):
        payload = JwtPayload(sub="alice")
        payload.add_claim("x", value)
        with pytest.raises(UnsupportedJsonValue):
            payload.serialize()

    def test_custom_claim_overrides_registered(self):
        payload = JwtPayload(iss="issuer", sub="alice")
        payload.add_claim("iss", "override")
        assert payload.to_claims() == {"iss": "override", "sub": "alice"}
        assert payload.serialize() == b'{"iss":"override","sub":"alice"}'

    def test_null_custom_claim_removes_registered(self):
        payload = JwtPayload(iss="issuer", sub="alice")
        payload.add_claim("iss", None)
        assert payload.serialize() == b'{"sub":"alice"}'

    def test_add_claim_overwrites(self):
        payload = JwtPayload()
        payload.add_claim("n", 1)
        payload.add_claim("n", 2)
        assert payload.to_claims() == {"n": 2}

    def test_subclass_fields_before_extra(self):
        payload = TenantPayload(sub="alice", tenant="acme")
        payload.add_claim("flag", True)
        assert payload.serialize() == b'{"sub":"alice","tenant":"acme","flag":true}'


class TestFromClaims:
    def test_registered_and_extra(self):
        payload = JwtPayload.from_claims({"sub": "alice", "exp": 10, "role": "admin"})
        assert payload.sub == "alice"
        assert payload.exp == 10
        assert payload.iss is None
        assert payload.extra == {"role": "admin"}

    def test_subclass_field_is_populated(self):
        payload = TenantPayload.from_claims({"tenant": "acme", "other": 1})
        assert isinstance(payload, TenantPayload)
        assert payload.tenant == "acme"
        assert payload.extra == {"other": 1}

    def test_null_registered_claim(self):
        assert JwtPayload.from_claims({"exp": None}).exp is None

    @pytest.mark.parametrize(
        "claims",
        [
            {"exp": "soon"},
            {"exp": 1.5},
            {"iat": True},
            {"sub": 42},
            {"aud": ["a", "b"]},
        ],
    )
    def test_wrong_claim_type(self, claims):
        with pytest.raises(PayloadDecodeError):
            JwtPayload.from_claims(claims)

    @pytest.mark.parametrize("claims", [[1, 2], "text", 3, None])
    def test_not_an_object(self, claims):
        with pytest.raises(PayloadDecodeError):
            JwtPayload.from_claims(claims)
