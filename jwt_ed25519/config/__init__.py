"""Configuration helpers for token key material."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

_DEFAULT_CONFIG = Path(__file__).resolve().parent / "tokens.yaml"


@dataclass(frozen=True)
class KeyConfig:
    private_key_path: Path | None
    public_key_path: Path | None


@dataclass(frozen=True)
class TokenConfig:
    keys: KeyConfig


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(path)
    return yaml.safe_load(path.read_text()) or {}


def _resolve(value: Any, base: Path) -> Path | None:
    if not value:
        return None
    path = Path(str(value)).expanduser()
    return path if path.is_absolute() else base / path


def load_token_config(path: Path) -> TokenConfig:
    data = _load_yaml(path)
    keys = data.get("keys") or {}
    base = path.resolve().parent
    return TokenConfig(
        keys=KeyConfig(
            private_key_path=_resolve(keys.get("private_key_path"), base),
            public_key_path=_resolve(keys.get("public_key_path"), base),
        ),
    )


@lru_cache(maxsize=1)
def get_token_config() -> TokenConfig:
    return load_token_config(Path(os.getenv("JWT_ED25519_CONFIG_PATH", _DEFAULT_CONFIG)))
