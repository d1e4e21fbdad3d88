"""Declarative description of how to seed a :class:`SecureRng`."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .rng import SecureRng

MODES = ("seed", "time", "masked", "confused")


def _parse_hex(name: str, value: Optional[str]) -> bytes:
    if value is None:
        raise ValueError(f"'{name}' is required for this mode")
    try:
        return bytes.fromhex(value)
    except ValueError as exc:
        raise ValueError(f"'{name}' is not valid hex: {value!r}") from exc


@dataclass(frozen=True)
class RngConfig:
    """Seed source for one RNG.

    ``payload`` and ``key`` are hex strings so configs stay plain JSON.
    """

    mode: str = "seed"
    seed: Optional[int] = None
    payload: Optional[str] = None
    key: Optional[str] = None

    def __post_init__(self) -> None:
        if self.mode not in MODES:
            raise ValueError(f"Unknown mode '{self.mode}'. Available: {', '.join(MODES)}")
        if self.mode == "seed" and self.seed is None:
            raise ValueError("'seed' is required for mode 'seed'")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RngConfig":
        unknown = set(data) - {"mode", "seed", "payload", "key"}
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return cls(**data)

    @classmethod
    def from_json(cls, json_str: str) -> "RngConfig":
        return cls.from_dict(json.loads(json_str))

    def to_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}


def load_config(path: str | Path) -> RngConfig:
    return RngConfig.from_json(Path(path).read_text(encoding="utf-8"))


def build_rng(config: RngConfig) -> SecureRng:
    if config.mode == "time":
        return SecureRng.from_current_time()
    if config.mode == "seed":
        assert config.seed is not None  # checked in __post_init__
        return SecureRng.from_seed(config.seed)
    payload = _parse_hex("payload", config.payload)
    key = _parse_hex("key", config.key)
    if config.mode == "masked":
        return SecureRng.from_masked_seed(payload, key)
    return SecureRng.from_confused_seed(payload, key)


__all__ = ["MODES", "RngConfig", "build_rng", "load_config"]
