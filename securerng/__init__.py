"""Seedable ChaCha12 random source with seed obfuscation."""

from .config import RngConfig, build_rng, load_config
from .errors import KeyTooShortError, OddLengthError, SecureRngError, SeedLengthError
from .rng import SecureRng, expand_seed, stream_digest
from .transform import (
    bytes_to_seed,
    confuse,
    decode_confused_then_mask,
    encode_mask,
    encode_mask_confused,
    seed_to_bytes,
)

__all__ = [
    "KeyTooShortError",
    "OddLengthError",
    "RngConfig",
    "SecureRng",
    "SecureRngError",
    "SeedLengthError",
    "build_rng",
    "bytes_to_seed",
    "confuse",
    "decode_confused_then_mask",
    "encode_mask",
    "encode_mask_confused",
    "expand_seed",
    "load_config",
    "seed_to_bytes",
    "stream_digest",
]
