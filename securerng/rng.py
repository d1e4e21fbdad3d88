"""Seeded ChaCha12 random source.

Every draw flows from one 64-bit seed, so two instances built from the same
seed produce the same stream for as long as they are pulled.
"""

from __future__ import annotations

import hashlib
import logging
from datetime import datetime, timezone
from typing import Optional

import numpy as np
from randomgen import ChaCha

from .transform import (
    U64_MAX,
    BytesLike,
    bytes_to_seed,
    check_seed,
    decode_confused_then_mask,
    encode_mask,
)

logger = logging.getLogger(__name__)

CHACHA_ROUNDS = 12

# PCG32 constants used to stretch a u64 seed into a 256-bit key.
_PCG_MUL = 6364136223846793005
_PCG_INC = 11634580027462260723
_U32_MASK = 0xFFFFFFFF


def expand_seed(seed: int) -> bytes:
    """Stretch a u64 seed into 32 key bytes with eight PCG32 (XSH-RR) steps."""
    state = check_seed(seed)
    key = bytearray()
    for _ in range(8):
        state = (state * _PCG_MUL + _PCG_INC) & U64_MAX
        xorshifted = (((state >> 18) ^ state) >> 27) & _U32_MASK
        rot = state >> 59
        word = ((xorshifted >> rot) | (xorshifted << ((-rot) & 31))) & _U32_MASK
        key += word.to_bytes(4, "little")
    return bytes(key)


def current_time_millis() -> int:
    """Milliseconds since the Unix epoch, truncated to 64 bits."""
    now = datetime.now(timezone.utc)
    return int(now.timestamp() * 1000) & U64_MAX


class SecureRng:
    """Exclusively owned ChaCha12 stream seeded from a u64.

    Not safe to share between threads without an external lock; build one
    instance per worker instead.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is None:
            seed = current_time_millis()
            logger.debug("Seeding SecureRng from the wall clock")
        key = int.from_bytes(expand_seed(seed), "little")
        self._bit_generator = ChaCha(key=key, rounds=CHACHA_ROUNDS)
        self._generator = np.random.Generator(self._bit_generator)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rounds={CHACHA_ROUNDS})"

    @classmethod
    def from_seed(cls, seed: int) -> "SecureRng":
        return cls(check_seed(seed))

    @classmethod
    def from_current_time(cls) -> "SecureRng":
        """Time-seeded instance; convenient, but not reproducible."""
        return cls(None)

    @classmethod
    def from_masked_seed(cls, obfuscated: BytesLike, key: BytesLike) -> "SecureRng":
        """Build from a seed produced by :func:`encode_mask`."""
        seed = bytes_to_seed(encode_mask(obfuscated, key))
        logger.debug("Seeding SecureRng from a masked seed")
        return cls(seed)

    @classmethod
    def from_confused_seed(cls, obfuscated: BytesLike, key: BytesLike) -> "SecureRng":
        """Build from a seed produced by :func:`encode_mask_confused`."""
        seed = bytes_to_seed(decode_confused_then_mask(obfuscated, key))
        logger.debug("Seeding SecureRng from a confused seed")
        return cls(seed)

    def next_u32(self) -> int:
        return int(self._generator.integers(0, 1 << 32, dtype=np.uint32))

    def next_u64(self) -> int:
        return int(self._bit_generator.random_raw())


def stream_digest(rng: SecureRng, count: int, width: int = 64) -> str:
    """SHA-256 over the next ``count`` draws of ``width`` bits.

    Two instances seeded alike yield the same digest; the draws are consumed.
    """
    if width not in (32, 64):
        raise ValueError(f"Unsupported width {width}; expected 32 or 64")
    draw = rng.next_u32 if width == 32 else rng.next_u64
    hasher = hashlib.sha256()
    for _ in range(count):
        hasher.update(draw().to_bytes(width // 8, "little"))
    return hasher.hexdigest()


__all__ = ["CHACHA_ROUNDS", "SecureRng", "current_time_millis", "expand_seed", "stream_digest"]
