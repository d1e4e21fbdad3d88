"""Seed obfuscation transforms.

Masking XORs data with a cyclically repeated key. Confusion additionally swaps
the even-indexed bytes of the first half with their mirrors in the second
half, so the masked payload has to be de-permuted before it can be unmasked.

Every function here is pure and returns a fresh ``bytes`` object, so the
module is safe to call from any number of threads.
"""

from __future__ import annotations

from typing import Union

import numpy as np

from .errors import KeyTooShortError, OddLengthError, SeedLengthError

BytesLike = Union[bytes, bytearray, memoryview]

MIN_KEY_LENGTH = 8
SEED_LENGTH = 8
U64_MAX = (1 << 64) - 1


def _as_bytes(value: BytesLike) -> bytes:
    if isinstance(value, (str, int)):
        raise TypeError(f"Expected a byte sequence, got {type(value).__name__}")
    return bytes(value)


def _check_key(key: bytes) -> None:
    if len(key) < MIN_KEY_LENGTH:
        raise KeyTooShortError(len(key), MIN_KEY_LENGTH)


def _check_even(data: bytes) -> None:
    if len(data) % 2 != 0:
        raise OddLengthError(len(data))


def encode_mask(data: BytesLike, key: BytesLike) -> bytes:
    """XOR ``data`` with ``key`` repeated to the data length.

    Applying it twice with the same key returns the original data.
    """
    data = _as_bytes(data)
    key = _as_bytes(key)
    _check_key(key)
    plain = np.frombuffer(data, dtype=np.uint8)
    # np.resize repeats the key cyclically: stream[i] == key[i % len(key)]
    stream = np.resize(np.frombuffer(key, dtype=np.uint8), plain.shape)
    return np.bitwise_xor(plain, stream).tobytes()


def confuse(data: BytesLike) -> bytes:
    """Apply the fixed even/odd half-swap permutation to ``data``.

    Odd positions pass through. Each even position ``i`` below the midpoint
    trades places with ``i + len(data) // 2``. The permutation is its own
    inverse whenever the length is a multiple of four.
    """
    data = _as_bytes(data)
    _check_even(data)
    length = len(data)
    half = length // 2
    out = bytearray(length)
    for i in range(length):
        if i % 2 != 0:
            out[i] = data[i]
        elif i < half:
            j = i + half
            out[j] = data[i]
            out[i] = data[j]
    return bytes(out)


def encode_mask_confused(data: BytesLike, key: BytesLike) -> bytes:
    """Mask ``data`` with ``key`` and then confuse the result."""
    masked = encode_mask(data, key)
    _check_even(masked)
    return confuse(masked)


def decode_confused_then_mask(data: BytesLike, key: BytesLike) -> bytes:
    """Inverse of :func:`encode_mask_confused`: de-permute, then unmask."""
    data = _as_bytes(data)
    _check_key(_as_bytes(key))
    _check_even(data)
    return encode_mask(confuse(data), key)


def check_seed(seed: int) -> int:
    if not 0 <= seed <= U64_MAX:
        raise ValueError(f"Seed must be an unsigned 64-bit integer, got {seed}")
    return int(seed)


def seed_to_bytes(seed: int) -> bytes:
    """Little-endian u64 encoding of ``seed``."""
    return check_seed(seed).to_bytes(SEED_LENGTH, "little")


def bytes_to_seed(data: BytesLike) -> int:
    data = _as_bytes(data)
    if len(data) != SEED_LENGTH:
        raise SeedLengthError(len(data), SEED_LENGTH)
    return int.from_bytes(data, "little")


__all__ = [
    "MIN_KEY_LENGTH",
    "SEED_LENGTH",
    "U64_MAX",
    "bytes_to_seed",
    "check_seed",
    "confuse",
    "decode_confused_then_mask",
    "encode_mask",
    "encode_mask_confused",
    "seed_to_bytes",
]
