"""Failure types raised by the seed transforms and the RNG wrapper."""

from __future__ import annotations


class SecureRngError(ValueError):
    """Base class for invalid keys, payloads and seeds."""


class KeyTooShortError(SecureRngError):
    """Key is shorter than the masking minimum."""

    def __init__(self, length: int, minimum: int) -> None:
        super().__init__(f"Key must be at least {minimum} bytes, got {length}")
        self.length = length
        self.minimum = minimum


class OddLengthError(SecureRngError):
    """Payload length is odd where the confusion permutation needs pairs."""

    def __init__(self, length: int) -> None:
        super().__init__(f"Data length must be even for confusion, got {length}")
        self.length = length


class SeedLengthError(SecureRngError):
    """Recovered seed bytes are not a little-endian u64."""

    def __init__(self, length: int, expected: int) -> None:
        super().__init__(f"Seed payload must be exactly {expected} bytes, got {length}")
        self.length = length
        self.expected = expected


__all__ = ["KeyTooShortError", "OddLengthError", "SecureRngError", "SeedLengthError"]
