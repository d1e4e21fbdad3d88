"""
Headless throughput benchmark for the seed transforms and the RNG accessors.

Prints a short summary in milliseconds per batch.

Examples:
  python tools/benchmark.py
  python tools/benchmark.py --draws 200000 --round-trips 5000
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from securerng.rng import SecureRng  # noqa: E402
from securerng.transform import (  # noqa: E402
    bytes_to_seed,
    decode_confused_then_mask,
    encode_mask,
    encode_mask_confused,
    seed_to_bytes,
)

BENCH_KEY = seed_to_bytes(0xFFABCDEFFEDCBA00)
FIRST_SEED = 0x1FFFFFFFFFFFFFFF


def _fmt(v: float) -> str:
    return f"{v:0.3f}"


def bench_mask(round_trips: int) -> float:
    start = time.perf_counter()
    for n in range(FIRST_SEED, FIRST_SEED + round_trips):
        plain = encode_mask(encode_mask(seed_to_bytes(n), BENCH_KEY), BENCH_KEY)
        assert bytes_to_seed(plain) == n
    return (time.perf_counter() - start) * 1000.0


def bench_confused(round_trips: int) -> float:
    start = time.perf_counter()
    for n in range(FIRST_SEED, FIRST_SEED + round_trips):
        obfuscated = encode_mask_confused(seed_to_bytes(n), BENCH_KEY)
        assert bytes_to_seed(decode_confused_then_mask(obfuscated, BENCH_KEY)) == n
    return (time.perf_counter() - start) * 1000.0


def bench_draws(rng: SecureRng, draws: int, width: int) -> float:
    draw = rng.next_u32 if width == 32 else rng.next_u64
    start = time.perf_counter()
    for _ in range(draws):
        draw()
    return (time.perf_counter() - start) * 1000.0


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="SecureRng throughput benchmark (ms per batch)")
    ap.add_argument("--round-trips", type=int, default=10000)
    ap.add_argument("--draws", type=int, default=1000000)
    ns = ap.parse_args(argv)

    rng = SecureRng.from_current_time()
    results = {
        f"mask round trip x{ns.round_trips}": bench_mask(ns.round_trips),
        f"confused round trip x{ns.round_trips}": bench_confused(ns.round_trips),
        f"next_u32 x{ns.draws}": bench_draws(rng, ns.draws, 32),
        f"next_u64 x{ns.draws}": bench_draws(rng, ns.draws, 64),
    }
    for name, ms in results.items():
        print(f"{name}: {_fmt(ms)} ms")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
