"""Obfuscate a u64 seed so it can be stored or shipped without the plaintext.

Examples:
  python tools/mask_seed.py --seed 1727517952591 --key ffffffffffffff7f
  python tools/mask_seed.py --time --key 00badcfeefcdabff --confused
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from securerng.errors import SecureRngError  # noqa: E402
from securerng.rng import current_time_millis  # noqa: E402
from securerng.transform import encode_mask, encode_mask_confused, seed_to_bytes  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--seed", type=int, help="Plain u64 seed")
    source.add_argument("--time", action="store_true", help="Use the current time in ms as the seed")
    parser.add_argument("--key", type=str, required=True, help="Key as hex, at least 8 bytes")
    parser.add_argument("--confused", action="store_true", help="Also apply the confusion permutation")
    return parser.parse_args(argv)


def obfuscate(seed: int, key: bytes, confused: bool = False) -> bytes:
    plain = seed_to_bytes(seed)
    if confused:
        return encode_mask_confused(plain, key)
    return encode_mask(plain, key)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    seed = current_time_millis() if args.time else args.seed
    try:
        payload = obfuscate(seed, bytes.fromhex(args.key), confused=args.confused)
    except (SecureRngError, ValueError) as exc:
        raise SystemExit(f"mask_seed: {exc}") from exc
    print(payload.hex())


if __name__ == "__main__":
    main()
