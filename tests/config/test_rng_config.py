import json

import pytest

from securerng.config import RngConfig, build_rng, load_config
from securerng.errors import KeyTooShortError
from securerng.rng import SecureRng
from securerng.transform import encode_mask, encode_mask_confused, seed_to_bytes

SEED = 1727517952591
KEY = seed_to_bytes(0x7FFFFFFFFFFFFFFF)


def first_draws(rng: SecureRng) -> list[int]:
    return [rng.next_u64() for _ in range(32)]


def test_seed_mode_builds_plain_stream():
    config = RngConfig(mode="seed", seed=SEED)
    assert first_draws(build_rng(config)) == first_draws(SecureRng.from_seed(SEED))


@pytest.mark.parametrize(
    "mode, transform",
    [("masked", encode_mask), ("confused", encode_mask_confused)],
)
def test_obfuscated_modes_recover_seed(mode, transform):
    payload = transform(seed_to_bytes(SEED), KEY)
    config = RngConfig(mode=mode, payload=payload.hex(), key=KEY.hex())
    assert first_draws(build_rng(config)) == first_draws(SecureRng.from_seed(SEED))


def test_time_mode_needs_no_seed():
    rng = build_rng(RngConfig(mode="time"))
    assert 0 <= rng.next_u32() < 1 << 32


def test_load_config_from_file(tmp_path):
    path = tmp_path / "rng.json"
    payload = encode_mask(seed_to_bytes(SEED), KEY).hex()
    path.write_text(json.dumps({"mode": "masked", "payload": payload, "key": KEY.hex()}))
    config = load_config(path)
    assert config == RngConfig(mode="masked", payload=payload, key=KEY.hex())
    assert RngConfig.from_json(json.dumps(config.to_dict())) == config


def test_to_dict_drops_unset_fields():
    assert RngConfig(mode="seed", seed=5).to_dict() == {"mode": "seed", "seed": 5}


def test_invalid_configs_rejected():
    with pytest.raises(ValueError, match="Unknown mode"):
        RngConfig(mode="lottery")
    with pytest.raises(ValueError, match="'seed' is required"):
        RngConfig(mode="seed")
    with pytest.raises(ValueError, match="Unknown config keys"):
        RngConfig.from_dict({"mode": "seed", "seed": 1, "salt": "x"})


def test_obfuscated_modes_validate_inputs():
    with pytest.raises(ValueError, match="'key' is required"):
        build_rng(RngConfig(mode="masked", payload="00" * 8))
    with pytest.raises(ValueError, match="not valid hex"):
        build_rng(RngConfig(mode="masked", payload="zz", key=KEY.hex()))
    with pytest.raises(KeyTooShortError):
        build_rng(RngConfig(mode="confused", payload="00" * 8, key="0011"))
