import json
import os

import pytest

from config import BlindConfig, config_from_dict, load_config
from errors import HashComputationError

HERE = os.path.dirname(os.path.abspath(__file__))


def write_config(tmp_path, data):
    path = tmp_path / "blind-config.json"
    path.write_text(json.dumps(data))
    return str(path)


def test_defaults():
    config = BlindConfig()
    assert config.modulus_length == 2048
    assert config.hash_algorithm == "SHA256"
    assert config.message == "Hello world!"
    config.validate()


def test_shipped_config_loads():
    config = load_config(os.path.join(HERE, "blind-config.json"))
    assert config == BlindConfig()


def test_partial_config_takes_defaults(tmp_path):
    config = load_config(write_config(tmp_path, {"message": "vote for 3"}))
    assert config.message == "vote for 3"
    assert config.modulus_length == 2048


def test_unknown_keys_rejected():
    with pytest.raises(ValueError):
        config_from_dict({"candidates": ["a", "b"]})


def test_invalid_values_rejected():
    with pytest.raises(ValueError):
        config_from_dict({"modulus_length": 512})
    with pytest.raises(ValueError):
        config_from_dict({"modulus_length": "2048"})
    with pytest.raises(ValueError):
        config_from_dict({"message": 7})
    with pytest.raises(HashComputationError):
        config_from_dict({"hash_algorithm": "MD99"})
    with pytest.raises(HashComputationError):
        config_from_dict({"hash_algorithm": "CMAC"})
    with pytest.raises(HashComputationError):
        config_from_dict({"hash_algorithm": "MD5"})


def test_non_object_json_rejected(tmp_path):
    with pytest.raises(ValueError):
        load_config(write_config(tmp_path, ["SHA256"]))
