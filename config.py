from dataclasses import dataclass, fields

import json # for reading blind-config.json

from signer import MIN_MODULUS_LENGTH
from primitives import DEFAULT_HASH, hash_module


@dataclass
class BlindConfig:
    modulus_length: int = 2048
    hash_algorithm: str = DEFAULT_HASH
    public_key_path: str = "public/rsa.pub"
    message: str = "Hello world!"

    def validate(self):
        if not isinstance(self.modulus_length, int) or self.modulus_length < MIN_MODULUS_LENGTH:
            raise ValueError(f"modulus_length must be an integer >= {MIN_MODULUS_LENGTH}")
        for name in ("hash_algorithm", "public_key_path", "message"):
            if not isinstance(getattr(self, name), str):
                raise ValueError(f"{name} must be a string")
        # fails with HashComputationError for an unusable digest
        hash_module(self.hash_algorithm)


def config_from_dict(json_data: dict) -> BlindConfig:
    known = {field.name for field in fields(BlindConfig)}
    unknown = set(json_data) - known
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")

    config = BlindConfig(**json_data)
    config.validate()
    return config


def load_config(path: str) -> BlindConfig:
    with open(path) as json_file:
        json_data = json.load(json_file)

    if not isinstance(json_data, dict):
        raise ValueError("Config file must hold a JSON object")
    return config_from_dict(json_data)
