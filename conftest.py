import random

import pytest

from signer import generate_keys, key_numbers


class ScriptedRandom:
    """randfunc that hands out prepared byte strings and records each request."""

    def __init__(self, outputs):
        self.outputs = list(outputs)
        self.requests = []

    def __call__(self, num_bytes):
        self.requests.append(num_bytes)
        return self.outputs.pop(0)


def seeded_randfunc(seed):
    return random.Random(seed).randbytes


@pytest.fixture(scope="session")
def rsa_key():
    return generate_keys(2048)


@pytest.fixture(scope="session")
def key_params(rsa_key):
    # (n, e, d)
    return key_numbers(rsa_key)


@pytest.fixture
def message():
    return "Hello world!"
