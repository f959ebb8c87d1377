from Crypto.PublicKey import RSA #pycryptodome
from Crypto.PublicKey.RSA import RsaKey

from typing import Optional, Sequence, Tuple

import os
import logging
logger = logging.getLogger(__name__)

from primitives import RandFunc, check_modulus

MIN_MODULUS_LENGTH = 1024


def generate_keys(modulus_length: int = 2048, randfunc: RandFunc = None) -> RsaKey:
    if modulus_length < MIN_MODULUS_LENGTH:
        raise ValueError(f"Modulus length must be at least {MIN_MODULUS_LENGTH} bits.")

    rsa_private_key = RSA.generate(modulus_length, randfunc=randfunc)
    logger.info("Generated %d-bit RSA key pair", modulus_length)
    return rsa_private_key


def key_numbers(key: RsaKey) -> Tuple[int, int, Optional[int]]:
    """(n, e, d) of a key as plain ints; d is None for a public key."""
    d = int(key.d) if key.has_private() else None
    return int(key.n), int(key.e), d


def export_public_key(key: RsaKey, path: str):
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(path, "wb") as rsaf:
        rsaf.write(key.publickey().export_key(format="PEM"))

    logger.info("Public key written to %s", path)


def load_public_key(path: str) -> RsaKey:
    with open(path, "rb") as rsaf:
        return RSA.import_key(rsaf.read())


def sign(blinded: int, d: int, n: int) -> int:
    # the signer never sees the message, only m * r^e
    check_modulus(n)
    return pow(blinded, d, n)


def sign_batch(blinded_values: Sequence[int], d: int, n: int) -> list[int]:
    signatures = []

    for i in range(len(blinded_values)):
        signatures.append(sign(blinded_values[i], d, n))

    return signatures


def sign_with_key(blinded: int, rsa_private_key: RsaKey) -> int:
    if not rsa_private_key.has_private():
        raise ValueError("Signing requires a private key.")
    return sign(blinded, int(rsa_private_key.d), int(rsa_private_key.n))
