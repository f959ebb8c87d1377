from Crypto.Random import get_random_bytes
from Crypto.Util.number import GCD, inverse, bytes_to_long, size

from typing import Callable, Optional, Union, TypeAlias

import importlib
import logging
logger = logging.getLogger(__name__)

from errors import HashComputationError

Message: TypeAlias = Union[bytes, str]
RandFunc: TypeAlias = Callable[[int], bytes]

DEFAULT_HASH = "SHA256"

# collision-resistant, fixed output, keyless
DIGESTS = frozenset([
    "SHA224", "SHA256", "SHA384", "SHA512",
    "SHA3_224", "SHA3_256", "SHA3_384", "SHA3_512",
])


def message_bytes(message: Message) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    if isinstance(message, (bytes, bytearray)):
        return bytes(message)
    raise TypeError(f"message must be bytes or str, not {type(message).__name__}")


def hash_module(hash_algorithm: str):
    # resolve e.g. "SHA256" -> Crypto.Hash.SHA256
    if hash_algorithm not in DIGESTS:
        raise HashComputationError(f"{hash_algorithm!r} is not a supported fixed-length digest.")
    try:
        module = importlib.import_module("Crypto.Hash." + hash_algorithm)
    except ImportError as exc:
        raise HashComputationError(f"Hash algorithm {hash_algorithm!r} is not available.") from exc

    return module


def hash_to_int(message: Message, n: Optional[int] = None, hash_algorithm: str = DEFAULT_HASH) -> int:
    """Hash a message and read the digest as a big-endian unsigned integer.

    The result is not reduced modulo n. n is accepted only so callers can pass
    the key context along; it has no effect on the value.
    """
    data = message_bytes(message)
    hash_obj = hash_module(hash_algorithm).new(data)
    h = bytes_to_long(hash_obj.digest())

    if n is not None and h >= n:
        logger.warning("Hash integer (%d bits) is not smaller than the modulus (%d bits)", size(h), size(n))

    return h


def is_coprime(a: int, b: int) -> bool:
    if b == 0:
        raise ValueError("is_coprime is undefined for b == 0")
    return GCD(a, b) == 1


def mod_inverse(a: int, n: int) -> int:
    if not is_coprime(a, n):
        raise ValueError("No modular inverse: value is not co-prime with modulus.")
    return inverse(a, n)


def check_modulus(n: int):
    if not isinstance(n, int) or n <= 1:
        raise ValueError("Modulus must be an integer greater than 1.")


def gen_blinding_factor(n: int, randfunc: RandFunc = None) -> int:
    """Random r in [1, n) with gcd(r, n) == 1, drawn from a secure source.

    Each candidate is built from at least as many random bits as n has and
    reduced mod n. Candidates sharing a factor with n (including 0) are
    discarded and redrawn.
    """
    check_modulus(n)
    if randfunc is None:
        randfunc = get_random_bytes

    num_bytes = (size(n) + 7) // 8
    attempts = 0
    while True:
        attempts += 1
        r = bytes_to_long(randfunc(num_bytes)) % n
        if is_coprime(r, n):
            break

    logger.debug("Blinding factor drawn after %d attempt(s)", attempts)
    return r
