from typing import Sequence

import logging
logger = logging.getLogger(__name__)

from primitives import Message, DEFAULT_HASH, check_modulus, hash_to_int


def verify(message: Message, signature: int, e: int, n: int, hash_algorithm: str = DEFAULT_HASH) -> bool:
    """Plain RSA signature check: hash(message) == signature^e (mod n).

    Works for any RSA signature over the message hash, whether or not it was
    obtained through blinding.
    """
    check_modulus(n)
    m = hash_to_int(message, n, hash_algorithm)
    return m % n == pow(signature, e, n)


def verify_batch(messages: Sequence[Message], signatures: Sequence[int], e: int, n: int,
                 hash_algorithm: str = DEFAULT_HASH) -> bool:
    if len(messages) != len(signatures):
        raise ValueError("messages and signatures must have the same length")

    for i in range(len(messages)):
        if not verify(messages[i], signatures[i], e, n, hash_algorithm):
            logger.info("Signature %d of %d did not verify", i + 1, len(messages))
            return False

    return True
