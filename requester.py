from typing import NamedTuple

import logging
logger = logging.getLogger(__name__)

from errors import NonCoprimeHashError, InvalidSignatureError
from primitives import (Message, RandFunc, DEFAULT_HASH, check_modulus, gen_blinding_factor,
                        hash_to_int, is_coprime, mod_inverse)
from verifier import verify


class Blinded(NamedTuple):
    # blinded goes to the signer, r stays with the requester
    blinded: int
    r: int


def blind(message: Message, e: int, n: int, randfunc: RandFunc = None,
          hash_algorithm: str = DEFAULT_HASH) -> Blinded:
    """Blind the hash of a message for the holder of the key (n, e).

    Returns the blinded value m * r^e mod n together with the fresh blinding
    factor r. Use a new call (and so a new r) for every signature request.

    Raises NonCoprimeHashError before drawing any randomness if the message
    hash shares a factor with n.
    """
    check_modulus(n)
    m = hash_to_int(message, n, hash_algorithm)
    if not is_coprime(m, n):
        raise NonCoprimeHashError()

    r = gen_blinding_factor(n, randfunc)

    # m' = m * r^e mod n
    blinded = (m * pow(r, e, n)) % n
    logger.debug("Blinded message hash under a %d-bit modulus", n.bit_length())
    return Blinded(blinded, r)


def unblind(signed: int, r: int, n: int) -> int:
    check_modulus(n)
    r_inv = mod_inverse(r, n)
    return (signed * r_inv) % n


def unblind_verify(message: Message, signed: int, r: int, e: int, n: int,
                   hash_algorithm: str = DEFAULT_HASH) -> int:
    """Unblind the signer's answer and check it against the message.

    Returns the unblinded signature, or raises InvalidSignatureError if it does
    not verify under (n, e).
    """
    unblinded = unblind(signed, r, n)
    if not verify(message, unblinded, e, n, hash_algorithm):
        raise InvalidSignatureError()
    return unblinded
