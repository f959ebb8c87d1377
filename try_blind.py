import sys
import logging
logger = logging.getLogger(__name__)

from config import BlindConfig, load_config
from primitives import RandFunc
from codec import int_to_base64, int_to_wire, wire_to_int
from requester import blind, unblind_verify
from signer import generate_keys, key_numbers, export_public_key, sign


def run(config: BlindConfig, randfunc: RandFunc = None) -> int:
    """One full protocol run between a requester and a signer.

    Blinded and signed values cross between the parties in their wire form.
    Returns the unblinded signature on config.message.
    """
    # Signer: generate the RSA key pair and publish the public half
    rsa_private_key = generate_keys(config.modulus_length, randfunc)
    export_public_key(rsa_private_key, config.public_key_path)
    n, e, d = key_numbers(rsa_private_key)

    # Requester: blind the message
    blinded, r = blind(config.message, e, n, randfunc, config.hash_algorithm)
    request = int_to_wire(blinded, n)

    # Signer: sign the blinded message
    response = int_to_wire(sign(wire_to_int(request, n), d, n), n)

    # Requester: unblind and check the signature
    signature = unblind_verify(config.message, wire_to_int(response, n), r, e, n, config.hash_algorithm)
    logger.info("Signature on %r verified", config.message)
    return signature


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    config = load_config(sys.argv[1]) if len(sys.argv) > 1 else BlindConfig()
    signature = run(config)

    print(f"Signature: {int_to_base64(signature)}")
