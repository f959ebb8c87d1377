from enum import Enum


class ErrorKind(Enum):
    PROTOCOL = "protocol"
    NON_COPRIME_HASH = "non_coprime_hash"
    INVALID_SIGNATURE = "invalid_signature"
    HASH_COMPUTATION = "hash_computation"


class BlindSignatureError(Exception):
    """Base class for failures of a blind signature protocol run."""
    kind: ErrorKind = ErrorKind.PROTOCOL

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NonCoprimeHashError(BlindSignatureError):
    # this (message, modulus) pair can never be blinded, do not retry it
    kind = ErrorKind.NON_COPRIME_HASH

    def __init__(self, message: str = "Message hash is not co-prime with modulus."):
        super().__init__(message)


class InvalidSignatureError(BlindSignatureError):
    kind = ErrorKind.INVALID_SIGNATURE

    def __init__(self, message: str = "Invalid signature."):
        super().__init__(message)


class HashComputationError(BlindSignatureError):
    kind = ErrorKind.HASH_COMPUTATION
