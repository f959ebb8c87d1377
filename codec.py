"""Text and byte encodings for the integers exchanged during a protocol run."""
from Crypto.Util.number import bytes_to_long, long_to_bytes

import base64
import binascii
import string


def base64_to_int(text: str) -> int:
    """Decode standard or URL-safe base64 (padding optional), as found in JWK keys."""
    text = text.strip().replace("-", "+").replace("_", "/")
    text += "=" * (-len(text) % 4)
    try:
        data = base64.b64decode(text, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"Invalid base64 integer: {exc}") from exc
    return bytes_to_long(data)


def int_to_base64(value: int) -> str:
    if value < 0:
        raise ValueError("Only non-negative integers can be encoded.")
    return base64.b64encode(long_to_bytes(value)).decode("ascii")


def hex_to_int(text: str) -> int:
    # bare hex digits only, no sign, prefix, underscores or whitespace
    if not text or not all(c in string.hexdigits for c in text):
        raise ValueError(f"Invalid hex integer: {text!r}")
    return int(text, 16)


def int_to_hex(value: int) -> str:
    if value < 0:
        raise ValueError("Only non-negative integers can be encoded.")
    return format(value, "x")


def wire_length(n: int) -> int:
    return (n.bit_length() + 7) // 8


def int_to_wire(value: int, n: int) -> bytes:
    # fixed width big-endian, sized to the modulus
    if not 0 <= value < n:
        raise ValueError("Value must lie in [0, n).")
    return value.to_bytes(wire_length(n), "big")


def wire_to_int(data: bytes, n: int) -> int:
    if len(data) != wire_length(n):
        raise ValueError(f"Expected {wire_length(n)} bytes, got {len(data)}.")

    value = int.from_bytes(data, "big")
    if value >= n:
        raise ValueError("Value must lie in [0, n).")
    return value
