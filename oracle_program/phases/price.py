"""
Price parsing and fixed-point scaling.

The proxy answers with a bare JSON number. The price is scaled by a fixed
factor and truncated to an unsigned 128-bit integer for the host.
"""

import json
import math

from oracle_program.config import DEFAULT_SCALE_FACTOR
from oracle_program.exceptions import InvalidPriceError, PayloadDecodingError

U128_BYTES = 16
U128_MAX = (1 << 128) - 1


def _reject_constant(name: str) -> float:
    raise ValueError(f"{name} is not a valid numeric literal")


def decode_text(payload: bytes) -> str:
    """
    Decode a fetched payload as UTF-8.

    Raises:
        PayloadDecodingError: If the payload is not valid UTF-8
    """
    try:
        return payload.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise PayloadDecodingError(f"Payload is not valid UTF-8: {exc}") from exc


def parse_price(payload: bytes) -> float:
    """
    Parse a payload holding exactly one JSON number.

    Surrounding JSON whitespace is allowed. Strings, booleans, null, objects,
    arrays, NaN/Infinity and trailing data are rejected.

    Args:
        payload: Raw response bytes

    Returns:
        The price as a float

    Raises:
        PayloadDecodingError: If the payload is not a single numeric literal
    """
    text = decode_text(payload)
    try:
        value = json.loads(text, parse_int=float, parse_constant=_reject_constant)
    # deeply nested arrays or objects exhaust the decoder recursion limit
    except (ValueError, RecursionError) as exc:
        raise PayloadDecodingError(f"Payload is not a numeric literal: {text[:80]!r}") from exc

    # bool is a subclass of int; parse_int=float turns real integers into floats
    if isinstance(value, bool) or not isinstance(value, float):
        raise PayloadDecodingError(f"Payload is not a numeric literal: {text[:80]!r}")

    return value


def scale_price(price: float, factor: int = DEFAULT_SCALE_FACTOR) -> int:
    """
    Scale a price to a fixed-point integer, truncating toward zero.

    Args:
        price: Parsed price
        factor: Fixed-point multiplier

    Returns:
        The scaled value, guaranteed to fit in an unsigned 128-bit integer

    Raises:
        InvalidPriceError: If the price is NaN, infinite, negative or too large
    """
    if math.isnan(price) or math.isinf(price):
        raise InvalidPriceError(f"Price {price} is not finite")
    if price < 0:
        raise InvalidPriceError(f"Price {price} is negative")

    scaled = price * factor
    if math.isinf(scaled):
        raise InvalidPriceError(f"Price {price} overflows when scaled by {factor}")

    value = math.trunc(scaled)
    if value > U128_MAX:
        raise InvalidPriceError(f"Scaled price {value} does not fit in 128 bits")
    return value


def encode_u128(value: int) -> bytes:
    """Encode an unsigned 128-bit integer as 16 little-endian bytes."""
    if not 0 <= value <= U128_MAX:
        raise ValueError(f"{value} is out of range for an unsigned 128-bit integer")
    return value.to_bytes(U128_BYTES, "little")


def decode_u128(data: bytes) -> int:
    """Decode 16 little-endian bytes into an unsigned 128-bit integer."""
    if len(data) != U128_BYTES:
        raise ValueError(f"Expected {U128_BYTES} bytes, got {len(data)}")
    return int.from_bytes(data, "little")
