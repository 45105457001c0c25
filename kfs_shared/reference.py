"""Reference identifiers: fixed-width binary ids exchanged as lowercase hex."""

from __future__ import annotations

import secrets
import string

from .capacity import CapacityConfig
from .errors import InvalidArgumentError, InvalidLengthError

_HEX_DIGITS = frozenset(string.hexdigits)


def is_hex_string(value, length: int) -> bool:
    """Return True when ``value`` is a string of exactly ``length`` hex digits."""
    return isinstance(value, str) and len(value) == length and _HEX_DIGITS.issuperset(value)


def create_reference_id(capacity: CapacityConfig, rid: str | None = None) -> bytes:
    """Return the binary reference id for ``rid``, generating one when absent.

    Args:
        capacity: Capacity configuration; ``reference_bits`` sets the width.
        rid: Existing hex reference id. ``None`` or an empty string requests
            a fresh random id from the system CSPRNG.

    Returns:
        bytes: ``capacity.reference_bytes`` raw bytes.

    Raises:
        InvalidLengthError: If ``rid`` is not ``reference_bits / 4`` characters.
        InvalidArgumentError: If ``rid`` is not a hex string.
    """
    if not rid:
        rid = secrets.token_hex(capacity.reference_bytes)

    if not isinstance(rid, str):
        raise InvalidArgumentError("Invalid reference ID supplied")
    if len(rid) != capacity.reference_hex_length:
        raise InvalidLengthError("Invalid reference ID length")
    if not is_hex_string(rid, capacity.reference_hex_length):
        raise InvalidArgumentError("Reference ID must be hexadecimal")

    return bytes.fromhex(rid)


def reference_id_to_hex(rid: bytes) -> str:
    """Return the lowercase hex external form of a binary reference id."""
    return bytes(rid).hex()


__all__ = ["create_reference_id", "reference_id_to_hex", "is_hex_string"]
