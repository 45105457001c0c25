"""Item keys and bucket file names for a KFS table.

Both names use fixed-width, zero-padded decimal fields whose widths come from
the table's ``CapacityConfig``. Equal widths make lexicographic order match
numeric order, so sorted keys and sorted directory listings need no parsing:

    create_item_key(cap, "a1" * 20, 42)  == "a1a1...a1 000042"
    create_bucket_name(cap, 7)           == "007.s"
"""

from __future__ import annotations

from typing import Tuple

from .capacity import CapacityConfig, is_strict_int
from .constants import BUCKET_SUFFIX, ITEM_KEY_SEPARATOR
from .errors import IndexOutOfBoundsError, InvalidArgumentError
from .reference import is_hex_string


def create_item_key(capacity: CapacityConfig, content_hash: str, index: int) -> str:
    """Return the slot key for chunk ``index`` of the object ``content_hash``.

    Args:
        capacity: Capacity configuration of the table.
        content_hash: Hex digest exactly ``reference_bits`` bits wide.
        index: Non-negative chunk ordinal within the object.

    Returns:
        str: ``"<hash> <zero-padded index>"`` with a lowercase hash.

    Raises:
        InvalidArgumentError: If ``index`` is not an integer or the hash has
            the wrong width.
        IndexOutOfBoundsError: If ``index`` has more digits than the index
            field allows.
    """
    if not is_strict_int(index) or index < 0:
        raise InvalidArgumentError("Invalid index supplied")
    if not is_hex_string(content_hash, capacity.reference_hex_length):
        raise InvalidArgumentError("Invalid key length")

    index_string = str(index)
    if len(index_string) > capacity.index_width:
        raise IndexOutOfBoundsError("Index is out of bounds")

    return f"{content_hash.lower()}{ITEM_KEY_SEPARATOR}{index_string.zfill(capacity.index_width)}"


def parse_item_key(capacity: CapacityConfig, item_key: str) -> Tuple[str, int]:
    """Split an item key back into its content hash and chunk index.

    Raises:
        InvalidArgumentError: If ``item_key`` was not produced by ``create_item_key``.
    """
    parts = item_key.split(ITEM_KEY_SEPARATOR) if isinstance(item_key, str) else []
    if len(parts) != 2:
        raise InvalidArgumentError(f"Malformed item key: {item_key!r}")
    content_hash, index_field = parts
    if not is_hex_string(content_hash, capacity.reference_hex_length):
        raise InvalidArgumentError("Invalid key length")
    if len(index_field) != capacity.index_width or not (index_field.isascii() and index_field.isdecimal()):
        raise InvalidArgumentError(f"Malformed index field: {index_field!r}")
    return content_hash.lower(), int(index_field)


def create_bucket_name(capacity: CapacityConfig, ordinal: int) -> str:
    """Return the file name of the bucket at ``ordinal``.

    Raises:
        InvalidArgumentError: If ``ordinal`` is not an integer.
        IndexOutOfBoundsError: If ``ordinal`` is outside ``[0, bucket_count)``.
    """
    if not is_strict_int(ordinal):
        raise InvalidArgumentError("Invalid index supplied")
    if not 0 <= ordinal < capacity.bucket_count:
        raise IndexOutOfBoundsError(
            f"Bucket index {ordinal} outside [0, {capacity.bucket_count})"
        )
    return str(ordinal).zfill(capacity.bucket_width) + BUCKET_SUFFIX


def parse_bucket_name(capacity: CapacityConfig, name: str) -> int:
    """Return the ordinal encoded in a bucket file name."""
    if not isinstance(name, str) or not name.endswith(BUCKET_SUFFIX):
        raise InvalidArgumentError(f"Not a bucket file name: {name!r}")
    digits = name[: -len(BUCKET_SUFFIX)]
    if len(digits) != capacity.bucket_width or not (digits.isascii() and digits.isdecimal()):
        raise InvalidArgumentError(f"Not a bucket file name: {name!r}")
    ordinal = int(digits)
    if ordinal >= capacity.bucket_count:
        raise IndexOutOfBoundsError(
            f"Bucket index {ordinal} outside [0, {capacity.bucket_count})"
        )
    return ordinal


def bucket_index_for_key(capacity: CapacityConfig, reference_id: bytes, content_hash: str) -> int:
    """Place ``content_hash`` in a bucket by its XOR distance to ``reference_id``.

    The distance is scaled onto ``[0, bucket_count)`` by its most significant
    bits; with 256 buckets the result is the first byte of the distance.

    Args:
        capacity: Capacity configuration of the table.
        reference_id: Binary reference id of the table.
        content_hash: Hex digest of the stored object.

    Returns:
        int: Bucket ordinal holding every chunk of ``content_hash``.
    """
    if len(reference_id) != capacity.reference_bytes:
        raise InvalidArgumentError("Invalid reference ID length")
    if not is_hex_string(content_hash, capacity.reference_hex_length):
        raise InvalidArgumentError("Invalid key length")

    key_bytes = bytes.fromhex(content_hash)
    distance = int.from_bytes(bytes(a ^ b for a, b in zip(reference_id, key_bytes)), "big")
    return (distance * capacity.bucket_count) >> capacity.reference_bits


__all__ = [
    "create_item_key",
    "parse_item_key",
    "create_bucket_name",
    "parse_bucket_name",
    "bucket_index_for_key",
]
