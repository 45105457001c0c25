"""Bind a table path, its capacity and its reference id into one layout."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .capacity import DEFAULT_CAPACITY, CapacityConfig
from .logging_config import log
from .naming import bucket_index_for_key, create_bucket_name, create_item_key
from .paths import coerce_table_path, file_does_exist
from .reference import create_reference_id, reference_id_to_hex


@dataclass(frozen=True)
class TableLayout:
    """Naming for one KFS table: where buckets live and how slots are keyed.

    Args:
        table_path: Path of the table directory; ``.kfs`` is appended when missing.
        capacity: Capacity configuration shared by every name in the table.
        reference_hex: Hex reference id of the table. A random one is
            generated when omitted and kept in lowercase hex form.
    """

    table_path: str | os.PathLike
    capacity: CapacityConfig = DEFAULT_CAPACITY
    reference_hex: str | None = None

    def __post_init__(self):
        rid = create_reference_id(self.capacity, self.reference_hex)
        object.__setattr__(self, "table_path", coerce_table_path(self.table_path))
        object.__setattr__(self, "reference_hex", reference_id_to_hex(rid))
        log.debug("Table layout %s rid=%s", self.table_path, self.reference_hex)

    @property
    def reference_id(self) -> bytes:
        return bytes.fromhex(self.reference_hex)

    def item_key(self, content_hash: str, index: int) -> str:
        return create_item_key(self.capacity, content_hash, index)

    def bucket_name(self, ordinal: int) -> str:
        return create_bucket_name(self.capacity, ordinal)

    def bucket_path(self, ordinal: int) -> str:
        """Return the full path of the bucket file at ``ordinal``."""
        return os.path.join(self.table_path, self.bucket_name(ordinal))

    def bucket_for_key(self, content_hash: str) -> int:
        return bucket_index_for_key(self.capacity, self.reference_id, content_hash)

    def bucket_path_for_key(self, content_hash: str) -> str:
        """Return the path of the bucket file that stores ``content_hash``."""
        return self.bucket_path(self.bucket_for_key(content_hash))

    def exists(self) -> bool:
        return file_does_exist(self.table_path)


__all__ = ["TableLayout"]
