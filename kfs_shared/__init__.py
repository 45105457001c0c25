"""Shared exports for KFS table addressing."""

from .capacity import DEFAULT_CAPACITY, CapacityConfig, load_capacity  # noqa: F401
from .constants import (  # noqa: F401
    BUCKET_SUFFIX,
    NOT_FOUND_MARKER,
    TABLE_EXTENSION,
)
from .errors import (  # noqa: F401
    AddressingError,
    CapacityConfigError,
    IndexOutOfBoundsError,
    InvalidArgumentError,
    InvalidLengthError,
    NotFoundError,
    is_not_found_error,
)
from .layout import TableLayout  # noqa: F401
from .naming import (  # noqa: F401
    bucket_index_for_key,
    create_bucket_name,
    create_item_key,
    parse_bucket_name,
    parse_item_key,
)
from .paths import coerce_table_path, file_does_exist  # noqa: F401
from .reference import create_reference_id, reference_id_to_hex  # noqa: F401

__all__ = [
    "BUCKET_SUFFIX",
    "NOT_FOUND_MARKER",
    "TABLE_EXTENSION",
    "CapacityConfig",
    "DEFAULT_CAPACITY",
    "load_capacity",
    "AddressingError",
    "CapacityConfigError",
    "IndexOutOfBoundsError",
    "InvalidArgumentError",
    "InvalidLengthError",
    "NotFoundError",
    "is_not_found_error",
    "TableLayout",
    "create_item_key",
    "parse_item_key",
    "create_bucket_name",
    "parse_bucket_name",
    "bucket_index_for_key",
    "coerce_table_path",
    "file_does_exist",
    "create_reference_id",
    "reference_id_to_hex",
]
