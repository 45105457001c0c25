"""Shared KFS constants used by the addressing helpers and the CLI."""

# Default capacity of a single table
TOTAL_CAPACITY_BYTES = 32 * 1024 * 1024 * 1024
CHUNK_SIZE_BYTES = 128 * 1024
BUCKET_COUNT = 256
REFERENCE_BITS = 160

# File naming
TABLE_EXTENSION = ".kfs"
BUCKET_SUFFIX = ".s"
ITEM_KEY_SEPARATOR = " "

# Marker the storage engine puts in front of "key absent" messages
NOT_FOUND_MARKER = "NotFound:"
