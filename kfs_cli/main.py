"""Command-line helper for deriving KFS table names."""
# Example:
# python -m kfs_cli.main item-key a1a1a1a1a1a1a1a1a1a1a1a1a1a1a1a1a1a1a1a1 42

from __future__ import annotations

import json
import sys
from argparse import ArgumentDefaultsHelpFormatter, ArgumentParser, RawDescriptionHelpFormatter
from dataclasses import asdict

from kfs_shared import (
    AddressingError,
    TableLayout,
    coerce_table_path,
    create_bucket_name,
    create_item_key,
    create_reference_id,
    load_capacity,
    reference_id_to_hex,
)
from kfs_shared.logging_config import configure_logging, log


# Combine both formatters to allow newlines and showing default arguments
class RawDescriptionDefaultsHelpFormatter(
    RawDescriptionHelpFormatter,
    ArgumentDefaultsHelpFormatter,
):
    pass


def build_parser() -> ArgumentParser:
    """Return the argument parser for all subcommands."""
    parser = ArgumentParser(
        description="Derive KFS item keys, bucket file names and reference ids.\n\n"
        + "Capacity settings come from the capacity section of the config file,\n"
        + "overridden by KFS_TOTAL_CAPACITY, KFS_CHUNK_SIZE, KFS_BUCKET_COUNT and KFS_REFERENCE_BITS.",
        formatter_class=RawDescriptionDefaultsHelpFormatter,
    )
    parser.add_argument("--config", default="config.yaml", help="YAML file holding a capacity section")
    parser.add_argument("--log-level", default=None, help="Logging level (defaults to LOG_LEVEL, then INFO)")

    sub = parser.add_subparsers(dest="action", required=True)

    item = sub.add_parser("item-key", help="Key of one chunk of an object")
    item.add_argument("hash", help="Hex content hash")
    item.add_argument("index", type=int, help="Chunk index")

    bucket = sub.add_parser("bucket-name", help="File name of a bucket")
    bucket.add_argument("ordinal", type=int, help="Bucket ordinal")

    rid = sub.add_parser("reference-id", help="Validate or generate a reference id")
    rid.add_argument("rid", nargs="?", default=None, help="Existing hex reference id")

    table = sub.add_parser("table-path", help="Coerce a path to a table path")
    table.add_argument("path")

    locate = sub.add_parser("locate", help="Bucket file and slot key of a chunk")
    locate.add_argument("table", help="Table path")
    locate.add_argument("hash", help="Hex content hash")
    locate.add_argument("index", type=int, help="Chunk index")
    locate.add_argument("--reference-id", required=True, help="Hex reference id of the table")

    sub.add_parser("capacity", help="Show the resolved capacity configuration")
    return parser


def run(args) -> str:
    """Execute the parsed action and return its printable result."""
    capacity = load_capacity(args.config)

    if args.action == "item-key":
        return create_item_key(capacity, args.hash, args.index)
    if args.action == "bucket-name":
        return create_bucket_name(capacity, args.ordinal)
    if args.action == "reference-id":
        return reference_id_to_hex(create_reference_id(capacity, args.rid))
    if args.action == "table-path":
        return coerce_table_path(args.path)
    if args.action == "locate":
        layout = TableLayout(args.table, capacity, args.reference_id)
        result = {
            "bucket": layout.bucket_path_for_key(args.hash),
            "key": layout.item_key(args.hash, args.index),
        }
        return json.dumps(result)
    if args.action == "capacity":
        data = asdict(capacity)
        data.update(index_width=capacity.index_width, bucket_width=capacity.bucket_width)
        return json.dumps(data)
    raise ValueError(f"Unsupported action {args.action}")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint.

    Args:
        argv: Optional list of arguments (defaults to ``sys.argv``).

    Returns:
        int: Process exit code (0 on success, 1 on invalid input).
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        output = run(args)
    except AddressingError as exc:
        log.debug("Derivation failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
