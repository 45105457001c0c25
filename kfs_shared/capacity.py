"""Capacity configuration for a KFS table.

A ``CapacityConfig`` fixes the addressing space of one storage instance:
total size, chunk size, bucket count and reference width. Every derived
width (index padding, bucket-name padding, reference length) is computed
from it, so two tables that must agree on names must share one value.
"""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Mapping

import yaml

from .constants import BUCKET_COUNT, CHUNK_SIZE_BYTES, REFERENCE_BITS, TOTAL_CAPACITY_BYTES
from .errors import CapacityConfigError
from .logging_config import log

# Environment overrides applied on top of config.yaml
_ENV_OVERRIDES = {
    "KFS_TOTAL_CAPACITY": "total_capacity_bytes",
    "KFS_CHUNK_SIZE": "chunk_size_bytes",
    "KFS_BUCKET_COUNT": "bucket_count",
    "KFS_REFERENCE_BITS": "reference_bits",
}


def is_strict_int(value) -> bool:
    """Return True for real integers; booleans do not count."""
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class CapacityConfig:
    """Immutable capacity model shared by all derivations of one table."""

    total_capacity_bytes: int = TOTAL_CAPACITY_BYTES
    chunk_size_bytes: int = CHUNK_SIZE_BYTES
    bucket_count: int = BUCKET_COUNT
    reference_bits: int = REFERENCE_BITS

    def __post_init__(self):
        for name, value in asdict(self).items():
            if not is_strict_int(value) or value <= 0:
                raise CapacityConfigError(f"{name} must be a positive integer, got {value!r}")
        if self.reference_bits % 8:
            raise CapacityConfigError("reference_bits must be a multiple of 8")
        if self.chunk_size_bytes > self.total_capacity_bytes:
            raise CapacityConfigError("chunk_size_bytes cannot exceed total_capacity_bytes")

    @property
    def max_chunk_index(self) -> int:
        """Largest chunk index the table can address."""
        return self.total_capacity_bytes // self.chunk_size_bytes

    @property
    def index_width(self) -> int:
        """Digits in the zero-padded index field of an item key."""
        return len(str(self.max_chunk_index))

    @property
    def bucket_width(self) -> int:
        """Digits in the zero-padded ordinal of a bucket file name."""
        return len(str(self.bucket_count))

    @property
    def reference_bytes(self) -> int:
        return self.reference_bits // 8

    @property
    def reference_hex_length(self) -> int:
        return self.reference_bits // 4


DEFAULT_CAPACITY = CapacityConfig()


def capacity_from_mapping(data: Mapping) -> CapacityConfig:
    """Build a ``CapacityConfig`` from a mapping, ignoring unknown keys.

    Args:
        data: Mapping with any of the ``CapacityConfig`` field names.

    Returns:
        CapacityConfig: Validated configuration; missing fields use defaults.

    Raises:
        CapacityConfigError: If a value is not an integer or the combination
            is inconsistent.
    """
    fields = {}
    for name in _ENV_OVERRIDES.values():
        if name in data:
            fields[name] = _coerce_int(name, data[name])
    return CapacityConfig(**fields)


def _coerce_int(name: str, value) -> int:
    """Accept integers and decimal strings (as found in environment variables)."""
    if is_strict_int(value):
        return value
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value.strip())
    raise CapacityConfigError(f"{name} must be an integer, got {value!r}")


def load_capacity(path: str | os.PathLike = "config.yaml", env: Mapping[str, str] | None = None) -> CapacityConfig:
    """Build capacity settings from a YAML file overlaid with environment variables.

    Args:
        path: YAML file holding a ``capacity`` mapping. A missing file is fine.
        env: Environment to read overrides from; defaults to ``os.environ``.

    Returns:
        CapacityConfig: The resolved configuration.
    """
    env = os.environ if env is None else env
    cfg_path = Path(path)
    values: dict = {}

    # First, load the capacity section of the config file if it exists
    try:
        if cfg_path.exists():
            with cfg_path.open("r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
            section = data.get("capacity", {}) if isinstance(data, dict) else None
            if not isinstance(section, dict):
                log.warning("Config file %s does not contain a capacity mapping", cfg_path)
            else:
                values.update(section)
    except (OSError, yaml.YAMLError) as exc:
        log.warning("Failed to load config from %s: %s", cfg_path, exc)

    # Environment variables override config file values
    for env_name, field_name in _ENV_OVERRIDES.items():
        override = env.get(env_name)
        if override:
            values[field_name] = override

    capacity = capacity_from_mapping(values)
    log.info("Capacity configuration loaded: %s", asdict(capacity))
    return capacity


__all__ = ["CapacityConfig", "DEFAULT_CAPACITY", "capacity_from_mapping", "is_strict_int", "load_capacity"]
