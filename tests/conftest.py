"""Test configuration that ensures project modules are importable."""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path so `kfs_shared` and `kfs_cli` can be imported in tests.
ROOT = Path(__file__).resolve().parent.parent
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)

from kfs_shared.capacity import CapacityConfig  # noqa: E402

SAMPLE_HASH = "a1" * 20


@pytest.fixture
def capacity():
    """Default table capacity: 32 GiB of 128 KiB chunks in 256 buckets."""
    return CapacityConfig()


@pytest.fixture
def sample_hash():
    return SAMPLE_HASH
