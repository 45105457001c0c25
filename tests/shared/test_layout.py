import dataclasses
import os

import pytest

from kfs_shared.capacity import CapacityConfig
from kfs_shared.errors import IndexOutOfBoundsError, InvalidLengthError
from kfs_shared.layout import TableLayout

RID = "ff" + "00" * 19


def test_layout_coerces_path_and_decodes_reference_id(tmp_path):
    layout = TableLayout(tmp_path / "store", reference_hex=RID)
    assert layout.table_path == str(tmp_path / "store") + ".kfs"
    assert layout.reference_id == bytes.fromhex(RID)
    assert layout.reference_hex == RID


def test_layout_generates_reference_id_when_absent():
    first = TableLayout("store")
    second = TableLayout("store")
    assert len(first.reference_id) == 20
    assert first.reference_id != second.reference_id


def test_layout_rejects_bad_reference_id():
    with pytest.raises(InvalidLengthError):
        TableLayout("store", reference_hex="ff")


def test_layout_names_buckets_and_slots(sample_hash):
    layout = TableLayout("store.kfs", reference_hex=RID)
    assert layout.bucket_name(7) == "007.s"
    assert layout.bucket_path(7) == os.path.join("store.kfs", "007.s")
    assert layout.item_key(sample_hash, 42) == f"{sample_hash} 000042"
    with pytest.raises(IndexOutOfBoundsError):
        layout.bucket_path(256)


def test_layout_locates_bucket_for_key():
    layout = TableLayout("store", reference_hex=RID)
    assert layout.bucket_for_key("0f" + "00" * 19) == 0xF0
    assert layout.bucket_path_for_key("0f" + "00" * 19) == os.path.join("store.kfs", "240.s")


def test_layouts_with_different_capacities_coexist(sample_hash):
    default = TableLayout("a", reference_hex=RID)
    small = TableLayout("b", CapacityConfig(bucket_count=16, chunk_size_bytes=1024 * 1024), reference_hex=RID)
    assert default.bucket_name(7) == "007.s"
    assert small.bucket_name(7) == "07.s"
    assert default.item_key(sample_hash, 5).endswith(" 000005")
    assert small.item_key(sample_hash, 5).endswith(" 00005")
    assert small.bucket_for_key("0f" + "00" * 19) == 0xF


def test_layout_exists(tmp_path):
    layout = TableLayout(tmp_path / "store", reference_hex=RID)
    assert layout.exists() is False
    os.mkdir(layout.table_path)
    assert layout.exists() is True


def test_layout_replace_keeps_reference_id():
    layout = TableLayout("store", reference_hex=RID.upper())
    moved = dataclasses.replace(layout, table_path="elsewhere")
    assert moved.table_path == "elsewhere.kfs"
    assert moved.reference_id == layout.reference_id
    assert moved.reference_hex == RID


def test_layout_generated_reference_id_survives_replace():
    layout = TableLayout("store")
    assert dataclasses.replace(layout) == layout
