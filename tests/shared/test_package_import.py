import subprocess
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]


@pytest.mark.parametrize("module", ["kfs_shared", "kfs_shared.capacity", "kfs_cli.main"])
def test_module_imports_in_fresh_interpreter(module):
    result = subprocess.run(
        [sys.executable, "-c", f"import {module}"],
        cwd=ROOT,
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0, result.stderr


def test_default_capacity_built_at_import():
    result = subprocess.run(
        [sys.executable, "-c", "from kfs_shared import DEFAULT_CAPACITY; print(DEFAULT_CAPACITY.index_width)"],
        cwd=ROOT,
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == "6"
