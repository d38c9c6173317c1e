from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the src layout is importable when running tests directly from the repo root.
REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = REPO_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


@pytest.fixture()
def empty_file(tmp_path: Path) -> Path:
    target = tmp_path / "empty.bin"
    target.write_bytes(b"")
    return target


@pytest.fixture()
def abc_file(tmp_path: Path) -> Path:
    target = tmp_path / "abc.txt"
    target.write_bytes(b"abc")
    return target


@pytest.fixture()
def large_file(tmp_path: Path) -> Path:
    target = tmp_path / "large.bin"
    target.write_bytes(bytes(range(256)) * 40 + b"tail")
    return target
