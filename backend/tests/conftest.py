"""Test fixtures — sample cache files on disk."""

from pathlib import Path

import pytest

CAB_BYTES = b"MSCF\x00\x00\x00\x00" + b"passim test payload\n" * 64


@pytest.fixture
def cab_bytes() -> bytes:
    return CAB_BYTES


@pytest.fixture
def cab_file(tmp_path: Path) -> Path:
    """Provide an example.cab with known contents."""
    path = tmp_path / "example.cab"
    path.write_bytes(CAB_BYTES)
    return path
