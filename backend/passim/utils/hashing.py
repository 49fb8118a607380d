"""SHA-256 file hashing utility."""

import hashlib
from pathlib import Path

from passim.config import settings


def hash_file(path: Path, chunk_size: int | None = None) -> str:
    """Compute SHA-256 hash of a file as lowercase hex, streaming in chunks."""
    chunk_size = chunk_size or settings.hash_chunk_size
    sha256 = hashlib.sha256()
    with open(path, "rb") as f:
        while chunk := f.read(chunk_size):
            sha256.update(chunk)
    return sha256.hexdigest()
