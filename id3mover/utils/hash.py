"""Hashing utilities for copy verification."""

import hashlib
from pathlib import Path

from id3mover.config.settings import HASH_CHUNK_SIZE


def file_digest(filename: Path, chunk_size: int = HASH_CHUNK_SIZE) -> str:
    """
    Compute the SHA-256 digest of a whole file.

    Unlike a sampled hash, every byte is read: the digest is used to
    prove a copy is identical before its source is deleted.

    Args:
        filename: File to hash.
        chunk_size: Read size in bytes.

    Returns:
        Hexadecimal digest.

    Raises:
        OSError: If the file cannot be read.
    """
    sha256 = hashlib.sha256()
    with open(filename, 'rb') as f:
        for chunk in iter(lambda: f.read(chunk_size), b''):
            sha256.update(chunk)
    return sha256.hexdigest()


def files_match(first: Path, second: Path) -> bool:
    """Return True if both files have the same size and content."""
    if first.stat().st_size != second.stat().st_size:
        return False
    return file_digest(first) == file_digest(second)
