"""Utility functions."""

from id3mover.utils.hash import file_digest, files_match

__all__ = [
    "file_digest",
    "files_match",
]
