"""Tag reading for audio files."""

from id3mover.metadata.exceptions import MetadataError, UnreadableTagError
from id3mover.metadata.numbers import parse_tag_number
from id3mover.metadata.reader import read_metadata, record_for

__all__ = [
    "MetadataError",
    "UnreadableTagError",
    "parse_tag_number",
    "read_metadata",
    "record_for",
]
