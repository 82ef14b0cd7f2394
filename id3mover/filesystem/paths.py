"""Canonical destination paths built from track metadata."""

from typing import Optional

from id3mover.config.settings import (
    DISC_SUFFIX_FORMAT,
    ILLEGAL_PATH_CHARS,
    MAX_SEGMENT_LENGTH,
    SANITIZE_REPLACEMENT,
    TRACK_NUMBER_WIDTH,
    UNKNOWN_ALBUM,
    UNKNOWN_ARTIST,
    UNKNOWN_EXTENSION,
    UNKNOWN_TITLE,
)
from id3mover.models.track import DestinationPath, MetadataRecord


def _is_unsafe(char: str) -> bool:
    code = ord(char)
    return char in ILLEGAL_PATH_CHARS or code < 0x20 or code == 0x7F


def sanitize_segment(
    value: Optional[str],
    placeholder: str,
    max_length: int = MAX_SEGMENT_LENGTH,
) -> str:
    """
    Turn a tag value into a single safe path segment.

    Path separators, characters reserved on Windows-compatible
    filesystems and control characters are replaced, surrounding
    whitespace is trimmed and overly long values are truncated.

    Args:
        value: Raw tag value, or None if missing.
        placeholder: Value used when nothing usable remains.
        max_length: Maximum segment length in characters.

    Returns:
        Non-empty segment without separators.

    Examples:
        >>> sanitize_segment("AC/DC", "Unknown Artist")
        'AC_DC'
        >>> sanitize_segment("   ", "Unknown Album")
        'Unknown Album'
    """
    if value is None:
        return placeholder

    cleaned = ''.join(SANITIZE_REPLACEMENT if _is_unsafe(c) else c for c in value.strip())
    cleaned = cleaned.strip()
    if len(cleaned) > max_length:
        cleaned = cleaned[:max_length].rstrip()

    # "." and ".." would escape or alias the parent directory
    if not cleaned or not cleaned.strip('.'):
        return placeholder
    return cleaned


def sanitize_extension(extension: Optional[str]) -> str:
    """Normalize an extension to its bare, safe form ("mp3", not ".mp3")."""
    if not extension:
        return UNKNOWN_EXTENSION
    bare = extension.strip().lstrip('.')
    return sanitize_segment(bare, UNKNOWN_EXTENSION) if bare else UNKNOWN_EXTENSION


def format_track_number(track_number: Optional[int], width: int = TRACK_NUMBER_WIDTH) -> str:
    """
    Zero-pad a track number so lexicographic order matches numeric order.

    Examples:
        >>> format_track_number(7)
        '07'
        >>> format_track_number(123)
        '123'
        >>> format_track_number(None)
        '00'
    """
    if track_number is None:
        return "0" * width
    return f"{track_number:0{width}d}"


def format_disc_suffix(disc_number: Optional[int]) -> str:
    """Disc decoration for the filename, empty when the disc is unknown."""
    if disc_number is None:
        return ""
    return DISC_SUFFIX_FORMAT.format(disc=disc_number)


def resolve_album_artist(record: MetadataRecord) -> Optional[str]:
    """Album artist, falling back to the track artist."""
    for candidate in (record.album_artist, record.artist):
        if candidate is not None and candidate.strip():
            return candidate
    return None


def build_filename_stem(record: MetadataRecord) -> str:
    """
    Build "NN - Title" with the optional disc decoration.

    Args:
        record: Track metadata.

    Returns:
        Filename without extension, e.g. "03 - Song (2)".
    """
    track = format_track_number(record.track_number)
    title = sanitize_segment(record.track_title, UNKNOWN_TITLE)
    return f"{track} - {title}{format_disc_suffix(record.disc_number)}"


def build_destination(record: MetadataRecord, extension: str) -> DestinationPath:
    """
    Map track metadata to its canonical location under the output root.

    Layout: {album_artist}/{album}/{track} - {title}[ ({disc})].{extension}

    Never fails: every missing or unusable field is replaced by its
    placeholder.

    Args:
        record: Track metadata.
        extension: Source file extension, with or without leading dot.

    Returns:
        DestinationPath relative to the output root.
    """
    artist = sanitize_segment(resolve_album_artist(record), UNKNOWN_ARTIST)
    album = sanitize_segment(record.album, UNKNOWN_ALBUM)

    return DestinationPath(
        directories=(artist, album),
        stem=build_filename_stem(record),
        extension=sanitize_extension(extension),
    )
