"""Tag extraction from audio files using mutagen."""

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from loguru import logger
from mutagen import File as MutagenFile
from mutagen import MutagenError
from mutagen.asf import ASFTags
from mutagen.id3 import ID3

from id3mover.metadata.exceptions import UnreadableTagError
from id3mover.metadata.numbers import parse_tag_number
from id3mover.models.track import MetadataRecord

# Easy-interface keys, most specific first
EASY_KEYS: Dict[str, Sequence[str]] = {
    "album_artist": ("albumartist", "album artist", "album_artist"),
    "artist": ("artist",),
    "album": ("album",),
    "track_title": ("title",),
    "track_number": ("tracknumber", "track"),
    "disc_number": ("discnumber", "disc"),
}

# Raw ID3 frames, for containers mutagen has no easy wrapper for (WAVE, AIFF)
ID3_KEYS: Dict[str, Sequence[str]] = {
    "album_artist": ("TPE2",),
    "artist": ("TPE1",),
    "album": ("TALB",),
    "track_title": ("TIT2",),
    "track_number": ("TRCK",),
    "disc_number": ("TPOS",),
}

# Windows Media attributes
ASF_KEYS: Dict[str, Sequence[str]] = {
    "album_artist": ("WM/AlbumArtist",),
    "artist": ("Author",),
    "album": ("WM/AlbumTitle",),
    "track_title": ("Title",),
    "track_number": ("WM/TrackNumber",),
    "disc_number": ("WM/PartOfSet",),
}


def _key_table(tags: Any) -> Dict[str, Sequence[str]]:
    """Pick the tag keys matching the tag container type."""
    if isinstance(tags, ID3):
        return ID3_KEYS
    if isinstance(tags, ASFTags):
        return ASF_KEYS
    return EASY_KEYS


def _values(tags: Any, key: str) -> List[Any]:
    """Plain values stored under key, unwrapping ID3 frames and ASF attributes."""
    try:
        found = tags.get(key)
    except (KeyError, ValueError):
        return []
    if found is None:
        return []
    if not isinstance(found, (list, tuple)):
        found = [found]

    values = []
    for item in found:
        if hasattr(item, "text"):
            values.extend(item.text)
        elif hasattr(item, "value"):
            values.append(item.value)
        else:
            values.append(item)
    return values


def _first_value(tags: Any, keys: Sequence[str]) -> Optional[Any]:
    """Return the first non-blank value stored under any of keys."""
    for key in keys:
        for value in _values(tags, key):
            if isinstance(value, str):
                value = value.strip()
                if not value:
                    continue
            return value
    return None


def _text(tags: Any, keys: Sequence[str]) -> Optional[str]:
    value = _first_value(tags, keys)
    if value is None:
        return None
    return str(value)


def _number(tags: Any, keys: Sequence[str], path: Path) -> Optional[int]:
    value = _first_value(tags, keys)
    number = parse_tag_number(value)
    if value is not None and number is None:
        logger.warning(f"Ignoring malformed {keys[0]} tag {value!r} in {path.name}")
    return number


def read_metadata(path: Path) -> Optional[MetadataRecord]:
    """
    Read the tags of an audio file.

    Args:
        path: Audio file to read.

    Returns:
        MetadataRecord with whatever could be read, or None if the
        file has no recognizable tags.

    Raises:
        UnreadableTagError: If the file cannot be opened or its tag
            container is corrupt.
    """
    try:
        audio = MutagenFile(path, easy=True)
    except (MutagenError, OSError) as e:
        raise UnreadableTagError(path, str(e)) from e

    if audio is None or audio.tags is None:
        logger.debug(f"No tags found in {path.name}")
        return None

    tags = audio.tags
    keys = _key_table(tags)
    record = MetadataRecord(
        album_artist=_text(tags, keys["album_artist"]),
        album=_text(tags, keys["album"]),
        track_number=_number(tags, keys["track_number"], path),
        track_title=_text(tags, keys["track_title"]),
        disc_number=_number(tags, keys["disc_number"], path),
        artist=_text(tags, keys["artist"]),
    )

    if record.album_artist is None and record.artist is not None:
        logger.debug(f"No album artist tag in {path.name}, artist tag will be used")

    return record


def record_for(path: Path) -> MetadataRecord:
    """
    Read the tags of an audio file, treating absence as an empty record.

    Args:
        path: Audio file to read.

    Returns:
        MetadataRecord, empty when the file carries no tags.

    Raises:
        UnreadableTagError: If the tag container is corrupt.
    """
    record = read_metadata(path)
    if record is None:
        record = MetadataRecord()
    if record.is_empty:
        logger.info(f"No usable tags in {path.name}, placeholders will be used")
    return record
