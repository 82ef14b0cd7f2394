"""Configuration settings and constants for the id3mover package."""

from typing import FrozenSet

# Audio file extensions (lowercase, with leading dot)
MUSIC_EXTENSIONS: FrozenSet[str] = frozenset({
    ".mp3", ".flac", ".m4a", ".aac", ".ogg", ".wav", ".wma", ".mp4"
})

# Name of the output directory created under the input root
DEFAULT_OUTPUT_DIRNAME: str = "output"

# Placeholders for missing or unusable tag values
UNKNOWN_ARTIST: str = "Unknown Artist"
UNKNOWN_ALBUM: str = "Unknown Album"
UNKNOWN_TITLE: str = "Unknown Title"
UNKNOWN_EXTENSION: str = ""

# Track numbers are padded to at least this width
TRACK_NUMBER_WIDTH: int = 2

# Characters replaced inside tag-derived path segments
ILLEGAL_PATH_CHARS: FrozenSet[str] = frozenset('/\\\0:*?"<>|')
SANITIZE_REPLACEMENT: str = "_"

# Longest segment kept, in characters
MAX_SEGMENT_LENGTH: int = 200

# Disc decoration appended to the filename stem
DISC_SUFFIX_FORMAT: str = " ({disc})"

# Collision disambiguation: "name (2).ext", "name (3).ext", ...
COLLISION_SUFFIX_FORMAT: str = " ({counter})"
COLLISION_FIRST_COUNTER: int = 2

# Suffix of in-flight copies during cross-volume moves
PARTIAL_SUFFIX: str = ".partial"

# Chunk size used when hashing files for copy verification
HASH_CHUNK_SIZE: int = 1024 * 1024

# Worker threads for tag reading and move execution
DEFAULT_WORKERS: int = 4

# Log file written next to the working directory
LOG_FILE: str = "id3mover.log"
