"""Filesystem operations for music organization."""

from id3mover.filesystem.discovery import (
    is_music_file,
    get_files,
)
from id3mover.filesystem.paths import (
    sanitize_segment,
    format_track_number,
    build_destination,
)
from id3mover.filesystem.claims import ClaimedPathSet
from id3mover.filesystem.file_ops import (
    select_strategy,
    copy_verified,
    prune_empty_dirs,
    execute_move,
)
from id3mover.filesystem.exceptions import (
    MoveError,
    DestinationConflictError,
    CrossDeviceMoveError,
    VerificationError,
    InputRootError,
)

__all__ = [
    "is_music_file",
    "get_files",
    "sanitize_segment",
    "format_track_number",
    "build_destination",
    "ClaimedPathSet",
    "select_strategy",
    "copy_verified",
    "prune_empty_dirs",
    "execute_move",
    "MoveError",
    "DestinationConflictError",
    "CrossDeviceMoveError",
    "VerificationError",
    "InputRootError",
]
