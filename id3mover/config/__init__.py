"""Configuration and CLI handling."""

from id3mover.config.settings import (
    MUSIC_EXTENSIONS,
    DEFAULT_OUTPUT_DIRNAME,
    UNKNOWN_ARTIST,
    UNKNOWN_ALBUM,
    UNKNOWN_TITLE,
    TRACK_NUMBER_WIDTH,
    COLLISION_SUFFIX_FORMAT,
    COLLISION_FIRST_COUNTER,
    DEFAULT_WORKERS,
    LOG_FILE,
)
from id3mover.config.cli import (
    CLIArgs,
    create_parser,
    parse_arguments,
    validate_directories,
    args_to_cli_args,
)

__all__ = [
    "MUSIC_EXTENSIONS",
    "DEFAULT_OUTPUT_DIRNAME",
    "UNKNOWN_ARTIST",
    "UNKNOWN_ALBUM",
    "UNKNOWN_TITLE",
    "TRACK_NUMBER_WIDTH",
    "COLLISION_SUFFIX_FORMAT",
    "COLLISION_FIRST_COUNTER",
    "DEFAULT_WORKERS",
    "LOG_FILE",
    "CLIArgs",
    "create_parser",
    "parse_arguments",
    "validate_directories",
    "args_to_cli_args",
]
