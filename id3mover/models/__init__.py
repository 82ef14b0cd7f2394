"""Data models for music organization."""

from id3mover.models.track import MetadataRecord, DestinationPath
from id3mover.models.outcome import (
    MoveStrategy,
    Moved,
    Skipped,
    Failed,
    MoveOutcome,
)

__all__ = [
    "MetadataRecord",
    "DestinationPath",
    "MoveStrategy",
    "Moved",
    "Skipped",
    "Failed",
    "MoveOutcome",
]
