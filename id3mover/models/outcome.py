"""Per-file results of the move step."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union


class MoveStrategy(Enum):
    """How a file reached its destination."""

    SAME_VOLUME_RENAME = "rename"
    COPY_VERIFY_DELETE = "copy-verify-delete"
    COPY = "copy"


@dataclass(frozen=True)
class Moved:
    """File now lives at destination."""

    source: Path
    destination: Path
    strategy: MoveStrategy = MoveStrategy.SAME_VOLUME_RENAME

    @property
    def kept_source(self) -> bool:
        return self.strategy is MoveStrategy.COPY


@dataclass(frozen=True)
class Skipped:
    """File was deliberately left where it is."""

    source: Path
    reason: str
    destination: Optional[Path] = None


@dataclass(frozen=True)
class Failed:
    """File could not be moved; it remains at source."""

    source: Path
    error: Exception
    destination: Optional[Path] = None

    @property
    def message(self) -> str:
        return f"{type(self.error).__name__}: {self.error}"


MoveOutcome = Union[Moved, Skipped, Failed]
