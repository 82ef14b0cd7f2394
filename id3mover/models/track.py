"""Track metadata and destination path models."""

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Optional, Tuple

from id3mover.config.settings import COLLISION_SUFFIX_FORMAT


@dataclass(frozen=True)
class MetadataRecord:
    """
    Tag values read from one audio file.

    Every field is optional: tags may be absent, blank or malformed.
    Missing values are replaced by placeholders when the destination
    path is built, never here.
    """

    album_artist: Optional[str] = None
    album: Optional[str] = None
    track_number: Optional[int] = None
    track_title: Optional[str] = None
    disc_number: Optional[int] = None
    artist: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        """True when no field carries a value."""
        return all(
            value is None
            for value in (
                self.album_artist, self.album, self.track_number,
                self.track_title, self.disc_number, self.artist,
            )
        )


@dataclass(frozen=True)
class DestinationPath:
    """
    Destination of a file relative to the output root.

    Attributes:
        directories: Sanitized directory segments (artist, album).
        stem: Sanitized filename without extension.
        extension: Extension without its leading dot, may be empty.
    """

    directories: Tuple[str, ...] = field(default_factory=tuple)
    stem: str = ""
    extension: str = ""

    @property
    def filename(self) -> str:
        if not self.extension:
            return self.stem
        return f"{self.stem}.{self.extension}"

    @property
    def segments(self) -> Tuple[str, ...]:
        """All segments in order, filename last."""
        return self.directories + (self.filename,)

    def with_counter(self, counter: int, suffix_format: str = COLLISION_SUFFIX_FORMAT) -> "DestinationPath":
        """
        Return a copy disambiguated with a counter before the extension.

        Args:
            counter: Counter value inserted by suffix_format.
            suffix_format: Format string with a {counter} field.

        Returns:
            New DestinationPath, e.g. "01 - Title (2).mp3".
        """
        return DestinationPath(
            directories=self.directories,
            stem=self.stem + suffix_format.format(counter=counter),
            extension=self.extension,
        )

    def to_path(self, root: Path) -> Path:
        """Absolute location of this destination under root."""
        return root.joinpath(*self.segments)

    @classmethod
    def from_relative(cls, relative: PurePosixPath) -> "DestinationPath":
        """
        Build a DestinationPath from a path relative to the output root.

        Used to describe files already present in the output tree.
        """
        parts = relative.parts
        if not parts:
            raise ValueError("Empty relative path")
        name = parts[-1]
        stem, dot, extension = name.rpartition(".")
        if not dot or not stem:
            stem, extension = name, ""
        return cls(directories=tuple(parts[:-1]), stem=stem, extension=extension)

    def __str__(self) -> str:
        return "/".join(self.segments)
