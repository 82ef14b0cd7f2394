"""Tests for data models."""

import dataclasses

import pytest
from pathlib import Path

from id3mover.models.outcome import Failed, MoveStrategy, Moved, Skipped
from id3mover.models.track import DestinationPath, MetadataRecord


class TestMetadataRecord:
    """Tests for the MetadataRecord dataclass."""

    def test_default_values(self):
        """Every field is optional."""
        record = MetadataRecord()
        assert record.album_artist is None
        assert record.album is None
        assert record.track_number is None
        assert record.track_title is None
        assert record.disc_number is None
        assert record.artist is None

    def test_is_immutable(self):
        record = MetadataRecord(album="Album")
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.album = "Other"

    def test_is_empty(self):
        assert MetadataRecord().is_empty is True
        assert MetadataRecord(disc_number=0).is_empty is False


class TestDestinationPath:
    """Tests for the DestinationPath dataclass."""

    def test_filename_and_segments(self):
        dest = DestinationPath(("Artist", "Album"), "01 - Title", "mp3")

        assert dest.filename == "01 - Title.mp3"
        assert dest.segments == ("Artist", "Album", "01 - Title.mp3")
        assert str(dest) == "Artist/Album/01 - Title.mp3"

    def test_filename_without_extension(self):
        dest = DestinationPath(("Artist",), "01 - Title", "")
        assert dest.filename == "01 - Title"

    def test_with_counter(self):
        """Counter goes before the extension."""
        dest = DestinationPath(("Artist", "Album"), "01 - Title", "mp3")

        result = dest.with_counter(2)

        assert result.filename == "01 - Title (2).mp3"
        assert result.directories == dest.directories
        assert dest.filename == "01 - Title.mp3"

    def test_to_path(self, tmp_path):
        dest = DestinationPath(("Artist", "Album"), "01 - Title", "mp3")
        assert dest.to_path(tmp_path) == tmp_path / "Artist" / "Album" / "01 - Title.mp3"

    def test_hashable_and_comparable(self):
        first = DestinationPath(("A",), "x", "mp3")
        second = DestinationPath(("A",), "x", "mp3")
        assert first == second
        assert len({first, second}) == 1


class TestOutcomes:
    """Tests for the move outcome types."""

    def test_moved_default_strategy(self):
        outcome = Moved(Path("a.mp3"), Path("b.mp3"))
        assert outcome.strategy is MoveStrategy.SAME_VOLUME_RENAME
        assert outcome.kept_source is False

    def test_moved_copy_keeps_source(self):
        outcome = Moved(Path("a.mp3"), Path("b.mp3"), MoveStrategy.COPY)
        assert outcome.kept_source is True

    def test_skipped_without_destination(self):
        outcome = Skipped(Path("a.mp3"), "unreadable tags")
        assert outcome.destination is None

    def test_failed_message(self):
        outcome = Failed(Path("a.mp3"), PermissionError("denied"))
        assert outcome.message == "PermissionError: denied"
