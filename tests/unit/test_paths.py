"""Tests for destination path building."""

import pytest

from id3mover.filesystem.paths import (
    sanitize_segment,
    sanitize_extension,
    format_track_number,
    format_disc_suffix,
    resolve_album_artist,
    build_filename_stem,
    build_destination,
)
from id3mover.models.track import MetadataRecord


class TestSanitizeSegment:
    """Tests for sanitize_segment function."""

    def test_keeps_plain_value(self):
        """Plain values pass through unchanged."""
        assert sanitize_segment("Discovery", "Unknown Album") == "Discovery"

    def test_replaces_slash(self):
        """Forward slash becomes an underscore."""
        assert sanitize_segment("AC/DC", "Unknown Artist") == "AC_DC"

    def test_replaces_backslash(self):
        """Backslash becomes an underscore."""
        assert sanitize_segment("Left\\Right", "x") == "Left_Right"

    @pytest.mark.parametrize("char", list(':*?"<>|'))
    def test_replaces_windows_reserved(self, char):
        """Characters reserved on Windows are replaced."""
        assert sanitize_segment(f"a{char}b", "x") == "a_b"

    def test_replaces_nul_and_control_characters(self):
        """NUL and other control characters are replaced."""
        assert sanitize_segment("a\x00b\x1fc\x7fd", "x") == "a_b_c_d"

    def test_trims_whitespace(self):
        """Leading and trailing whitespace is trimmed."""
        assert sanitize_segment("  Title \t\n", "x") == "Title"

    def test_none_uses_placeholder(self):
        """Missing value falls back to the placeholder."""
        assert sanitize_segment(None, "Unknown Album") == "Unknown Album"

    def test_blank_uses_placeholder(self):
        """Value empty after trimming falls back to the placeholder."""
        assert sanitize_segment("   ", "Unknown Album") == "Unknown Album"

    @pytest.mark.parametrize("value", [".", "..", " ... "])
    def test_dot_only_uses_placeholder(self, value):
        """Dot-only values would alias directories and are rejected."""
        assert sanitize_segment(value, "Unknown Album") == "Unknown Album"

    def test_truncates_long_values(self):
        """Values longer than max_length are truncated."""
        assert sanitize_segment("x" * 50, "p", max_length=10) == "x" * 10

    def test_result_never_contains_separator(self):
        """No separator survives sanitization."""
        result = sanitize_segment("a/b\\c/d", "p")
        assert "/" not in result
        assert "\\" not in result


class TestSanitizeExtension:
    """Tests for sanitize_extension function."""

    def test_strips_leading_dot(self):
        assert sanitize_extension(".mp3") == "mp3"

    def test_keeps_bare_extension(self):
        assert sanitize_extension("flac") == "flac"

    def test_preserves_case(self):
        assert sanitize_extension(".FLAC") == "FLAC"

    def test_empty_extension(self):
        assert sanitize_extension("") == ""
        assert sanitize_extension(None) == ""


class TestFormatTrackNumber:
    """Tests for format_track_number function."""

    @pytest.mark.parametrize("number,expected", [
        (1, "01"),
        (7, "07"),
        (12, "12"),
        (0, "00"),
        (123, "123"),
    ])
    def test_pads_to_two_digits(self, number, expected):
        """Pads to width 2, growing for larger numbers."""
        assert format_track_number(number) == expected

    def test_missing_renders_zero_placeholder(self):
        assert format_track_number(None) == "00"

    def test_lexicographic_order_matches_numeric(self):
        """Padded numbers sort like integers within an album."""
        numbers = [10, 2, 1, 9]
        padded = sorted(format_track_number(n) for n in numbers)
        assert padded == ["01", "02", "09", "10"]


class TestFormatDiscSuffix:
    """Tests for format_disc_suffix function."""

    def test_absent_disc_has_no_decoration(self):
        assert format_disc_suffix(None) == ""

    def test_present_disc_is_decorated(self):
        assert format_disc_suffix(2) == " (2)"

    def test_disc_zero_is_present(self):
        """Zero is a value, not an absence."""
        assert format_disc_suffix(0) == " (0)"


class TestResolveAlbumArtist:
    """Tests for resolve_album_artist function."""

    def test_prefers_album_artist(self):
        record = MetadataRecord(album_artist="Various Artists", artist="Someone")
        assert resolve_album_artist(record) == "Various Artists"

    def test_falls_back_to_artist(self):
        record = MetadataRecord(artist="Someone")
        assert resolve_album_artist(record) == "Someone"

    def test_blank_album_artist_falls_back(self):
        record = MetadataRecord(album_artist="  ", artist="Someone")
        assert resolve_album_artist(record) == "Someone"

    def test_none_when_both_missing(self):
        assert resolve_album_artist(MetadataRecord()) is None


class TestBuildFilenameStem:
    """Tests for build_filename_stem function."""

    def test_without_disc(self, full_record):
        assert build_filename_stem(full_record) == "03 - Digital Love"

    def test_with_disc(self):
        record = MetadataRecord(track_number=3, track_title="Song", disc_number=2)
        assert build_filename_stem(record) == "03 - Song (2)"

    def test_title_is_sanitized(self):
        record = MetadataRecord(track_number=1, track_title="Either/Or")
        assert build_filename_stem(record) == "01 - Either_Or"


class TestBuildDestination:
    """Tests for build_destination function."""

    def test_full_record(self, full_record):
        """All fields present produce the canonical layout."""
        result = build_destination(full_record, ".mp3")
        assert str(result) == "Daft Punk/Discovery/03 - Digital Love.mp3"

    def test_no_disc_segment_when_disc_missing(self, full_record):
        """A missing disc number leaves no decoration at all."""
        result = build_destination(full_record, "mp3")
        assert result.filename == "03 - Digital Love.mp3"
        assert "(" not in result.filename

    def test_disc_segment_positioned_before_extension(self):
        """A disc number appears after the title, before the extension."""
        record = MetadataRecord(
            album_artist="Artist", album="Album",
            track_number=5, track_title="Title", disc_number=2,
        )
        result = build_destination(record, ".flac")
        assert result.filename == "05 - Title (2).flac"
        assert result.directories == ("Artist", "Album")

    def test_all_tags_missing(self):
        """An empty record maps to the placeholder path."""
        result = build_destination(MetadataRecord(), ".mp3")
        assert str(result) == "Unknown Artist/Unknown Album/00 - Unknown Title.mp3"

    def test_separator_in_artist_stays_one_segment(self):
        """AC/DC becomes one directory and the file lands one level below it."""
        record = MetadataRecord(album_artist="AC/DC", album="Back in Black",
                                track_number=1, track_title="Hells Bells")
        result = build_destination(record, ".mp3")
        assert result.segments == ("AC_DC", "Back in Black", "01 - Hells Bells.mp3")

    def test_segment_empty_after_trim_uses_placeholder(self):
        record = MetadataRecord(album_artist=" ", album="\t", track_title="  ")
        result = build_destination(record, ".ogg")
        assert str(result) == "Unknown Artist/Unknown Album/00 - Unknown Title.ogg"

    def test_artist_fallback(self):
        record = MetadataRecord(artist="Solo", album="Album", track_number=1, track_title="T")
        assert build_destination(record, ".mp3").directories[0] == "Solo"

    def test_missing_extension(self):
        record = MetadataRecord(track_number=1, track_title="Mr. Jones")
        result = build_destination(record, "")
        assert result.filename == "01 - Mr. Jones"

    def test_is_deterministic(self, full_record):
        """Same input always yields the same path."""
        assert build_destination(full_record, ".mp3") == build_destination(full_record, ".mp3")
