"""Pytest configuration and fixtures."""

import pytest
from pathlib import Path

from id3mover.models.track import MetadataRecord


@pytest.fixture
def full_record():
    """Record with every tag present."""
    return MetadataRecord(
        album_artist="Daft Punk",
        album="Discovery",
        track_number=3,
        track_title="Digital Love",
        disc_number=None,
    )


@pytest.fixture
def make_audio(tmp_path):
    """Factory creating fake audio files under tmp_path/music."""
    root = tmp_path / "music"
    root.mkdir(exist_ok=True)

    def _make(relative: str, content: bytes = b"fake audio content") -> Path:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path

    return _make


@pytest.fixture
def music_root(tmp_path, make_audio):
    """Input root used by make_audio."""
    return tmp_path / "music"
