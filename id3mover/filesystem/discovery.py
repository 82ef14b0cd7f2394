"""File discovery functions for finding music files."""

from pathlib import Path
from typing import List, Optional

from loguru import logger

from id3mover.config.settings import MUSIC_EXTENSIONS


def is_music_file(path: Path) -> bool:
    """Check the extension against the supported audio formats."""
    return path.suffix.lower() in MUSIC_EXTENSIONS


def _is_inside(path: Path, directory: Path) -> bool:
    return path == directory or directory in path.parents


def get_files(directory: Path, output_dir: Optional[Path] = None) -> List[Path]:
    """
    List music files under directory in a stable order.

    Files are sorted by path so that the first file to claim a
    destination is the same on every run over an unchanged tree.

    Args:
        directory: Root directory to search in.
        output_dir: Output tree to skip (already organized files).

    Returns:
        Sorted list of music file paths.
    """
    excluded = output_dir.resolve() if output_dir is not None else None
    files: List[Path] = []

    try:
        for file in directory.rglob("*"):
            if not file.is_file() or not is_music_file(file):
                continue
            if excluded is not None and _is_inside(file.resolve(), excluded):
                continue
            files.append(file)
    except OSError as e:
        logger.warning(f"Filesystem access error under {directory}: {e}")

    files.sort(key=lambda p: p.as_posix())
    logger.debug(f"{len(files)} music files found in {directory}")
    return files
