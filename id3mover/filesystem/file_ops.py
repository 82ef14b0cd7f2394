"""File operations for moving music files into the output tree."""

import errno
import os
import shutil
from pathlib import Path
from typing import Optional

from loguru import logger

from id3mover.config.settings import PARTIAL_SUFFIX
from id3mover.filesystem.exceptions import (
    CrossDeviceMoveError,
    DestinationConflictError,
    MoveError,
    VerificationError,
)
from id3mover.models.outcome import Failed, MoveOutcome, MoveStrategy, Moved, Skipped
from id3mover.utils.hash import files_match


def select_strategy(source: Path, destination_dir: Path) -> MoveStrategy:
    """
    Choose how to relocate source into destination_dir.

    Args:
        source: Existing source file.
        destination_dir: Existing destination directory.

    Returns:
        SAME_VOLUME_RENAME when both live on the same device,
        COPY_VERIFY_DELETE otherwise.
    """
    if source.stat().st_dev == destination_dir.stat().st_dev:
        return MoveStrategy.SAME_VOLUME_RENAME
    return MoveStrategy.COPY_VERIFY_DELETE


def partial_path_for(destination: Path) -> Path:
    """Hidden sibling receiving the bytes of an in-flight copy."""
    return destination.with_name(f".{destination.name}{PARTIAL_SUFFIX}")


def _discard(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"Could not remove {path}: {e}")


# Errors meaning the filesystem does not support hard links
_LINK_UNSUPPORTED = {errno.EPERM, errno.EOPNOTSUPP, errno.ENOTSUP}


def link_into_place(source: Path, destination: Path) -> None:
    """
    Give source the name destination without ever replacing a file.

    The new name is created with a hard link, which fails atomically
    when destination exists, then the old name is removed. Filesystems
    without hard links fall back to an existence check and a rename.

    Args:
        source: File to rename.
        destination: New name; must not exist.

    Raises:
        DestinationConflictError: If destination exists.
        OSError: If the rename failed (EXDEV when crossing devices).
    """
    try:
        os.link(source, destination)
    except FileExistsError as e:
        raise DestinationConflictError(f"Destination already exists: {destination}") from e
    except OSError as e:
        if e.errno not in _LINK_UNSUPPORTED:
            raise
        logger.debug(f'Hard links unsupported, renaming instead: {source}')
        if os.path.lexists(destination):
            raise DestinationConflictError(f"Destination already exists: {destination}")
        os.rename(source, destination)
        return

    try:
        os.unlink(source)
    except OSError:
        # Both names point at the same data: drop the new one
        _discard(destination)
        raise


def copy_verified(source: Path, destination: Path) -> None:
    """
    Copy source to destination and prove the copy is identical.

    Bytes are written to a partial sibling, compared with the source,
    then linked into place. On any failure the partial file is
    removed and destination is left absent.

    Args:
        source: File to copy.
        destination: Final location; must not exist.

    Raises:
        DestinationConflictError: If destination appeared meanwhile.
        VerificationError: If the copy differs from the source.
        CrossDeviceMoveError: If copying failed.
    """
    partial = partial_path_for(destination)
    published = False
    try:
        shutil.copy2(source, partial)
        if not files_match(source, partial):
            raise VerificationError(f"Copy of {source} does not match the original")
        link_into_place(partial, destination)
        published = True
    except OSError as e:
        raise CrossDeviceMoveError(f"Copy of {source} to {destination} failed: {e}") from e
    finally:
        if not published:
            _discard(partial)


def _copy_then_delete(source: Path, destination: Path) -> None:
    copy_verified(source, destination)
    try:
        source.unlink()
    except OSError:
        # The source stays authoritative: roll back the copy
        _discard(destination)
        raise


def prune_empty_dirs(start: Path, stop: Path) -> int:
    """
    Remove start and its ancestors while they are empty, up to stop.

    stop itself is never removed. Directories that are already gone
    are skipped, so calling this twice is harmless.

    Args:
        start: Deepest directory to consider.
        stop: Ancestor at which pruning ends.

    Returns:
        Number of directories removed.
    """
    removed = 0
    current = start
    while current != stop and stop in current.parents:
        try:
            current.rmdir()
            removed += 1
            logger.debug(f"Removed empty directory: {current}")
        except FileNotFoundError:
            pass
        except OSError:
            break
        current = current.parent
    return removed


def execute_move(
    source: Path,
    destination: Path,
    dry_run: bool = False,
    keep_source: bool = False,
    prune_until: Optional[Path] = None,
) -> MoveOutcome:
    """
    Relocate one file to its reserved destination.

    Never overwrites an existing file and never raises for per-file
    problems: every error is reported as a Failed outcome with the
    source left in place.

    Args:
        source: File to move.
        destination: Reserved absolute destination.
        dry_run: If True, only report what would happen.
        keep_source: If True, copy instead of move.
        prune_until: If set, remove source directories emptied by the
            move, stopping at this directory.

    Returns:
        Moved, Skipped or Failed outcome.
    """
    if dry_run:
        verb = "Copy" if keep_source else "Move"
        logger.info(f'SIMULATION - {verb}: {source.name} -> {destination}')
        return Skipped(source, "dry run", destination)

    if not source.is_file():
        logger.warning(f'Source file not found: {source}')
        return Failed(source, FileNotFoundError(f"Source file not found: {source}"), destination)

    if os.path.lexists(destination):
        logger.error(f'Destination already exists, refusing to overwrite: {destination}')
        return Failed(
            source,
            DestinationConflictError(f"Destination already exists: {destination}"),
            destination,
        )

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)

        if keep_source:
            strategy = MoveStrategy.COPY
            copy_verified(source, destination)
        else:
            strategy = select_strategy(source, destination.parent)
            if strategy is MoveStrategy.SAME_VOLUME_RENAME:
                try:
                    link_into_place(source, destination)
                except OSError as e:
                    if e.errno != errno.EXDEV:
                        raise
                    logger.debug(f'Rename crossed devices, copying instead: {source}')
                    strategy = MoveStrategy.COPY_VERIFY_DELETE
            if strategy is MoveStrategy.COPY_VERIFY_DELETE:
                _copy_then_delete(source, destination)

    except (OSError, MoveError) as e:
        logger.error(f'Error moving {source}: {e}')
        return Failed(source, e, destination)

    logger.info(f'File {"copied" if keep_source else "moved"}: {destination}')

    if prune_until is not None and not keep_source:
        prune_empty_dirs(source.parent, prune_until)

    return Moved(source, destination, strategy)
