"""Pipeline orchestration for music organization."""

import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Union

from loguru import logger
from tqdm import tqdm

from id3mover.config.settings import DEFAULT_WORKERS
from id3mover.filesystem.claims import ClaimedPathSet
from id3mover.filesystem.discovery import get_files
from id3mover.filesystem.exceptions import InputRootError
from id3mover.filesystem.file_ops import execute_move
from id3mover.filesystem.paths import build_destination
from id3mover.metadata.exceptions import MetadataError
from id3mover.metadata.reader import record_for
from id3mover.models.outcome import Failed, MoveOutcome, Moved, Skipped
from id3mover.models.track import MetadataRecord

ReadResult = Union[MetadataRecord, Exception]


@dataclass
class ProcessingStats:
    """Counts of per-file outcomes.

    planned counts dry-run destinations; skipped counts files left
    without one (unreadable tags).
    """

    moved: int = 0
    copied: int = 0
    planned: int = 0
    skipped: int = 0
    failed: int = 0
    total: int = 0

    @classmethod
    def from_outcomes(cls, outcomes: Sequence[MoveOutcome]) -> "ProcessingStats":
        """Compute statistics from a list of outcomes."""
        return cls(
            moved=sum(1 for o in outcomes if isinstance(o, Moved) and not o.kept_source),
            copied=sum(1 for o in outcomes if isinstance(o, Moved) and o.kept_source),
            planned=sum(1 for o in outcomes if isinstance(o, Skipped) and o.destination is not None),
            skipped=sum(1 for o in outcomes if isinstance(o, Skipped) and o.destination is None),
            failed=sum(1 for o in outcomes if isinstance(o, Failed)),
            total=len(outcomes),
        )

    @property
    def has_failures(self) -> bool:
        return self.failed > 0


@dataclass
class PipelineContext:
    """Execution settings of one run."""

    input_dir: Path
    output_dir: Path
    dry_run: bool = False
    copy_mode: bool = False
    workers: int = DEFAULT_WORKERS
    prune_empty_dirs: bool = True
    case_insensitive: bool = False
    show_progress: bool = True


@dataclass
class PlannedMove:
    """A source file with its reserved destination, or why it has none."""

    source: Path
    destination: Optional[Path] = None
    skip_reason: Optional[str] = None


@dataclass
class RunResult:
    """Outcomes of a run, in traversal order."""

    outcomes: List[MoveOutcome] = field(default_factory=list)

    @property
    def stats(self) -> ProcessingStats:
        return ProcessingStats.from_outcomes(self.outcomes)


def validate_input_root(directory: Path) -> None:
    """
    Check that the input root can be traversed.

    Raises:
        InputRootError: If directory is missing, not a directory or unreadable.
    """
    if not directory.exists():
        raise InputRootError(f"Directory '{directory}' does not exist")
    if not directory.is_dir():
        raise InputRootError(f"'{directory}' is not a directory")
    if not os.access(directory, os.R_OK | os.X_OK):
        raise InputRootError(f"Directory '{directory}' is not readable")


class PipelineOrchestrator:
    """
    Runs tag reading, destination reservation and moves for a batch.

    Tag reading and moves run on a thread pool. Destinations are
    reserved one file at a time in traversal order, which keeps the
    resulting layout identical whatever the number of workers.
    """

    def __init__(
        self,
        context: PipelineContext,
        claimed: Optional[ClaimedPathSet] = None,
        reader: Optional[Callable[[Path], MetadataRecord]] = None,
        mover: Optional[Callable[..., MoveOutcome]] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            context: Directories and options of the run.
            claimed: Pre-seeded claim set; scanned from the output tree when None.
            reader: Tag extractor returning a MetadataRecord per file (record_for by default).
            mover: Move executor (execute_move by default).
        """
        self.context = context
        self.claimed = claimed
        self._reader = reader or record_for
        self._mover = mover or execute_move

    def run(self, files: Optional[Sequence[Path]] = None) -> RunResult:
        """
        Organize files, or every music file under the input root.

        Args:
            files: Files to process in traversal order (None to discover them).

        Returns:
            RunResult with one outcome per file.

        Raises:
            InputRootError: If the input root cannot be traversed.
        """
        ctx = self.context
        validate_input_root(ctx.input_dir)

        if files is None:
            files = get_files(ctx.input_dir, ctx.output_dir)
        if self.claimed is None:
            self.claimed = ClaimedPathSet.from_directory(
                ctx.output_dir, case_insensitive=ctx.case_insensitive
            )

        logger.info(f"{len(files)} files to process from {ctx.input_dir}")
        if not files:
            return RunResult()

        records = self._read_all(files)
        plans = [self._plan(source, record) for source, record in zip(files, records)]
        outcomes = self._execute_all(plans)

        result = RunResult(outcomes)
        stats = result.stats
        logger.info(
            f"Run complete: {stats.moved} moved, {stats.copied} copied, {stats.planned} planned, "
            f"{stats.skipped} skipped, {stats.failed} failed"
        )
        return result

    def _read_one(self, source: Path) -> ReadResult:
        try:
            return self._reader(source)
        except (MetadataError, OSError, ValueError) as e:
            logger.warning(f"Cannot read tags of {source}: {e}")
            return e

    def _read_all(self, files: Sequence[Path]) -> List[ReadResult]:
        with ThreadPoolExecutor(max_workers=self.context.workers) as executor:
            return list(tqdm(
                executor.map(self._read_one, files),
                total=len(files),
                desc="Reading tags",
                unit="file",
                disable=not self.context.show_progress,
            ))

    def _plan(self, source: Path, record: ReadResult) -> PlannedMove:
        """Build and reserve the destination of one file."""
        if isinstance(record, Exception):
            return PlannedMove(source, skip_reason=f"unreadable tags: {record}")

        proposed = build_destination(record, source.suffix)
        reserved = self.claimed.resolve(proposed)
        logger.debug(f"{source.name} -> {reserved}")
        return PlannedMove(source, destination=reserved.to_path(self.context.output_dir))

    def _execute_one(self, plan: PlannedMove) -> MoveOutcome:
        ctx = self.context
        if plan.destination is None:
            return Skipped(plan.source, plan.skip_reason or "no destination")

        prune_until = ctx.input_dir if ctx.prune_empty_dirs and not ctx.copy_mode else None
        try:
            return self._mover(
                plan.source,
                plan.destination,
                dry_run=ctx.dry_run,
                keep_source=ctx.copy_mode,
                prune_until=prune_until,
            )
        except OSError as e:
            logger.error(f"Error moving {plan.source}: {e}")
            return Failed(plan.source, e, plan.destination)

    def _execute_all(self, plans: List[PlannedMove]) -> List[MoveOutcome]:
        desc = "Copying files" if self.context.copy_mode else "Moving files"
        with ThreadPoolExecutor(max_workers=self.context.workers) as executor:
            return list(tqdm(
                executor.map(self._execute_one, plans),
                total=len(plans),
                desc=desc,
                unit="file",
                disable=not self.context.show_progress,
            ))
