"""Plain-text report of file operations."""

from pathlib import Path
from typing import Iterable, List

from loguru import logger

from id3mover.models.outcome import Failed, MoveOutcome, Moved, Skipped


def _relative(path: Path, base: Path) -> str:
    try:
        return path.relative_to(base).as_posix()
    except ValueError:
        return path.as_posix()


def format_report_line(
    outcome: MoveOutcome,
    input_dir: Path,
    output_dir: Path,
    copy: bool = False,
) -> str:
    """
    Format one outcome as a report line.

    Moves read "source -> destination" and copies "source => destination",
    with the source relative to input_dir and the destination relative
    to output_dir.

    Args:
        outcome: Outcome to describe.
        input_dir: Input root.
        output_dir: Output root.
        copy: If True, planned (dry run) operations are shown as copies.

    Returns:
        Report line without trailing newline.
    """
    if not isinstance(outcome, (Moved, Skipped, Failed)):
        raise TypeError(f"Unknown outcome: {outcome!r}")

    source = _relative(outcome.source, input_dir)

    if isinstance(outcome, Moved):
        arrow = "=>" if outcome.kept_source else "->"
        return f"{source} {arrow} {_relative(outcome.destination, output_dir)}"

    if isinstance(outcome, Skipped):
        if outcome.destination is not None:
            arrow = "=>" if copy else "->"
            return f"{source} {arrow} {_relative(outcome.destination, output_dir)}"
        return f"SKIPPED {source}: {outcome.reason}"

    return f"FAILED {source}: {outcome.message}"


def format_report(
    outcomes: Iterable[MoveOutcome],
    input_dir: Path,
    output_dir: Path,
    copy: bool = False,
) -> List[str]:
    """Format every outcome, keeping their order."""
    return [format_report_line(o, input_dir, output_dir, copy) for o in outcomes]


def write_report(report_path: Path, lines: Iterable[str]) -> None:
    """
    Write report lines to a file, replacing its previous content.

    Raises:
        OSError: If the report cannot be written.
    """
    with open(report_path, "w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")
    logger.info(f"Report written to {report_path}")
