"""Command-line interface argument parsing."""

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from loguru import logger

from id3mover.config.settings import DEFAULT_OUTPUT_DIRNAME, DEFAULT_WORKERS


@dataclass
class CLIArgs:
    """
    Parsed command-line arguments.

    Attributes:
        directory: Root directory containing the music files.
        output_dir: Destination root (defaults to DIRECTORY/output).
        dry_run: If True, report planned moves without touching files.
        copy: If True, copy files and keep the originals.
        verbose: If True, print every file operation.
        output_report: Optional file receiving the operation report.
        workers: Number of worker threads.
        prune: If True, remove source directories emptied by moves.
        case_insensitive: If True, treat destinations differing only by case as collisions.
        debug: If True, enable debug logging.
    """

    directory: Path = Path(".")
    output_dir: Optional[Path] = None
    dry_run: bool = False
    copy: bool = False
    verbose: bool = False
    output_report: Optional[Path] = None
    workers: int = DEFAULT_WORKERS
    prune: bool = True
    case_insensitive: bool = False
    debug: bool = False

    @property
    def resolved_output_dir(self) -> Path:
        """Output root, falling back to the default subdirectory."""
        if self.output_dir is not None:
            return self.output_dir
        return self.directory / DEFAULT_OUTPUT_DIRNAME


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='id3mover',
        description="""
        Moves music files into an Artist/Album/NN - Title layout
        built from their embedded tags.
        """
    )

    parser.add_argument(
        'directory',
        help='directory containing music files to organize'
    )

    parser.add_argument(
        '-o', '--output',
        default=None,
        help=f"destination root (default: DIRECTORY/{DEFAULT_OUTPUT_DIRNAME})"
    )

    parser.add_argument(
        '--dry-run',
        action='store_true',
        help="show what would be moved without moving files"
    )

    parser.add_argument(
        '--copy',
        action='store_true',
        help="copy files instead of moving them"
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help="show every file operation"
    )

    parser.add_argument(
        '--output-report',
        default=None,
        help="write the file operation report to this file"
    )

    parser.add_argument(
        '-j', '--workers',
        type=_positive_int,
        default=DEFAULT_WORKERS,
        help=f"number of worker threads (default: {DEFAULT_WORKERS})"
    )

    parser.add_argument(
        '--no-prune',
        action='store_true',
        help="keep source directories emptied by moves"
    )

    parser.add_argument(
        '--case-insensitive',
        action='store_true',
        help="treat destinations that differ only by case as collisions"
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help="enable debug logging"
    )

    return parser


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: List of argument strings (None for sys.argv).

    Returns:
        Parsed Namespace object.
    """
    parser = create_parser()
    return parser.parse_args(args)


def validate_directories(
    input_dir: Path,
    output_dir: Path,
    dry_run: bool = False
) -> bool:
    """
    Validate the input root and optionally create the output root.

    Args:
        input_dir: Input directory (must exist).
        output_dir: Output directory.
        dry_run: If True, skip directory creation.

    Returns:
        True if validation passed, False otherwise.
    """
    if not input_dir.is_dir():
        logger.error(f"Directory {input_dir} does not exist")
        return False

    if not dry_run:
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Cannot create output directory {output_dir}: {e}")
            return False

    return True


def args_to_cli_args(namespace: argparse.Namespace) -> CLIArgs:
    """
    Convert argparse Namespace to CLIArgs dataclass.

    Args:
        namespace: Parsed argparse Namespace.

    Returns:
        CLIArgs instance.
    """
    return CLIArgs(
        directory=Path(namespace.directory),
        output_dir=Path(namespace.output) if namespace.output else None,
        dry_run=namespace.dry_run,
        copy=namespace.copy,
        verbose=namespace.verbose,
        output_report=Path(namespace.output_report) if namespace.output_report else None,
        workers=namespace.workers,
        prune=not namespace.no_prune,
        case_insensitive=namespace.case_insensitive,
        debug=namespace.debug,
    )
