"""Entry point for the id3mover package.

This module provides the command-line entry point for the music organization tool.
Run with: python -m id3mover
"""

import sys
from typing import List, Optional

from loguru import logger

from id3mover.config import (
    LOG_FILE,
    parse_arguments,
    args_to_cli_args,
    validate_directories,
)
from id3mover.filesystem import InputRootError
from id3mover.pipeline import (
    PipelineContext,
    PipelineOrchestrator,
    format_report,
    write_report,
)
from id3mover.ui import (
    ConsoleUI,
    display_configuration,
    display_report_lines,
    display_summary,
)


def setup_logging(debug: bool = False) -> None:
    """
    Configure loguru logging.

    Args:
        debug: If True, enable debug-level logging.
    """
    logger.remove()
    level = "DEBUG" if debug else "INFO"
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    logger.add(
        LOG_FILE,
        rotation="10 MB",
        retention="7 days",
        level="DEBUG",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the music organization tool.

    Args:
        argv: Command-line arguments (None for sys.argv).

    Returns:
        Exit code: 0 on success, 1 if the run could not start or any file failed.
    """
    namespace = parse_arguments(argv)
    cli_args = args_to_cli_args(namespace)

    setup_logging(cli_args.debug)
    console = ConsoleUI()
    output_dir = cli_args.resolved_output_dir

    if not validate_directories(cli_args.directory, output_dir, dry_run=cli_args.dry_run):
        if not cli_args.directory.is_dir():
            console.print_error(f"Directory '{cli_args.directory}' does not exist")
        else:
            console.print_error(f"Cannot create output directory '{output_dir}'")
        return 1

    display_configuration(cli_args, console)

    context = PipelineContext(
        input_dir=cli_args.directory,
        output_dir=output_dir,
        dry_run=cli_args.dry_run,
        copy_mode=cli_args.copy,
        workers=cli_args.workers,
        prune_empty_dirs=cli_args.prune,
        case_insensitive=cli_args.case_insensitive,
    )

    try:
        result = PipelineOrchestrator(context).run()
    except InputRootError as e:
        console.print_error(str(e))
        return 1

    lines = format_report(result.outcomes, cli_args.directory, output_dir, copy=cli_args.copy)
    if cli_args.verbose:
        display_report_lines(lines, console)

    exit_code = 0
    if cli_args.output_report is not None:
        try:
            write_report(cli_args.output_report, lines)
        except OSError as e:
            logger.error(f"Failed to write report file '{cli_args.output_report}': {e}")
            console.print_error(f"Failed to write report file '{cli_args.output_report}': {e}")
            exit_code = 1

    stats = result.stats
    display_summary(stats, console, dry_run=cli_args.dry_run)

    if stats.has_failures:
        exit_code = 1
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
