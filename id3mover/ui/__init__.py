"""User interface components."""

from id3mover.ui.console import ConsoleUI
from id3mover.ui.display import (
    display_configuration,
    display_report_lines,
    display_summary,
)

__all__ = [
    "ConsoleUI",
    "display_configuration",
    "display_report_lines",
    "display_summary",
]
