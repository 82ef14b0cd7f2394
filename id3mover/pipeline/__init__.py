"""Music processing pipeline."""

from id3mover.pipeline.orchestrator import (
    ProcessingStats,
    PipelineContext,
    PlannedMove,
    RunResult,
    PipelineOrchestrator,
    validate_input_root,
)
from id3mover.pipeline.report import (
    format_report_line,
    format_report,
    write_report,
)

__all__ = [
    "ProcessingStats",
    "PipelineContext",
    "PlannedMove",
    "RunResult",
    "PipelineOrchestrator",
    "validate_input_root",
    "format_report_line",
    "format_report",
    "write_report",
]
