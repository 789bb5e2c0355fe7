"""Core components for build log analysis."""

from .analyzer import WctrAnalyzer
from .errors import (
    DanglingStopError,
    FormatMismatchError,
    InconsistentLogError,
    LogAnalysisError,
    MalformedRecordError,
)
from .types import AnalysisConfig, Attribution, BuildSummary, Event, LogRecord, TaskInterval

__all__ = [
    "WctrAnalyzer",
    "DanglingStopError",
    "FormatMismatchError",
    "InconsistentLogError",
    "LogAnalysisError",
    "MalformedRecordError",
    "AnalysisConfig",
    "Attribution",
    "BuildSummary",
    "Event",
    "LogRecord",
    "TaskInterval",
]
