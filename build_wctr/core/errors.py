"""
Errors raised while reading and analyzing build logs.

All of them are fatal for a run: the analysis stops and no partial
ranking is produced.
"""

from typing import Iterable, Optional


class LogAnalysisError(Exception):
    """Base class for every build log analysis failure."""


class FormatMismatchError(LogAnalysisError):
    """The log's header or overall shape is not a recognized format."""

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {expected} but got {actual!r}")


class MalformedRecordError(LogAnalysisError):
    """A log entry cannot be decomposed into start, stop and task."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class InconsistentLogError(LogAnalysisError):
    """The interval set violates start/stop pairing."""

    @classmethod
    def already_active(cls, task: str) -> 'InconsistentLogError':
        return cls(f"task '{task}' started while already active")

    @classmethod
    def never_stopped(cls, tasks: Iterable[str]) -> 'InconsistentLogError':
        names = ', '.join(sorted(tasks))
        return cls(f"tasks still active after the last event: {names}")


class DanglingStopError(LogAnalysisError):
    """A stop event arrived for a task that is not active."""

    def __init__(self, task: str):
        self.task = task
        super().__init__(f"task '{task}' stopped without being active")
