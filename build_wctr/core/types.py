"""
Type definitions for build log analysis.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, TypedDict


# Event ranks at a shared instant: stops of already-running tasks first,
# then starts, then stops of zero-length tasks.
RANK_STOP = 0
RANK_START = 1
RANK_ZERO_LENGTH_STOP = 2


@dataclass(frozen=True)
class LogRecord:
    """A single raw entry read from a build log."""
    start_ms: float
    stop_ms: float
    task: str
    restat_mtime: Optional[int] = None
    command_hash: Optional[str] = None


@dataclass(frozen=True)
class TaskInterval:
    """The canonical start/stop span of one build output."""
    task: str
    start_ms: float
    stop_ms: float

    @property
    def duration_ms(self) -> float:
        return self.stop_ms - self.start_ms


@dataclass(frozen=True)
class Event:
    """A task becoming active (start) or inactive (stop)."""
    time_ms: float
    task: str
    is_start: bool
    rank: int

    def sort_key(self) -> Tuple[float, int, str]:
        return (self.time_ms, self.rank, self.task)


@dataclass(frozen=True)
class Attribution:
    """Wall-clock time a finished task is responsible for."""
    task: str
    wctr_ms: float


@dataclass
class BuildSummary:
    """Aggregate figures for one analyzed build."""
    task_count: int
    earliest_start_ms: float
    latest_stop_ms: float
    covered_ms: float
    cpu_ms: float
    total_wctr_ms: float

    @property
    def span_ms(self) -> float:
        return self.latest_stop_ms - self.earliest_start_ms

    @property
    def parallelism(self) -> float:
        """Average number of tasks running while anything was running."""
        if self.covered_ms <= 0:
            return 1.0
        return self.cpu_ms / self.covered_ms


class ExtensionStats(TypedDict):
    """Totals for all outputs sharing one output type."""
    count: int
    wctr_ms: float
    cpu_ms: float


class AnalysisConfig:
    """Configuration for build log analysis."""

    def __init__(
        self,
        num_lines: int = 0,
        log_format: str = 'auto',
        accepted_versions: Tuple[int, ...] = (5,),
        last_build_only: bool = False,
        discrepancy_tolerance_ms: float = 500.0
    ):
        """
        Initialize build log analysis configuration.

        Args:
            num_lines: How many ranked tasks to present. 0 means all of them.

            log_format: 'ninja' for a .ninja_log text file, 'chrome' for a
                        Chrome trace-event JSON file, or 'auto' to decide
                        from the file contents.
                        Default: 'auto'

            accepted_versions: ninja log versions whose header is accepted.
                               Default: (5,)

            last_build_only: If True, only the last build appended to the log
                             is analyzed. An entry that finishes earlier than
                             its predecessor starts a new build.
                             Only valid for ninja logs.
                             Default: False (latest entry per output wins)

            discrepancy_tolerance_ms: Allowed difference between the summed
                                      WCTR and the covered build time before
                                      a warning is logged.
        """
        if num_lines < 0:
            raise ValueError(f"num_lines must be non-negative, got {num_lines}")
        if log_format not in ('auto', 'ninja', 'chrome'):
            raise ValueError(f"Unknown log format '{log_format}'")
        if log_format == 'chrome' and last_build_only:
            raise ValueError("last build only applies to ninja logs, not Chrome traces")
        self.num_lines = num_lines
        self.log_format = log_format
        self.accepted_versions = tuple(accepted_versions)
        self.last_build_only = last_build_only
        self.discrepancy_tolerance_ms = discrepancy_tolerance_ms
