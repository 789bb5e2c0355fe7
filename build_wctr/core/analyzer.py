"""
Main build log analyzer orchestrator.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..core.types import AnalysisConfig, Attribution, BuildSummary, ExtensionStats, LogRecord, TaskInterval
from ..processors import (
    IntervalCollector,
    EventSequencer,
    FairShareApportioner,
    ExtensionAggregator,
    summarize_build
)
from ..readers import ChromeTraceReader, NinjaLogReader, detect_format
from ..formatters import format_time, top_entries

logger = logging.getLogger(__name__)


class WctrAnalyzer:
    """Main orchestrator for wall-clock time responsibility analysis."""

    def __init__(
        self,
        num_lines: int = 0,
        log_format: str = 'auto',
        accepted_versions: Sequence[int] = (5,),
        last_build_only: bool = False,
        discrepancy_tolerance_ms: float = 500.0
    ):
        """
        Initialize the WctrAnalyzer.

        Args:
            num_lines: How many ranked tasks top_results() returns, 0 for all
            log_format: 'auto', 'ninja' or 'chrome'
            accepted_versions: Accepted ninja log versions
            last_build_only: If True, only analyze the last build in the log
            discrepancy_tolerance_ms: Conservation check tolerance
        """
        self.config = AnalysisConfig(
            num_lines=num_lines,
            log_format=log_format,
            accepted_versions=tuple(accepted_versions),
            last_build_only=last_build_only,
            discrepancy_tolerance_ms=discrepancy_tolerance_ms
        )

        # Results of the last completed analysis
        self.intervals: Dict[str, TaskInterval] = {}
        self.attributions: List[Attribution] = []
        self.summary: Optional[BuildSummary] = None
        self.extension_breakdown: List[Tuple[str, ExtensionStats]] = []

        # Initialize components
        self.ninja_reader = NinjaLogReader(self.config.accepted_versions)
        self.chrome_reader = ChromeTraceReader()
        self.collector = IntervalCollector(last_build_only=self.config.last_build_only)
        self.sequencer = EventSequencer()
        self.apportioner = FairShareApportioner()
        self.extension_aggregator = ExtensionAggregator()

    def process_log_file(self, file_path: str) -> List[Attribution]:
        """
        Read a build log and compute the ranked WCTR of every task.

        Args:
            file_path: Path to a .ninja_log or Chrome trace JSON file

        Returns:
            All attributions, largest WCTR first

        Raises:
            ValueError: If last_build_only is combined with a Chrome trace
        """
        log_format = self.config.log_format
        if log_format == 'auto':
            log_format = detect_format(file_path)
            logger.info("Detected %s log format", log_format)

        # Trace events are written per lane, so stop times going backwards
        # does not mark a new build there.
        if log_format == 'chrome' and self.config.last_build_only:
            raise ValueError("last build only applies to ninja logs, not Chrome traces")

        if log_format == 'chrome':
            records = self.chrome_reader.read_file(file_path)
        else:
            records = self.ninja_reader.read_file(file_path)

        return self.analyze_records(records)

    def analyze_records(self, records: Iterable[LogRecord]) -> List[Attribution]:
        """
        Run the full pipeline on raw records.

        Results are only stored once every step succeeded, so a failed run
        never leaves a partial ranking behind.

        Raises:
            LogAnalysisError: On any malformed or inconsistent input
        """
        # Step 1: One interval per task, latest entry wins
        intervals = self.collector.collect(records)

        # Step 2: Ordered start/stop events
        events = self.sequencer.sequence(intervals)

        # Step 3: Sweep and apportion
        attributions = self.apportioner.apportion(events)

        # Step 4: Totals and breakdown
        summary = summarize_build(intervals, attributions, self.config.discrepancy_tolerance_ms)
        breakdown = self.extension_aggregator.aggregate(intervals, attributions)

        self.intervals = intervals
        self.attributions = attributions
        self.summary = summary
        self.extension_breakdown = breakdown

        logger.info(
            "Analyzed %d tasks: %s busy, %s CPU time",
            summary.task_count, format_time(summary.covered_ms), format_time(summary.cpu_ms)
        )
        return attributions

    def top_results(self) -> List[Attribution]:
        """The first config.num_lines ranked attributions (all for 0)."""
        return top_entries(self.attributions, self.config.num_lines)

    def format_time(self, ms: float) -> str:
        """
        Format time in milliseconds to a human-readable string.

        Args:
            ms: Time in milliseconds

        Returns:
            Formatted time string
        """
        return format_time(ms)
