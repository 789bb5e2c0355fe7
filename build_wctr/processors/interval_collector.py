"""
Interval collector: one canonical interval per build output.
"""

import logging
from typing import Dict, Iterable

from ..core.errors import MalformedRecordError
from ..core.types import LogRecord, TaskInterval

logger = logging.getLogger(__name__)


class IntervalCollector:
    """Reduces raw log records to a task -> interval mapping."""

    def __init__(self, last_build_only: bool = False):
        """
        Args:
            last_build_only: If True, drop everything before the last build
                             appended to the log
        """
        self.last_build_only = last_build_only

    def collect(self, records: Iterable[LogRecord]) -> Dict[str, TaskInterval]:
        """
        Collect the latest interval for every task.

        ninja only appends to its log and compacts it from time to time, so
        the same output can show up several times. The last entry wins.

        Args:
            records: Raw records in log order

        Returns:
            Dictionary mapping task -> TaskInterval
        """
        intervals: Dict[str, TaskInterval] = {}
        record_count, duplicate_count, build_count = 0, 0, 1
        last_stop_seen = None

        for record in records:
            record_count += 1
            if not record.task:
                raise MalformedRecordError(f"record #{record_count} has no task identifier")
            if record.stop_ms < record.start_ms:
                raise MalformedRecordError(
                    f"'{record.task}' stops ({record.stop_ms}) before it starts ({record.start_ms})"
                )

            if self.last_build_only and last_stop_seen is not None and record.stop_ms < last_stop_seen:
                # Time went backwards: a new build was appended to the log
                intervals = {}
                duplicate_count = 0
                build_count += 1
            last_stop_seen = record.stop_ms

            if record.task in intervals:
                duplicate_count += 1
            intervals[record.task] = TaskInterval(
                task=record.task,
                start_ms=record.start_ms,
                stop_ms=record.stop_ms
            )

        logger.info(
            "Collected %d intervals from %d records (%d superseded)",
            len(intervals), record_count, duplicate_count
        )
        if self.last_build_only and build_count > 1:
            logger.info("Kept the last of %d builds found in the log", build_count)

        return intervals
