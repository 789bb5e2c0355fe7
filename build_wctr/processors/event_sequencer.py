"""
Event sequencer: expands intervals into chronologically ordered events.
"""

from typing import Dict, List

from ..core.types import (
    Event,
    TaskInterval,
    RANK_START,
    RANK_STOP,
    RANK_ZERO_LENGTH_STOP,
)


class EventSequencer:
    """Turns each interval into a start and a stop event and orders them."""

    @staticmethod
    def events_for(interval: TaskInterval) -> List[Event]:
        """Create the start and stop events of one interval."""
        stop_rank = RANK_ZERO_LENGTH_STOP if interval.duration_ms == 0 else RANK_STOP
        return [
            Event(time_ms=interval.start_ms, task=interval.task, is_start=True, rank=RANK_START),
            Event(time_ms=interval.stop_ms, task=interval.task, is_start=False, rank=stop_rank),
        ]

    @staticmethod
    def sequence(intervals: Dict[str, TaskInterval]) -> List[Event]:
        """
        Build the full, sorted event list.

        Events at the same instant are ordered as:
          1. stops of tasks that started earlier
          2. starts
          3. stops of zero-length tasks
        and then by task name. A task ending exactly when another begins
        therefore never overlaps it, and the order is the same on every run.

        Args:
            intervals: Dictionary mapping task -> TaskInterval

        Returns:
            List of Event, two per interval, in processing order
        """
        events = []
        for interval in intervals.values():
            events.extend(EventSequencer.events_for(interval))

        events.sort(key=Event.sort_key)
        return events
