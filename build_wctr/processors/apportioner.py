"""
Fair-share apportioner: distributes wall-clock time among active tasks.
"""

import logging
from typing import Dict, List, Sequence

from ..core.errors import DanglingStopError, InconsistentLogError
from ..core.types import Attribution, Event

logger = logging.getLogger(__name__)


class FairShareApportioner:
    """Sweeps ordered events and computes each task's WCTR."""

    @staticmethod
    def apportion(events: Sequence[Event]) -> List[Attribution]:
        """
        Compute the wall-clock time responsibility of every task.

        Walks the events in order while tracking which tasks are running.
        The time since the previous event is split equally between all of
        them, so a task running alongside N-1 others for D ms is charged
        D/N ms.

        Args:
            events: Events sorted by EventSequencer

        Returns:
            Attributions sorted by WCTR descending, then by task name

        Raises:
            InconsistentLogError: If a task starts twice or never stops
            DanglingStopError: If a task stops without having started
        """
        active: Dict[str, float] = {}
        finished: List[Attribution] = []
        previous_time = events[0].time_ms if events else 0.0

        for event in events:
            if active:
                share = (event.time_ms - previous_time) / len(active)
                for task in active:
                    active[task] += share

            if event.is_start:
                if event.task in active:
                    raise InconsistentLogError.already_active(event.task)
                active[event.task] = 0.0
            else:
                if event.task not in active:
                    raise DanglingStopError(event.task)
                finished.append(Attribution(task=event.task, wctr_ms=active.pop(event.task)))

            previous_time = event.time_ms

        if active:
            raise InconsistentLogError.never_stopped(active)

        finished.sort(key=lambda a: (-a.wctr_ms, a.task))
        logger.debug("Apportioned %d events across %d tasks", len(events), len(finished))
        return finished
