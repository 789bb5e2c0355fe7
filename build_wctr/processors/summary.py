"""
Build-wide totals and per-output-type breakdown of attributed time.
"""

import logging
import os
from collections import defaultdict
from typing import DefaultDict, Dict, List, Sequence, Tuple

from ..core.types import Attribution, BuildSummary, ExtensionStats, TaskInterval
from ..formatters.interval_merger import covered_time_ms

logger = logging.getLogger(__name__)

LINK_EXTENSIONS = {'.exe', '.dll', '.pdb', '.so', '.dylib', '.a', '.lib'}
LINKING_LABEL = '(linking)'
NO_EXTENSION_LABEL = '(no extension)'


def summarize_build(
    intervals: Dict[str, TaskInterval],
    attributions: Sequence[Attribution],
    tolerance_ms: float = 500.0
) -> BuildSummary:
    """
    Compute totals for a finished analysis.

    The sum of all WCTR values must equal the time during which at least
    one task was running. A larger difference than tolerance_ms is logged.

    Args:
        intervals: Dictionary mapping task -> TaskInterval
        attributions: Ranked attributions for the same tasks
        tolerance_ms: Allowed difference before warning

    Returns:
        BuildSummary
    """
    if not intervals:
        return BuildSummary(0, 0.0, 0.0, 0.0, 0.0, 0.0)

    spans = [(i.start_ms, i.stop_ms) for i in intervals.values()]
    covered = covered_time_ms(spans)
    total_wctr = sum(a.wctr_ms for a in attributions)

    if abs(covered - total_wctr) > tolerance_ms:
        logger.warning(
            "Discrepancy: covered build time %.3f s, summed WCTR %.3f s",
            covered / 1000.0, total_wctr / 1000.0
        )

    return BuildSummary(
        task_count=len(intervals),
        earliest_start_ms=min(s for s, _ in spans),
        latest_stop_ms=max(e for _, e in spans),
        covered_ms=covered,
        cpu_ms=sum(i.duration_ms for i in intervals.values()),
        total_wctr_ms=total_wctr
    )


class ExtensionAggregator:
    """Groups attributed time by the type of file each task produces."""

    @staticmethod
    def output_type(task: str) -> str:
        """
        Classify an output path by extension.

        Linker products are grouped together so that e.g. .dll and .exe
        show up as one line.
        """
        extension = os.path.splitext(task)[1].lower()
        if not extension:
            return NO_EXTENSION_LABEL
        if extension in LINK_EXTENSIONS:
            return LINKING_LABEL
        return extension

    def aggregate(
        self,
        intervals: Dict[str, TaskInterval],
        attributions: Sequence[Attribution]
    ) -> List[Tuple[str, ExtensionStats]]:
        """
        Sum WCTR and CPU time per output type.

        Returns:
            List of (output type, stats), largest WCTR first
        """
        by_type: DefaultDict[str, ExtensionStats] = defaultdict(
            lambda: {
                'count': 0,
                'wctr_ms': 0.0,
                'cpu_ms': 0.0
            }
        )
        for attribution in attributions:
            stats = by_type[self.output_type(attribution.task)]
            stats['count'] += 1
            stats['wctr_ms'] += attribution.wctr_ms
            stats['cpu_ms'] += intervals[attribution.task].duration_ms

        return sorted(by_type.items(), key=lambda item: (-item[1]['wctr_ms'], item[0]))
