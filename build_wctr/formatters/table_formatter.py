"""
Fixed-width text report of ranked WCTR results.

Example:
          WCTR  wallclock parallel output
         0.594     19.004    32.0 whatever.cpp.o
"""

from typing import Dict, List, Sequence, Tuple

from ..core.types import Attribution, BuildSummary, ExtensionStats, TaskInterval
from .interval_merger import calculate_parallelism_factor
from .time_formatter import format_time, to_seconds

WCTR_HEADER = "      WCTR  wallclock parallel output"
EXTENSION_HEADER = "      WCTR        CPU   count type"


def top_entries(ranked: Sequence, num_lines: int) -> list:
    """Return the first num_lines entries; 0 or too many means all of them."""
    if num_lines <= 0 or num_lines > len(ranked):
        return list(ranked)
    return list(ranked[:num_lines])


def format_wctr_row(attribution: Attribution, interval: TaskInterval) -> str:
    wall_clock_ms = interval.duration_ms
    parallelism = calculate_parallelism_factor(wall_clock_ms, attribution.wctr_ms)
    return (
        f"{to_seconds(attribution.wctr_ms):10.3f} "
        f"{to_seconds(wall_clock_ms):10.3f} "
        f"{parallelism:8.1f} {attribution.task}"
    )


def format_wctr_table(
    attributions: Sequence[Attribution],
    intervals: Dict[str, TaskInterval],
    num_lines: int = 0
) -> List[str]:
    """
    Render the top ranked tasks, times in seconds.

    Args:
        attributions: Ranked attributions
        intervals: Dictionary mapping task -> TaskInterval
        num_lines: Number of rows, 0 for all

    Returns:
        Lines of the report, header first
    """
    lines = [WCTR_HEADER]
    for attribution in top_entries(attributions, num_lines):
        lines.append(format_wctr_row(attribution, intervals[attribution.task]))
    return lines


def format_extension_table(
    breakdown: Sequence[Tuple[str, ExtensionStats]],
    num_lines: int = 0
) -> List[str]:
    """Render WCTR and CPU seconds per output type."""
    lines = [EXTENSION_HEADER]
    for output_type, stats in top_entries(breakdown, num_lines):
        lines.append(
            f"{to_seconds(stats['wctr_ms']):10.3f} "
            f"{to_seconds(stats['cpu_ms']):10.3f} "
            f"{stats['count']:7d} {output_type}"
        )
    return lines


def format_summary(summary: BuildSummary) -> List[str]:
    """Render build-wide totals."""
    return [
        f"{summary.task_count} build steps",
        f"  wall-clock span: {format_time(summary.span_ms)}",
        f"  busy time:       {format_time(summary.covered_ms)}",
        f"  CPU time:        {format_time(summary.cpu_ms)}",
        f"  summed WCTR:     {format_time(summary.total_wctr_ms)}",
        f"  parallelism:     {summary.parallelism:.1f}x",
    ]
