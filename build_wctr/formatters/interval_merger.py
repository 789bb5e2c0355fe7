"""
Interval merging utility for calculating how much wall-clock time a set of
possibly overlapping task intervals covers.
"""
from typing import List, Tuple


def merge_intervals(intervals: List[Tuple[float, float]]) -> List[Tuple[float, float]]:
    """
    Merge overlapping or touching intervals.

    Example:
        Input: [(0, 100), (50, 150), (200, 300)]
        After merge: [(0, 150), (200, 300)]

    Args:
        intervals: List of (start_ms, stop_ms) tuples

    Returns:
        Sorted list of non-overlapping intervals. Zero-length intervals are
        dropped since they cover no time.
    """
    valid = sorted((s, e) for s, e in intervals if e > s)
    if not valid:
        return []

    merged = [valid[0]]
    for start, end in valid[1:]:
        last_start, last_end = merged[-1]
        if start <= last_end:
            merged[-1] = (last_start, max(last_end, end))
        else:
            merged.append((start, end))
    return merged


def covered_time_ms(intervals: List[Tuple[float, float]]) -> float:
    """
    Total time during which at least one interval is active.

    Example:
        [(0, 100), (50, 150), (200, 300)] -> 150 + 100 = 250
    """
    return float(sum(end - start for start, end in merge_intervals(intervals)))


def calculate_parallelism_factor(wall_clock_ms: float, wctr_ms: float) -> float:
    """
    Calculate how much concurrency diluted a task's responsibility.

    Args:
        wall_clock_ms: The task's own stop - start
        wctr_ms: Time attributed to the task

    Returns:
        wall_clock_ms / wctr_ms; 1.0 for tasks that were attributed nothing
    """
    if wctr_ms <= 0:
        return 1.0
    return wall_clock_ms / wctr_ms
