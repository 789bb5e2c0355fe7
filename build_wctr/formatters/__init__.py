"""Formatting utilities for analysis output."""

from .interval_merger import calculate_parallelism_factor, covered_time_ms, merge_intervals
from .table_formatter import (
    format_extension_table,
    format_summary,
    format_wctr_table,
    top_entries,
)
from .time_formatter import format_time, to_seconds

__all__ = [
    "calculate_parallelism_factor",
    "covered_time_ms",
    "merge_intervals",
    "format_extension_table",
    "format_summary",
    "format_wctr_table",
    "top_entries",
    "format_time",
    "to_seconds",
]
