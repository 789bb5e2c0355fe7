"""Processors turning log records into ranked WCTR results."""

from .interval_collector import IntervalCollector
from .event_sequencer import EventSequencer
from .apportioner import FairShareApportioner
from .summary import ExtensionAggregator, summarize_build

__all__ = [
    "IntervalCollector",
    "EventSequencer",
    "FairShareApportioner",
    "ExtensionAggregator",
    "summarize_build",
]
