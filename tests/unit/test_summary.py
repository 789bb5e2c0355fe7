"""
Unit tests for build_wctr.processors.summary module.
"""
import logging

import pytest

from build_wctr.core.types import Attribution, TaskInterval
from build_wctr.processors.summary import ExtensionAggregator, summarize_build


INTERVALS = {
    "obj/logging.o": TaskInterval("obj/logging.o", 0, 1000),
    "obj/strings.o": TaskInterval("obj/strings.o", 0, 3000),
    "libbase.so": TaskInterval("libbase.so", 3000, 5000),
    "gen/version": TaskInterval("gen/version", 5000, 5000),
}

ATTRIBUTIONS = [
    Attribution("libbase.so", 2000.0),
    Attribution("obj/strings.o", 2000.0),
    Attribution("obj/logging.o", 1000.0),
    Attribution("gen/version", 0.0),
]


class TestSummarizeBuild:
    """Tests for summarize_build()."""

    def test_totals(self):
        summary = summarize_build(INTERVALS, ATTRIBUTIONS)

        assert summary.task_count == 4
        assert summary.earliest_start_ms == 0
        assert summary.latest_stop_ms == 5000
        assert summary.span_ms == 5000
        assert summary.covered_ms == 5000.0
        assert summary.cpu_ms == 6000
        assert summary.total_wctr_ms == 5000.0
        assert summary.parallelism == pytest.approx(1.2)

    def test_gap_not_covered(self):
        """Idle time between tasks is part of the span but not covered."""
        intervals = {
            "a": TaskInterval("a", 0, 10),
            "b": TaskInterval("b", 20, 30),
        }
        summary = summarize_build(intervals, [Attribution("a", 10.0), Attribution("b", 10.0)])

        assert summary.span_ms == 30
        assert summary.covered_ms == 20.0

    def test_empty(self):
        summary = summarize_build({}, [])

        assert summary.task_count == 0
        assert summary.parallelism == 1.0

    def test_discrepancy_logged(self, caplog):
        """A WCTR total that does not match covered time is a warning."""
        with caplog.at_level(logging.WARNING):
            summarize_build(INTERVALS, ATTRIBUTIONS[:1], tolerance_ms=500.0)

        assert "Discrepancy" in caplog.text

    def test_consistent_totals_not_logged(self, caplog):
        with caplog.at_level(logging.WARNING):
            summarize_build(INTERVALS, ATTRIBUTIONS)

        assert "Discrepancy" not in caplog.text


class TestExtensionAggregator:
    """Tests for grouping attributed time by output type."""

    def test_output_type(self):
        assert ExtensionAggregator.output_type("obj/a.o") == ".o"
        assert ExtensionAggregator.output_type("obj/A.OBJ") == ".obj"
        assert ExtensionAggregator.output_type("bin/chrome.exe") == "(linking)"
        assert ExtensionAggregator.output_type("lib/libbase.so") == "(linking)"
        assert ExtensionAggregator.output_type("gen/version") == "(no extension)"

    def test_aggregate(self):
        breakdown = ExtensionAggregator().aggregate(INTERVALS, ATTRIBUTIONS)

        assert breakdown == [
            ('.o', {'count': 2, 'wctr_ms': 3000.0, 'cpu_ms': 4000}),
            ('(linking)', {'count': 1, 'wctr_ms': 2000.0, 'cpu_ms': 2000}),
            ('(no extension)', {'count': 1, 'wctr_ms': 0.0, 'cpu_ms': 0}),
        ]
