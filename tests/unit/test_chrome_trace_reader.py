"""
Unit tests for build_wctr.readers.chrome_trace_reader module.
"""
import pytest

from build_wctr.core.errors import FormatMismatchError, MalformedRecordError
from build_wctr.readers import detect_format
from build_wctr.readers.chrome_trace_reader import ChromeTraceReader


class TestReadFile:
    """Tests for ChromeTraceReader.read_file()."""

    def test_trace_events_object(self, temp_json_file, sample_chrome_trace):
        """Complete events are read from a traceEvents object."""
        records = list(ChromeTraceReader().read_file(temp_json_file(sample_chrome_trace)))

        assert [(r.task, r.start_ms, r.stop_ms) for r in records] == [
            ("a.o", 0.0, 10.0),
            ("b.o", 0.0, 10.0),
            ("c.o", 10.0, 20.0),
        ]

    def test_top_level_array(self, temp_json_file, sample_chrome_trace):
        """A bare array of events is accepted as well."""
        records = list(ChromeTraceReader().read_file(temp_json_file(sample_chrome_trace["traceEvents"])))

        assert len(records) == 3

    def test_fractional_microseconds(self, temp_json_file):
        """Non-integer timestamps are converted to float milliseconds."""
        path = temp_json_file([{"name": "x", "ph": "X", "ts": 1500.5, "dur": 499.5}])

        record = list(ChromeTraceReader().read_file(path))[0]

        assert record.start_ms == pytest.approx(1.5005)
        assert record.stop_ms == pytest.approx(2.0)

    def test_non_complete_events_skipped(self, temp_json_file):
        """Begin/end and metadata events are not tasks."""
        path = temp_json_file([
            {"name": "a", "ph": "B", "ts": 0},
            {"name": "a", "ph": "E", "ts": 10},
            {"name": "b", "ph": "X", "ts": 0, "dur": 5},
        ])

        assert [r.task for r in ChromeTraceReader().read_file(path)] == ["b"]

    def test_missing_duration(self, temp_json_file):
        """A complete event without dur is malformed."""
        path = temp_json_file([{"name": "a", "ph": "X", "ts": 0}])

        with pytest.raises(MalformedRecordError, match="event #1"):
            list(ChromeTraceReader().read_file(path))

    def test_not_json(self, temp_log_file):
        """Plain text is not a trace."""
        path = temp_log_file("# ninja log v5\n", name="trace.json")

        with pytest.raises(FormatMismatchError):
            list(ChromeTraceReader().read_file(path))

    def test_truncated_json(self, temp_log_file):
        """A truncated document fails with FormatMismatchError."""
        path = temp_log_file('[{"name": "a", "ph": "X", "ts": 0, "dur": 5}, {"na', name="trace.json")

        with pytest.raises(FormatMismatchError):
            list(ChromeTraceReader().read_file(path))

    def test_byte_order_mark(self, tmp_path):
        """A UTF-8 byte order mark before the document is skipped."""
        path = tmp_path / "bom.json"
        path.write_bytes(b'\xef\xbb\xbf[{"name":"a","ph":"X","ts":0,"dur":1000}]')

        records = list(ChromeTraceReader().read_file(str(path)))

        assert [(r.task, r.start_ms, r.stop_ms) for r in records] == [("a", 0.0, 1.0)]

    def test_byte_order_mark_traceevents_object(self, tmp_path):
        path = tmp_path / "bom.json"
        path.write_bytes(b'\xef\xbb\xbf {"traceEvents": [{"name":"b","ph":"X","ts":2000,"dur":3000}]}')

        records = list(ChromeTraceReader().read_file(str(path)))

        assert [(r.task, r.start_ms, r.stop_ms) for r in records] == [("b", 2.0, 5.0)]

    def test_no_events(self, temp_json_file):
        """An object without traceEvents is rejected."""
        path = temp_json_file({"something": "else"})

        with pytest.raises(FormatMismatchError, match="no trace events"):
            list(ChromeTraceReader().read_file(path))


class TestDetectFormat:
    """Tests for detect_format()."""

    def test_json_detected(self, temp_json_file, sample_chrome_trace):
        assert detect_format(temp_json_file(sample_chrome_trace)) == 'chrome'

    def test_ninja_detected(self, ninja_log_file):
        assert detect_format(ninja_log_file) == 'ninja'

    def test_leading_whitespace(self, temp_log_file):
        assert detect_format(temp_log_file('\n  [ ]', name="t.json")) == 'chrome'

    def test_byte_order_mark(self, tmp_path):
        path = tmp_path / "bom.json"
        path.write_bytes(b'\xef\xbb\xbf[]')

        assert detect_format(str(path)) == 'chrome'
