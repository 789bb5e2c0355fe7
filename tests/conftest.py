"""
Pytest configuration and shared fixtures for build WCTR tests.
"""
import json
import pytest

from build_wctr.core.types import LogRecord, TaskInterval


NINJA_HEADER = "# ninja log v5\n"


def make_ninja_line(start, stop, output, restat=0, command_hash="deadbeef"):
    """Format one .ninja_log line."""
    return f"{start}\t{stop}\t{restat}\t{output}\t{command_hash}\n"


@pytest.fixture
def sample_records():
    """Raw records for A=[0,10], B=[0,10], C=[10,20]."""
    return [
        LogRecord(start_ms=0, stop_ms=10, task="a.o"),
        LogRecord(start_ms=0, stop_ms=10, task="b.o"),
        LogRecord(start_ms=10, stop_ms=20, task="c.o"),
    ]


@pytest.fixture
def sample_intervals():
    """Collected intervals matching sample_records."""
    return {
        "a.o": TaskInterval(task="a.o", start_ms=0, stop_ms=10),
        "b.o": TaskInterval(task="b.o", start_ms=0, stop_ms=10),
        "c.o": TaskInterval(task="c.o", start_ms=10, stop_ms=20),
    }


@pytest.fixture
def sample_ninja_log_text():
    """A small ninja log with a duplicated, superseded entry."""
    return (
        NINJA_HEADER
        + make_ninja_line(0, 4000, "obj/base/stale.o", command_hash="1111")
        + make_ninja_line(0, 1000, "obj/base/logging.o")
        + make_ninja_line(0, 3000, "obj/base/strings.o")
        + make_ninja_line(1000, 3000, "obj/base/stale.o", command_hash="2222")
        + make_ninja_line(3000, 5000, "libbase.so")
    )


@pytest.fixture
def ninja_log_file(tmp_path, sample_ninja_log_text):
    """Write sample_ninja_log_text to a .ninja_log file."""
    log_file = tmp_path / ".ninja_log"
    log_file.write_text(sample_ninja_log_text)
    return str(log_file)


@pytest.fixture
def temp_log_file(tmp_path):
    """Create a temporary text log file and return a helper function."""
    def _create_file(text, name=".ninja_log"):
        file_path = tmp_path / name
        file_path.write_text(text)
        return str(file_path)

    return _create_file


@pytest.fixture
def temp_json_file(tmp_path):
    """Create a temporary JSON file and return a helper function."""
    def _create_file(data, name="trace.json"):
        file_path = tmp_path / name
        with open(file_path, "w") as f:
            json.dump(data, f)
        return str(file_path)

    return _create_file


@pytest.fixture
def sample_chrome_trace():
    """Chrome trace-event document equivalent to sample_records (us units)."""
    return {
        "traceEvents": [
            {"name": "process_name", "ph": "M", "pid": 1, "args": {"name": "ninja"}},
            {"name": "a.o", "ph": "X", "ts": 0, "dur": 10000, "pid": 1, "tid": 1},
            {"name": "b.o", "ph": "X", "ts": 0, "dur": 10000, "pid": 1, "tid": 2},
            {"name": "c.o", "ph": "X", "ts": 10000, "dur": 10000, "pid": 1, "tid": 1},
        ],
        "displayTimeUnit": "ms"
    }


@pytest.fixture
def ninja_line():
    """Return the make_ninja_line helper."""
    return make_ninja_line
