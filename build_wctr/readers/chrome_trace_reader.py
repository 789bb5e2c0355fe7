"""
Reader for Chrome trace-event JSON files (e.g. produced by ninjatracing).

Only complete events ("ph": "X") describe tasks. Their "ts" and "dur" are
in microseconds. The file is streamed so large traces are never loaded
into memory at once.
"""

import logging
from decimal import Decimal
from typing import Dict, Iterator

import ijson

from ..core.errors import FormatMismatchError, MalformedRecordError
from ..core.types import LogRecord

logger = logging.getLogger(__name__)

COMPLETE_EVENT_PHASE = 'X'
US_PER_MS = 1000.0
UTF8_BOM = b'\xef\xbb\xbf'


class ChromeTraceReader:
    """Streams complete events out of a trace-event JSON file."""

    def read_file(self, file_path: str) -> Iterator[LogRecord]:
        """
        Read every complete event from a trace file.

        Args:
            file_path: Path to the trace JSON file

        Returns:
            Iterator of LogRecord in file order

        Raises:
            FormatMismatchError: If the file is not a trace-event document
            MalformedRecordError: If a complete event lacks name, ts or dur
        """
        logger.info("Reading Chrome trace %s", file_path)

        with open(file_path, 'rb') as f:
            prefix = self._items_prefix(f)
            f.seek(self._content_offset(f))

            event_count, record_count = 0, 0
            try:
                for event in ijson.items(f, prefix):
                    event_count += 1
                    if not isinstance(event, dict):
                        raise FormatMismatchError('trace event objects', repr(event))
                    if event.get('ph') != COMPLETE_EVENT_PHASE:
                        continue
                    record_count += 1
                    yield self.parse_event(event, event_count)
            except ijson.JSONError as e:
                raise FormatMismatchError('a valid trace-event JSON document', str(e))

        if event_count == 0:
            raise FormatMismatchError('a trace with at least one event', 'no trace events')

        logger.info("Read %d complete events out of %d trace events", record_count, event_count)

    @staticmethod
    def _content_offset(f) -> int:
        """Byte offset of the JSON text, past a UTF-8 byte order mark."""
        f.seek(0)
        return len(UTF8_BOM) if f.read(len(UTF8_BOM)) == UTF8_BOM else 0

    @staticmethod
    def _items_prefix(f) -> str:
        """Pick the ijson prefix for a top-level array or a traceEvents object."""
        head = f.read(4096)
        if head.startswith(UTF8_BOM):
            head = head[len(UTF8_BOM):]
        head = head.lstrip()
        if head.startswith(b'['):
            return 'item'
        if head.startswith(b'{'):
            return 'traceEvents.item'
        raise FormatMismatchError("a JSON array or object", head[:20].decode('utf-8', 'replace'))

    @staticmethod
    def parse_event(event: Dict, index: int = None) -> LogRecord:
        """Convert one complete event into a LogRecord in milliseconds."""
        name = event.get('name')
        ts = event.get('ts')
        dur = event.get('dur')
        if not name or ts is None or dur is None:
            raise MalformedRecordError(
                f"event #{index}: complete event needs name, ts and dur: {event!r}"
            )
        if not isinstance(ts, (int, float, Decimal)) or not isinstance(dur, (int, float, Decimal)):
            raise MalformedRecordError(f"event #{index}: non-numeric ts/dur in '{name}'")
        if dur < 0:
            raise MalformedRecordError(f"event #{index}: negative duration in '{name}'")

        start_ms = float(ts) / US_PER_MS
        stop_ms = float(ts + dur) / US_PER_MS
        return LogRecord(start_ms=start_ms, stop_ms=stop_ms, task=str(name))
