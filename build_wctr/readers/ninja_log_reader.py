"""
Reader for ninja's .ninja_log build log.

A log looks like this:

    # ninja log v5
    10      3908    1601299613944115493     CMakeFiles/lgr.dir/nanobench.cpp.o    5ff3f2b631310730

Columns are start (ms), stop (ms), restat mtime, output path and command hash.
"""

import logging
import re
from typing import IO, Iterator, Sequence

from ..core.errors import FormatMismatchError, MalformedRecordError
from ..core.types import LogRecord

logger = logging.getLogger(__name__)

HEADER_PATTERN = re.compile(r'^# ninja log v(\d+)$')
FIELD_COUNT = 5


class NinjaLogReader:
    """Parses ninja log text into LogRecords."""

    def __init__(self, accepted_versions: Sequence[int] = (5,)):
        self.accepted_versions = tuple(accepted_versions)

    def read_file(self, file_path: str) -> Iterator[LogRecord]:
        """
        Read every record from a ninja log on disk.

        Args:
            file_path: Path to the .ninja_log file

        Returns:
            Iterator of LogRecord in file order
        """
        logger.info("Reading ninja log %s", file_path)
        with open(file_path, 'r', encoding='utf-8', errors='replace') as f:
            yield from self.read(f)

    def read(self, stream: IO[str]) -> Iterator[LogRecord]:
        """
        Read records from an open text stream.

        The header is checked before anything is yielded, so a log in the
        wrong format fails without producing records.

        Raises:
            FormatMismatchError: If the header is missing or names an
                                 unsupported version
            MalformedRecordError: If a line cannot be parsed
        """
        header = stream.readline().rstrip('\r\n')
        self._check_header(header)

        record_count = 0
        for line_number, line in enumerate(stream, start=2):
            line = line.strip()
            if not line:
                continue
            yield self.parse_line(line, line_number)
            record_count += 1

        logger.info("Read %d ninja log records", record_count)

    def _check_header(self, header: str) -> None:
        expected = ' or '.join(f"'# ninja log v{v}'" for v in self.accepted_versions)
        match = HEADER_PATTERN.match(header)
        if not match or int(match.group(1)) not in self.accepted_versions:
            raise FormatMismatchError(expected, header)

    @staticmethod
    def parse_line(line: str, line_number: int = None) -> LogRecord:
        """
        Parse a single log line.

        Fields are tab separated; any whitespace is accepted as well since
        output paths in ninja logs never contain tabs.
        """
        parts = line.split('\t')
        if len(parts) != FIELD_COUNT:
            parts = line.split()
        if len(parts) != FIELD_COUNT:
            raise MalformedRecordError(
                f"expected {FIELD_COUNT} fields, found {len(parts)}: {line!r}",
                line_number
            )

        start, stop, restat, output, command_hash = parts
        try:
            start_ms = int(start)
            stop_ms = int(stop)
            restat_mtime = int(restat)
        except ValueError:
            raise MalformedRecordError(f"non-integer time field: {line!r}", line_number)

        if stop_ms < start_ms:
            raise MalformedRecordError(
                f"'{output}' stops ({stop_ms}) before it starts ({start_ms})",
                line_number
            )

        return LogRecord(
            start_ms=start_ms,
            stop_ms=stop_ms,
            task=output,
            restat_mtime=restat_mtime,
            command_hash=command_hash
        )
