"""Readers turning build tool logs into raw records."""

from .chrome_trace_reader import ChromeTraceReader
from .ninja_log_reader import NinjaLogReader


def detect_format(file_path: str) -> str:
    """
    Guess the log format from the first non-blank byte of a file.

    Returns:
        'chrome' for JSON documents, 'ninja' otherwise
    """
    with open(file_path, 'rb') as f:
        head = f.read(1024).lstrip(b'\xef\xbb\xbf \t\r\n')
    if head[:1] in (b'{', b'['):
        return 'chrome'
    return 'ninja'


__all__ = ["ChromeTraceReader", "NinjaLogReader", "detect_format"]
