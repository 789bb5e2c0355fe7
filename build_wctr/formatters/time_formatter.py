"""
Time formatting utilities for human-readable output.
"""

MS_PER_SECOND = 1000.0
MS_PER_MINUTE = 60000.0
MS_PER_HOUR = 3600000.0


def format_time(ms: float) -> str:
    """
    Format a duration in milliseconds to a human-readable string.

    Args:
        ms: Time in milliseconds

    Returns:
        Formatted string, e.g. "123 ms", "2.34 s", "1m 30.5s", "2h 03m"
    """
    if ms < MS_PER_SECOND:
        return f"{ms:.0f} ms"
    elif ms < MS_PER_MINUTE:
        return f"{ms / MS_PER_SECOND:.2f} s"
    elif ms < MS_PER_HOUR:
        minutes = int(ms // MS_PER_MINUTE)
        seconds = (ms % MS_PER_MINUTE) / MS_PER_SECOND
        return f"{minutes}m {seconds:.1f}s"
    else:
        hours = int(ms // MS_PER_HOUR)
        minutes = int((ms % MS_PER_HOUR) // MS_PER_MINUTE)
        return f"{hours}h {minutes:02d}m"


def to_seconds(ms: float) -> float:
    """Milliseconds to seconds, the unit the text report uses."""
    return ms / MS_PER_SECOND
