"""
Human readable rendering of idle durations.
"""

from __future__ import annotations

SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24


def format_time(seconds: float) -> str:
    """
    Render a duration using the largest unit that applies.

    ``S.ss [s]`` below one minute, ``MM:SS [m]`` below one hour,
    ``HH:MM:SS [h]`` below one day and ``DD:HH:MM:SS [d]`` otherwise.
    Seconds in the composite formats are truncated to whole numbers and
    values that round up to a full minute use the minute format.
    """
    if seconds < SECONDS_PER_MINUTE and round(seconds, 2) >= SECONDS_PER_MINUTE:
        # Would render as "60.00 [s]".
        seconds = float(SECONDS_PER_MINUTE)
    minutes = int(seconds / SECONDS_PER_MINUTE)
    hours = minutes // MINUTES_PER_HOUR
    days = hours // HOURS_PER_DAY
    whole_seconds = int(seconds % SECONDS_PER_MINUTE)

    if minutes <= 0:
        return f"{seconds:.2f} [s]"
    if hours <= 0:
        return f"{minutes:02d}:{whole_seconds:02d} [m]"
    if days <= 0:
        return f"{hours:02d}:{minutes % MINUTES_PER_HOUR:02d}:{whole_seconds:02d} [h]"
    return (
        f"{days:02d}:{hours % HOURS_PER_DAY:02d}:"
        f"{minutes % MINUTES_PER_HOUR:02d}:{whole_seconds:02d} [d]"
    )
