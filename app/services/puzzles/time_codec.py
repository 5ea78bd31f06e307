"""
Time parsing and formatting for puzzle completion times.

Accepted input shapes:
- "95"        raw seconds
- "3:42"      minutes and seconds
- "1:02:03"   hours, minutes and seconds

Output is "mm:ss" under one hour and "h:mm:ss" from one hour up.
"""
import math
import re
from typing import Optional, Union

PLACEHOLDER = "-"

# Longer parts are rejected before int() sees them
MAX_PART_DIGITS = 9

_DIGITS = re.compile(r"[0-9]{1,%d}" % MAX_PART_DIGITS)


def parse_time_to_seconds(text: Optional[str]) -> Optional[int]:
    """
    Parse a human time string into whole seconds.

    Args:
        text: Raw user input

    Returns:
        Seconds, or None if the input is empty, malformed or has a part
        longer than MAX_PART_DIGITS digits

    Examples:
        >>> parse_time_to_seconds("3:42")
        222
        >>> parse_time_to_seconds("1:02:03")
        3723
        >>> parse_time_to_seconds("1:60") is None
        True
    """
    if text is None:
        return None

    value = str(text).strip()
    if not value:
        return None

    if _DIGITS.fullmatch(value):
        return int(value)

    parts = [part.strip() for part in value.split(":")]
    if any(not _DIGITS.fullmatch(part) for part in parts):
        return None

    if len(parts) == 2:
        minutes, seconds = (int(p) for p in parts)
        if minutes >= 60 or seconds >= 60:
            return None
        return minutes * 60 + seconds

    if len(parts) == 3:
        hours, minutes, seconds = (int(p) for p in parts)
        if minutes >= 60 or seconds >= 60:
            return None
        return hours * 3600 + minutes * 60 + seconds

    return None


def format_seconds(total: Optional[Union[int, float]]) -> str:
    """
    Format seconds for display.

    Fractional values (averages) are floored and negatives clamp to zero.
    None renders as the placeholder "-".

    Examples:
        >>> format_seconds(222)
        '03:42'
        >>> format_seconds(3723)
        '1:02:03'
        >>> format_seconds(None)
        '-'
    """
    if total is None:
        return PLACEHOLDER

    secs = max(0, int(math.floor(total)))
    hours, remainder = divmod(secs, 3600)
    minutes, seconds = divmod(remainder, 60)

    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes:02d}:{seconds:02d}"
