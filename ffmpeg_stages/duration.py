"""Duration formatting for time-based ffmpeg flags (-ss, -to, -t)."""

import math
from datetime import timedelta
from decimal import Decimal, InvalidOperation
from typing import List, Union

from ffmpeg_stages.common import InvalidArgument

DurationLike = Union[timedelta, int, float, Decimal]

_MS_PER_HOUR = 3_600_000
_MS_PER_MINUTE = 60_000
_MS_PER_SECOND = 1_000

SEEK_FLAG = "-ss"
STOP_FLAG = "-to"
DURATION_FLAG = "-t"


def _to_milliseconds(value: DurationLike) -> int:
    """Convert a duration to whole milliseconds, truncating finer precision."""
    if isinstance(value, timedelta):
        micros = (value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds
        if micros < 0:
            raise InvalidArgument(f"Duration must be non-negative, got {value!r}")
        return micros // 1000

    # bool is an int subclass; True seconds is never what the caller meant
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise InvalidArgument(
            f"Duration must be a timedelta or a number of seconds, got {type(value).__name__}"
        )

    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidArgument(f"Duration must be finite, got {value!r}")
        # repr() gives the shortest decimal that round-trips, so 1.001 stays 1.001
        value = Decimal(repr(value))
    elif isinstance(value, Decimal) and not value.is_finite():
        raise InvalidArgument(f"Duration must be finite, got {value!r}")

    if value < 0:
        raise InvalidArgument(f"Duration must be non-negative, got {value!r}")

    try:
        return int(Decimal(value) * _MS_PER_SECOND)
    except InvalidOperation as e:
        raise InvalidArgument(f"Unrepresentable duration {value!r}") from e


def format_duration(value: DurationLike) -> str:
    """Format a duration as HH:MM:SS.mmm for ffmpeg.

    Hours are not clamped to 24. Anything finer than a millisecond is
    truncated, never rounded.

    Args:
        value: A timedelta, or a non-negative number of seconds.

    Raises:
        InvalidArgument: For negative, non-finite or non-numeric values.
    """
    ms = _to_milliseconds(value)
    hours, ms = divmod(ms, _MS_PER_HOUR)
    minutes, ms = divmod(ms, _MS_PER_MINUTE)
    seconds, ms = divmod(ms, _MS_PER_SECOND)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{ms:03d}"


def generate_time_flags(flag: str, value: DurationLike) -> List[str]:
    """Generate a time flag/value pair such as ["-ss", "00:01:30.000"]."""
    return [flag, format_duration(value)]
