from __future__ import annotations

import datetime
import math
import time as _time
from typing import Callable, Union

from libotp.errors import MovingFactorRangeError

__all__ = ["TimeLike", "normalize_time", "time_step", "seconds_until_next_window"]

TimeLike = Union[int, float, datetime.datetime]
Clock = Callable[[], float]


def normalize_time(value: TimeLike | None, now: Clock = _time.time) -> float:
    """
    Convert a time to seconds since the epoch.

    Accepts ints, floats and datetimes (naive datetimes are taken as UTC).
    ``None`` means the current time as reported by ``now``.
    """
    if value is None:
        value = now()
    if isinstance(value, datetime.datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=datetime.timezone.utc)
        return value.timestamp()
    if isinstance(value, (int, float)):
        return value
    raise TypeError(f"time must be int, float or datetime, not {type(value)!r}")


def time_step(
    step_size: int,
    at_time: TimeLike | None = None,
    *,
    now: Clock = _time.time,
) -> int:
    """
    Map a wall-clock time to its time step, ``floor(at_time / step_size)``.
    """
    seconds = normalize_time(at_time, now)
    if seconds < 0:
        raise MovingFactorRangeError(f"time must be >= 0, got {seconds}")
    return math.floor(seconds) // step_size


def seconds_until_next_window(
    step_size: int,
    at_time: TimeLike | None = None,
    *,
    now: Clock = _time.time,
) -> int:
    """
    Seconds left until the next time step starts, in range ``1..step_size``.
    """
    seconds = math.floor(normalize_time(at_time, now))
    return step_size - seconds % step_size
