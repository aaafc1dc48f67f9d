# SPDX-License-Identifier: MIT

import datetime
import math
from typing import cast

import pendulum

from ganttgrid.errors import InvalidTimelineInputError

MS_PER_MINUTE = 60 * 1000
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR
MS_PER_WEEK = 7 * MS_PER_DAY

# Ends of units are reported at millisecond resolution, e.g. 23:59:59.999
END_OF_UNIT_TICK_US = 1000


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def ensure_datetime(value: object, name: str = "date") -> pendulum.DateTime:
    """Return ``value`` as a pendulum.DateTime or raise InvalidTimelineInputError.

    Naive datetimes are read as local time, like every date the CLI parses.
    """
    if isinstance(value, pendulum.DateTime):
        return value
    if isinstance(value, datetime.datetime):
        return pendulum.instance(value, tz="local")
    raise InvalidTimelineInputError(f"{name} is not a datetime: {value!r}")


def is_valid_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def to_epoch_ms(value: pendulum.DateTime) -> int:
    return value.int_timestamp * 1000 + value.microsecond // 1000


def wall_clock_ms(value: pendulum.DateTime) -> int:
    """Milliseconds on the local wall clock, ignoring DST shifts between instants."""
    return to_epoch_ms(value) + (value.offset or 0) * 1000


def from_epoch_ms(
    epoch_ms: float, tz: pendulum.Timezone | pendulum.FixedTimezone | str
) -> pendulum.DateTime:
    seconds, remainder_ms = divmod(round_half_up(epoch_ms), 1000)
    return pendulum.from_timestamp(seconds, tz=tz).add(
        microseconds=remainder_ms * 1000
    )


def timezone_of(value: pendulum.DateTime) -> pendulum.Timezone | pendulum.FixedTimezone:
    if value.timezone is None:
        return pendulum.local_timezone()
    return value.timezone


def start_of(value: pendulum.DateTime, unit: str) -> pendulum.DateTime:
    return value.start_of(unit)  # type: ignore[arg-type]


def end_of(value: pendulum.DateTime, unit: str) -> pendulum.DateTime:
    """Last millisecond of the ``unit`` enclosing ``value``."""
    next_start = start_of(value, unit).add(**{f"{unit}s": 1})
    return next_start.subtract(microseconds=END_OF_UNIT_TICK_US)


def start_of_quarter(value: pendulum.DateTime) -> pendulum.DateTime:
    first_month = ((value.month - 1) // 3) * 3 + 1
    return value.set(month=first_month, day=1).start_of("day")


def js_day_of_week(value: pendulum.DateTime) -> int:
    """Day of week with Sunday as 0."""
    return value.isoweekday() % 7


def datetime_to_display_str(value: pendulum.DateTime) -> str:
    return value.format("YYYY-MM-DD HH:mm:ss.SSS")


def datetime_from_str(value: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(value, tz="local"))
