# SPDX-License-Identifier: MIT

import logging
from typing import Mapping

import pendulum

from ganttgrid.errors import InvalidTimelineInputError
from ganttgrid.model.interval import DateInterval
from ganttgrid.time import ensure_datetime

logger = logging.getLogger(__name__)


def overlaps(a: DateInterval, b: DateInterval) -> bool:
    """
    Check whether two date intervals share at least one instant.

    Both ends are inclusive, so intervals that only touch overlap.
    Malformed intervals never overlap anything.
    """
    try:
        a_start, a_end = _bounds(a, "a")
        b_start, b_end = _bounds(b, "b")
    except InvalidTimelineInputError as error:
        logger.warning("cannot check overlap: %s", error)
        return False

    return a_start <= b_end and b_start <= a_end


def _bounds(
    interval: DateInterval, name: str
) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    if not isinstance(interval, Mapping):
        raise InvalidTimelineInputError(f"{name} is not a date interval: {interval!r}")
    start = ensure_datetime(interval.get("start"), f"{name}.start")
    end = ensure_datetime(interval.get("end"), f"{name}.end")
    if end < start:
        raise InvalidTimelineInputError(f"{name} ends before it starts: {start} > {end}")
    return start, end
