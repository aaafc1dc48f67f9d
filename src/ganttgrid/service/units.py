# SPDX-License-Identifier: MIT

import logging
from typing import Sequence

import pendulum

from ganttgrid.errors import InvalidTimelineInputError
from ganttgrid.granularity.rules import get_strategy
from ganttgrid.model.view_mode import ViewMode
from ganttgrid.time import ensure_datetime

logger = logging.getLogger(__name__)


def generate_units(
    start: pendulum.DateTime, end: pendulum.DateTime, view_mode: ViewMode | str
) -> list[pendulum.DateTime]:
    """
    Generate the primitive columns of a timeline from start to end.

    The first column begins at the start of the unit containing ``start``
    (the quarter start for quarter mode); columns are added until one
    would begin after ``end``.

    Args:
        start: First instant that must be covered
        end: Last instant that must be covered
        view_mode: Granularity of the columns

    Returns:
        Start instant of each column, empty when the inputs are unusable
    """
    try:
        strategy = get_strategy(view_mode)
        start = ensure_datetime(start, "start")
        end = ensure_datetime(end, "end")
    except InvalidTimelineInputError as error:
        logger.warning("cannot generate units: %s", error)
        return []

    units = []
    current = strategy.unit_start(start)

    while current <= end:
        units.append(current)
        current = strategy.next_unit(current)

    return units


def current_unit_index(
    units: Sequence[pendulum.DateTime],
    instant: pendulum.DateTime,
    view_mode: ViewMode | str,
) -> int:
    """Index of the column containing ``instant``, or -1 if none does."""
    try:
        strategy = get_strategy(view_mode)
        instant = ensure_datetime(instant, "instant")
        dates = [
            ensure_datetime(unit, f"units[{index}]") for index, unit in enumerate(units)
        ]
    except (InvalidTimelineInputError, TypeError) as error:
        logger.warning("cannot locate instant: %s", error)
        return -1

    for index, unit in enumerate(dates):
        if unit <= instant < strategy.next_unit(unit):
            return index
    return -1
