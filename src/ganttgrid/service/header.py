# SPDX-License-Identifier: MIT

import logging
from typing import Sequence

import pendulum

from ganttgrid.errors import InvalidTimelineInputError
from ganttgrid.granularity.rules import get_strategy
from ganttgrid.model.header_unit import HeaderUnit
from ganttgrid.model.view_mode import ViewMode
from ganttgrid.time import MS_PER_DAY, ensure_datetime, start_of, wall_clock_ms

logger = logging.getLogger(__name__)


def group_header_units(
    units: Sequence[pendulum.DateTime], view_mode: ViewMode | str
) -> list[HeaderUnit]:
    """
    Group the primitive columns of a timeline into the secondary header row.

    Minute columns are grouped by hour and hour columns by day, one group
    per run of consecutive columns sharing the same parent. Day and week
    columns are grouped by calendar month; a week that straddles a month
    boundary is split, so spans may be fractional.

    Args:
        units: Start instant of each rendered column, in order
        view_mode: The view mode the columns were generated for

    Returns:
        Header groups in column order. Empty when the view mode has no
        secondary row, when there are no columns, or for a single day column.
    """
    try:
        strategy = get_strategy(view_mode)
        dates = [
            ensure_datetime(unit, f"units[{index}]") for index, unit in enumerate(units)
        ]
    except (InvalidTimelineInputError, TypeError) as error:
        logger.warning("cannot group header units: %s", error)
        return []

    if not dates:
        return []

    if strategy.header_parent_unit is not None:
        return _group_by_parent(dates, strategy.header_parent_unit)

    if strategy.header_block_days is not None:
        if len(dates) < 2 and strategy.header_requires_multiple_units:
            return []
        return _group_by_month(dates, strategy.header_block_days)

    return []


def _group_by_parent(
    dates: list[pendulum.DateTime], parent_unit: str
) -> list[HeaderUnit]:
    headers: list[HeaderUnit] = []
    group_key = start_of(dates[0], parent_unit)
    span = 0

    for date in dates:
        key = start_of(date, parent_unit)
        if key == group_key:
            span += 1
        else:
            headers.append(HeaderUnit(date=group_key, span=span))
            group_key = key
            span = 1

    headers.append(HeaderUnit(date=group_key, span=span))
    return headers


def _group_by_month(dates: list[pendulum.DateTime], block_days: int) -> list[HeaderUnit]:
    range_start = dates[0]
    range_end = dates[-1].add(days=block_days)
    unit_ms = block_days * MS_PER_DAY

    headers: list[HeaderUnit] = []
    cursor = range_start
    while cursor < range_end:
        next_month_start = start_of(cursor, "month").add(months=1)
        block_end = min(next_month_start, range_end)
        block_ms = wall_clock_ms(block_end) - wall_clock_ms(cursor)
        headers.append(HeaderUnit(date=cursor, span=block_ms / unit_ms))
        cursor = next_month_start

    return headers
