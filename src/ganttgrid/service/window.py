# SPDX-License-Identifier: MIT

from typing import Mapping, Sequence, cast

import pendulum

from ganttgrid.errors import InvalidTimelineInputError
from ganttgrid.granularity.rules import get_strategy
from ganttgrid.granularity.strategy import GranularityStrategy
from ganttgrid.model.view_mode import ViewMode
from ganttgrid.model.window import TimelineWindow
from ganttgrid.time import END_OF_UNIT_TICK_US, ensure_datetime, is_valid_number


def validate_window(
    window: TimelineWindow,
) -> tuple[GranularityStrategy, TimelineWindow]:
    """Check a window's invariants and return it with pendulum dates."""
    if not isinstance(window, Mapping):
        raise InvalidTimelineInputError(f"window is not a mapping: {window!r}")

    strategy = get_strategy(window.get("view_mode"))  # type: ignore[arg-type]
    start_date = ensure_datetime(window.get("start_date"), "window start_date")
    end_date = ensure_datetime(window.get("end_date"), "window end_date")
    if end_date <= start_date:
        raise InvalidTimelineInputError(
            f"window end_date {end_date} is not after start_date {start_date}"
        )

    total_units = window.get("total_units")
    if not is_valid_number(total_units) or total_units <= 0:  # type: ignore[operator]
        raise InvalidTimelineInputError(f"total_units must be positive: {total_units!r}")
    unit_width = window.get("unit_width")
    if not is_valid_number(unit_width) or unit_width <= 0:  # type: ignore[operator]
        raise InvalidTimelineInputError(f"unit_width must be positive: {unit_width!r}")

    return strategy, TimelineWindow(
        start_date=start_date,
        end_date=end_date,
        total_units=cast(int, total_units),
        unit_width=cast(float, unit_width),
        view_mode=strategy.view_mode,
    )


def window_for_units(
    units: Sequence[pendulum.DateTime], view_mode: ViewMode | str, unit_width: float
) -> TimelineWindow:
    """Window spanning the given columns, from the first start to the last end."""
    if not units:
        raise InvalidTimelineInputError("a window needs at least one unit")
    strategy = get_strategy(view_mode)
    end_date = strategy.next_unit(units[-1]).subtract(microseconds=END_OF_UNIT_TICK_US)
    return TimelineWindow(
        start_date=units[0],
        end_date=end_date,
        total_units=len(units),
        unit_width=unit_width,
        view_mode=strategy.view_mode,
    )
