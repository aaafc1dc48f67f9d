# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from ganttgrid.errors import UnknownViewModeError
from ganttgrid.granularity.strategy import (
    DayStrategy,
    GranularityStrategy,
    HourStrategy,
    MinuteStrategy,
    MonthStrategy,
    QuarterStrategy,
    WeekStrategy,
    YearStrategy,
)
from ganttgrid.model.view_mode import ViewMode

DEFAULT_MIN_PIXEL_WIDTH = 20

STRATEGIES: dict[ViewMode, GranularityStrategy] = {
    strategy.view_mode: strategy
    for strategy in (
        MinuteStrategy(),
        HourStrategy(),
        DayStrategy(),
        WeekStrategy(),
        MonthStrategy(),
        QuarterStrategy(),
        YearStrategy(),
    )
}


def get_strategy(view_mode: ViewMode | str) -> GranularityStrategy:
    try:
        return STRATEGIES[ViewMode(view_mode)]
    except (ValueError, KeyError, TypeError):
        raise UnknownViewModeError(view_mode) from None


def unit_duration_ms(view_mode: ViewMode | str) -> Optional[int]:
    """Milliseconds per column, or None for calendar-variable modes."""
    return get_strategy(view_mode).unit_duration_ms


def min_pixel_width(view_mode: ViewMode | str) -> int:
    try:
        return get_strategy(view_mode).min_width
    except UnknownViewModeError:
        return DEFAULT_MIN_PIXEL_WIDTH


def snap_quantum_px(view_mode: ViewMode | str, unit_width: float) -> Optional[float]:
    """Pixel increment bar edges align to, or None when bars are not snapped."""
    return get_strategy(view_mode).snap_quantum_px(unit_width)


def floor_to_unit(date: pendulum.DateTime, view_mode: ViewMode | str) -> pendulum.DateTime:
    return get_strategy(view_mode).floor_to_unit(date)


def ceil_to_unit(date: pendulum.DateTime, view_mode: ViewMode | str) -> pendulum.DateTime:
    return get_strategy(view_mode).ceil_to_unit(date)
