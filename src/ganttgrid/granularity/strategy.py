# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod
from typing import Any, Optional

import pendulum

from ganttgrid.model.view_mode import ViewMode
from ganttgrid.model.window import TimelineWindow
from ganttgrid.time import (
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_WEEK,
    end_of,
    js_day_of_week,
    round_half_up,
    start_of,
    start_of_quarter,
    to_epoch_ms,
)


class GranularityStrategy(ABC):
    """Everything the engine needs to know about one view mode."""

    view_mode: ViewMode
    min_width: int
    # pendulum.add() keyword arguments that advance one rendered column
    unit_step: dict[str, int]
    unit_duration_ms: Optional[int] = None

    # Secondary header row: run-length groups keyed by the start of this unit
    header_parent_unit: Optional[str] = None
    # Secondary header row: month blocks measured in units of this many days
    header_block_days: Optional[int] = None
    header_requires_multiple_units: bool = False

    @property
    def is_fixed_duration(self) -> bool:
        return self.unit_duration_ms is not None

    @abstractmethod
    def snap_quantum_px(self, unit_width: float) -> Optional[float]: ...

    @abstractmethod
    def effective_duration_ms(self, window: TimelineWindow) -> float: ...

    @abstractmethod
    def snap_dates(
        self,
        left: float,
        width: float,
        raw_start: pendulum.DateTime,
        raw_end: pendulum.DateTime,
        window: TimelineWindow,
    ) -> tuple[pendulum.DateTime, pendulum.DateTime]: ...

    @abstractmethod
    def unit_fraction(self, instant: pendulum.DateTime) -> float:
        """Position of ``instant`` inside its own column, from 0 to 1."""

    def floor_to_unit(self, value: pendulum.DateTime) -> pendulum.DateTime:
        return value

    def ceil_to_unit(self, value: pendulum.DateTime) -> pendulum.DateTime:
        return value

    def normalize_task(
        self, start: pendulum.DateTime, end: pendulum.DateTime
    ) -> tuple[pendulum.DateTime, pendulum.DateTime]:
        return start, end

    def unit_start(self, value: pendulum.DateTime) -> pendulum.DateTime:
        return start_of(value, self._column_unit)

    def next_unit(self, value: pendulum.DateTime) -> pendulum.DateTime:
        return value.add(**self.unit_step)

    @property
    def _column_unit(self) -> str:
        return next(iter(self.unit_step)).rstrip("s")


class FixedDurationStrategy(GranularityStrategy):
    # calendar field bars are rounded to
    precision_unit: str
    # calendar step one snapped pixel step stands for
    step_unit: str

    def snap_quantum_px(self, unit_width: float) -> Optional[float]:
        return 1.0

    def step_px(self, unit_width: float) -> float:
        return unit_width

    def effective_duration_ms(self, window: TimelineWindow) -> float:
        assert self.unit_duration_ms is not None
        return window["total_units"] * self.unit_duration_ms

    def floor_to_unit(self, value: pendulum.DateTime) -> pendulum.DateTime:
        return start_of(value, self.precision_unit)

    def ceil_to_unit(self, value: pendulum.DateTime) -> pendulum.DateTime:
        return end_of(value, self.precision_unit)

    def normalize_task(
        self, start: pendulum.DateTime, end: pendulum.DateTime
    ) -> tuple[pendulum.DateTime, pendulum.DateTime]:
        return self.floor_to_unit(start), self.ceil_to_unit(end)

    def snap_dates(
        self,
        left: float,
        width: float,
        raw_start: pendulum.DateTime,
        raw_end: pendulum.DateTime,
        window: TimelineWindow,
    ) -> tuple[pendulum.DateTime, pendulum.DateTime]:
        step_px = self.step_px(window["unit_width"])
        offset_steps = round_half_up(left / step_px)
        span_steps = max(1, round_half_up(width / step_px))

        base = self.floor_to_unit(window["start_date"])
        start = base.add(**self._steps(offset_steps))
        end = self.ceil_to_unit(start.add(**self._steps(span_steps - 1)))
        return start, end

    def _steps(self, count: int) -> dict[str, Any]:
        return {self.step_unit: count}


class CalendarStrategy(GranularityStrategy):
    """Month-like modes: no fixed grid, positions follow the literal window span."""

    def snap_quantum_px(self, unit_width: float) -> Optional[float]:
        return None

    def effective_duration_ms(self, window: TimelineWindow) -> float:
        return to_epoch_ms(window["end_date"]) - to_epoch_ms(window["start_date"])

    def snap_dates(
        self,
        left: float,
        width: float,
        raw_start: pendulum.DateTime,
        raw_end: pendulum.DateTime,
        window: TimelineWindow,
    ) -> tuple[pendulum.DateTime, pendulum.DateTime]:
        return start_of(raw_start, "day"), end_of(raw_end, "day")


class MinuteStrategy(FixedDurationStrategy):
    view_mode = ViewMode.MINUTE
    min_width = 10
    unit_step = {"minutes": 1}
    unit_duration_ms = MS_PER_MINUTE
    precision_unit = "minute"
    step_unit = "minutes"
    header_parent_unit = "hour"

    def unit_fraction(self, instant: pendulum.DateTime) -> float:
        """Seconds into the minute column, not minutes into the hour."""
        return (instant.second + instant.microsecond / 1_000_000) / 60


class HourStrategy(FixedDurationStrategy):
    view_mode = ViewMode.HOUR
    min_width = 15
    unit_step = {"hours": 1}
    unit_duration_ms = MS_PER_HOUR
    precision_unit = "hour"
    step_unit = "hours"
    header_parent_unit = "day"

    def unit_fraction(self, instant: pendulum.DateTime) -> float:
        return instant.minute / 60


class DayStrategy(FixedDurationStrategy):
    view_mode = ViewMode.DAY
    min_width = 20
    unit_step = {"days": 1}
    unit_duration_ms = MS_PER_DAY
    precision_unit = "day"
    step_unit = "days"
    header_block_days = 1
    header_requires_multiple_units = True

    def snap_quantum_px(self, unit_width: float) -> Optional[float]:
        return unit_width

    def unit_fraction(self, instant: pendulum.DateTime) -> float:
        # the marker sits in the middle of the day column
        return 0.5


class WeekStrategy(FixedDurationStrategy):
    view_mode = ViewMode.WEEK
    min_width = 20
    unit_step = {"weeks": 1}
    unit_duration_ms = MS_PER_WEEK
    precision_unit = "day"
    step_unit = "days"
    header_block_days = 7

    def snap_quantum_px(self, unit_width: float) -> Optional[float]:
        return unit_width / 7

    def step_px(self, unit_width: float) -> float:
        return unit_width / 7

    def unit_fraction(self, instant: pendulum.DateTime) -> float:
        return js_day_of_week(instant) / 6


class MonthStrategy(CalendarStrategy):
    view_mode = ViewMode.MONTH
    min_width = 20
    unit_step = {"months": 1}

    def unit_fraction(self, instant: pendulum.DateTime) -> float:
        return (instant.day - 1) / instant.days_in_month


class QuarterStrategy(CalendarStrategy):
    view_mode = ViewMode.QUARTER
    min_width = 30
    unit_step = {"months": 3}

    def unit_start(self, value: pendulum.DateTime) -> pendulum.DateTime:
        return start_of_quarter(value)

    def unit_fraction(self, instant: pendulum.DateTime) -> float:
        return ((instant.month - 1) % 3) / 3


class YearStrategy(CalendarStrategy):
    view_mode = ViewMode.YEAR
    min_width = 40
    unit_step = {"years": 1}

    def unit_fraction(self, instant: pendulum.DateTime) -> float:
        return (instant.month - 1) / 12
