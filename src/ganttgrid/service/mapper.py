# SPDX-License-Identifier: MIT

import logging
import math
import re
from typing import Any, Mapping, cast

import pendulum

from ganttgrid.errors import InvalidTimelineInputError
from ganttgrid.granularity.rules import min_pixel_width
from ganttgrid.model.interval import DateInterval, PixelInterval
from ganttgrid.model.task import Task
from ganttgrid.model.window import TimelineWindow
from ganttgrid.service.window import validate_window
from ganttgrid.time import (
    ensure_datetime,
    from_epoch_ms,
    is_valid_number,
    round_half_up,
    timezone_of,
    to_epoch_ms,
)

logger = logging.getLogger(__name__)

# Narrowest bar a drag gesture may produce, whatever the view mode
DRAG_MIN_WIDTH_PX = 20

_CSS_NUMBER_P = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def to_date_interval(
    pixel_interval: PixelInterval, window: TimelineWindow
) -> DateInterval:
    """
    Convert a bar's pixel position back into the dates it covers.

    Fixed-duration modes snap both edges to whole minutes, hours or days
    counted from the start of the window; month, quarter and year modes
    round the raw instants out to whole days. The result always lies
    inside the window.

    Args:
        pixel_interval: Bar position, usually read from the live element during a drag
        window: The timeline the bar is rendered on

    Returns:
        A new DateInterval. If the window is unusable the window bounds are
        returned unchanged.
    """
    try:
        return _to_date_interval(pixel_interval, window)
    except InvalidTimelineInputError as error:
        logger.warning("cannot convert pixels to dates, using window bounds: %s", error)
        bounds = _window_fields(window)
        return DateInterval(
            start=bounds.get("start_date"),  # type: ignore[typeddict-item]
            end=bounds.get("end_date"),  # type: ignore[typeddict-item]
        )


def to_pixel_interval(
    date_interval: DateInterval, window: TimelineWindow
) -> PixelInterval:
    """
    Place a date interval on the pixel axis of a window.

    This is the inverse of to_date_interval: both use the same effective
    duration, so a bar rendered here and dragged back maps onto the same
    column boundaries.
    """
    try:
        return _to_pixel_interval(date_interval, window)
    except InvalidTimelineInputError as error:
        view_mode = _window_fields(window).get("view_mode")
        logger.warning("cannot convert dates to pixels, using default bar: %s", error)
        return PixelInterval(left=0.0, width=float(min_pixel_width(view_mode)))


def live_dates_from_style(
    left_style: str | None, width_style: str | None, window: TimelineWindow
) -> DateInterval:
    """Dates for a bar whose CSS ``left``/``width`` are e.g. ``"300px"``."""
    pixel_interval = PixelInterval(
        left=_parse_css_length(left_style),
        width=_parse_css_length(width_style),
    )
    return to_date_interval(pixel_interval, window)


def update_task_dates(
    task: Task, start: pendulum.DateTime, end: pendulum.DateTime
) -> Task:
    updated = cast(Task, dict(task))
    updated["start_date"] = start
    updated["end_date"] = end
    return updated


def move_task(task: Task, pixel_interval: PixelInterval, window: TimelineWindow) -> Task:
    interval = to_date_interval(pixel_interval, window)
    return update_task_dates(task, interval["start"], interval["end"])


def _to_date_interval(
    pixel_interval: PixelInterval, window: TimelineWindow
) -> DateInterval:
    strategy, window = validate_window(window)
    window_start = window["start_date"]
    window_end = window["end_date"]

    if not isinstance(pixel_interval, Mapping):
        pixel_interval = PixelInterval()  # type: ignore[typeddict-item]
    left = _sanitize_left(pixel_interval.get("left"))
    width = _sanitize_width(pixel_interval.get("width"))

    total_px = window["total_units"] * window["unit_width"]
    ms_per_px = strategy.effective_duration_ms(window) / total_px

    start_ms = to_epoch_ms(window_start)
    tz = timezone_of(window_start)
    try:
        raw_start = from_epoch_ms(start_ms + left * ms_per_px, tz)
        raw_end = from_epoch_ms(start_ms + (left + width) * ms_per_px, tz)
        start, end = strategy.snap_dates(left, width, raw_start, raw_end, window)
    except (OverflowError, ValueError, OSError) as error:
        raise InvalidTimelineInputError(
            f"pixel interval left={left} width={width} leaves the calendar"
        ) from error

    # clamping always wins over snapping
    start = min(max(start, window_start), window_end)
    end = max(min(end, window_end), start)

    logger.debug(
        "%s: left=%s width=%s -> %s .. %s", strategy.view_mode, left, width, start, end
    )
    return DateInterval(start=start, end=end)


def _to_pixel_interval(
    date_interval: DateInterval, window: TimelineWindow
) -> PixelInterval:
    strategy, window = validate_window(window)
    window_start = window["start_date"]
    window_end = window["end_date"]

    if not isinstance(date_interval, Mapping):
        raise InvalidTimelineInputError(
            f"date interval is not a mapping: {date_interval!r}"
        )
    task_start = ensure_datetime(date_interval.get("start"), "interval start")
    task_end = ensure_datetime(date_interval.get("end"), "interval end")

    task_start = min(max(task_start, window_start), window_end)
    task_end = min(task_end, window_end)

    grid_start = strategy.floor_to_unit(window_start)
    task_start, task_end = strategy.normalize_task(task_start, task_end)

    duration_ms = strategy.effective_duration_ms(window)
    total_px = window["total_units"] * window["unit_width"]

    left = (to_epoch_ms(task_start) - to_epoch_ms(grid_start)) / duration_ms * total_px
    width = (
        max(0, to_epoch_ms(task_end) - to_epoch_ms(task_start)) / duration_ms * total_px
    )

    quantum = strategy.snap_quantum_px(window["unit_width"])
    if quantum is not None:
        left = round_half_up(left / quantum) * quantum
        width = max(quantum, round_half_up(width / quantum) * quantum)

    width = max(strategy.min_width, width)
    left = min(max(left, 0.0), total_px)
    width = min(width, total_px - left)

    logger.debug(
        "%s: %s .. %s -> left=%s width=%s",
        strategy.view_mode,
        task_start,
        task_end,
        left,
        width,
    )
    return PixelInterval(left=float(left), width=float(width))


def _window_fields(window: object) -> Mapping[str, Any]:
    if isinstance(window, Mapping):
        return window
    return {}


def _sanitize_left(value: object) -> float:
    if not is_valid_number(value) or cast(float, value) < 0:
        return 0.0
    return float(cast(float, value))


def _sanitize_width(value: object) -> float:
    if not is_valid_number(value) or cast(float, value) < DRAG_MIN_WIDTH_PX:
        return float(DRAG_MIN_WIDTH_PX)
    return float(cast(float, value))


def _parse_css_length(value: str | None) -> float:
    match = _CSS_NUMBER_P.match(value or "0")
    if match is None:
        return math.nan
    return float(match.group(1))
