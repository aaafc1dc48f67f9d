# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from ganttgrid.errors import InvalidTimelineInputError
from ganttgrid.granularity.rules import get_strategy
from ganttgrid.granularity.strategy import GranularityStrategy
from ganttgrid.model.view_mode import ViewMode
from ganttgrid.model.window import TimelineWindow
from ganttgrid.service.window import validate_window
from ganttgrid.time import ensure_datetime, is_valid_number, to_epoch_ms

logger = logging.getLogger(__name__)


def marker_offset(
    instant: pendulum.DateTime, window: TimelineWindow, reference_index: int
) -> Optional[float]:
    """
    Pixel offset of a vertical marker (usually "now") on the timeline.

    Fixed-duration modes measure the elapsed time from the start of the
    grid, exactly like task bars are placed. Month, quarter and year modes
    place the marker inside the column at ``reference_index``.

    Returns:
        The offset in pixels, or None when no marker should be drawn
        (negative reference index or unusable input).
    """
    if not is_valid_number(reference_index):
        logger.warning(
            "cannot place marker: reference index is not a number: %r", reference_index
        )
        return None
    if reference_index < 0:
        return None

    try:
        strategy, window = validate_window(window)
        instant = ensure_datetime(instant, "instant")
    except InvalidTimelineInputError as error:
        logger.warning("cannot place marker: %s", error)
        return None

    if strategy.unit_duration_ms is not None:
        grid_start = strategy.floor_to_unit(window["start_date"])
        elapsed_ms = to_epoch_ms(instant) - to_epoch_ms(grid_start)
        return elapsed_ms / strategy.unit_duration_ms * window["unit_width"]

    return _offset_in_unit(strategy, instant, window["unit_width"], reference_index)


def marker_offset_in_unit(
    instant: pendulum.DateTime,
    view_mode: ViewMode | str,
    unit_width: float,
    reference_index: int,
) -> Optional[float]:
    """Marker offset from the column index alone, without a precise window."""
    if not is_valid_number(reference_index):
        logger.warning(
            "cannot place marker: reference index is not a number: %r", reference_index
        )
        return None
    if reference_index < 0:
        return None

    try:
        strategy = get_strategy(view_mode)
        instant = ensure_datetime(instant, "instant")
        if not is_valid_number(unit_width) or unit_width <= 0:
            raise InvalidTimelineInputError(f"unit_width must be positive: {unit_width!r}")
    except InvalidTimelineInputError as error:
        logger.warning("cannot place marker: %s", error)
        return None

    return _offset_in_unit(strategy, instant, unit_width, reference_index)


def _offset_in_unit(
    strategy: GranularityStrategy,
    instant: pendulum.DateTime,
    unit_width: float,
    reference_index: int,
) -> float:
    return reference_index * unit_width + unit_width * strategy.unit_fraction(instant)
