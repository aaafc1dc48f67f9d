import pytest

from ganttgrid.errors import UnknownViewModeError
from ganttgrid.granularity.rules import (
    ceil_to_unit,
    floor_to_unit,
    get_strategy,
    min_pixel_width,
    snap_quantum_px,
    unit_duration_ms,
)
from ganttgrid.model.view_mode import ViewMode
from tests.conftest import utc

SAMPLE = utc(2024, 5, 17, 13, 45, 12).add(microseconds=345000)


@pytest.mark.parametrize(
    "view_mode, expected",
    [
        (ViewMode.MINUTE, 60_000),
        (ViewMode.HOUR, 3_600_000),
        (ViewMode.DAY, 86_400_000),
        (ViewMode.WEEK, 604_800_000),
        (ViewMode.MONTH, None),
        (ViewMode.QUARTER, None),
        (ViewMode.YEAR, None),
    ],
)
def test_unit_duration(view_mode: ViewMode, expected) -> None:
    assert unit_duration_ms(view_mode) == expected


@pytest.mark.parametrize(
    "view_mode, expected",
    [
        ("minute", 10),
        ("hour", 15),
        ("day", 20),
        ("week", 20),
        ("month", 20),
        ("quarter", 30),
        ("year", 40),
        ("fortnight", 20),
    ],
)
def test_min_pixel_width(view_mode: str, expected: int) -> None:
    assert min_pixel_width(view_mode) == expected


def test_snap_quantum() -> None:
    assert snap_quantum_px(ViewMode.DAY, 150) == 150
    assert snap_quantum_px(ViewMode.WEEK, 140) == 20
    assert snap_quantum_px(ViewMode.HOUR, 60) == 1
    assert snap_quantum_px(ViewMode.MINUTE, 60) == 1
    assert snap_quantum_px(ViewMode.MONTH, 100) is None


def test_floor_and_ceil_day_precision() -> None:
    for view_mode in (ViewMode.DAY, ViewMode.WEEK):
        assert floor_to_unit(SAMPLE, view_mode) == utc(2024, 5, 17)
        assert ceil_to_unit(SAMPLE, view_mode) == utc(2024, 5, 17, 23, 59, 59).add(
            microseconds=999000
        )


def test_floor_and_ceil_hour_and_minute() -> None:
    assert floor_to_unit(SAMPLE, ViewMode.HOUR) == utc(2024, 5, 17, 13)
    assert ceil_to_unit(SAMPLE, ViewMode.HOUR) == utc(2024, 5, 17, 13, 59, 59).add(
        microseconds=999000
    )
    assert floor_to_unit(SAMPLE, ViewMode.MINUTE) == utc(2024, 5, 17, 13, 45)
    assert ceil_to_unit(SAMPLE, ViewMode.MINUTE) == utc(2024, 5, 17, 13, 45, 59).add(
        microseconds=999000
    )


def test_calendar_modes_do_not_round() -> None:
    for view_mode in (ViewMode.MONTH, ViewMode.QUARTER, ViewMode.YEAR):
        assert floor_to_unit(SAMPLE, view_mode) == SAMPLE
        assert ceil_to_unit(SAMPLE, view_mode) == SAMPLE


def test_unknown_view_mode_raises() -> None:
    with pytest.raises(UnknownViewModeError):
        get_strategy("fortnight")
    with pytest.raises(UnknownViewModeError):
        unit_duration_ms(None)  # type: ignore[arg-type]


def test_strategy_accepts_plain_strings() -> None:
    assert get_strategy("week").view_mode is ViewMode.WEEK
    assert get_strategy("week").is_fixed_duration
    assert not get_strategy("quarter").is_fixed_duration
