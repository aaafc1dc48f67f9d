import logging

import pytest

from ganttgrid.errors import InvalidTimelineInputError
from ganttgrid.model.view_mode import ViewMode
from ganttgrid.service.units import current_unit_index, generate_units
from ganttgrid.service.window import window_for_units
from tests.conftest import end_of_day, utc


def test_day_units_start_at_midnight() -> None:
    units = generate_units(utc(2024, 1, 1, 10), utc(2024, 1, 5), ViewMode.DAY)

    assert units == [utc(2024, 1, day) for day in range(1, 6)]


def test_week_units_start_on_monday() -> None:
    units = generate_units(utc(2024, 1, 3), utc(2024, 1, 20), ViewMode.WEEK)

    assert units == [utc(2024, 1, 1), utc(2024, 1, 8), utc(2024, 1, 15)]


def test_quarter_units_start_on_quarter_boundaries() -> None:
    units = generate_units(utc(2024, 5, 10), utc(2024, 12, 1), ViewMode.QUARTER)

    assert units == [utc(2024, 4, 1), utc(2024, 7, 1), utc(2024, 10, 1)]


def test_year_units() -> None:
    units = generate_units(utc(2023, 6, 1), utc(2025, 1, 1), ViewMode.YEAR)

    assert units == [utc(2023, 1, 1), utc(2024, 1, 1), utc(2025, 1, 1)]


def test_unusable_input_generates_nothing() -> None:
    assert generate_units(utc(2024, 1, 5), utc(2024, 1, 1), ViewMode.DAY) == []
    assert generate_units(utc(2024, 1, 1), utc(2024, 1, 5), "fortnight") == []


def test_window_for_units() -> None:
    units = generate_units(utc(2024, 1, 1), utc(2024, 1, 30), ViewMode.DAY)

    window = window_for_units(units, ViewMode.DAY, 150)

    assert window == {
        "start_date": utc(2024, 1, 1),
        "end_date": end_of_day(2024, 1, 30),
        "total_units": 30,
        "unit_width": 150,
        "view_mode": ViewMode.DAY,
    }


def test_window_for_no_units() -> None:
    with pytest.raises(InvalidTimelineInputError):
        window_for_units([], ViewMode.DAY, 150)


def test_current_unit_index() -> None:
    units = generate_units(utc(2024, 1, 1), utc(2024, 1, 30), ViewMode.DAY)

    assert current_unit_index(units, utc(2024, 1, 3, 12), ViewMode.DAY) == 2
    assert current_unit_index(units, utc(2024, 1, 1), ViewMode.DAY) == 0
    assert current_unit_index(units, utc(2024, 2, 1), ViewMode.DAY) == -1
    assert current_unit_index(units, utc(2023, 12, 31), ViewMode.DAY) == -1


@pytest.mark.parametrize("units", [None, 42, [None], ["2024-01-01"]])
def test_current_unit_index_of_unusable_units(units, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="ganttgrid"):
        assert current_unit_index(units, utc(2024, 1, 3), ViewMode.DAY) == -1

    assert [record.levelno for record in caplog.records] == [logging.WARNING]


@pytest.mark.parametrize("start, end", [(None, utc(2024, 1, 5)), (utc(2024, 1, 1), "soon")])
def test_generate_units_from_unusable_dates(start, end, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="ganttgrid"):
        assert generate_units(start, end, ViewMode.DAY) == []

    assert [record.levelno for record in caplog.records] == [logging.WARNING]
