import pendulum
import pytest

from ganttgrid import configuration
from ganttgrid.model.view_mode import ViewMode
from ganttgrid.model.window import TimelineWindow
from ganttgrid.repository.configuration import CONFIGURATION_REPO
from ganttgrid.view import state as view_state


def utc(*args: int) -> pendulum.DateTime:
    return pendulum.datetime(*args, tz="UTC")


def end_of_day(year: int, month: int, day: int) -> pendulum.DateTime:
    return pendulum.datetime(year, month, day, 23, 59, 59, 999000, tz="UTC")


def make_window(
    start: pendulum.DateTime,
    end: pendulum.DateTime,
    total_units: int,
    unit_width: float,
    view_mode: ViewMode,
) -> TimelineWindow:
    return TimelineWindow(
        start_date=start,
        end_date=end,
        total_units=total_units,
        unit_width=unit_width,
        view_mode=view_mode,
    )


@pytest.fixture
def day_window() -> TimelineWindow:
    """Thirty 150px day columns across January 2024."""
    return make_window(utc(2024, 1, 1), utc(2024, 1, 31), 30, 150, ViewMode.DAY)


@pytest.fixture
def week_window() -> TimelineWindow:
    """Eight 140px week columns starting Monday 2024-01-01, 20px per day."""
    return make_window(
        utc(2024, 1, 1), end_of_day(2024, 2, 25), 8, 140, ViewMode.WEEK
    )


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    """Point the configuration at a temporary directory."""
    monkeypatch.setattr(configuration, "CONFIG_PATH", tmp_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", tmp_path / "config.yaml")
    CONFIGURATION_REPO.reset()
    yield tmp_path / "config.yaml"
    CONFIGURATION_REPO.reset()
    view_state.set_show_header(True)
