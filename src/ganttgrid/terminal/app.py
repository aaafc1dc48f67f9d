# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from ganttgrid.errors import InvalidTimelineInputError
from ganttgrid.log import LOG_LEVELS, configure_logging
from ganttgrid.model.interval import DateInterval, PixelInterval
from ganttgrid.model.view_mode import ViewMode
from ganttgrid.model.window import TimelineWindow
from ganttgrid.repository.configuration import CONFIGURATION_REPO
from ganttgrid.service.header import group_header_units
from ganttgrid.service.mapper import to_date_interval, to_pixel_interval
from ganttgrid.service.marker import marker_offset
from ganttgrid.service.overlap import overlaps
from ganttgrid.service.units import current_unit_index, generate_units
from ganttgrid.service.window import window_for_units
from ganttgrid.terminal import configuration
from ganttgrid.terminal.custom_typer import OrderedAliasedTyperGroup
from ganttgrid.terminal.parse import parse_datetime
from ganttgrid.terminal.version import version
from ganttgrid.time import now_local
from ganttgrid.view import reports
from ganttgrid.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="ganttgrid - Gantt timeline coordinates in the CLI",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")
app.command(name="version, ve")(version)

StartOption = Annotated[
    pendulum.DateTime,
    typer.Option(
        "--start",
        "-s",
        parser=parse_datetime,
        help="window start; valid inputs: YYYY-MM-DD[THH:mm], now, today, yesterday, tomorrow, or day offset like 1, -1",
    ),
]
EndOption = Annotated[
    pendulum.DateTime,
    typer.Option(
        "--end",
        "-e",
        parser=parse_datetime,
        help="window end; same inputs as --start",
    ),
]
ModeOption = Annotated[
    Optional[ViewMode],
    typer.Option("--mode", "-m", help="view mode, defaults to the configured one"),
]
UnitWidthOption = Annotated[
    Optional[float],
    typer.Option(
        "--unit-width", "-w", min=0.001, help="column width in pixels"
    ),
]
UnitsOption = Annotated[
    Optional[int],
    typer.Option(
        "--units",
        "-u",
        min=1,
        help="number of rendered columns, derived from the window when omitted",
    ),
]


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            help=f"one of {', '.join(LOG_LEVELS)}",
        ),
    ] = None,
) -> None:
    """
    ganttgrid - Gantt timeline coordinates in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if log_level is not None:
        if log_level.upper() not in LOG_LEVELS:
            raise typer.BadParameter(
                f"must be one of {', '.join(LOG_LEVELS)}", param_hint="--log-level"
            )
        configure_logging(log_level)


@app.command("to-dates, d")
def to_dates(
    left: float,
    width: float,
    start: StartOption,
    end: EndOption,
    mode: ModeOption = None,
    unit_width: UnitWidthOption = None,
    units: UnitsOption = None,
) -> None:
    """Convert a bar's pixel position to the dates it covers."""
    window = _build_window(start, end, mode, unit_width, units)
    pixel_interval = PixelInterval(left=left, width=width)
    reports.date_interval_view(
        window, pixel_interval, to_date_interval(pixel_interval, window)
    )


@app.command("to-pixels, p")
def to_pixels(
    task_start: Annotated[pendulum.DateTime, typer.Argument(parser=parse_datetime)],
    task_end: Annotated[pendulum.DateTime, typer.Argument(parser=parse_datetime)],
    start: StartOption,
    end: EndOption,
    mode: ModeOption = None,
    unit_width: UnitWidthOption = None,
    units: UnitsOption = None,
) -> None:
    """Convert a task's dates to a bar position."""
    window = _build_window(start, end, mode, unit_width, units)
    interval = DateInterval(start=task_start, end=task_end)
    reports.pixel_interval_view(window, interval, to_pixel_interval(interval, window))


@app.command("overlap, o")
def overlap(
    a_start: Annotated[pendulum.DateTime, typer.Argument(parser=parse_datetime)],
    a_end: Annotated[pendulum.DateTime, typer.Argument(parser=parse_datetime)],
    b_start: Annotated[pendulum.DateTime, typer.Argument(parser=parse_datetime)],
    b_end: Annotated[pendulum.DateTime, typer.Argument(parser=parse_datetime)],
) -> None:
    """Check whether two date ranges overlap."""
    a = DateInterval(start=a_start, end=a_end)
    b = DateInterval(start=b_start, end=b_end)
    reports.overlap_view(a, b, overlaps(a, b))


@app.command("headers, h")
def headers(
    start: StartOption,
    end: EndOption,
    mode: ModeOption = None,
    unit_width: UnitWidthOption = None,
) -> None:
    """Show the secondary header row grouping the timeline's columns."""
    view_mode, width = _resolve_defaults(mode, unit_width)
    column_units = _generate_units(start, end, view_mode)
    window = window_for_units(column_units, view_mode, width)
    reports.header_units_view(
        window, column_units, group_header_units(column_units, view_mode)
    )


@app.command("marker, m")
def marker(
    start: StartOption,
    end: EndOption,
    mode: ModeOption = None,
    unit_width: UnitWidthOption = None,
    at: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--at",
            "-a",
            parser=parse_datetime,
            help="instant to mark, defaults to now",
        ),
    ] = None,
) -> None:
    """Show where the current-instant marker is drawn."""
    view_mode, width = _resolve_defaults(mode, unit_width)
    instant = at if at is not None else now_local()
    column_units = _generate_units(start, end, view_mode)
    window = window_for_units(column_units, view_mode, width)
    reference_index = current_unit_index(column_units, instant, view_mode)
    reports.marker_view(
        window,
        instant,
        reference_index,
        marker_offset(instant, window, reference_index),
    )


def _resolve_defaults(
    mode: Optional[ViewMode], unit_width: Optional[float]
) -> tuple[ViewMode, float]:
    config = CONFIGURATION_REPO.get_config()
    if mode is None:
        try:
            mode = ViewMode(config["default_view_mode"])
        except ValueError:
            raise typer.BadParameter(
                f"configured default_view_mode {config['default_view_mode']!r} is not valid",
                param_hint="--mode",
            )
    if unit_width is None:
        unit_width = float(config["default_unit_width"])
    return mode, unit_width


def _generate_units(
    start: pendulum.DateTime, end: pendulum.DateTime, view_mode: ViewMode
) -> list[pendulum.DateTime]:
    if end <= start:
        raise typer.BadParameter("end must be after start", param_hint="--end")
    return generate_units(start, end, view_mode)


def _build_window(
    start: pendulum.DateTime,
    end: pendulum.DateTime,
    mode: Optional[ViewMode],
    unit_width: Optional[float],
    units: Optional[int],
) -> TimelineWindow:
    view_mode, width = _resolve_defaults(mode, unit_width)
    if units is None:
        try:
            return window_for_units(_generate_units(start, end, view_mode), view_mode, width)
        except InvalidTimelineInputError as e:
            raise typer.BadParameter(str(e))

    if end <= start:
        raise typer.BadParameter("end must be after start", param_hint="--end")
    return TimelineWindow(
        start_date=start,
        end_date=end,
        total_units=units,
        unit_width=width,
        view_mode=view_mode,
    )


def run() -> None:
    app()
