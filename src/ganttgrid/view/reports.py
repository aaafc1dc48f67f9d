# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table

from ganttgrid.model.header_unit import HeaderUnit
from ganttgrid.model.interval import DateInterval, PixelInterval
from ganttgrid.model.view_mode import ViewMode
from ganttgrid.model.window import TimelineWindow
from ganttgrid.time import datetime_to_display_str
from ganttgrid.view.header import header

HEADER_LABEL_FORMATS = {
    ViewMode.MINUTE: "HH:00",
    ViewMode.HOUR: "MMM D",
    ViewMode.DAY: "MMM YYYY",
    ViewMode.WEEK: "MMM YYYY",
}


def date_interval_view(
    window: TimelineWindow, pixel_interval: PixelInterval, interval: DateInterval
) -> None:
    header("pixels -> dates", window)

    table = Table(box=box.SIMPLE)
    table.add_column("property")
    table.add_column("value")
    table.add_row("left", f"{pixel_interval['left']:g}px")
    table.add_row("width", f"{pixel_interval['width']:g}px")
    table.add_row("start", _display(interval["start"]))
    table.add_row("end", _display(interval["end"]))

    Console().print(table)


def pixel_interval_view(
    window: TimelineWindow, interval: DateInterval, pixel_interval: PixelInterval
) -> None:
    header("dates -> pixels", window)

    table = Table(box=box.SIMPLE)
    table.add_column("property")
    table.add_column("value")
    table.add_row("start", _display(interval["start"]))
    table.add_row("end", _display(interval["end"]))
    table.add_row("left", f"{pixel_interval['left']:g}px")
    table.add_row("width", f"{pixel_interval['width']:g}px")

    Console().print(table)


def overlap_view(a: DateInterval, b: DateInterval, result: bool) -> None:
    header("overlap")

    table = Table(box=box.SIMPLE)
    table.add_column("interval")
    table.add_column("start")
    table.add_column("end")
    table.add_row("a", _display(a["start"]), _display(a["end"]))
    table.add_row("b", _display(b["start"]), _display(b["end"]))

    console = Console()
    console.print(table)
    if result:
        console.print("[green]overlapping[/green]")
    else:
        console.print("[red]not overlapping[/red]")


def header_units_view(
    window: TimelineWindow,
    units: list[pendulum.DateTime],
    header_units: list[HeaderUnit],
) -> None:
    header("header groups", window)

    console = Console()
    if not header_units:
        console.print(
            f"\n[dim]No secondary header row for {len(units)} "
            f"{window['view_mode']} columns[/dim]\n"
        )
        return

    label_format = HEADER_LABEL_FORMATS[ViewMode(window["view_mode"])]

    table = Table(box=box.SIMPLE)
    table.add_column("label")
    table.add_column("start")
    table.add_column("span", justify="right")
    table.add_column("width", justify="right")
    for header_unit in header_units:
        table.add_row(
            header_unit["date"].format(label_format),
            _display(header_unit["date"]),
            f"{header_unit['span']:g}",
            f"{header_unit['span'] * window['unit_width']:g}px",
        )

    console.print(table)


def marker_view(
    window: TimelineWindow,
    instant: pendulum.DateTime,
    reference_index: int,
    offset: Optional[float],
) -> None:
    header("marker", window)

    table = Table(box=box.SIMPLE)
    table.add_column("property")
    table.add_column("value")
    table.add_row("instant", _display(instant))
    table.add_row("column", str(reference_index))
    table.add_row("offset", "hidden" if offset is None else f"{offset:g}px")

    Console().print(table)


def _display(value: object) -> str:
    if isinstance(value, pendulum.DateTime):
        return datetime_to_display_str(value)
    return str(value)
