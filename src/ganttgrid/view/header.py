# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from ganttgrid.model.window import TimelineWindow
from ganttgrid.view.state import get_show_header


def header(report_name: str, window: Optional[TimelineWindow] = None) -> None:
    """Print the report header with the window it was computed for.

    Args:
        report_name: Name of the report
        window: Timeline window, shown below the report name when given
    """
    if not get_show_header():
        return

    print(Padding("[dark_orange]ganttgrid[/dark_orange]", (1, 0, 0, 1)))
    print(Padding(f"[sandy_brown]{report_name}[/sandy_brown]", (0, 1)))
    if window is not None:
        description = (
            f"{window['view_mode']} | {window['start_date'].to_datetime_string()}"
            f" .. {window['end_date'].to_datetime_string()}"
            f" | {window['total_units']} x {window['unit_width']:g}px"
        )
        print(Padding(f"[plum1]{description}[/plum1]", (0, 1)))
