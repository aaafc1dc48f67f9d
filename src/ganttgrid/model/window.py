# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from ganttgrid.model.view_mode import ViewMode


class TimelineWindow(TypedDict):
    start_date: pendulum.DateTime
    end_date: pendulum.DateTime
    total_units: int
    unit_width: float
    view_mode: ViewMode
