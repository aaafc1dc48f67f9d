# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from ganttgrid.time import datetime_from_str


def parse_datetime(datetime_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    if datetime_param is None:
        return None

    datetime = str(datetime_param)

    # Match YYYY-MM-DD format (with optional time component)
    if re.match(r"\d{4}-\d{2}-\d{2}", datetime):
        try:
            return datetime_from_str(datetime)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", datetime):
        return pendulum.today("local").add(days=int(datetime))

    if datetime == "now" or datetime == "n":
        return pendulum.now("local")
    if datetime == "today" or datetime == "t":
        return pendulum.today("local")
    if datetime == "yesterday" or datetime == "y":
        return pendulum.yesterday("local")
    if datetime == "tomorrow" or datetime == "o":
        return pendulum.tomorrow("local")
    raise typer.BadParameter("Incorrect datetime format")
