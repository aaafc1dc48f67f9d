# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class DateInterval(TypedDict):
    start: pendulum.DateTime
    end: pendulum.DateTime


class PixelInterval(TypedDict):
    left: float
    width: float
