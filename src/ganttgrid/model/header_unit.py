# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class HeaderUnit(TypedDict):
    date: pendulum.DateTime
    span: float
