# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class Task(TypedDict):
    id: Optional[str]
    name: Optional[str]
    start_date: pendulum.DateTime
    end_date: pendulum.DateTime
