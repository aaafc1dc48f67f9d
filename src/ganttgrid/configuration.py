# SPDX-License-Identifier: MIT

from typing import TypedDict

import platformdirs

APP_NAME = "ganttgrid"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"


class Configuration(TypedDict):
    default_view_mode: str
    default_unit_width: float
    log_level: str
    show_header: bool


def get_default_configuration() -> Configuration:
    return {
        "default_view_mode": "day",
        "default_unit_width": 150.0,
        "log_level": "WARNING",
        "show_header": True,
    }
