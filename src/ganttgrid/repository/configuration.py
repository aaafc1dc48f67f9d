# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from ganttgrid import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        loaded = None
        if configuration.APP_CONFIG_PATH.is_file():
            loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        defaults = configuration.get_default_configuration()
        if loaded is None:
            self._config = defaults
            return

        # Migration: back-fill keys added after the file was written
        for key, value in defaults.items():
            if key not in loaded:
                loaded[key] = value
        self._config = loaded

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def reset(self) -> None:
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        default_view_mode: Optional[str] = None,
        default_unit_width: Optional[float] = None,
        log_level: Optional[str] = None,
        show_header: Optional[bool] = None,
    ) -> None:
        self.is_dirty = True

        if default_view_mode is not None:
            self.config["default_view_mode"] = default_view_mode
        if default_unit_width is not None:
            self.config["default_unit_width"] = default_unit_width
        if log_level is not None:
            self.config["log_level"] = log_level
        if show_header is not None:
            self.config["show_header"] = show_header


CONFIGURATION_REPO = ConfigurationRepository()
