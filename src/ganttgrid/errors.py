# SPDX-License-Identifier: MIT


class InvalidTimelineInputError(ValueError):
    """Raised inside the engine when a date or window cannot be used.

    Public engine functions catch it, log a warning and return their
    fallback value instead.
    """


class UnknownViewModeError(InvalidTimelineInputError):
    def __init__(self, view_mode: object) -> None:
        super().__init__(f"unknown view mode: {view_mode!r}")
        self.view_mode = view_mode
