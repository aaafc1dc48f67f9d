# SPDX-License-Identifier: MIT

"""Report display switches shared by the CLI callback and the views."""

from contextvars import ContextVar

# --no-header turns this off for the rest of the invocation
_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)


def set_show_header(value: bool) -> None:
    _show_header_var.set(value)


def get_show_header() -> bool:
    return _show_header_var.get()
