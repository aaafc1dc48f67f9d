# SPDX-License-Identifier: MIT

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version

from rich.console import Console

from ganttgrid.configuration import APP_NAME


def version() -> None:
    """Show the installed ganttgrid version."""
    try:
        installed = package_version(APP_NAME)
    except PackageNotFoundError:
        installed = "unknown"
    Console().print(f"{APP_NAME} {installed}")
