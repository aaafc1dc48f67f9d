# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from ganttgrid import configuration
from ganttgrid.log import LOG_LEVELS
from ganttgrid.model.view_mode import ViewMode
from ganttgrid.repository.configuration import CONFIGURATION_REPO
from ganttgrid.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("default_view_mode", str(config["default_view_mode"]))
    table.add_row("default_unit_width", f"{config['default_unit_width']:g}")
    table.add_row("log_level", str(config["log_level"]))
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set, s")
def set(
    default_view_mode: Annotated[
        Optional[ViewMode],
        typer.Option("--default-view-mode", help="View mode used when --mode is omitted"),
    ] = None,
    default_unit_width: Annotated[
        Optional[float],
        typer.Option(
            "--default-unit-width",
            min=0.001,
            help="Column width in pixels used when --unit-width is omitted",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help=f"one of {', '.join(LOG_LEVELS)}"),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable report headers",
        ),
    ] = None,
) -> None:
    """Update configuration settings."""
    if log_level is not None and log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(
            f"must be one of {', '.join(LOG_LEVELS)}", param_hint="--log-level"
        )

    CONFIGURATION_REPO.update_config(
        default_view_mode=None if default_view_mode is None else str(default_view_mode),
        default_unit_width=default_unit_width,
        log_level=None if log_level is None else log_level.upper(),
        show_header=show_header,
    )
    CONFIGURATION_REPO.flush()
    view()
