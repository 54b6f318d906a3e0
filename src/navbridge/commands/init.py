"""Init command implementation."""

from __future__ import annotations

import typer
from rich.markup import escape

from navbridge.core.config.main import ConfigLoadingError, NavbridgeConfig
from navbridge.core.models import AutomationTarget

from .utils import console


def init_command(
    target: AutomationTarget = typer.Option(AutomationTarget.SAFARI, "--target", "-t", help="Default browser"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing navbridge.yaml"),
) -> None:
    """Create a navbridge.yaml in the current directory."""
    config_path = NavbridgeConfig.get_config_path()
    if config_path.exists() and not force:
        console.print(f"[yellow]{config_path} already exists.[/yellow] Use [bold]--force[/bold] to overwrite it.")
        raise typer.Exit(1)

    config = NavbridgeConfig.default()
    config.automation.default_target = target

    try:
        config.save()
    except ConfigLoadingError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1) from e
