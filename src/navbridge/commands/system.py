"""Commands that inspect the local automation setup."""

from __future__ import annotations

import typer
from rich.table import Table

from navbridge.core.models import AutomationTarget
from navbridge.core.permissions import check_automation_permission
from navbridge.core.runner import ScriptRunner

from .utils import console, load_config_or_exit, reporting_errors


def targets_command() -> None:
    """List the browsers navbridge can drive."""
    table = Table(title="Automation targets")
    table.add_column("Target", style="bold")
    table.add_column("Application")
    table.add_column("Dialect")

    for target in AutomationTarget:
        table.add_row(target.value, target.app_name, target.dialect.value)

    console.print(table)


def check_permission_command() -> None:
    """Check (and prompt for) the permission to script other applications."""
    config = load_config_or_exit()
    runner = ScriptRunner(interpreter=config.automation.interpreter, timeout=config.automation.timeout)

    with reporting_errors():
        granted = check_automation_permission(runner)

    if granted:
        console.print("[green]✅ Automation permission granted[/green]")
        return

    console.print("[yellow]⚠️  Automation permission not granted.[/yellow]")
    console.print("Enable it in [bold]System Settings → Privacy & Security → Automation[/bold].")
    raise typer.Exit(1)
