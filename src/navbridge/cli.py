"""Main CLI application for Navbridge."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from . import __version__

console = Console()
app = typer.Typer(
    name="navbridge",
    help="Drive Safari and Chromium browsers from the command line via macOS scripting",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Show version information."""
    if value:
        console.print(f"Navbridge v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, console=Console(stderr=True))],
        force=True,
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version information",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log every rendered script and interpreter call"),
) -> None:
    """
    Navbridge: uniform navigation commands for external browsers.

    Safari is scripted with AppleScript, Chromium-based browsers with JavaScript
    for Automation. Every command re-resolves the front window and active tab.
    """
    configure_logging(verbose)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


# Import and register commands after app creation to avoid circular imports
def register_commands() -> None:
    """Register CLI commands."""
    from .commands import navigate, system
    from .commands.init import init_command

    app.command("init", help="Create a navbridge.yaml in the current directory")(init_command)
    app.command("open", help="Open a URL in a new tab")(navigate.open_command)
    app.command("current-url", help="Print the URL of the active tab")(navigate.current_url_command)
    app.command("back", help="Go back in the active tab")(navigate.back_command)
    app.command("forward", help="Go forward in the active tab")(navigate.forward_command)
    app.command("reload", help="Reload the active tab")(navigate.reload_command)
    app.command("render", help="Print the script a command would run")(navigate.render_command)
    app.command("targets", help="List supported browsers")(system.targets_command)
    app.command("check-permission", help="Check the automation permission")(system.check_permission_command)


# Register commands when module is imported
register_commands()


if __name__ == "__main__":
    app()
