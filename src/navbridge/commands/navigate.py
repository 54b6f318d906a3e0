"""Navigation commands that drive an external browser."""

from __future__ import annotations

from enum import StrEnum

import typer
from rich.markup import escape
from rich.syntax import Syntax

from navbridge.core.errors import InvalidCommandError
from navbridge.core.models import (
    AutomationCommand,
    AutomationTarget,
    CurrentURL,
    GoBack,
    GoForward,
    Open,
    Reload,
    ScriptDialect,
)
from navbridge.core.urls import normalize_url

from .utils import build_bridge, console, load_config_or_exit, reporting_errors, resolve_target

TARGET_HELP = "Browser to drive (defaults to automation.default_target)"


class CommandName(StrEnum):
    OPEN = "open"
    BACK = "back"
    FORWARD = "forward"
    RELOAD = "reload"
    CURRENT_URL = "current-url"


def open_command(
    url: str = typer.Argument(..., help="URL to open; https:// is added when no scheme is given"),
    target: AutomationTarget | None = typer.Option(None, "--target", "-t", help=TARGET_HELP),
) -> None:
    """Open a URL in a new tab of the external browser."""
    config = load_config_or_exit()
    browser = resolve_target(target, config)

    with reporting_errors():
        normalized = normalize_url(url, config.navigation.default_scheme)
        build_bridge(config).open(browser, normalized)

    console.print(f"[green]✅ Opened[/green] {escape(normalized)} in [bold]{browser.app_name}[/bold]")


def current_url_command(
    target: AutomationTarget | None = typer.Option(None, "--target", "-t", help=TARGET_HELP),
) -> None:
    """Print the URL of the active tab."""
    config = load_config_or_exit()
    browser = resolve_target(target, config)

    with reporting_errors():
        url = build_bridge(config).current_url(browser)

    # Plain output so the URL can be piped
    console.print(url, markup=False, highlight=False, soft_wrap=True)


def back_command(
    target: AutomationTarget | None = typer.Option(None, "--target", "-t", help=TARGET_HELP),
) -> None:
    """Go back in the active tab, if it has history."""
    config = load_config_or_exit()
    browser = resolve_target(target, config)

    with reporting_errors():
        build_bridge(config).go_back(browser)

    console.print(f"[green]⬅️  Back[/green] in [bold]{browser.app_name}[/bold]")


def forward_command(
    target: AutomationTarget | None = typer.Option(None, "--target", "-t", help=TARGET_HELP),
) -> None:
    """Go forward in the active tab, if it has forward history."""
    config = load_config_or_exit()
    browser = resolve_target(target, config)

    with reporting_errors():
        build_bridge(config).go_forward(browser)

    console.print(f"[green]➡️  Forward[/green] in [bold]{browser.app_name}[/bold]")


def reload_command(
    target: AutomationTarget | None = typer.Option(None, "--target", "-t", help=TARGET_HELP),
) -> None:
    """Reload the active tab."""
    config = load_config_or_exit()
    browser = resolve_target(target, config)

    with reporting_errors():
        build_bridge(config).reload(browser)

    console.print(f"[green]🔄 Reloaded[/green] [bold]{browser.app_name}[/bold]")


def _build_command(name: CommandName, url: str | None) -> AutomationCommand:
    match name:
        case CommandName.OPEN:
            return Open(url or "")
        case CommandName.BACK:
            return GoBack()
        case CommandName.FORWARD:
            return GoForward()
        case CommandName.RELOAD:
            return Reload()
        case CommandName.CURRENT_URL:
            return CurrentURL()


def render_command(
    command: CommandName = typer.Argument(..., help="Command to render"),
    url: str | None = typer.Argument(None, help="URL, required for 'open'"),
    target: AutomationTarget | None = typer.Option(None, "--target", "-t", help=TARGET_HELP),
) -> None:
    """Print the script a command would run, without running it."""
    config = load_config_or_exit()
    browser = resolve_target(target, config)

    with reporting_errors():
        if url is not None and command is not CommandName.OPEN:
            raise InvalidCommandError(f"'{command}' takes no URL")
        if url is not None:
            url = normalize_url(url, config.navigation.default_scheme)
        script = build_bridge(config).render(browser, _build_command(command, url))

    lexer = "applescript" if browser.dialect is ScriptDialect.APPLESCRIPT else "javascript"
    console.print(Syntax(script, lexer, theme="monokai", word_wrap=True))
