"""Helpers shared by the CLI commands."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import typer
from rich.console import Console
from rich.markup import escape

from navbridge.core.bridge import AutomationBridge
from navbridge.core.config.main import ConfigLoadingError, NavbridgeConfig
from navbridge.core.errors import AutomationError
from navbridge.core.models import AutomationTarget

console = Console()


def load_config_or_exit() -> NavbridgeConfig:
    """Load navbridge.yaml for commands that need it, exiting on an invalid file."""
    try:
        config = NavbridgeConfig.load_config()
    except ConfigLoadingError as e:
        console.print(f"[red]Error loading configuration:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1) from e

    if config.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    return config


def resolve_target(target: AutomationTarget | None, config: NavbridgeConfig) -> AutomationTarget:
    return target or config.automation.default_target


def build_bridge(config: NavbridgeConfig) -> AutomationBridge:
    return AutomationBridge.from_config(config)


@contextmanager
def reporting_errors() -> Iterator[None]:
    """Print automation failures and exit with status 1."""
    try:
        yield
    except AutomationError as e:
        console.print(f"[red]❌ {e.__class__.__name__}:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1) from e
