"""Per-browser command sets."""

from __future__ import annotations

from ..models import AutomationTarget, BrowserFamily
from .base import CommandSet, applescript_string, js_string
from .chromium import ChromiumCommandSet
from .safari import SafariCommandSet

# Registry of command sets per browser family
COMMAND_SET_REGISTRY: dict[BrowserFamily, type[CommandSet]] = {
    BrowserFamily.SAFARI: SafariCommandSet,
    BrowserFamily.CHROMIUM: ChromiumCommandSet,
}


def get_command_set(target: AutomationTarget) -> CommandSet:
    """Return the command set that drives ``target``."""
    command_set_class = COMMAND_SET_REGISTRY[target.family]
    return command_set_class(app_name=target.app_name)


__all__ = [
    "COMMAND_SET_REGISTRY",
    "ChromiumCommandSet",
    "CommandSet",
    "SafariCommandSet",
    "applescript_string",
    "get_command_set",
    "js_string",
]
