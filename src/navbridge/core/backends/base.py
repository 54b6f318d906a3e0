"""Shared machinery for rendering browser commands into script source."""

from __future__ import annotations

import json
import logging
from typing import ClassVar

from jinja2 import Environment, StrictUndefined, UndefinedError

from ..errors import InvalidCommandError, UnsupportedCommandError
from ..models import AutomationCommand, CurrentURL, GoBack, GoForward, Open, Reload, ScriptDialect

log = logging.getLogger(__name__)

_LINE_SEPARATORS = {"\u2028", "\u2029"}


def _reject_control_characters(value: str) -> None:
    for ch in value:
        if ord(ch) < 0x20 or 0x7F <= ord(ch) <= 0x9F or ch in _LINE_SEPARATORS:
            raise InvalidCommandError(f"Control character {ch!r} is not allowed in {value!r}")


def applescript_string(value: str) -> str:
    """Quote ``value`` as an AppleScript string literal."""
    _reject_control_characters(value)
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def js_string(value: str) -> str:
    """Quote ``value`` as a JavaScript string literal."""
    _reject_control_characters(value)
    return json.dumps(value)


_env = Environment(undefined=StrictUndefined, autoescape=False, trim_blocks=True, lstrip_blocks=True)  # noqa: S701
_env.filters["applescript_string"] = applescript_string
_env.filters["js_string"] = js_string


class CommandSet:
    """Fixed table of command templates for one browser family.

    Subclasses declare their dialect and a template per command type. Templates
    receive ``app`` (the application name) and, for :class:`Open`, ``url``.
    """

    dialect: ClassVar[ScriptDialect]
    templates: ClassVar[dict[type, str]]

    def __init__(self, app_name: str) -> None:
        self.app_name = app_name

    def render(self, command: AutomationCommand) -> str:
        """Render ``command`` into script source without executing it."""
        source = self.templates.get(type(command))
        if source is None:
            raise UnsupportedCommandError(
                f"{self.app_name} has no script for command {type(command).__name__}"
            )

        params = _command_parameters(command)
        try:
            script = _env.from_string(source).render(app=self.app_name, **params)
        except UndefinedError as e:
            raise InvalidCommandError(f"Missing parameter for {type(command).__name__}: {e}") from e

        log.debug("Rendered %s for %s", type(command).__name__, self.app_name)
        return script.strip()


def _command_parameters(command: AutomationCommand) -> dict[str, str]:
    match command:
        case Open(url=url):
            if not url or not url.strip():
                raise InvalidCommandError("Open requires a non-empty URL")
            return {"url": url}
        case GoBack() | GoForward() | Reload() | CurrentURL():
            return {}
        case _:
            raise UnsupportedCommandError(f"Unknown command: {command!r}")
