"""Errors raised by the automation core."""

from __future__ import annotations


class AutomationError(Exception):
    """Base class for every failure surfaced by the automation bridge."""


class UnsupportedCommandError(AutomationError):
    """The target has no script template for the requested command."""


class InvalidCommandError(AutomationError, ValueError):
    """A command parameter cannot be rendered safely (e.g. an empty URL)."""


class ScriptError(AutomationError):
    """A failure reported across the interpreter boundary."""

    def __init__(self, message: str, output: str = "", returncode: int | None = None) -> None:
        super().__init__(message)
        self.output = output
        self.returncode = returncode


class ScriptCompilationError(ScriptError):
    """The rendered script did not compile."""


class ScriptExecutionError(ScriptError):
    """The interpreter or the external browser reported a runtime failure."""


class ScriptTimeoutError(ScriptExecutionError):
    """The interpreter did not finish within the allotted time."""


class InterpreterNotFoundError(ScriptExecutionError):
    """The scripting interpreter binary could not be launched."""


class AutomationPermissionError(ScriptExecutionError):
    """The OS refused to let this process send Apple events."""


class OutputDecodeError(ScriptError):
    """The interpreter produced bytes that are not valid UTF-8."""
