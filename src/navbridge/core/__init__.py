"""Automation core: render browser commands and run them through osascript."""

from .bridge import AutomationBridge, current_url, get_default_bridge, go_back, go_forward, open, reload
from .errors import (
    AutomationError,
    AutomationPermissionError,
    InterpreterNotFoundError,
    InvalidCommandError,
    OutputDecodeError,
    ScriptCompilationError,
    ScriptError,
    ScriptExecutionError,
    ScriptTimeoutError,
    UnsupportedCommandError,
)
from .models import (
    AutomationCommand,
    AutomationTarget,
    BrowserFamily,
    CurrentURL,
    ExecutionResult,
    GoBack,
    GoForward,
    Open,
    Reload,
    ScriptDialect,
)
from .permissions import check_automation_permission
from .runner import ScriptRunner
from .session import NavigationSession
from .urls import normalize_url

__all__ = [
    "AutomationBridge",
    "AutomationCommand",
    "AutomationError",
    "AutomationPermissionError",
    "AutomationTarget",
    "BrowserFamily",
    "CurrentURL",
    "ExecutionResult",
    "GoBack",
    "GoForward",
    "InterpreterNotFoundError",
    "InvalidCommandError",
    "NavigationSession",
    "Open",
    "OutputDecodeError",
    "Reload",
    "ScriptCompilationError",
    "ScriptDialect",
    "ScriptError",
    "ScriptExecutionError",
    "ScriptRunner",
    "ScriptTimeoutError",
    "UnsupportedCommandError",
    "check_automation_permission",
    "current_url",
    "get_default_bridge",
    "go_back",
    "go_forward",
    "normalize_url",
    "open",
    "reload",
]
