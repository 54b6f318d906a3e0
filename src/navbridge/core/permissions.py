"""Capability check for macOS automation permissions."""

from __future__ import annotations

import logging

from .errors import AutomationPermissionError
from .models import ScriptDialect
from .runner import ScriptRunner

log = logging.getLogger(__name__)

UI_SCRIPTING_CHECK = 'tell application "System Events" to get UI elements enabled'


def check_automation_permission(runner: ScriptRunner | None = None) -> bool:
    """Return whether this process may script other applications.

    Asking System Events triggers the OS permission prompt the first time. A
    refusal is reported as ``False``; any other failure propagates.
    """
    runner = runner or ScriptRunner()
    try:
        answer = runner.run(UI_SCRIPTING_CHECK, ScriptDialect.APPLESCRIPT)
    except AutomationPermissionError:
        log.warning("Automation permission not granted; enable it in System Settings > Privacy & Security")
        return False
    return answer.strip().lower() == "true"
