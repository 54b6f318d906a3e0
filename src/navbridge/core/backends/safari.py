"""AppleScript command set for Safari and Safari Technology Preview."""

from __future__ import annotations

from ..models import CurrentURL, GoBack, GoForward, Open, Reload, ScriptDialect
from .base import CommandSet

OPEN_TEMPLATE = """
tell application {{ app | applescript_string }}
    if (count of windows) = 0 then make new document
    set newTab to make new tab at end of tabs of front window
    set URL of newTab to {{ url | applescript_string }}
    set current tab of front window to newTab
    activate
end tell
"""

CURRENT_URL_TEMPLATE = """
tell application {{ app | applescript_string }}
    if (count of windows) = 0 then error "no windows"
    set theURL to URL of current tab of front window
end tell
theURL
"""

GO_BACK_TEMPLATE = """
tell application {{ app | applescript_string }}
    if can go back of current tab of front window then
        go back of current tab of front window
    end if
end tell
"""

GO_FORWARD_TEMPLATE = """
tell application {{ app | applescript_string }}
    if can go forward of current tab of front window then
        go forward of current tab of front window
    end if
end tell
"""

RELOAD_TEMPLATE = """
tell application {{ app | applescript_string }}
    reload current tab of front window
end tell
"""


class SafariCommandSet(CommandSet):
    dialect = ScriptDialect.APPLESCRIPT
    templates = {
        Open: OPEN_TEMPLATE,
        CurrentURL: CURRENT_URL_TEMPLATE,
        GoBack: GO_BACK_TEMPLATE,
        GoForward: GO_FORWARD_TEMPLATE,
        Reload: RELOAD_TEMPLATE,
    }
