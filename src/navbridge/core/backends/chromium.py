"""JXA command set for Chrome and other Chromium-based browsers."""

from __future__ import annotations

from ..models import CurrentURL, GoBack, GoForward, Open, Reload, ScriptDialect
from .base import CommandSet

OPEN_TEMPLATE = """
var browser = Application({{ app | js_string }});
browser.activate();
if (browser.windows.length === 0) { browser.Window().make(); }
var win = browser.windows[0];
var tab = browser.Tab({url: {{ url | js_string }}});
win.tabs.push(tab);
win.activeTabIndex = win.tabs.length;
"""

CURRENT_URL_TEMPLATE = """
var browser = Application({{ app | js_string }});
if (browser.windows.length === 0) { throw new Error("no windows"); }
browser.windows[0].activeTab.url();
"""

GO_BACK_TEMPLATE = """
var browser = Application({{ app | js_string }});
var tab = browser.windows[0].activeTab;
if (tab.canGoBack()) { tab.goBack(); }
"""

GO_FORWARD_TEMPLATE = """
var browser = Application({{ app | js_string }});
var tab = browser.windows[0].activeTab;
if (tab.canGoForward()) { tab.goForward(); }
"""

RELOAD_TEMPLATE = """
var browser = Application({{ app | js_string }});
browser.windows[0].activeTab.reload();
"""


class ChromiumCommandSet(CommandSet):
    dialect = ScriptDialect.JAVASCRIPT
    templates = {
        Open: OPEN_TEMPLATE,
        CurrentURL: CURRENT_URL_TEMPLATE,
        GoBack: GO_BACK_TEMPLATE,
        GoForward: GO_FORWARD_TEMPLATE,
        Reload: RELOAD_TEMPLATE,
    }
