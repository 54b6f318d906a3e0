"""Targets, commands and results exchanged with the automation bridge."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ScriptDialect(StrEnum):
    """Scripting language understood by ``osascript -l``."""

    APPLESCRIPT = "AppleScript"
    JAVASCRIPT = "JavaScript"


class BrowserFamily(StrEnum):
    SAFARI = "safari"
    CHROMIUM = "chromium"


class AutomationTarget(StrEnum):
    """External browsers the bridge knows how to drive."""

    SAFARI = "safari"
    SAFARI_PREVIEW = "safari-preview"
    CHROME = "chrome"
    CHROME_CANARY = "chrome-canary"
    CHROMIUM = "chromium"
    BRAVE = "brave"
    EDGE = "edge"

    @property
    def app_name(self) -> str:
        """Application name as addressed by the scripting runtime."""
        return _APP_NAMES[self]

    @property
    def family(self) -> BrowserFamily:
        return _FAMILIES[self]

    @property
    def dialect(self) -> ScriptDialect:
        # Safari is driven with AppleScript, the Chromium family with JXA
        if self.family is BrowserFamily.SAFARI:
            return ScriptDialect.APPLESCRIPT
        return ScriptDialect.JAVASCRIPT


_APP_NAMES: dict[AutomationTarget, str] = {
    AutomationTarget.SAFARI: "Safari",
    AutomationTarget.SAFARI_PREVIEW: "Safari Technology Preview",
    AutomationTarget.CHROME: "Google Chrome",
    AutomationTarget.CHROME_CANARY: "Google Chrome Canary",
    AutomationTarget.CHROMIUM: "Chromium",
    AutomationTarget.BRAVE: "Brave Browser",
    AutomationTarget.EDGE: "Microsoft Edge",
}

_FAMILIES: dict[AutomationTarget, BrowserFamily] = {
    AutomationTarget.SAFARI: BrowserFamily.SAFARI,
    AutomationTarget.SAFARI_PREVIEW: BrowserFamily.SAFARI,
    AutomationTarget.CHROME: BrowserFamily.CHROMIUM,
    AutomationTarget.CHROME_CANARY: BrowserFamily.CHROMIUM,
    AutomationTarget.CHROMIUM: BrowserFamily.CHROMIUM,
    AutomationTarget.BRAVE: BrowserFamily.CHROMIUM,
    AutomationTarget.EDGE: BrowserFamily.CHROMIUM,
}


@dataclass(frozen=True)
class Open:
    url: str

    name = "open"


@dataclass(frozen=True)
class GoBack:
    name = "back"


@dataclass(frozen=True)
class GoForward:
    name = "forward"


@dataclass(frozen=True)
class Reload:
    name = "reload"


@dataclass(frozen=True)
class CurrentURL:
    name = "current-url"


AutomationCommand = Open | GoBack | GoForward | Reload | CurrentURL


@dataclass
class ExecutionResult:
    output: str
    target: AutomationTarget
    command: AutomationCommand
    duration_s: float = 0.0

    @property
    def dialect(self) -> ScriptDialect:
        return self.target.dialect
