"""Uniform entry point for driving an external browser."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Self

from .backends import get_command_set
from .models import (
    AutomationCommand,
    AutomationTarget,
    CurrentURL,
    ExecutionResult,
    GoBack,
    GoForward,
    Open,
    Reload,
)
from .runner import ScriptRunner

if TYPE_CHECKING:
    from .config.main import NavbridgeConfig

log = logging.getLogger(__name__)


class AutomationBridge:
    """Renders commands for a target browser and runs them.

    The bridge keeps no state between calls: "front window" and "active tab" are
    resolved by the external browser each time a script runs. Failures raised by
    the runner propagate unchanged and are never retried.
    """

    def __init__(self, runner: ScriptRunner | None = None) -> None:
        self.runner = runner or ScriptRunner()

    @classmethod
    def from_config(cls, config: NavbridgeConfig) -> Self:
        return cls(ScriptRunner(interpreter=config.automation.interpreter, timeout=config.automation.timeout))

    def render(self, target: AutomationTarget, command: AutomationCommand) -> str:
        """Return the script that ``execute`` would run, without running it."""
        return get_command_set(target).render(command)

    def execute(self, target: AutomationTarget, command: AutomationCommand) -> ExecutionResult:
        command_set = get_command_set(target)
        script = command_set.render(command)

        log.debug("Executing %s against %s", command.name, target.app_name)
        start = time.perf_counter()
        output = self.runner.run(script, command_set.dialect)
        return ExecutionResult(
            output=output,
            target=target,
            command=command,
            duration_s=time.perf_counter() - start,
        )

    async def execute_async(
        self,
        target: AutomationTarget,
        command: AutomationCommand,
        timeout: float | None = None,
    ) -> ExecutionResult:
        command_set = get_command_set(target)
        script = command_set.render(command)

        log.debug("Executing %s against %s asynchronously", command.name, target.app_name)
        start = time.perf_counter()
        output = await self.runner.run_async(script, command_set.dialect, timeout=timeout)
        return ExecutionResult(
            output=output,
            target=target,
            command=command,
            duration_s=time.perf_counter() - start,
        )

    def open(self, target: AutomationTarget, url: str) -> None:
        self.execute(target, Open(url))

    def current_url(self, target: AutomationTarget) -> str:
        return self.execute(target, CurrentURL()).output

    def go_back(self, target: AutomationTarget) -> None:
        self.execute(target, GoBack())

    def go_forward(self, target: AutomationTarget) -> None:
        self.execute(target, GoForward())

    def reload(self, target: AutomationTarget) -> None:
        self.execute(target, Reload())

    async def open_async(self, target: AutomationTarget, url: str, timeout: float | None = None) -> None:
        await self.execute_async(target, Open(url), timeout=timeout)

    async def current_url_async(self, target: AutomationTarget, timeout: float | None = None) -> str:
        return (await self.execute_async(target, CurrentURL(), timeout=timeout)).output

    async def go_back_async(self, target: AutomationTarget, timeout: float | None = None) -> None:
        await self.execute_async(target, GoBack(), timeout=timeout)

    async def go_forward_async(self, target: AutomationTarget, timeout: float | None = None) -> None:
        await self.execute_async(target, GoForward(), timeout=timeout)

    async def reload_async(self, target: AutomationTarget, timeout: float | None = None) -> None:
        await self.execute_async(target, Reload(), timeout=timeout)


_default_bridge: AutomationBridge | None = None


def get_default_bridge() -> AutomationBridge:
    global _default_bridge  # noqa: PLW0603
    if _default_bridge is None:
        _default_bridge = AutomationBridge()
    return _default_bridge


def open(target: AutomationTarget, url: str) -> None:  # noqa: A001
    get_default_bridge().open(target, url)


def current_url(target: AutomationTarget) -> str:
    return get_default_bridge().current_url(target)


def go_back(target: AutomationTarget) -> None:
    get_default_bridge().go_back(target)


def go_forward(target: AutomationTarget) -> None:
    get_default_bridge().go_forward(target)


def reload(target: AutomationTarget) -> None:
    get_default_bridge().reload(target)
