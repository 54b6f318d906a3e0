"""Execute rendered automation scripts through ``osascript``."""

from __future__ import annotations

import asyncio
import logging
import subprocess
import time

from .errors import (
    AutomationPermissionError,
    InterpreterNotFoundError,
    OutputDecodeError,
    ScriptCompilationError,
    ScriptError,
    ScriptExecutionError,
    ScriptTimeoutError,
)
from .models import ScriptDialect

log = logging.getLogger(__name__)

DEFAULT_INTERPRETER = "/usr/bin/osascript"

# osascript reports compile failures as "syntax error: ... (-2741)"
_SYNTAX_ERROR_MARKERS = ("syntax error", "(-2740)", "(-2741)")
_PERMISSION_DENIED_MARKERS = (
    "(-1743)",
    "not authorized to send apple events",
    "not allowed to send apple events",
)


def _decode(data: bytes | None) -> str:
    if not data:
        return ""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise OutputDecodeError(f"Interpreter output is not valid UTF-8: {e}") from e


def _classify_failure(dialect: ScriptDialect, diagnostic: str, returncode: int | None) -> ScriptError:
    lowered = diagnostic.lower()
    message = f"{dialect} script failed (exit {returncode}): {diagnostic}"

    if any(marker in lowered for marker in _PERMISSION_DENIED_MARKERS):
        return AutomationPermissionError(message, output=diagnostic, returncode=returncode)
    if dialect is ScriptDialect.APPLESCRIPT and any(marker in lowered for marker in _SYNTAX_ERROR_MARKERS):
        return ScriptCompilationError(message, output=diagnostic, returncode=returncode)
    return ScriptExecutionError(message, output=diagnostic, returncode=returncode)


def interpret_output(dialect: ScriptDialect, returncode: int | None, stdout: bytes | None, stderr: bytes | None) -> str:
    """Turn a finished interpreter invocation into trimmed output or a typed error."""
    out = _decode(stdout)

    if returncode != 0:
        # stderr is only a diagnostic; it is not read on success
        err = _decode(stderr)
        diagnostic = (err or out).strip() if dialect is ScriptDialect.APPLESCRIPT else f"{out}{err}".strip()
        raise _classify_failure(dialect, diagnostic, returncode)

    return out.strip()


class ScriptRunner:
    """Runs script source in the interpreter matching its dialect.

    AppleScript is executed with stdout and stderr captured separately so that
    compile diagnostics can be told apart from results. JXA is executed with the
    two streams combined, and any non-zero exit is a runtime failure.
    """

    def __init__(self, interpreter: str = DEFAULT_INTERPRETER, timeout: float | None = None) -> None:
        self.interpreter = interpreter
        self.timeout = timeout

    def build_command(self, source: str, dialect: ScriptDialect) -> list[str]:
        return [self.interpreter, "-l", dialect.value, "-e", source]

    def _stderr_mode(self, dialect: ScriptDialect) -> int:
        return subprocess.STDOUT if dialect is ScriptDialect.JAVASCRIPT else subprocess.PIPE

    def run(self, source: str, dialect: ScriptDialect, timeout: float | None = None) -> str:
        """Run ``source`` and block until the interpreter exits."""
        timeout = timeout if timeout is not None else self.timeout
        cmd = self.build_command(source, dialect)
        log.debug("Running %s script via %s (timeout=%s)", dialect, self.interpreter, timeout)

        start = time.perf_counter()
        try:
            proc = subprocess.run(  # noqa: S603
                cmd,
                stdout=subprocess.PIPE,
                stderr=self._stderr_mode(dialect),
                timeout=timeout,
                check=False,
            )
        except FileNotFoundError as e:
            raise InterpreterNotFoundError(f"Interpreter not found: {self.interpreter}") from e
        except subprocess.TimeoutExpired as e:
            log.warning("%s script timed out after %ss", dialect, timeout)
            partial = e.output.decode("utf-8", errors="replace") if e.output else ""
            raise ScriptTimeoutError(f"{dialect} script timed out after {timeout}s", output=partial) from e

        log.debug("%s script exited with %s in %.3fs", dialect, proc.returncode, time.perf_counter() - start)
        try:
            return interpret_output(dialect, proc.returncode, proc.stdout, proc.stderr)
        except ScriptError as e:
            log.warning("%s", e)
            raise

    async def run_async(self, source: str, dialect: ScriptDialect, timeout: float | None = None) -> str:
        """Run ``source`` on an asyncio subprocess.

        The child is killed when the timeout expires or the awaiting task is cancelled.
        """
        timeout = timeout if timeout is not None else self.timeout
        cmd = self.build_command(source, dialect)
        log.debug("Running %s script asynchronously via %s (timeout=%s)", dialect, self.interpreter, timeout)

        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=self._stderr_mode(dialect),
            )
        except FileNotFoundError as e:
            raise InterpreterNotFoundError(f"Interpreter not found: {self.interpreter}") from e

        try:
            out_b, err_b = await asyncio.wait_for(proc.communicate(), timeout)
        except TimeoutError as e:
            proc.kill()
            await proc.wait()
            log.warning("%s script timed out after %ss", dialect, timeout)
            raise ScriptTimeoutError(f"{dialect} script timed out after {timeout}s") from e
        except asyncio.CancelledError:
            proc.kill()
            await proc.wait()
            raise

        try:
            return interpret_output(dialect, proc.returncode, out_b, err_b)
        except ScriptError as e:
            log.warning("%s", e)
            raise
