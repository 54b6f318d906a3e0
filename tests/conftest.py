"""Shared fixtures for Navbridge tests."""

from __future__ import annotations

import subprocess
from collections.abc import Callable, Iterator
from unittest.mock import MagicMock, patch

import pytest


def _completed(returncode: int = 0, stdout: bytes = b"", stderr: bytes | None = b"") -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=["osascript"], returncode=returncode, stdout=stdout, stderr=stderr)


@pytest.fixture
def completed() -> Callable[..., subprocess.CompletedProcess]:
    """Factory for the result of a finished osascript invocation."""
    return _completed


@pytest.fixture
def fake_run() -> Iterator[MagicMock]:
    """Replace subprocess.run inside the runner; succeeds with empty output by default."""
    with patch("navbridge.core.runner.subprocess.run") as mock_run:
        mock_run.return_value = _completed()
        yield mock_run
