"""Tests for configuration management."""

import os
from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from navbridge.core.config.main import ConfigLoadingError, NavbridgeConfig
from navbridge.core.models import AutomationTarget
from navbridge.core.runner import DEFAULT_INTERPRETER


def test_default_config() -> None:
    """Test default configuration values."""
    config = NavbridgeConfig()

    assert config.automation.default_target is AutomationTarget.SAFARI
    assert config.automation.interpreter == DEFAULT_INTERPRETER
    assert config.automation.timeout == 10.0

    assert config.navigation.default_scheme == "https"
    assert config.navigation.start_url == "https://www.apple.com"
    assert config.verbose is False


def test_save_and_load_config() -> None:
    """Test saving and loading configuration."""
    with TemporaryDirectory() as tmpdir:
        # Change to temp directory
        original_cwd = Path.cwd()
        os.chdir(tmpdir)

        try:
            # Create custom config
            config = NavbridgeConfig()
            config.automation.default_target = AutomationTarget.BRAVE
            config.automation.timeout = 2.5
            config.navigation.default_scheme = "http"

            # Save config
            path = config.save()
            assert path.name == "navbridge.yaml"
            assert "default_target: brave" in path.read_text(encoding="utf-8")

            # Load config
            loaded_config = NavbridgeConfig.load_config()

            assert loaded_config.automation.default_target is AutomationTarget.BRAVE
            assert loaded_config.automation.timeout == 2.5
            assert loaded_config.navigation.default_scheme == "http"

        finally:
            os.chdir(original_cwd)


def test_missing_config_uses_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert NavbridgeConfig.load_config() == NavbridgeConfig.default()


def test_partial_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "navbridge.yaml").write_text("automation:\n  default_target: chrome\n", encoding="utf-8")

    config = NavbridgeConfig.load_config()

    assert config.automation.default_target is AutomationTarget.CHROME
    assert config.automation.interpreter == DEFAULT_INTERPRETER


def test_empty_config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "navbridge.yaml").write_text("", encoding="utf-8")
    assert NavbridgeConfig.load_config() == NavbridgeConfig.default()


@pytest.mark.parametrize(
    "content",
    [
        "automation:\n  default_target: netscape\n",
        "automation:\n  timeout: -1\n",
        "automation: [unclosed\n",
        "- just\n- a list\n",
    ],
)
def test_invalid_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, content: str) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "navbridge.yaml").write_text(content, encoding="utf-8")

    with pytest.raises(ConfigLoadingError):
        NavbridgeConfig.load_config()
