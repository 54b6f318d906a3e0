"""Configuration management for Navbridge."""

from __future__ import annotations

from pathlib import Path
from typing import Self

import yaml
from pydantic import BaseModel, Field, ValidationError
from rich.console import Console

from navbridge.core.models import AutomationTarget
from navbridge.core.runner import DEFAULT_INTERPRETER

console = Console()


class ConfigLoadingError(Exception):
    """Raised when navbridge.yaml exists but cannot be used."""


class AutomationConfig(BaseModel):
    """External browser automation settings."""

    default_target: AutomationTarget = AutomationTarget.SAFARI
    interpreter: str = DEFAULT_INTERPRETER
    timeout: float | None = Field(default=10.0, gt=0)


class NavigationConfig(BaseModel):
    """URL bar and history settings."""

    default_scheme: str = "https"
    start_url: str | None = "https://www.apple.com"


class NavbridgeConfig(BaseModel):
    """Main Navbridge configuration."""

    automation: AutomationConfig = Field(default_factory=AutomationConfig)
    navigation: NavigationConfig = Field(default_factory=NavigationConfig)
    verbose: bool = False

    @classmethod
    def default(cls) -> Self:
        return cls()

    @classmethod
    def get_config_path(cls) -> Path:
        """Get the path to the configuration file."""
        return Path.cwd() / "navbridge.yaml"

    @classmethod
    def load_config(cls) -> Self:
        """Load configuration from navbridge.yaml, falling back to defaults when absent."""
        config_path = cls.get_config_path()

        if not config_path.exists():
            return cls.default()

        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = yaml.safe_load(f) or {}
            return cls(**config_data)
        except ValidationError as e:
            raise ConfigLoadingError(f"Invalid configuration in {config_path}:\n{e}") from e
        except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
            raise ConfigLoadingError(f"{e.__class__.__name__} loading {config_path}: {e}") from e

    def save(self) -> Path:
        """Save configuration to navbridge.yaml file."""
        config_path = self.get_config_path()

        try:
            with open(config_path, "w", encoding="utf-8") as f:
                yaml.safe_dump(self.model_dump(mode="json"), f, sort_keys=False)
        except (OSError, ValueError) as e:
            raise ConfigLoadingError(f"Error saving configuration to {config_path}: {e}") from e
        else:
            console.print(f"[green]Configuration saved to {config_path}[/green]")

        return config_path
