"""Tests for navigation history and mirroring."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from navbridge.core.bridge import AutomationBridge
from navbridge.core.config.main import AutomationConfig, NavbridgeConfig, NavigationConfig
from navbridge.core.errors import InvalidCommandError, ScriptExecutionError
from navbridge.core.models import AutomationTarget
from navbridge.core.session import NavigationSession


def make_bridge() -> MagicMock:
    return MagicMock(spec=AutomationBridge)


class TestHistory:
    """Test cases for local back/forward history."""

    def test_empty_session(self) -> None:
        session = NavigationSession()

        assert session.current_url is None
        assert session.history == []
        assert not session.can_go_back
        assert not session.can_go_forward
        assert session.go_back() is None
        assert session.go_forward() is None
        assert session.reload() is None

    def test_start_url_is_normalized(self) -> None:
        session = NavigationSession(start_url="www.apple.com")
        assert session.current_url == "https://www.apple.com"

    def test_load_back_forward(self) -> None:
        session = NavigationSession()
        session.load("a.test")
        session.load("https://b.test")
        session.load("http://c.test")

        assert session.history == ["https://a.test", "https://b.test", "http://c.test"]
        assert session.can_go_back
        assert not session.can_go_forward

        assert session.go_back() == "https://b.test"
        assert session.go_back() == "https://a.test"
        assert session.go_back() is None
        assert session.current_url == "https://a.test"

        assert session.go_forward() == "https://b.test"
        assert session.can_go_forward

    def test_load_discards_forward_history(self) -> None:
        session = NavigationSession(start_url="a.test")
        session.load("b.test")
        session.go_back()

        session.load("c.test")

        assert session.history == ["https://a.test", "https://c.test"]
        assert not session.can_go_forward

    def test_reload_returns_current(self) -> None:
        session = NavigationSession(start_url="a.test")
        assert session.reload() == "https://a.test"

    def test_history_is_a_copy(self) -> None:
        session = NavigationSession(start_url="a.test")
        session.history.append("https://evil.test")
        assert session.history == ["https://a.test"]

    def test_empty_input_is_rejected(self) -> None:
        session = NavigationSession(start_url="a.test")
        with pytest.raises(InvalidCommandError):
            session.load("   ")
        assert session.history == ["https://a.test"]

    def test_custom_scheme(self) -> None:
        session = NavigationSession(default_scheme="http")
        assert session.load("localhost:8000") == "http://localhost:8000"


class TestMirroring:
    """Test cases for mirroring navigation into an external browser."""

    def test_no_mirror_never_touches_bridge(self) -> None:
        bridge = make_bridge()
        session = NavigationSession(bridge=bridge)
        session.load("a.test")
        session.load("b.test")
        session.go_back()
        session.reload()

        assert bridge.mock_calls == []

    def test_start_url_is_not_mirrored(self) -> None:
        bridge = make_bridge()
        NavigationSession(start_url="a.test", mirror=AutomationTarget.SAFARI, bridge=bridge)
        bridge.open.assert_not_called()

    def test_navigation_is_mirrored(self) -> None:
        bridge = make_bridge()
        session = NavigationSession(mirror=AutomationTarget.CHROME, bridge=bridge)

        session.load("a.test")
        session.load("b.test")
        session.go_back()
        session.go_forward()
        session.reload()

        bridge.open.assert_any_call(AutomationTarget.CHROME, "https://a.test")
        bridge.open.assert_any_call(AutomationTarget.CHROME, "https://b.test")
        bridge.go_back.assert_called_once_with(AutomationTarget.CHROME)
        bridge.go_forward.assert_called_once_with(AutomationTarget.CHROME)
        bridge.reload.assert_called_once_with(AutomationTarget.CHROME)

    def test_boundary_moves_are_not_mirrored(self) -> None:
        bridge = make_bridge()
        session = NavigationSession(mirror=AutomationTarget.SAFARI, bridge=bridge)
        session.load("a.test")

        session.go_back()
        session.go_forward()

        bridge.go_back.assert_not_called()
        bridge.go_forward.assert_not_called()

    def test_mirror_failure_propagates_after_local_update(self) -> None:
        bridge = make_bridge()
        bridge.open.side_effect = ScriptExecutionError("Safari is not running")
        session = NavigationSession(mirror=AutomationTarget.SAFARI, bridge=bridge)

        with pytest.raises(ScriptExecutionError, match="not running"):
            session.load("a.test")

        assert session.current_url == "https://a.test"


class TestFromConfig:
    """Test cases for building a session from navbridge.yaml settings."""

    def test_uses_navigation_settings(self) -> None:
        config = NavbridgeConfig(navigation=NavigationConfig(default_scheme="http", start_url="intranet.local"))

        session = NavigationSession.from_config(config)

        assert session.current_url == "http://intranet.local"
        assert session.load("wiki.local") == "http://wiki.local"

    def test_default_start_url(self) -> None:
        session = NavigationSession.from_config(NavbridgeConfig.default())
        assert session.history == ["https://www.apple.com"]

    def test_no_start_url(self) -> None:
        config = NavbridgeConfig(navigation=NavigationConfig(start_url=None))
        assert NavigationSession.from_config(config).current_url is None

    def test_bridge_follows_automation_settings(self) -> None:
        config = NavbridgeConfig(automation=AutomationConfig(interpreter="/opt/osascript", timeout=2.0))

        session = NavigationSession.from_config(config, mirror=AutomationTarget.SAFARI)

        assert session.mirror is AutomationTarget.SAFARI
        assert session.bridge.runner.interpreter == "/opt/osascript"
        assert session.bridge.runner.timeout == 2.0

    def test_explicit_bridge_is_kept(self) -> None:
        bridge = make_bridge()
        session = NavigationSession.from_config(NavbridgeConfig.default(), mirror=AutomationTarget.CHROME, bridge=bridge)

        session.load("a.test")

        bridge.open.assert_called_once_with(AutomationTarget.CHROME, "https://a.test")
