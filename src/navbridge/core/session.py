"""Caller-owned navigation state with optional mirroring into an external browser."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Self

from .bridge import AutomationBridge
from .models import AutomationTarget
from .urls import normalize_url

if TYPE_CHECKING:
    from .config.main import NavbridgeConfig

log = logging.getLogger(__name__)


class NavigationSession:
    """Back/forward history for one browsing view.

    When ``mirror`` is set, every navigation is also issued to that external
    browser. Local history is updated first; a failing mirror call propagates to
    the caller without rolling the history back.
    """

    def __init__(
        self,
        start_url: str | None = None,
        mirror: AutomationTarget | None = None,
        bridge: AutomationBridge | None = None,
        default_scheme: str = "https",
    ) -> None:
        self.mirror = mirror
        self.default_scheme = default_scheme
        self._bridge = bridge
        self._history: list[str] = []
        self._index = -1

        if start_url:
            self._push(normalize_url(start_url, default_scheme))

    @classmethod
    def from_config(
        cls,
        config: NavbridgeConfig,
        mirror: AutomationTarget | None = None,
        bridge: AutomationBridge | None = None,
    ) -> Self:
        """Start a session at ``navigation.start_url``, mirroring through a bridge built from ``config``."""
        return cls(
            start_url=config.navigation.start_url,
            mirror=mirror,
            bridge=bridge or AutomationBridge.from_config(config),
            default_scheme=config.navigation.default_scheme,
        )

    @property
    def bridge(self) -> AutomationBridge:
        if self._bridge is None:
            self._bridge = AutomationBridge()
        return self._bridge

    @property
    def history(self) -> list[str]:
        return list(self._history)

    @property
    def current_url(self) -> str | None:
        if self._index < 0:
            return None
        return self._history[self._index]

    @property
    def can_go_back(self) -> bool:
        return self._index > 0

    @property
    def can_go_forward(self) -> bool:
        return 0 <= self._index < len(self._history) - 1

    def _push(self, url: str) -> None:
        # A new navigation discards the forward history
        del self._history[self._index + 1 :]
        self._history.append(url)
        self._index = len(self._history) - 1

    def load(self, text: str) -> str:
        url = normalize_url(text, self.default_scheme)
        self._push(url)
        log.debug("Loaded %s", url)
        if self.mirror is not None:
            self.bridge.open(self.mirror, url)
        return url

    def go_back(self) -> str | None:
        if not self.can_go_back:
            return None
        self._index -= 1
        if self.mirror is not None:
            self.bridge.go_back(self.mirror)
        return self.current_url

    def go_forward(self) -> str | None:
        if not self.can_go_forward:
            return None
        self._index += 1
        if self.mirror is not None:
            self.bridge.go_forward(self.mirror)
        return self.current_url

    def reload(self) -> str | None:
        if self.current_url is not None and self.mirror is not None:
            self.bridge.reload(self.mirror)
        return self.current_url
