from .main import AutomationConfig, ConfigLoadingError, NavbridgeConfig, NavigationConfig

__all__ = ["AutomationConfig", "ConfigLoadingError", "NavbridgeConfig", "NavigationConfig"]
