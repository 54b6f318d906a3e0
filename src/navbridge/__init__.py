"""Navbridge: drive an external browser's navigation through macOS scripting."""

__version__ = "0.1.0"
