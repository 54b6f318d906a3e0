from __future__ import annotations

from .errors import InvalidCommandError

_KNOWN_SCHEMES = ("http://", "https://")


def normalize_url(text: str, default_scheme: str = "https") -> str:
    """Turn URL-bar input into a loadable URL, adding a scheme when missing."""
    formatted = text.strip()
    if not formatted:
        raise InvalidCommandError("URL must not be empty")

    if not formatted.lower().startswith(_KNOWN_SCHEMES):
        formatted = f"{default_scheme}://{formatted}"
    return formatted
