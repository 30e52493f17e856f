"""Exception hierarchy for keybind discovery."""

from __future__ import annotations

from pathlib import Path


class FzfKeysError(Exception):
    """Base class for every error raised by fzf_keys."""


class ConfigPathError(FzfKeysError):
    """A default config path could not be resolved (e.g. HOME is unset)."""


class DiscoveryError(FzfKeysError):
    """A source's discover() call failed as a whole."""


class ConfigReadError(DiscoveryError):
    """The config file is missing or unreadable."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to read {path}: {reason}")


class ConfigParseError(DiscoveryError):
    """The config file is not a valid KDL document."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to parse {path}: {reason}")


class UnknownModifierError(DiscoveryError):
    """A key combination contains a modifier token that cannot be resolved."""

    def __init__(self, token: str, message: str | None = None) -> None:
        self.token = token
        super().__init__(message or f"Unknown modifier: {token}")


class RuntimeUnavailableError(DiscoveryError):
    """An embedded runtime is missing, has an unexpected shape, or fails to load."""
