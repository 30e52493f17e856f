"""
fzf-keys -- keybind discovery for fuzzy finders.

Collects keyboard shortcuts from desktop programs and renders them as
one greppable line each.

Quick start::

    import fzf_keys

    source = fzf_keys.get_source("niri")          # ~/.config/niri/config.kdl
    keybinds = fzf_keys.discover_all([source])
    print(fzf_keys.serialize_keybinds(keybinds), end="")
"""

from __future__ import annotations

import logging
from typing import Iterable

from fzf_keys._base import KeybindSource
from fzf_keys._router import SUPPORTED_SOURCES, default_config_path, get_source
from fzf_keys.errors import (
    ConfigParseError,
    ConfigPathError,
    ConfigReadError,
    DiscoveryError,
    FzfKeysError,
    RuntimeUnavailableError,
    UnknownModifierError,
)
from fzf_keys.format import format_keybind, serialize_keybinds
from fzf_keys.keybind import Keybind, Modifier

__all__ = [
    "discover_all",
    "get_source",
    "default_config_path",
    "SUPPORTED_SOURCES",
    "Keybind",
    "Modifier",
    "KeybindSource",
    "format_keybind",
    "serialize_keybinds",
    # Errors
    "FzfKeysError",
    "ConfigPathError",
    "DiscoveryError",
    "ConfigReadError",
    "ConfigParseError",
    "UnknownModifierError",
    "RuntimeUnavailableError",
]

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def discover_all(sources: Iterable[KeybindSource]) -> list[Keybind]:
    """Run each source in order and concatenate their keybinds.

    A source that fails is logged and contributes nothing; the remaining
    sources still run.
    """
    keybinds: list[Keybind] = []
    for source in sources:
        try:
            found = source.discover()
        except DiscoveryError as exc:
            logger.error("Error discovering %s keybinds: %s", source.name, exc)
            continue
        keybinds.extend(found)
    return keybinds
