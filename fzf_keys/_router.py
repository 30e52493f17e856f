"""Source selection and default config locations."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Mapping

from fzf_keys.errors import ConfigPathError

if TYPE_CHECKING:
    from fzf_keys._base import KeybindSource

SUPPORTED_SOURCES = ("niri", "kitty")


def default_config_path(
    program: str,
    ext: str,
    env: Mapping[str, str] | None = None,
) -> Path:
    """Return ``$HOME/.config/<program>/config.<ext>``.

    Raises:
        ConfigPathError: If HOME is not set.
    """
    if env is None:
        env = os.environ
    home = env.get("HOME")
    if not home:
        raise ConfigPathError("HOME environment variable not set")
    return Path(home) / ".config" / program / f"config.{ext}"


def get_source(name: str, *, config_path: str | Path | None = None) -> KeybindSource:
    """Return a fresh source instance.

    Args:
        name: Source identifier ('niri' or 'kitty').
        config_path: Explicit config file for sources that read one.
                     If None, the program's default location is used.

    Raises:
        ValueError: If the source name is unknown.
        ConfigPathError: If a default path is needed but HOME is unset.
    """
    if name == "niri":
        from fzf_keys.sources.niri import NiriSource

        if config_path is not None:
            return NiriSource(config_path)
        return NiriSource.from_default_config()
    elif name == "kitty":
        from fzf_keys.sources.kitty import KittySource

        return KittySource()
    else:
        raise ValueError(
            f"No source available for '{name}'. "
            f"Currently supported: {', '.join(SUPPORTED_SOURCES)}."
        )
