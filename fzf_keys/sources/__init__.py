"""Keybind sources, one module per program.

Provides the niri config reader and the kitty runtime reader.
"""

from fzf_keys.sources.kitty import KittySource
from fzf_keys.sources.niri import NiriSource

__all__ = ["KittySource", "NiriSource"]
