"""
niri keybind source.

Reads niri's KDL config (``~/.config/niri/config.kdl`` by default) and
turns every child of the top-level ``binds`` node into a ``Keybind``::

    binds {
        Mod+T hotkey-overlay-title="Open a Terminal" { spawn "alacritty"; }
        XF86AudioRaiseVolume allow-when-locked=true { spawn "wpctl" "set-volume" "@DEFAULT_AUDIO_SINK@" "0.1+"; }
    }

Parsing is best-effort per bind: a node with an unknown modifier is
dropped and the rest of the section is still read.  Read and KDL syntax
errors fail the whole discover() call.
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from pathlib import Path
from typing import Any

import ckdl

from fzf_keys._base import KeybindSource
from fzf_keys._keys import parse_niri_combo
from fzf_keys._router import default_config_path
from fzf_keys.errors import ConfigParseError, ConfigReadError, UnknownModifierError
from fzf_keys.keybind import Keybind

logger = logging.getLogger(__name__)

PROGRAM = "niri"
BINDS_SECTION = "binds"
UNKNOWN_ACTION = "unknown"

_U64_MAX = 2**64 - 1


# ---------------------------------------------------------------------------
# KDL value helpers
# ---------------------------------------------------------------------------


def _native(value: Any) -> Any:
    """Unwrap type-annotated ckdl values, e.g. ``(u8)1``, to plain Python values."""
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    return getattr(value, "value", value)


def _as_bool(value: Any) -> bool | None:
    value = _native(value)
    return value if isinstance(value, bool) else None


def _as_str(value: Any) -> str | None:
    value = _native(value)
    return value if isinstance(value, str) else None


def _as_cooldown(value: Any) -> int | None:
    value = _native(value)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if 0 <= value <= _U64_MAX:
        return value
    return None


def format_value(value: Any) -> str:
    """Render one KDL argument or property value for display."""
    value = _native(value)
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    return "null"


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    # shortest round-trip digits, never in exponent notation
    return format(Decimal(repr(value)), "f")


def format_action(node: ckdl.Node) -> str:
    """Render an action node as ``name [args...] [key=value...]``."""
    parts = [node.name]
    parts.extend(format_value(arg) for arg in node.args)
    parts.extend(f"{key}={format_value(value)}" for key, value in node.properties.items())
    return " ".join(parts)


# ---------------------------------------------------------------------------
# Bind nodes
# ---------------------------------------------------------------------------


def is_bind_name(name: str) -> bool:
    """Guess whether a child of ``binds`` is a keybind.

    Anything with a ``+`` or not starting with a lowercase letter counts.
    This is a naming convention, not part of niri's grammar: it keeps
    ``Mod+T`` and ``XF86AudioRaiseVolume`` while dropping lowercase
    nodes such as ``spawn``.
    """
    return "+" in name or not name[:1].islower()


def parse_bind_node(node: ckdl.Node) -> Keybind:
    """Build a Keybind from one child of ``binds``.

    Raises:
        UnknownModifierError: If the node name has an unknown modifier.
    """
    modifiers, key = parse_niri_combo(node.name)

    props = node.properties
    description = _as_str(props.get("hotkey-overlay-title"))
    repeat = _as_bool(props.get("repeat"))
    cooldown_ms = _as_cooldown(props.get("cooldown-ms"))
    allow_when_locked = _as_bool(props.get("allow-when-locked"))
    allow_inhibiting = _as_bool(props.get("allow-inhibiting"))

    if node.children:
        action = ", ".join(format_action(child) for child in node.children)
    else:
        action = UNKNOWN_ACTION

    return Keybind(
        modifiers=tuple(modifiers),
        key=key,
        action=action,
        program=PROGRAM,
        description=description,
        repeat=repeat,
        cooldown_ms=cooldown_ms,
        allow_when_locked=allow_when_locked,
        allow_inhibiting=allow_inhibiting,
    )


def parse_binds(document: ckdl.Document) -> list[Keybind]:
    """Collect keybinds from every top-level ``binds`` node of a document."""
    keybinds: list[Keybind] = []
    for section in document.nodes:
        if section.name != BINDS_SECTION:
            continue
        for node in section.children:
            if not is_bind_name(node.name):
                logger.debug("Skipping non-bind node %r", node.name)
                continue
            try:
                keybinds.append(parse_bind_node(node))
            except UnknownModifierError as exc:
                logger.debug("Skipping bind %r: %s", node.name, exc)
    return keybinds


# ---------------------------------------------------------------------------
# NiriSource — KeybindSource implementation
# ---------------------------------------------------------------------------


class NiriSource(KeybindSource):
    """Keybinds declared in a niri config file."""

    def __init__(self, config_path: str | Path) -> None:
        self.config_path = Path(config_path)

    @classmethod
    def from_default_config(cls) -> NiriSource:
        """Use ``$HOME/.config/niri/config.kdl``.

        Raises:
            ConfigPathError: If HOME is not set.
        """
        return cls(default_config_path(PROGRAM, "kdl"))

    @property
    def name(self) -> str:
        return PROGRAM

    def parse_config(self, content: str) -> list[Keybind]:
        """Parse config text and return its keybinds."""
        try:
            document = ckdl.parse(content)
        except ckdl.ParseError as exc:
            raise ConfigParseError(self.config_path, str(exc)) from exc
        return parse_binds(document)

    def discover(self) -> list[Keybind]:
        try:
            content = self.config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigReadError(self.config_path, str(exc)) from exc

        keybinds = self.parse_config(content)
        logger.debug("Found %d niri keybinds in %s", len(keybinds), self.config_path)
        return keybinds
