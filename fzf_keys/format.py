"""
Text rendering for keybinds: one greppable line per shortcut.

Line shape::

    [<mod>+...+]<key> - <description or action>[ (<flags>)] [<program>]
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from fzf_keys.keybind import Keybind


def format_combo(keybind: Keybind) -> str:
    """Render the modifier+key part, e.g. ``Mod+Shift+T``."""
    if not keybind.modifiers:
        return keybind.key
    mods = "+".join(str(m) for m in keybind.modifiers)
    return f"{mods}+{keybind.key}"


def format_flags(keybind: Keybind) -> list[str]:
    """Return the flag annotations that apply, in their fixed order."""
    flags: list[str] = []
    if keybind.repeat is False:
        flags.append("no-repeat")
    if keybind.cooldown_ms is not None:
        flags.append(f"cooldown={keybind.cooldown_ms}ms")
    if keybind.allow_when_locked is True:
        flags.append("allow-locked")
    if keybind.allow_inhibiting is False:
        flags.append("no-inhibit")
    return flags


def format_keybind(keybind: Keybind) -> str:
    """Render a single keybind as one line (no trailing newline)."""
    label = keybind.description if keybind.description is not None else keybind.action

    parts = [f"{format_combo(keybind)} - {label}"]
    flags = format_flags(keybind)
    if flags:
        parts.append(f"({', '.join(flags)})")
    parts.append(f"[{keybind.program}]")
    return " ".join(parts)


def serialize_keybinds(keybinds: Iterable[Keybind]) -> str:
    """Render keybinds as newline-terminated lines, in the given order."""
    return "".join(f"{format_keybind(kb)}\n" for kb in keybinds)
