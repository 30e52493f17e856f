"""Key combination parsing for each source's surface syntax.

niri and kitty spell combinations differently (case, aliases, chord
separators, a literal ``+`` key), so each gets its own parser.  Both
return ``(modifiers, key)``.
"""

from __future__ import annotations

from fzf_keys.errors import UnknownModifierError
from fzf_keys.keybind import Modifier

# niri: case-sensitive, names as accepted in config.kdl
NIRI_MODIFIERS: dict[str, Modifier] = {
    "Mod": Modifier.MOD,
    "Super": Modifier.SUPER,
    "Win": Modifier.SUPER,
    "Alt": Modifier.ALT,
    "Ctrl": Modifier.CTRL,
    "Control": Modifier.CTRL,
    "Shift": Modifier.SHIFT,
    "ISO_Level3_Shift": Modifier.ISO_LEVEL3_SHIFT,
    "Mod5": Modifier.ISO_LEVEL3_SHIFT,
    "ISO_Level5_Shift": Modifier.ISO_LEVEL5_SHIFT,
    "Mod3": Modifier.ISO_LEVEL5_SHIFT,
}

# kitty: matched after lowercasing
KITTY_MOD_PLACEHOLDER = "kitty_mod"

KITTY_MODIFIERS: dict[str, Modifier] = {
    "ctrl": Modifier.CTRL,
    "control": Modifier.CTRL,
    "shift": Modifier.SHIFT,
    "alt": Modifier.ALT,
    "opt": Modifier.ALT,
    "option": Modifier.ALT,
    "super": Modifier.SUPER,
    "cmd": Modifier.SUPER,
    "command": Modifier.SUPER,
    KITTY_MOD_PLACEHOLDER: Modifier.MOD,
}


def parse_niri_combo(combo: str) -> tuple[list[Modifier], str]:
    """Parse a niri bind node name into (modifiers, key).

    Examples::

        >>> parse_niri_combo("Mod+Shift+T")
        ([<Modifier.MOD: 'Mod'>, <Modifier.SHIFT: 'Shift'>], 'T')
        >>> parse_niri_combo("XF86AudioRaiseVolume")
        ([], 'XF86AudioRaiseVolume')

    Raises:
        UnknownModifierError: If any segment before the key is not a
            known niri modifier name.
    """
    *mod_parts, key = combo.split("+")
    modifiers: list[Modifier] = []
    for part in mod_parts:
        modifier = NIRI_MODIFIERS.get(part)
        if modifier is None:
            raise UnknownModifierError(part)
        modifiers.append(modifier)
    return modifiers, key


def _kitty_modifier(name: str) -> Modifier:
    modifier = KITTY_MODIFIERS.get(name.lower())
    if modifier is None:
        raise UnknownModifierError(name)
    return modifier


def parse_kitty_combo(combo: str) -> tuple[list[Modifier], str]:
    """Parse kitty's human-readable shortcut repr into (modifiers, key).

    Three shapes, checked in this order::

        >>> parse_kitty_combo("ctrl+shift++")   # literal plus key
        ([<Modifier.CTRL: 'Ctrl'>, <Modifier.SHIFT: 'Shift'>], '+')
        >>> parse_kitty_combo("ctrl+f>2")       # multi-key sequence
        ([<Modifier.CTRL: 'Ctrl'>], 'f>2')
        >>> parse_kitty_combo("ctrl+shift+c")
        ([<Modifier.CTRL: 'Ctrl'>, <Modifier.SHIFT: 'Shift'>], 'c')

    For sequences only the first stroke is split; everything from the
    first ``>`` on is kept verbatim in the key.

    Raises:
        UnknownModifierError: If any modifier segment is not recognized.
    """
    if combo.endswith("++"):
        mod_part = combo[:-2]
        modifiers = [_kitty_modifier(p) for p in mod_part.split("+")] if mod_part else []
        return modifiers, "+"

    if ">" in combo:
        first, rest = combo.split(">", 1)
        *mod_parts, last = first.split("+")
        return [_kitty_modifier(p) for p in mod_parts], f"{last}>{rest}"

    *mod_parts, key = combo.split("+")
    return [_kitty_modifier(p) for p in mod_parts], key
