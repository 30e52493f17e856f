"""The canonical keybind model shared by every source."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fzf_keys.format import format_keybind


class Modifier(Enum):
    """Modifier keys. Each value is the canonical display name."""

    MOD = "Mod"
    SUPER = "Super"
    ALT = "Alt"
    CTRL = "Ctrl"
    SHIFT = "Shift"
    ISO_LEVEL3_SHIFT = "ISO_Level3_Shift"
    ISO_LEVEL5_SHIFT = "ISO_Level5_Shift"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Keybind:
    """One discovered keyboard shortcut.

    ``modifiers`` keeps the order found in the source.  The optional
    flags are tri-state: ``None`` means the source did not say, which
    renders differently from an explicit ``False``.
    """

    modifiers: tuple[Modifier, ...]
    key: str
    action: str
    program: str
    description: str | None = None
    repeat: bool | None = None
    cooldown_ms: int | None = None
    allow_when_locked: bool | None = None
    allow_inhibiting: bool | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "modifiers", tuple(self.modifiers))

    def __str__(self) -> str:
        return format_keybind(self)
