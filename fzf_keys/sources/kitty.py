"""
kitty keybind source.

Asks a kitty installation for its resolved shortcut table (see
``_kitty_runtime``) and normalizes each entry.  Unlike the niri source
there is no per-entry recovery: if one shortcut cannot be decoded the
whole discover() call fails and nothing is returned.
"""

from __future__ import annotations

import logging
from contextlib import AbstractContextManager
from typing import Callable

from fzf_keys._base import KeybindSource
from fzf_keys._keys import parse_kitty_combo
from fzf_keys.errors import UnknownModifierError
from fzf_keys.keybind import Keybind
from fzf_keys.sources._kitty_runtime import KittyRuntime, ShortcutRecord, load_kitty_runtime

logger = logging.getLogger(__name__)

PROGRAM = "kitty"

RuntimeFactory = Callable[[], AbstractContextManager[KittyRuntime]]


def record_to_keybind(record: ShortcutRecord) -> Keybind:
    """Convert one kitty shortcut record into a Keybind.

    Raises:
        UnknownModifierError: If the key repr has an unknown modifier.
    """
    try:
        modifiers, key = parse_kitty_combo(record.key_repr)
    except UnknownModifierError as exc:
        raise UnknownModifierError(
            exc.token, f"Failed to parse key '{record.key_repr}': {exc}"
        ) from exc

    return Keybind(
        modifiers=tuple(modifiers),
        key=key,
        action=record.action_repr,
        program=PROGRAM,
    )


class KittySource(KeybindSource):
    """Keybinds reported by kitty's own configuration loader.

    Args:
        runtime_factory: Callable returning a context manager that yields
            a ``KittyRuntime``.  Defaults to loading the local kitty
            installation.
    """

    def __init__(self, runtime_factory: RuntimeFactory = load_kitty_runtime) -> None:
        self._runtime_factory = runtime_factory

    @property
    def name(self) -> str:
        return PROGRAM

    def discover(self) -> list[Keybind]:
        with self._runtime_factory() as runtime:
            records = runtime.shortcuts()

        keybinds = [record_to_keybind(record) for record in records]
        logger.debug("Found %d kitty keybinds", len(keybinds))
        return keybinds
