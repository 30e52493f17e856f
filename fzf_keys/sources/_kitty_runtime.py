"""
Adapter around kitty's own Python modules.

kitty ships its configuration machinery as importable Python
(``kitty.config``, ``kitty.types``).  Loading the config through it gives
the resolved shortcut table: defaults, user mappings and removals are
already merged and ``kitty_mod`` is already known.

Everything that touches kitty objects lives here; the rest of the
package only sees plain ``ShortcutRecord`` tuples.
"""

from __future__ import annotations

import importlib
import logging
import threading
from contextlib import contextmanager
from typing import Any, Iterator, NamedTuple

from fzf_keys._keys import KITTY_MOD_PLACEHOLDER
from fzf_keys.errors import RuntimeUnavailableError

logger = logging.getLogger(__name__)

# kitty's config loader keeps module-level state; one reader at a time.
_RUNTIME_LOCK = threading.Lock()


class ShortcutRecord(NamedTuple):
    """One resolved shortcut as kitty describes it."""

    mode: str
    key_repr: str
    action_repr: str


def _import(module_name: str) -> Any:
    try:
        return importlib.import_module(module_name)
    except ImportError as exc:
        raise RuntimeUnavailableError(
            f"Failed to import {module_name}. Is kitty installed? Error: {exc}"
        ) from exc


class KittyRuntime:
    """Read-only view of a loaded kitty configuration.

    Args:
        opts: The options object returned by ``kitty.config.load_config()``.
        types_module: The ``kitty.types`` module (provides ``Shortcut``
            and ``mod_to_names``).
    """

    def __init__(self, opts: Any, types_module: Any) -> None:
        self._opts = opts
        self._types = types_module

    @property
    def kitty_mod(self) -> int:
        return int(self._opts.kitty_mod)

    def kitty_mod_names(self) -> list[str]:
        """Expand the configured kitty_mod into modifier names, e.g. ['ctrl', 'shift']."""
        return list(self._types.mod_to_names(self.kitty_mod))

    def shortcuts(self) -> list[ShortcutRecord]:
        """Return every shortcut of every keyboard mode.

        One key can carry several action definitions (e.g. different
        multi-key sequences starting with the same trigger); each becomes
        its own record, keyed by the full sequence of that definition.

        Raises:
            RuntimeUnavailableError: If the loaded objects do not have the
                shape this adapter expects, or kitty fails while
                describing a shortcut.
        """
        try:
            return self._collect()
        except AttributeError as exc:
            raise RuntimeUnavailableError(f"Unexpected kitty API: {exc}") from exc
        except Exception as exc:
            raise RuntimeUnavailableError(f"Failed to read kitty shortcuts: {exc}") from exc

    def _collect(self) -> list[ShortcutRecord]:
        kitty_mod = self.kitty_mod
        expanded_mod = "+".join(self.kitty_mod_names())
        shortcut_cls = self._types.Shortcut

        records: list[ShortcutRecord] = []
        for mode_name, mode in self._opts.keyboard_modes.items():
            logger.debug("Reading kitty keyboard mode %r", mode_name)
            for key, definitions in mode.keymap.items():
                for definition in definitions:
                    if definition.is_sequence:
                        keys = (definition.trigger,) + tuple(definition.rest)
                    else:
                        keys = (key,)
                    key_repr = shortcut_cls(keys).human_repr(kitty_mod)
                    key_repr = key_repr.replace(KITTY_MOD_PLACEHOLDER, expanded_mod)
                    records.append(
                        ShortcutRecord(
                            mode=mode_name,
                            key_repr=key_repr,
                            action_repr=definition.human_repr(),
                        )
                    )
        return records


@contextmanager
def load_kitty_runtime() -> Iterator[KittyRuntime]:
    """Load kitty's effective configuration and yield a ``KittyRuntime``.

    Holds the runtime lock until the ``with`` block exits, on success or
    error.

    Raises:
        RuntimeUnavailableError: If kitty's modules cannot be imported,
            do not expose the expected attributes, or fail to load the
            configuration (e.g. a broken kitty.conf).
    """
    with _RUNTIME_LOCK:
        kitty_config = _import("kitty.config")
        kitty_types = _import("kitty.types")

        try:
            opts = kitty_config.load_config()
            runtime = KittyRuntime(opts, kitty_types)
        except AttributeError as exc:
            raise RuntimeUnavailableError(f"Unexpected kitty API: {exc}") from exc
        except Exception as exc:
            raise RuntimeUnavailableError(f"Failed to load kitty config: {exc}") from exc

        yield runtime
