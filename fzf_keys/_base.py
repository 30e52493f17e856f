"""Abstract base for keybind sources."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fzf_keys.keybind import Keybind


class KeybindSource(ABC):
    """Interface that each keybind discovery backend must implement.

    Subclasses handle everything program-specific (reading a config
    file, talking to a running program) and hand back canonical
    ``Keybind`` objects.  The aggregator calls only the members
    defined here.
    """

    # ---- identity --------------------------------------------------------

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the backend identifier, e.g. 'niri' or 'kitty'."""
        ...

    # ---- discovery -------------------------------------------------------

    @abstractmethod
    def discover(self) -> list[Keybind]:
        """Scan the program and return every keybind found.

        Each call is a fresh, complete scan; nothing is cached between
        calls.

        Raises:
            DiscoveryError: If the scan fails as a whole.
        """
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
