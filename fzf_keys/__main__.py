"""CLI for keybind discovery: python -m fzf_keys"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from fzf_keys import discover_all
from fzf_keys._base import KeybindSource
from fzf_keys._router import get_source
from fzf_keys.errors import ConfigPathError
from fzf_keys.format import serialize_keybinds

logger = logging.getLogger("fzf_keys")

LOG_FORMAT = "fzf-keys: %(levelname)s: %(message)s"
LOG_LEVEL_ENV = "FZF_KEYS_LOG_LEVEL"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fzf-keys",
        description="Search through keybinds from various programs",
    )
    parser.add_argument(
        "-n", "--niri-config", type=str, default=None, help="Path to niri config file"
    )
    parser.add_argument(
        "-k",
        "--kitty",
        action="store_true",
        help="List kitty keybinds instead of niri (requires kitty's Python modules)",
    )
    parser.add_argument(
        "-a", "--all", action="store_true", help="List niri keybinds, then kitty keybinds"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Print debug diagnostics to stderr"
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    if verbose:
        level = "DEBUG"
    else:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "WARNING"
    logging.basicConfig(stream=sys.stderr, level=level, format=LOG_FORMAT)


def _selected_sources(args: argparse.Namespace) -> list[KeybindSource]:
    names = ["niri", "kitty"] if args.all else (["kitty"] if args.kitty else ["niri"])

    sources: list[KeybindSource] = []
    for name in names:
        try:
            if name == "niri":
                sources.append(get_source(name, config_path=args.niri_config))
            else:
                sources.append(get_source(name))
        except ConfigPathError as exc:
            logger.error("Error initializing %s source: %s", name, exc)
    return sources


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    sources = _selected_sources(args)
    if sources:
        logger.debug("Selected sources: %s", ", ".join(s.name for s in sources))

    keybinds = discover_all(sources)
    sys.stdout.write(serialize_keybinds(keybinds))


if __name__ == "__main__":
    main()
