#!/usr/bin/env python3
"""
Trie Auto-Suggest

Interactive prefix search over a word list. Words are stored in a
prefix trie; typing a prefix lists every stored word that starts with
it, sorted alphabetically.

Usage:
    python trie_autosuggest.py [--dict words.txt] [--no-color] [-v]
"""

from __future__ import annotations

import argparse
import logging
import os

import colorama

from autosuggest.cli import run_cli
from autosuggest.dictionary import Dictionary

log = logging.getLogger("autosuggest")


# Entry point

def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Trie Auto-Suggest -- prefix-based word suggestions",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to word list file (one word per line)")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable ANSI colours (also honours NO_COLOR)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    use_color = not args.no_color and "NO_COLOR" not in os.environ
    if use_color:
        colorama.just_fix_windows_console()
    log.debug("Colour output %s", "enabled" if use_color else "disabled")

    dictionary = Dictionary(args.dict)
    run_cli(dictionary, use_color=use_color)


if __name__ == "__main__":
    main()
