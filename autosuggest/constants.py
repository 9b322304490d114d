"""Shared constants for the auto-suggest package."""

from __future__ import annotations

from colorama import Fore, Style

VERSION = "2.0"

# Whitespace stripped from both ends of words and prefixes
TRIM_CHARS = " \t\n\r"

# Word-list file looked up in the working directory and beside the package
WORD_LIST_FILENAME = "words.txt"

# Menu actions: search, add, stats, help, exit
MENU_SIZE = 5

# Terminal styles used by the shell
COLORS: dict[str, str] = {
    "reset": Style.RESET_ALL,
    "bold": Style.BRIGHT,
    "dim": Style.DIM,
    "red": Fore.RED,
    "green": Fore.GREEN,
    "yellow": Fore.YELLOW,
    "blue": Fore.BLUE,
    "magenta": Fore.MAGENTA,
    "cyan": Fore.CYAN,
}

# Built-in dictionary used when no word-list file is found
DEFAULT_WORDS: tuple[str, ...] = (
    "apple",    "app",         "apply",  "apricot", "apartment", "appetite",
    "banana",   "bat",         "ball",   "battle",  "badge",     "balance",
    "cat",      "caterpillar", "cattle", "camera",  "castle",    "canvas",
    "dog",      "dove",        "doll",   "dragon",  "dance",     "danger",
    "elephant", "egg",         "eagle",  "earth",   "energy",    "fish",
    "frog",     "falcon",      "forest", "fortune", "goat",      "grape",
    "giraffe",  "galaxy",      "garden", "hat",     "home",      "horse",
    "harbor",   "harmony",     "ice",    "igloo",   "island",    "iron",
    "imagine",
)
