"""CLI / terminal mode for the auto-suggest shell."""

from __future__ import annotations

import time
from typing import Callable

from autosuggest.constants import COLORS, MENU_SIZE, VERSION
from autosuggest.dictionary import Dictionary
from autosuggest.trie import PrefixIndex

_WIDTH = 54

InputFn = Callable[[str], str]


# styling

def paint(text: str, *styles: str, color: bool = True) -> str:
    """Wrap *text* in the named styles from ``COLORS``."""
    if not color or not styles:
        return text
    codes = "".join(COLORS[s] for s in styles)
    return f"{codes}{text}{COLORS['reset']}"


def print_line(color: bool, ch: str = "-") -> None:
    print("  " + paint(ch * _WIDTH, "dim", color=color))


def print_thick_line(color: bool) -> None:
    print("  " + paint("=" * _WIDTH, "bold", "cyan", color=color))


def print_success(msg: str, color: bool) -> None:
    print("  " + paint("✓", "green", "bold", color=color) + " " + paint(msg, "green", color=color))


def print_error(msg: str, color: bool) -> None:
    print("  " + paint("✗", "red", "bold", color=color) + " " + paint(msg, "red", color=color))


def print_info(msg: str, color: bool) -> None:
    print("  " + paint(f"ℹ {msg}", "blue", color=color))


# screens

def print_banner(color: bool) -> None:
    inner = _WIDTH - 2
    print()
    print(paint("  ╔" + "═" * inner + "╗", "bold", "cyan", color=color))
    for text in ("", f"TRIE AUTO-SUGGEST SYSTEM v{VERSION}", "Intelligent Prefix-Based Search", ""):
        print(paint("  ║" + text.center(inner) + "║", "bold", "cyan", color=color))
    print(paint("  ╚" + "═" * inner + "╝", "bold", "cyan", color=color))
    print()


def print_menu(color: bool) -> None:
    print()
    print_thick_line(color)
    print("\n  " + paint("SELECT AN OPTION:", "bold", "yellow", color=color) + "\n")
    labels = (
        "Search for Suggestions",
        "Add New Word",
        "View Statistics",
        "Help & Documentation",
        "Exit Program",
    )
    for i, label in enumerate(labels, start=1):
        print(f"    {paint(f'[{i}]', 'bold', 'cyan', color=color)}  {label}")
    print()
    print_thick_line(color)


def search(index: PrefixIndex, input_fn: InputFn, color: bool) -> None:
    """Prompt for a prefix and list its suggestions."""
    prefix = input_fn(
        "\n  " + paint("→ Enter search prefix", "yellow", color=color)
        + paint(" (or press Enter to show all)", "dim", color=color) + ": "
    )

    t0 = time.perf_counter()
    if prefix.strip() and not index.normalize(prefix):
        # only an empty line means "show all"
        suggestions: list[str] = []
    else:
        suggestions = index.suggest(prefix)
    elapsed_us = (time.perf_counter() - t0) * 1_000_000

    print()
    if not suggestions:
        print_error(f'No suggestions found for "{prefix}"', color)
        print("  " + paint("Try a different prefix or check spelling.", "dim", color=color))
        return

    n = len(suggestions)
    print_thick_line(color)
    print(
        "\n  " + paint(f"✓ Found {n} match{'es' if n > 1 else ''}", "bold", "green", color=color)
        + paint(f" (in {elapsed_us:.0f}μs)", "dim", color=color) + "\n"
    )
    print_line(color)
    print()
    for i, word in enumerate(suggestions, start=1):
        print(f"    {paint(f'[{i:>2}]', 'dim', color=color)}  {paint(word, 'cyan', color=color)}")
    print()
    print_thick_line(color)


def add_word(index: PrefixIndex, input_fn: InputFn, color: bool) -> None:
    """Prompt for a word and insert it."""
    word = input_fn("\n  " + paint("→ Enter new word to add: ", "yellow", color=color))
    print()
    if not word.strip():
        print_error("Cannot add empty word. Please try again.", color)
        return
    if not index.normalize(word):
        print_error(f'"{word}" has no letters. Please try again.', color)
        return

    before = index.count()
    index.insert(word)
    after = index.count()
    if after > before:
        print_success(f'Successfully added "{index.normalize(word)}" to dictionary!', color)
        print("  " + paint(f"Dictionary now contains {after} words.", "dim", color=color))
    else:
        print_info(f'Word "{word.strip()}" already exists in dictionary.', color)


def print_stats(dictionary: Dictionary, color: bool) -> None:
    print()
    print_thick_line(color)
    print("\n  " + paint("SYSTEM STATISTICS", "bold", "magenta", color=color) + "\n")
    print_line(color)
    rows = (
        ("Total Words:", paint(str(dictionary.index.count()), "bold", color=color)),
        ("Word Source:", dictionary.source),
        ("Data Structure:", "Trie (Prefix Tree)"),
        ("Search Algorithm:", "Prefix Matching + DFS Traversal"),
        ("Result Sorting:", "Alphabetical"),
        ("Performance:", "Sub-millisecond search times"),
    )
    print()
    for label, value in rows:
        print("  " + paint(f"{label:<20}", "cyan", color=color) + value)
    print()
    print_line(color)
    print("\n  " + paint("Tip: Press Enter at search prompt to view all words", "dim", color=color) + "\n")
    print_thick_line(color)


def print_help(color: bool) -> None:
    print()
    print_thick_line(color)
    print("\n  " + paint("HELP & DOCUMENTATION", "bold", "magenta", color=color) + "\n")
    print_line(color)
    print("\n  " + paint("How to Use:", "bold", "cyan", color=color) + "\n")
    print("    • Enter any prefix to see matching words")
    print("    • Press Enter (empty) to display all words")
    print('    • Search is case-insensitive: "AP" = "ap"')
    print('    • Only letters count: "a-p" = "ap"')
    print("    • Add words dynamically during runtime\n")
    print_line(color)
    print("\n  " + paint("Examples:", "bold", "cyan", color=color) + "\n")
    examples = (
        ('"ap"', "  →  app, apple, apply, apricot"),
        ('"ba"', "  →  ball, banana, bat, battle"),
        ('""', "    →  Displays all dictionary words"),
    )
    for prefix, result in examples:
        print(f"    Prefix: {paint(prefix, 'yellow', color=color)}{result}")
    print()
    print_line(color)
    print("\n  " + paint("Complexity Analysis:", "bold", "cyan", color=color) + "\n")
    print(f"    • Insert:  {paint('O(L)', 'green', color=color)} — L = word length")
    print(f"    • Search:  {paint('O(L + K×M)', 'green', color=color)} — K = results, M = avg length")
    print(f"    • Space:   {paint('O(N×M)', 'green', color=color)} — N = words, M = avg length\n")
    print_thick_line(color)


def print_goodbye(color: bool) -> None:
    print()
    print_thick_line(color)
    print()
    print_success("Thank you for using Trie Auto-Suggest System!", color)
    print("  " + paint("Session terminated. Goodbye!", "dim", color=color) + "\n")
    print_thick_line(color)


def read_choice(raw: str) -> int:
    """Parse a menu selection; raises ``ValueError`` for non-numbers."""
    return int(raw.strip())


def run_cli(
    dictionary: Dictionary,
    use_color: bool = True,
    input_fn: InputFn = input,
) -> None:
    """Run the interactive menu until the user exits or input ends."""
    color = use_color
    index = dictionary.index

    print_banner(color)
    print("  " + paint("Initializing system...", "blue", color=color))
    print("  " + paint("Loading dictionary and building trie structure...", "dim", color=color) + "\n")
    print_success(
        f"System ready! Loaded {index.count()} words "
        f"in {dictionary.load_seconds * 1000:.3f}ms",
        color,
    )

    while True:
        print_menu(color)
        try:
            raw = input_fn("\n  " + paint("→ Your choice: ", "yellow", color=color))
            try:
                choice = read_choice(raw)
            except ValueError:
                print()
                print_error(f"Invalid input. Please enter a number between 1-{MENU_SIZE}.", color)
                continue

            if choice == 1:
                search(index, input_fn, color)
            elif choice == 2:
                add_word(index, input_fn, color)
            elif choice == 3:
                print_stats(dictionary, color)
            elif choice == 4:
                print_help(color)
            elif choice == MENU_SIZE:
                break
            else:
                print()
                print_error(f"Invalid choice. Please select a number between 1-{MENU_SIZE}.", color)
            print()
        except (EOFError, KeyboardInterrupt):
            print()
            break

    print_goodbye(color)
