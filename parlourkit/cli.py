"""Top-level menu that leads to the bakery shop and the games."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable
from pathlib import Path

from parlourkit.bakery import BakeryConsole, BakeryStore
from parlourkit.games import game_menu

RED = "\033[0;31m"
GREEN = "\033[0;32m"
BLUE = "\033[0;34m"
WHITE = "\033[0;37m"
RULE = "#" * 70

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _stdin_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line


def _banner(write: Callable[[str], object], title: str, colour: str) -> None:
    write(colour)
    write(RULE + "\n")
    write("##" + title.center(len(RULE) - 4) + "##\n")
    write(RULE + "\n")
    write(WHITE)


def run(
    read: Callable[[], str] | None = None,
    write: Callable[[str], object] | None = None,
    root: str | Path = "bakery",
) -> None:
    """Show the main menu until Exit, an unknown choice, or end of input."""
    read = read or _stdin_line
    write = write or sys.stdout.write
    while True:
        _banner(write, "PARLOUR", RED)
        write(RED)
        write("1. Bakery Management System\n")
        write("2. Game Menu \n")
        write("3. Exit \n")
        write(RULE + "\n")
        write("Enter your choice: ")
        write(WHITE)
        try:
            match = _INT_PREFIX.match(read())
        except EOFError:
            return
        choice = int(match.group(1)) if match else None
        if choice == 1:
            _banner(write, "BAKERY", BLUE)
            BakeryConsole(BakeryStore(root), read, write).run()
        elif choice == 2:
            _banner(write, "GAMES", GREEN)
            game_menu(read, write)
        else:
            return


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="parlourkit", description="Bakery shop and small games in the terminal."
    )
    parser.add_argument(
        "--root", default="bakery", help="directory holding the bakery's files"
    )
    args = parser.parse_args(argv)
    run(root=args.root)
    return 0


if __name__ == "__main__":
    sys.exit(main())