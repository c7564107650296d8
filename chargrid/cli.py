# -*- coding: utf-8 -*-
"""
Interactive command surface for chargrid.

Asks for an input source and a column count, builds the grid, then runs
a numbered menu where every entry maps to one grid operation:

    1. Get element by (row, column)
    2. Get element by linear index
    3. Convert index to (row, column)
    4. Convert (row, column) to index
    5. Display grid again
    6. Show grid information
    7. Save grid to file
    8. Exit

Input and output streams are injectable so the whole dialogue can be
driven from tests.
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import Callable, Dict, List, Optional, Sequence, TextIO

from .config import DEFAULT_LOG_LEVEL
from .errors import GridIOError
from .grid.character_grid import CharacterGrid
from .logging_utils import get_logger, set_log_level
from .persistence import load_grid, save_grid

logger = get_logger()

MENU_LINES: List[str] = [
    "",
    "Options:",
    "1. Get element by (row, column)",
    "2. Get element by linear index",
    "3. Convert index to (row, column)",
    "4. Convert (row, column) to index",
    "5. Display grid again",
    "6. Show grid information",
    "7. Save grid to file",
    "8. Exit",
]

EXIT_CHOICE = 8

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Prompter:
    """Line-oriented prompts over a pair of text streams."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.stdin = stdin
        self.stdout = stdout

    def say(self, text: str = "") -> None:
        self.stdout.write(text + "\n")

    def ask(self, prompt: str) -> str:
        """Show ``prompt`` and return the next input line; EOFError at end of input."""
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def ask_int(self, prompt: str) -> Optional[int]:
        raw = self.ask(prompt)
        try:
            return int(raw.strip())
        except ValueError:
            self.say("Invalid input. Please enter a valid integer.")
            return None

    def ask_positive_int(self, prompt: str) -> Optional[int]:
        value = self.ask_int(prompt)
        if value is None:
            return None
        if value <= 0:
            self.say("Invalid input. Number of columns must be a positive integer.")
            return None
        return value

    def ask_input_choice(self) -> int:
        self.say()
        self.say("Choose input source:")
        self.say("1. Enter string manually")
        self.say("2. Read from file")
        while True:
            choice = self.ask_int("Enter your choice (1 or 2): ")
            if choice in (1, 2):
                return choice
            self.say("Please enter 1 or 2.")


class GridShell:
    """
    Menu loop over a built grid.

    ``commands`` maps each menu number to its handler; a handler returns
    ``False`` to end the loop.
    """

    def __init__(self, grid: CharacterGrid, prompter: Prompter) -> None:
        self.grid = grid
        self.io = prompter
        self.commands: Dict[int, Callable[[], bool]] = {
            1: self.get_by_coordinates,
            2: self.get_by_index,
            3: self.index_to_coordinates,
            4: self.coordinates_to_index,
            5: self.display,
            6: self.show_info,
            7: self.save,
            EXIT_CHOICE: self.exit,
        }

    def run(self) -> int:
        try:
            while True:
                for line in MENU_LINES:
                    self.io.say(line)
                choice = self.io.ask_int("Enter your choice: ")
                if choice is None:
                    continue
                handler = self.commands.get(choice)
                if handler is None:
                    self.io.say(f"Invalid choice. Please select 1-{EXIT_CHOICE}.")
                    continue
                if not handler():
                    return 0
        except EOFError:
            self.io.say()
            logger.debug("End of input; leaving menu.")
            return 0

    def _ask_coordinates(self):
        row = self.io.ask_int("Enter row: ")
        if row is None:
            return None
        col = self.io.ask_int("Enter column: ")
        if col is None:
            return None
        return row, col

    # --- handlers -----------------------------------------------------

    def get_by_coordinates(self) -> bool:
        coords = self._ask_coordinates()
        if coords is None:
            return True
        r, c = coords
        ch = self.grid.get_element_at(r, c)
        if ch is None:
            self.io.say("Invalid coordinates.")
        else:
            self.io.say(f"Element at ({r}, {c}): '{ch}'")
        return True

    def get_by_index(self) -> bool:
        index = self.io.ask_int("Enter index: ")
        if index is None:
            return True
        ch = self.grid.get_element_at_index(index)
        if ch is None:
            self.io.say("Invalid index.")
        else:
            self.io.say(f"Element at index {index}: '{ch}'")
        return True

    def index_to_coordinates(self) -> bool:
        index = self.io.ask_int("Enter index: ")
        if index is None:
            return True
        coords = self.grid.index_to_coordinates(index)
        if coords is None:
            self.io.say("Invalid index.")
        else:
            self.io.say(f"Index {index} corresponds to (row: {coords[0]}, col: {coords[1]})")
        return True

    def coordinates_to_index(self) -> bool:
        coords = self._ask_coordinates()
        if coords is None:
            return True
        r, c = coords
        index = self.grid.coordinates_to_index(r, c)
        if index is None:
            self.io.say("Invalid coordinates.")
        else:
            self.io.say(f"Coordinates ({r}, {c}) correspond to index {index}")
        return True

    def display(self) -> bool:
        show_grid(self.grid, self.io)
        return True

    def show_info(self) -> bool:
        show_info(self.grid, self.io)
        return True

    def save(self) -> bool:
        filename = self.io.ask("Enter filename to save: ")
        try:
            save_grid(self.grid, filename)
        except GridIOError as e:
            self.io.say(f"Error: {e}")
            return True
        self.io.say(f"Grid saved successfully to '{filename}'")
        return True

    def exit(self) -> bool:
        self.io.say("Exiting program. Goodbye!")
        return False


def show_grid(grid: CharacterGrid, io: Prompter) -> None:
    if grid.is_empty():
        io.say("Grid is empty.")
        return
    for line in grid.render():
        io.say(line)
    io.say()


def show_info(grid: CharacterGrid, io: Prompter) -> None:
    for line in grid.format_info():
        io.say(line)
    io.say()


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chargrid",
        description="Lay out text as a fixed-width character grid and query it.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--string", dest="text", help="Use TEXT as input instead of prompting")
    source.add_argument("--file", dest="path", help="Read input from PATH instead of prompting")
    parser.add_argument("--columns", type=int, help="Number of columns (prompted if omitted)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=DEFAULT_LOG_LEVEL,
        help=f"Logging level (default: {DEFAULT_LOG_LEVEL})",
    )
    return parser


def _build_grid(args: argparse.Namespace, io: Prompter) -> Optional[CharacterGrid]:
    if args.text is not None:
        choice = 1
    elif args.path is not None:
        choice = 2
    else:
        choice = io.ask_input_choice()

    columns = args.columns
    while columns is None:
        columns = io.ask_positive_int("Enter the number of columns for the grid: ")

    if choice == 1:
        text = args.text if args.text is not None else io.ask("Enter the input string: ")
        return CharacterGrid(text, columns)

    path = args.path if args.path is not None else io.ask("Enter the filename: ")
    if not os.path.isfile(path):
        io.say(f"Error: File '{path}' does not exist.")
        return None
    try:
        return load_grid(path, columns)
    except GridIOError as e:
        io.say(f"Error: {e}")
        return None


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    args = build_arg_parser().parse_args(argv)
    set_log_level(args.log_level)

    io = Prompter(stdin or sys.stdin, stdout or sys.stdout)
    io.say("Character Grid Application")
    io.say("=========================")

    try:
        grid = _build_grid(args, io)
    except EOFError:
        io.say()
        return 1
    if grid is None:
        return 1

    if not grid.is_empty():
        show_info(grid, io)
        show_grid(grid, io)

    return GridShell(grid, io).run()


if __name__ == "__main__":
    sys.exit(main())
