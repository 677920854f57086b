"""Console prompts: menus, file choices and yes/no questions."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Sequence

ReadLine = Callable[[str], str]
Write = Callable[[str], object]


def _io(read_line: ReadLine | None, write: Write | None) -> tuple[ReadLine, Write]:
    return (input if read_line is None else read_line,
            sys.stdout.write if write is None else write)


def _get_integer(prompt: str, read_line: ReadLine, write: Write) -> int:
    while True:
        text = read_line(prompt).strip()
        try:
            return int(text)
        except ValueError:
            write("Illegal integer format. Try again.\n")


def make_selection_from(
    title: str,
    options: Sequence[str],
    read_line: ReadLine | None = None,
    write: Write | None = None,
) -> int:
    """Show numbered options and prompt until a valid index is chosen."""
    read_line, write = _io(read_line, write)
    if not options:
        raise ValueError(
            "Internal error: Requesting the user to pick an item from an empty list."
        )

    write(f"{title}\n")
    for index, option in enumerate(options):
        write(f"{index} {option}\n")

    while True:
        choice = _get_integer("Your choice: ", read_line, write)
        if 0 <= choice < len(options):
            return choice
        write(f"Please enter a number between 0 and {len(options) - 1}\n")


def make_file_selection(
    suffix: str,
    directory: str = "res/",
    read_line: ReadLine | None = None,
    write: Write | None = None,
) -> str:
    """Ask the user to pick a file with the given suffix from a directory."""
    options = sorted(
        name for name in os.listdir(directory or ".") if name.endswith(suffix)
    )
    effective = directory or "."
    if not effective.endswith("/"):
        effective += "/"
    choice = make_selection_from(
        "Please choose a demo file from this list:", options, read_line, write
    )
    return effective + options[choice]


def get_yes_or_no(
    prompt: str,
    read_line: ReadLine | None = None,
    write: Write | None = None,
) -> bool:
    """Prompt until the answer starts with Y or N."""
    read_line, write = _io(read_line, write)
    while True:
        answer = read_line(f"{prompt} ").strip().lower()
        if answer.startswith("y"):
            return True
        if answer.startswith("n"):
            return False
        write("Please type a word that starts with 'Y' or 'N'.\n")