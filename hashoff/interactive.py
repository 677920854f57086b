"""A command interpreter for trying out a hash table by hand."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Protocol

ReadLine = Callable[[str], str]
Write = Callable[[str], object]


class StringSet(Protocol):
    def insert(self, key: str) -> bool: ...

    def contains(self, key: str) -> bool: ...

    def remove(self, key: str) -> bool: ...

    def is_empty(self) -> bool: ...

    def __len__(self) -> int: ...


def instructions(table_name: str) -> str:
    """Return the help text shown when the interpreter starts."""
    lines = [
        f"Interactive {table_name} Test",
        "This environment allows you to type in commands that will be",
        "executed on your hash table.  The interpreter knows the",
        "following commands:",
        "",
        "   isEmpty:         Reports whether the priority queue is empty.",
        "   size:            Reports the size of the priority queue",
        "   insert <str>:    Inserts the string into the data point.",
        "   contains <str>:  Returns whether the table contains the string.",
        "   remove <str>:    Removes the element from the table.",
        "   quit:            Quits the interpret and returns to the menu.",
        "",
        "The first letter of any command can be used as a substitute",
        "for any command name.",
        "",
        "Elements are hashed by treating the string as a number and using",
        "the number's last digit as the hash code. Non-number inputs will be",
        "hashed to zero.",
    ]
    return "\n".join(lines) + "\n"


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


class ReplSession:
    """Interprets one command line at a time against a table."""

    def __init__(self, table: StringSet) -> None:
        self.table = table
        self.finished = False

    def execute(self, line: str) -> str:
        """Run one command and return the text it prints."""
        tokens = line.split()
        if not tokens:
            return "Please enter a command.\n"

        action = tokens[0].lower()
        args = tokens[1:]
        try:
            return self._dispatch(action, args)
        except Exception as exc:  # any failure in the table is reported, not fatal
            return f"An error occurred: {exc}\n"

    def _dispatch(self, action: str, args: list[str]) -> str:
        if action == "isempty":
            return _bool_text(self.table.is_empty()) + "\n"
        if action in ("size", "s"):
            return f"{len(self.table)}\n"
        if action in ("quit", "q"):
            self.finished = True
            return "Leaving test environment...   "
        if action in ("insert", "i"):
            if len(args) != 1:
                return "Please specify a string to insert.\n"
            result = self.table.insert(args[0])
            return (f"Attempted to add {args[0]} to the table. "
                    f"Result: {_bool_text(result)}\n")
        if action in ("contains", "c"):
            if len(args) != 1:
                return "Please specify a string to check.\n"
            result = self.table.contains(args[0])
            return f"Is {args[0]} in the table? {_bool_text(result)}\n"
        if action in ("remove", "r"):
            if len(args) != 1:
                return "Please specify a string to remove.\n"
            result = self.table.remove(args[0])
            return (f"Attempted to remove {args[0]} from the table. "
                    f"Result: {_bool_text(result)}\n")
        return "Unknown command.\n"


def run_repl(
    table_name: str,
    table: StringSet,
    read_line: ReadLine | None = None,
    write: Write | None = None,
) -> None:
    """Show the instructions, then run commands until the user quits."""
    if read_line is None:
        read_line = input
    if write is None:
        write = sys.stdout.write

    write(instructions(table_name))
    session = ReplSession(table)
    while not session.finished:
        try:
            line = read_line("Enter command: ")
        except EOFError:
            line = "quit"
        write(session.execute(line))
    write("success.\n")
    write("\n")