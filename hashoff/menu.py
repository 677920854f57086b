"""Registry of console demos and the console main menu loop."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass

from hashoff.prompts import get_yes_or_no, make_selection_from

Callback = Callable[[], object]
BarrierCheck = Callable[[frozenset, Callback], Callback]
ReadLine = Callable[[str], str]
Write = Callable[[str], object]


@dataclass(frozen=True)
class MenuOption:
    """A named entry in the main menu."""

    name: str
    callback: Callback


@dataclass(frozen=True)
class _Handler:
    filename: str
    line: int
    name: str
    callback: Callback
    is_public: bool


def _tail(path: str) -> str:
    return path.replace("\\", "/").rsplit("/", 1)[-1]


class DemoRegistry:
    """Collects demos by source file and line and orders them for the menu.

    Only demos whose file appears in ``menu_order`` are shown in the menu.
    Demos whose file has an entry in ``test_barriers`` are wrapped with
    ``barrier_check(files, callback)`` so that they run only once the named
    test files pass.
    """

    def __init__(
        self,
        title: str,
        menu_order: Iterable[str] = (),
        test_barriers: Mapping[str, Iterable[str]] | None = None,
        barrier_check: BarrierCheck | None = None,
    ) -> None:
        self.title = title
        self._menu_order = list(menu_order)
        self._test_barriers = {
            demo: frozenset(files) for demo, files in (test_barriers or {}).items()
        }
        self._barrier_check = barrier_check
        self._handlers: list[_Handler] = []

    def _file_index(self, filename: str) -> int:
        try:
            return self._menu_order.index(filename)
        except ValueError:
            return len(self._menu_order)

    def _sorted_handlers(self) -> list[_Handler]:
        return sorted(
            self._handlers,
            key=lambda h: (self._file_index(h.filename), h.filename, h.line),
        )

    def register(self, filename: str, line: int, name: str, callback: Callback) -> Callback:
        """Add a demo defined at the given file and line; return the callback."""
        tail = _tail(filename)
        self._handlers.append(
            _Handler(tail, line, name, callback, tail in self._menu_order)
        )
        return callback

    def menu_options(self) -> list[MenuOption]:
        """Return the visible demos in menu order, with test barriers applied."""
        result = []
        for handler in self._sorted_handlers():
            if not handler.is_public:
                continue
            callback = handler.callback
            barrier = self._test_barriers.get(handler.filename)
            if barrier is not None and self._barrier_check is not None:
                callback = self._barrier_check(barrier, callback)
            result.append(MenuOption(handler.name, callback))
        return result

    def initial_demo(self, filename: str) -> Callback | None:
        """Return the first demo registered from filename, if any."""
        for handler in self._sorted_handlers():
            if handler.filename == filename:
                return handler.callback
        return None


def run_console(
    registry: DemoRegistry,
    initial_demo: Callback | None = None,
    read_line: ReadLine | None = None,
    write: Write | None = None,
) -> None:
    """Run the console main menu until the user quits."""
    if read_line is None:
        read_line = input
    if write is None:
        write = sys.stdout.write

    write("You have switched to the console window. Press ENTER to continue.\n")
    read_line("")

    while True:
        options = registry.menu_options()
        if initial_demo is not None:
            demo, initial_demo = initial_demo, None
            demo()
            if not registry.menu_options():
                break
        else:
            names = [option.name for option in options] + ["Quit"]
            write(f"{registry.title}\n")
            selection = make_selection_from(
                "Please make a selection:", names, read_line, write
            )
            if selection == len(options):
                break
            options[selection].callback()

        write("\n")
        if not get_yes_or_no(
            "You are back at the main menu. Would you like to pick again?",
            read_line,
            write,
        ):
            break

    write("\n")
    write("Exiting...\n")