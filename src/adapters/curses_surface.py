"""TerminalSurface over the standard `curses` module."""

from __future__ import annotations

import curses
from contextlib import contextmanager
from typing import Iterator

from loguru import logger

from core.errors import TerminalIOError
from core.interfaces.terminal import TerminalSurface

_LINE_LIMIT = 256


@contextmanager
def _terminal_errors(action: str) -> Iterator[None]:
    try:
        yield
    except curses.error as exc:
        raise TerminalIOError(f"{action} failed: {exc}") from exc


class CursesSurface(TerminalSurface):
    """Adapts a curses window. Every `curses.error` becomes `TerminalIOError`."""

    def __init__(self, window: curses.window) -> None:
        self._window = window

    def add_str(self, text: str) -> None:
        with _terminal_errors("write"):
            self._window.addstr(text)

    def add_char(self, char: str) -> None:
        with _terminal_errors("write"):
            self._window.addch(char)

    def get_char(self) -> str:
        with _terminal_errors("read"):
            key = self._window.get_wch()
        # Function keys (arrows, F1...) come back as ints.
        return key if isinstance(key, str) else ""

    def get_line(self) -> str:
        with _terminal_errors("read"):
            curses.echo()
            try:
                raw = self._window.getstr(_LINE_LIMIT)
            finally:
                curses.noecho()
        return raw.decode("utf-8", errors="replace")

    def get_cursor(self) -> tuple[int, int]:
        with _terminal_errors("cursor query"):
            row, col = self._window.getyx()
        return row, col

    def get_size(self) -> tuple[int, int]:
        with _terminal_errors("size query"):
            rows, cols = self._window.getmaxyx()
        return rows, cols

    def set_cursor(self, row: int, col: int) -> None:
        with _terminal_errors(f"cursor move to ({row}, {col})"):
            self._window.move(row, col)

    def clear(self) -> None:
        with _terminal_errors("clear"):
            self._window.clear()
            self._window.refresh()

    def draw_box(self) -> None:
        with _terminal_errors("box"):
            self._window.box(ord("|"), ord("-"))

    def refresh(self) -> None:
        with _terminal_errors("refresh"):
            self._window.refresh()


@contextmanager
def open_curses_surface() -> Iterator[CursesSurface]:
    """Put the terminal in cbreak mode and restore it on exit, whatever happens."""

    with _terminal_errors("terminal setup"):
        stdscr = curses.initscr()

    try:
        with _terminal_errors("terminal setup"):
            curses.cbreak()
            curses.noecho()
            stdscr.keypad(True)
        surface = CursesSurface(stdscr)
        logger.debug("terminal.acquire size={}", surface.get_size())
        yield surface
    finally:
        stdscr.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()
        logger.debug("terminal.release")
