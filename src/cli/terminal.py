"""Terminal session: cursor and margin bookkeeping over a `TerminalSurface`.

One session lives for the whole run and is handed explicitly to the menu and
to the active flow. Nothing reads cursor state from anywhere else.
"""

from __future__ import annotations

import time
from typing import Callable

from core.config import AppSettings
from core.domain.models import ScreenPosition
from core.interfaces.terminal import TerminalSurface


class TerminalSession:
    """Owns the surface plus the layout and pacing parameters."""

    def __init__(
        self,
        surface: TerminalSurface,
        *,
        margin_x: int = 3,
        margin_y: int = 3,
        typing_interval: float = 0.01,
        pause_seconds: float = 0.3,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.surface = surface
        self.margin_x = margin_x
        self.margin_y = margin_y
        self.typing_interval = typing_interval
        self.pause_seconds = pause_seconds
        self._sleep = sleep

    @classmethod
    def from_settings(
        cls,
        surface: TerminalSurface,
        settings: AppSettings,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ) -> "TerminalSession":
        return cls(
            surface,
            margin_x=settings.margin_x,
            margin_y=settings.margin_y,
            typing_interval=settings.typing_interval_seconds,
            pause_seconds=settings.pause_seconds,
            sleep=sleep,
        )

    def position(self) -> ScreenPosition:
        row, col = self.surface.get_cursor()
        return ScreenPosition(row=row, col=col)

    def move_to(self, row: int, col: int) -> None:
        self.surface.set_cursor(row, col)

    def home(self) -> None:
        self.move_to(self.margin_y, self.margin_x)

    def last_row(self) -> int:
        """Last row inside the box border."""

        rows, _ = self.surface.get_size()
        return max(rows - 2, 0)

    def rows_left(self) -> int:
        return self.last_row() - self.position().row

    def newline(self, indent: int = 0) -> None:
        """Move to the start of the next line; a full screen starts over from the top."""

        row = self.position().row + 1
        if row > self.last_row():
            self.reset_screen()
            row = self.margin_y
        self.move_to(row, self.margin_x + indent)

    def reset_screen(self) -> None:
        self.clear()
        self.draw_box()
        self.home()

    def print_out(self, text: str) -> None:
        self.surface.add_str(text)
        self.surface.refresh()

    def emulate_typing(self, text: str) -> None:
        for char in text:
            self.surface.add_char(char)
            self.surface.refresh()
            if self.typing_interval > 0:
                self._sleep(self.typing_interval)

    def pause(self, seconds: float | None = None) -> None:
        delay = self.pause_seconds if seconds is None else seconds
        if delay > 0:
            self._sleep(delay)

    def read_key(self) -> str:
        return self.surface.get_char()

    def read_line(self) -> str:
        return self.surface.get_line()

    def draw_box(self) -> None:
        self.surface.draw_box()
        self.surface.refresh()

    def clear(self) -> None:
        self.surface.clear()
