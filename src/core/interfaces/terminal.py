"""Terminal surface contract.

Structural contract (duck typing) for raw-mode character I/O and cursor
control. The curses adapter implements it; tests use an in-memory fake.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TerminalSurface(Protocol):
    """Minimal contract of the screen the tracker draws on.

    Coordinates are `(row, col)`, zero based. Implementations raise
    `core.errors.TerminalIOError` on I/O failures.
    """

    def add_str(self, text: str) -> None:
        """Write `text` at the cursor and advance it."""

        ...

    def add_char(self, char: str) -> None:
        """Write a single character at the cursor and advance it."""

        ...

    def get_char(self) -> str:
        """Block until a key is pressed; return it (empty string for non-character keys)."""

        ...

    def get_line(self) -> str:
        """Block until a full line is entered; return it without the line break."""

        ...

    def get_cursor(self) -> tuple[int, int]:
        ...

    def get_size(self) -> tuple[int, int]:
        """Screen size as `(rows, cols)`."""

        ...

    def set_cursor(self, row: int, col: int) -> None:
        ...

    def clear(self) -> None:
        ...

    def draw_box(self) -> None:
        """Draw a border around the whole screen."""

        ...

    def refresh(self) -> None:
        ...
