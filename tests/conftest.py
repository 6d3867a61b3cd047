from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import pytest

from cli.terminal import TerminalSession
from core.domain.models import DateRange, FetchNotFound, FetchResult, ObjectQuery
from core.errors import TerminalIOError


class FakeSurface:
    """In-memory terminal: scripted input, recorded output."""

    def __init__(
        self,
        keys: list[str] | None = None,
        lines: list[str] | None = None,
        *,
        height: int = 24,
        width: int = 80,
    ) -> None:
        self.height = height
        self.width = width
        self.clears = 0
        self.max_row = 0
        self.keys = list(keys or [])
        self.lines = list(lines or [])
        self.writes: list[str] = []
        self.chars: list[str] = []
        self.row = 0
        self.col = 0
        self.boxed = False
        self.refreshes = 0

    def add_str(self, text: str) -> None:
        self.writes.append(text)
        self.col += len(text)

    def add_char(self, char: str) -> None:
        self.chars.append(char)
        self.col += 1

    def get_char(self) -> str:
        if not self.keys:
            raise TerminalIOError("no more scripted keys")
        return self.keys.pop(0)

    def get_line(self) -> str:
        if not self.lines:
            raise TerminalIOError("no more scripted lines")
        return self.lines.pop(0)

    def get_cursor(self) -> tuple[int, int]:
        return self.row, self.col

    def get_size(self) -> tuple[int, int]:
        return self.height, self.width

    def set_cursor(self, row: int, col: int) -> None:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise TerminalIOError(f"cursor move to ({row}, {col}) failed")
        self.max_row = max(self.max_row, row)
        self.row = row
        self.col = col

    def clear(self) -> None:
        self.clears += 1

    def draw_box(self) -> None:
        self.boxed = True

    def refresh(self) -> None:
        self.refreshes += 1

    @property
    def typed(self) -> str:
        return "".join(self.chars)


class StubFetcher:
    """DataFetcher double returning canned results and recording queries."""

    def __init__(self, result: FetchResult | None = None) -> None:
        self.result = result if result is not None else FetchNotFound()
        self.feed_calls: list[DateRange] = []
        self.object_calls: list[ObjectQuery] = []

    def fetch_feed(self, date_range: DateRange) -> FetchResult:
        self.feed_calls.append(date_range)
        return self.result

    def fetch_object(self, query: ObjectQuery) -> FetchResult:
        self.object_calls.append(query)
        return self.result


class SurfaceFactory:
    """Context-manager factory that counts acquisitions and releases."""

    def __init__(self, surface: FakeSurface) -> None:
        self.surface = surface
        self.entered = 0
        self.released = 0

    @contextmanager
    def __call__(self) -> Iterator[FakeSurface]:
        self.entered += 1
        try:
            yield self.surface
        finally:
            self.released += 1


@pytest.fixture
def surface() -> FakeSurface:
    return FakeSurface()


@pytest.fixture
def sleeps() -> list[float]:
    return []


@pytest.fixture
def session(surface: FakeSurface, sleeps: list[float]) -> TerminalSession:
    return TerminalSession(surface, typing_interval=0.0, pause_seconds=0.0, sleep=sleeps.append)
