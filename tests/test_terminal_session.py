from cli.terminal import TerminalSession
from core.config import AppSettings
from core.domain.models import ScreenPosition

from conftest import FakeSurface


def test_newline_moves_to_next_row_at_left_margin(session: TerminalSession, surface: FakeSurface) -> None:
    surface.set_cursor(5, 40)

    session.newline()

    assert session.position() == ScreenPosition(row=6, col=session.margin_x)


def test_home_uses_both_margins(surface: FakeSurface) -> None:
    session = TerminalSession(surface, margin_x=7, margin_y=2)

    session.home()

    assert surface.get_cursor() == (2, 7)


def test_emulate_typing_writes_char_by_char_and_sleeps_between(surface: FakeSurface) -> None:
    sleeps: list[float] = []
    session = TerminalSession(surface, typing_interval=0.05, sleep=sleeps.append)

    session.emulate_typing("NEO")

    assert surface.chars == ["N", "E", "O"]
    assert sleeps == [0.05, 0.05, 0.05]
    assert surface.refreshes == 3


def test_zero_pacing_never_sleeps(session: TerminalSession, surface: FakeSurface, sleeps: list[float]) -> None:
    session.emulate_typing("Options:")
    session.pause()
    session.pause(0)

    assert surface.typed == "Options:"
    assert sleeps == []


def test_pause_defaults_to_configured_delay(surface: FakeSurface) -> None:
    sleeps: list[float] = []
    session = TerminalSession(surface, pause_seconds=0.3, sleep=sleeps.append)

    session.pause()
    session.pause(2.0)

    assert sleeps == [0.3, 2.0]


def test_from_settings_copies_layout_and_pacing(surface: FakeSurface) -> None:
    settings = AppSettings(_env_file=None, margin_x=5, margin_y=1, typing_interval_seconds=0.2, pause_seconds=0.4)

    session = TerminalSession.from_settings(surface, settings)

    assert (session.margin_x, session.margin_y) == (5, 1)
    assert session.typing_interval == 0.2
    assert session.pause_seconds == 0.4


def test_newline_past_last_row_starts_a_fresh_screen() -> None:
    surface = FakeSurface(height=10)
    session = TerminalSession(surface, margin_x=3, margin_y=2)
    surface.set_cursor(8, 20)

    session.newline()

    assert surface.clears == 1
    assert surface.boxed is True
    assert surface.get_cursor() == (2, 3)


def test_newline_indent_is_relative_to_margin(session: TerminalSession, surface: FakeSurface) -> None:
    session.newline(indent=4)

    assert surface.get_cursor() == (1, session.margin_x + 4)


def test_rows_left_counts_rows_inside_the_box() -> None:
    surface = FakeSurface(height=24)
    session = TerminalSession(surface)
    surface.set_cursor(20, 0)

    assert session.last_row() == 22
    assert session.rows_left() == 2
