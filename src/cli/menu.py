"""Welcome screen and option selection."""

from __future__ import annotations

from typing import Sequence

from loguru import logger

from cli.terminal import TerminalSession
from core.domain.flow import FlowKind
from core.domain.models import MENU_OPTIONS, MenuOption

WELCOME_STRING = "NEO (Near Earth Object) Tracker"
OPTIONS_STRING = "Options:"
INVALID_OPTION_STRING = "Invalid option selected, please try again:"

# Option lines are indented past the left margin.
_OPTION_INDENT = 4


class MenuController:
    """Renders the menu and blocks until the user picks a known option."""

    def __init__(self, session: TerminalSession, options: Sequence[MenuOption] = MENU_OPTIONS) -> None:
        self._session = session
        self._options = tuple(options)
        self._by_key = {option.key: option for option in self._options}

    def render_welcome(self) -> None:
        session = self._session

        session.emulate_typing(WELCOME_STRING)
        session.pause()

        session.newline()
        session.emulate_typing(OPTIONS_STRING)
        session.pause()

        for option in self._options:
            session.newline(indent=_OPTION_INDENT)
            session.print_out(f"{option.key}: {option.label}")
            session.pause()

        session.newline()

    def read_option(self) -> tuple[str, FlowKind]:
        """Read keys until one matches the option table. No attempt limit."""

        while True:
            key = self._session.read_key()
            option = self._by_key.get(key)
            if option is not None:
                return key, option.kind

            logger.debug("menu.invalid_option key={!r}", key)
            if self._session.rows_left() < 2:
                # Out of rows: start a fresh screen with the menu on top.
                self._session.reset_screen()
                self.render_welcome()
            self._session.newline()
            self._session.print_out(INVALID_OPTION_STRING)
            self._session.newline()
