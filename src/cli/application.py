"""Top-level driver of the interactive tracker.

States: INIT -> MENU_SHOWN -> FLOW_RUNNING -> DONE, with FATAL reachable from
any of them. The terminal surface is a context manager, so it is released on
every path before `run()` returns or raises.
"""

from __future__ import annotations

import time
from contextlib import AbstractContextManager
from enum import Enum
from typing import Callable

from loguru import logger

from cli.flows import build_flow
from cli.menu import MenuController
from cli.terminal import TerminalSession
from core.config import AppSettings
from core.errors import NeoTrackerError
from core.interfaces.fetcher import DataFetcher
from core.interfaces.terminal import TerminalSurface

EXIT_OK = 0

SurfaceFactory = Callable[[], AbstractContextManager[TerminalSurface]]


class AppState(str, Enum):
    INIT = "init"
    MENU_SHOWN = "menu_shown"
    FLOW_RUNNING = "flow_running"
    DONE = "done"
    FATAL = "fatal"


class Application:
    """Runs one menu selection and its flow inside a terminal surface."""

    def __init__(
        self,
        surface_factory: SurfaceFactory,
        fetcher: DataFetcher,
        settings: AppSettings | None = None,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._surface_factory = surface_factory
        self._fetcher = fetcher
        self._settings = settings or AppSettings()
        self._sleep = sleep
        self.state: AppState | None = None
        self.fatal_error: NeoTrackerError | None = None

    def run(self) -> int:
        """Run the session and return the process exit code."""

        try:
            with self._surface_factory() as surface:
                self._run_session(surface)
        except NeoTrackerError as exc:
            self._transition(AppState.FATAL)
            logger.error("app.fatal error={!r}", exc)
            self.fatal_error = exc
            return exc.exit_code
        return EXIT_OK

    def _run_session(self, surface: TerminalSurface) -> None:
        self._transition(AppState.INIT)
        session = TerminalSession.from_settings(surface, self._settings, sleep=self._sleep)
        session.draw_box()
        session.home()

        self._transition(AppState.MENU_SHOWN)
        menu = MenuController(session)
        menu.render_welcome()
        key, kind = menu.read_option()

        self._transition(AppState.FLOW_RUNNING)
        session.newline()
        session.print_out(f"You selected {key}")
        logger.info("app.flow kind={}", kind.label())
        build_flow(kind, session, self._fetcher).run()

        self._transition(AppState.DONE)
        session.pause(self._settings.done_pause_seconds)

    def _transition(self, state: AppState) -> None:
        logger.debug("app.state {} -> {}", self.state.value if self.state else None, state.value)
        self.state = state
