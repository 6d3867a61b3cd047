"""Flows started from the main menu.

Each flow collects its input through the session, calls the fetcher once and
renders the outcome. Results it cannot render become `FetchFailedError`.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol

from loguru import logger

from cli.terminal import TerminalSession
from core.domain.flow import FlowKind
from core.domain.models import (
    DateRange,
    FetchNotFound,
    FetchResult,
    FetchSuccess,
    FetchTransportError,
    ObjectQuery,
)
from core.errors import FetchFailedError
from core.interfaces.fetcher import DataFetcher
from core.validation import is_valid_date

START_DATE_PROMPT = "Enter start date (YYYY-MM-DD) - leave blank to start from now:"
END_DATE_PROMPT = "Enter end date (YYYY-MM-DD) - leave blank to default to 7 days from start date:"
LOOKUP_PROMPT = "Enter id of NEO to inspect"
FETCHED_STRING = "Fetched data"
NOT_FOUND_STRING = "Couldn't find NEO with that ID!"


class FlowRunner(Protocol):
    def run(self) -> None:
        ...


class _BaseFlow:
    def __init__(self, session: TerminalSession, fetcher: DataFetcher) -> None:
        self._session = session
        self._fetcher = fetcher

    def _prompt(self, message: str) -> str:
        self._session.newline()
        self._session.print_out(message)
        self._session.newline()
        return self._session.read_line()

    def _render_success(self, result: FetchSuccess) -> None:
        self._session.newline()
        self._session.print_out(FETCHED_STRING)
        self._session.newline()
        self._session.print_out("|".join(result.field_names()))


class FeedFlow(_BaseFlow):
    """Optional date range in, summary of the feed out."""

    def run(self) -> None:
        start = self._read_date(START_DATE_PROMPT)
        end = self._read_date(END_DATE_PROMPT)

        result = self._fetcher.fetch_feed(DateRange(start=start, end=end))
        if isinstance(result, FetchSuccess):
            self._render_success(result)
            return

        message = "feed not found" if isinstance(result, FetchNotFound) else f"request failed: {result.message}"
        raise FetchFailedError(message, result)

    def _read_date(self, prompt: str) -> date | None:
        raw = self._prompt(prompt).strip()
        if not raw:
            return None
        if not is_valid_date(raw):
            # Invalid dates fall back to the server default without telling the user.
            logger.debug("feed.date_ignored raw={!r}", raw)
            return None
        return date.fromisoformat(raw)


class LookupFlow(_BaseFlow):
    """Single NEO id in, the object's fields (or a not-found notice) out."""

    def run(self) -> None:
        neo_id = self._prompt(LOOKUP_PROMPT).strip()

        result: FetchResult = self._fetcher.fetch_object(ObjectQuery(id=neo_id))
        if isinstance(result, FetchSuccess):
            self._render_success(result)
        elif isinstance(result, FetchNotFound):
            self._session.newline()
            self._session.print_out(NOT_FOUND_STRING)
        elif isinstance(result, FetchTransportError):
            raise FetchFailedError(f"request failed: {result.message}", result)


def build_flow(kind: FlowKind, session: TerminalSession, fetcher: DataFetcher) -> FlowRunner:
    """Map a menu selection to its flow."""

    if kind is FlowKind.FEED:
        return FeedFlow(session, fetcher)
    if kind is FlowKind.LOOKUP:
        return LookupFlow(session, fetcher)
    raise ValueError(f"unknown flow: {kind!r}")
