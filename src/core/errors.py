"""Errors surfaced by the tracker.

Validation problems never become exceptions (they are absorbed by retry loops
or defaults); only fatal conditions do.
"""

from __future__ import annotations

from core.domain.models import FetchNotFound, FetchTransportError


class NeoTrackerError(Exception):
    """Base class for fatal tracker errors."""

    exit_code = 1


class FetchFailedError(NeoTrackerError):
    """A flow received a fetch result it cannot render."""

    exit_code = 1

    def __init__(self, message: str, result: FetchNotFound | FetchTransportError | None = None) -> None:
        super().__init__(message)
        self.result = result


class TerminalIOError(NeoTrackerError):
    """The terminal surface failed to read or write."""

    exit_code = 2
