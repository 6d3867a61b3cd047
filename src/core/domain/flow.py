"""Flows offered by the main menu.

A closed set: every menu entry maps to exactly one of these values and the
CLI dispatches on them directly.
"""

from __future__ import annotations

from enum import Enum


class FlowKind(str, Enum):
    """Flow selected from the main menu."""

    FEED = "feed"
    LOOKUP = "lookup"

    def label(self) -> str:
        """Human readable label for logging."""

        return "NEO feed" if self is FlowKind.FEED else "NEO lookup"
