"""NEO data fetcher contract."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import DateRange, FetchResult, ObjectQuery


@runtime_checkable
class DataFetcher(Protocol):
    """Performs the remote queries of the tracker.

    Design rules:
    - Never raises for HTTP or network failures: they come back as
      `FetchNotFound` / `FetchTransportError`.
    - One call, one result. No caching, no retries.
    """

    def fetch_feed(self, date_range: DateRange) -> FetchResult:
        """Fetch the NEOs approaching Earth within `date_range`."""

        ...

    def fetch_object(self, query: ObjectQuery) -> FetchResult:
        """Fetch a single NEO by id."""

        ...
