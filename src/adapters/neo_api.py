"""DataFetcher over the NASA NeoWs REST API.

Endpoints used:
- `GET /feed?start_date=..&end_date=..` (bounds optional, server defaults
  apply: today and start + 7 days)
- `GET /neo/{id}`

Every request carries `api_key`.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx
from loguru import logger

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.models import (
    DateRange,
    FetchNotFound,
    FetchResult,
    FetchSuccess,
    FetchTransportError,
    ObjectQuery,
)
from core.interfaces.fetcher import DataFetcher


class NeoWsFetcher(DataFetcher):
    """Fetches NEO feeds and single objects, mapping HTTP outcomes to `FetchResult`."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport
        # Read once: later changes to the environment do not affect this fetcher.
        self._api_key = self._settings.api_key

    def fetch_feed(self, date_range: DateRange) -> FetchResult:
        return self._get("/feed", date_range.as_params())

    def fetch_object(self, query: ObjectQuery) -> FetchResult:
        return self._get(f"/neo/{_quote_segment(query.id)}", {})

    def _get(self, path: str, params: dict[str, str]) -> FetchResult:
        logger.info("neo.fetch.start path={} params={}", path, params)
        try:
            with build_client(self._settings, transport=self._transport) as client:
                response = client.get(path, params={**params, "api_key": self._api_key})
        except httpx.HTTPError as exc:
            logger.warning("neo.fetch.failed path={} error={!r}", path, exc)
            return FetchTransportError(message=str(exc) or exc.__class__.__name__)

        result = _result_from_response(response)
        logger.info("neo.fetch.end path={} http_status={} result={}", path, response.status_code, result.status)
        return result


def _quote_segment(value: str) -> str:
    """Quote a path segment, dot segments included, so it cannot climb the URL."""

    if value and set(value) == {"."}:
        return value.replace(".", "%2E")
    return quote(value, safe="")


def _result_from_response(response: httpx.Response) -> FetchResult:
    if response.status_code == 404:
        return FetchNotFound()
    if not response.is_success:
        return FetchTransportError(message=f"HTTP {response.status_code}")

    try:
        payload: Any = response.json()
    except ValueError:
        return FetchTransportError(message="invalid JSON in response")
    if not isinstance(payload, dict):
        return FetchTransportError(message="unexpected response payload")
    return FetchSuccess(payload=payload)
