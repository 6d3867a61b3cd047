from datetime import date

import httpx
import pytest

from adapters.neo_api import NeoWsFetcher
from core.config import AppSettings
from core.domain.models import DateRange, FetchNotFound, FetchSuccess, FetchTransportError, ObjectQuery


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None, api_key="test-key", api_base_url="https://neo.test/rest/v1")


def _fetcher(settings: AppSettings, handler, requests: list[httpx.Request] | None = None) -> NeoWsFetcher:
    def record(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        return handler(request)

    return NeoWsFetcher(settings, transport=httpx.MockTransport(record))


def test_feed_omits_unset_bounds(settings: AppSettings) -> None:
    requests: list[httpx.Request] = []
    fetcher = _fetcher(settings, lambda r: httpx.Response(200, json={"element_count": 0}), requests)

    result = fetcher.fetch_feed(DateRange())

    assert isinstance(result, FetchSuccess)
    assert result.field_names() == ["element_count"]
    (request,) = requests
    assert request.url.path == "/rest/v1/feed"
    assert dict(request.url.params) == {"api_key": "test-key"}


def test_feed_sends_set_bounds(settings: AppSettings) -> None:
    requests: list[httpx.Request] = []
    fetcher = _fetcher(settings, lambda r: httpx.Response(200, json={}), requests)

    fetcher.fetch_feed(DateRange(start=date(2024, 1, 1), end=date(2024, 1, 3)))

    assert dict(requests[0].url.params) == {
        "api_key": "test-key",
        "start_date": "2024-01-01",
        "end_date": "2024-01-03",
    }


def test_lookup_hits_object_endpoint(settings: AppSettings) -> None:
    requests: list[httpx.Request] = []
    fetcher = _fetcher(settings, lambda r: httpx.Response(200, json={"id": "2000433", "name": "433 Eros"}), requests)

    result = fetcher.fetch_object(ObjectQuery(id="2000433"))

    assert result == FetchSuccess(payload={"id": "2000433", "name": "433 Eros"})
    assert requests[0].url.path == "/rest/v1/neo/2000433"
    assert requests[0].url.params["api_key"] == "test-key"
    assert requests[0].headers["user-agent"] == settings.user_agent


def test_lookup_quotes_path_characters(settings: AppSettings) -> None:
    requests: list[httpx.Request] = []
    fetcher = _fetcher(settings, lambda r: httpx.Response(404), requests)

    fetcher.fetch_object(ObjectQuery(id="../feed"))

    assert requests[0].url.raw_path.startswith(b"/rest/v1/neo/..%2Ffeed")


def test_404_maps_to_not_found(settings: AppSettings) -> None:
    fetcher = _fetcher(settings, lambda r: httpx.Response(404, json={"code": 404}))

    assert fetcher.fetch_object(ObjectQuery(id="99999999")) == FetchNotFound()


@pytest.mark.parametrize("status", [400, 403, 429, 500, 503])
def test_other_statuses_map_to_transport_error(settings: AppSettings, status: int) -> None:
    fetcher = _fetcher(settings, lambda r: httpx.Response(status, json={}))

    assert fetcher.fetch_feed(DateRange()) == FetchTransportError(message=f"HTTP {status}")


def test_invalid_json_is_a_transport_error(settings: AppSettings) -> None:
    fetcher = _fetcher(settings, lambda r: httpx.Response(200, text="<html>"))

    result = fetcher.fetch_object(ObjectQuery(id="1"))

    assert isinstance(result, FetchTransportError)
    assert result.message == "invalid JSON in response"


def test_non_object_json_is_a_transport_error(settings: AppSettings) -> None:
    fetcher = _fetcher(settings, lambda r: httpx.Response(200, json=["not", "a", "mapping"]))

    assert isinstance(fetcher.fetch_object(ObjectQuery(id="1")), FetchTransportError)


def test_timeout_maps_to_transport_error(settings: AppSettings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    result = _fetcher(settings, handler).fetch_feed(DateRange())

    assert result == FetchTransportError(message="timed out")


def test_connection_error_maps_to_transport_error(settings: AppSettings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    result = _fetcher(settings, handler).fetch_object(ObjectQuery(id="1"))

    assert isinstance(result, FetchTransportError)
    assert "connection refused" in result.message


def test_api_key_is_read_once_at_construction(settings: AppSettings) -> None:
    requests: list[httpx.Request] = []
    fetcher = _fetcher(settings, lambda r: httpx.Response(200, json={}), requests)
    settings.api_key = "changed"

    fetcher.fetch_feed(DateRange())

    assert requests[0].url.params["api_key"] == "test-key"


@pytest.mark.parametrize(("neo_id", "raw"), [(".", b"%2E"), ("..", b"%2E%2E"), ("3.5", b"3.5")])
def test_lookup_never_resolves_dot_segments(settings: AppSettings, neo_id: str, raw: bytes) -> None:
    requests: list[httpx.Request] = []
    fetcher = _fetcher(settings, lambda r: httpx.Response(404), requests)

    assert fetcher.fetch_object(ObjectQuery(id=neo_id)) == FetchNotFound()

    assert requests[0].url.raw_path.startswith(b"/rest/v1/neo/" + raw + b"?")
