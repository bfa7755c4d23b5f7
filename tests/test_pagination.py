import json

import pytest
import requests
import responses
from responses import matchers

from vinyldns import VinylDNSClient, ApiError, NetworkError, TransportError, ValidationError
from vinyldns.utils.pagination import iter_pages, list_all


BASE = "http://host.com"


def _client():
    return VinylDNSClient({"baseUrl": BASE})


@pytest.mark.parametrize("max_items", [0, -1, 101, 200])
@responses.activate
def test_list_all_rejects_out_of_range_max_items_without_requesting(max_items):
    c = _client()
    with pytest.raises(ValidationError):
        c.zones_list_all({"max_items": max_items})
    assert len(responses.calls) == 0


@pytest.mark.parametrize("max_items", [True, "10", 1.5])
def test_list_all_rejects_non_integer_max_items(max_items):
    calls = []
    with pytest.raises(ValidationError):
        list_all(lambda f: calls.append(f) or {}, {"max_items": max_items}, "zones")
    assert calls == []


@pytest.mark.parametrize("max_items", [1, 50, 100])
def test_list_all_accepts_bounds(max_items):
    zones = list_all(lambda f: {"zones": [{"id": "1"}]}, {"max_items": max_items}, "zones")
    assert zones == [{"id": "1"}]


@responses.activate
def test_zones_list_all_follows_next_id():
    responses.add(
        responses.GET,
        f"{BASE}/zones",
        json={"zones": [{"id": "1", "name": "one."}], "maxItems": 1, "nextId": "2"},
        status=200,
        match=[matchers.query_param_matcher({"maxItems": "1"})],
    )
    responses.add(
        responses.GET,
        f"{BASE}/zones",
        json={"zones": [{"id": "2", "name": "two."}], "maxItems": 1, "startFrom": "2"},
        status=200,
        match=[matchers.query_param_matcher({"startFrom": "2", "maxItems": "1"})],
    )

    zones = _client().zones_list_all({"max_items": 1})

    assert [z["id"] for z in zones] == ["1", "2"]
    assert len(responses.calls) == 2


@responses.activate
def test_zones_list_all_when_none_is_empty_list():
    responses.add(
        responses.GET,
        f"{BASE}/zones",
        json={"zones": [], "maxItems": 100},
        status=200,
        match=[matchers.query_param_matcher({})],
    )

    zones = _client().zones_list_all()

    assert zones == []
    assert json.dumps(zones) == "[]"


@responses.activate
def test_zones_list_all_missing_collection_key_is_empty_list():
    responses.add(responses.GET, f"{BASE}/zones", json={"maxItems": 100}, status=200)
    assert _client().zones_list_all() == []


@responses.activate
def test_zones_list_all_discards_partial_results_on_failure():
    responses.add(
        responses.GET,
        f"{BASE}/zones",
        json={"zones": [{"id": "1"}], "nextId": "2"},
        status=200,
        match=[matchers.query_param_matcher({"maxItems": "1"})],
    )
    responses.add(
        responses.GET,
        f"{BASE}/zones",
        json={"error": "boom"},
        status=500,
        match=[matchers.query_param_matcher({"startFrom": "2", "maxItems": "1"})],
    )

    with pytest.raises(ApiError) as ei:
        _client().zones_list_all({"max_items": 1})
    assert ei.value.status_code == 500


@responses.activate
def test_zones_list_all_does_not_stop_on_short_page():
    responses.add(
        responses.GET,
        f"{BASE}/zones",
        json={"zones": [{"id": "a"}], "nextId": "b"},
        status=200,
        match=[matchers.query_param_matcher({"maxItems": "3"})],
    )
    responses.add(
        responses.GET,
        f"{BASE}/zones",
        json={"zones": [{"id": "c"}, {"id": "b"}]},
        status=200,
        match=[matchers.query_param_matcher({"startFrom": "b", "maxItems": "3"})],
    )

    zones = _client().zones_list_all({"max_items": 3})

    # Server order is kept, no sorting
    assert [z["id"] for z in zones] == ["a", "c", "b"]


@responses.activate
def test_zones_list_all_is_repeatable():
    responses.add(
        responses.GET,
        f"{BASE}/zones",
        json={"zones": [{"id": "1"}, {"id": "1"}], "nextId": "x"},
        status=200,
        match=[matchers.query_param_matcher({"maxItems": "2"})],
    )
    responses.add(
        responses.GET,
        f"{BASE}/zones",
        json={"zones": [{"id": "2"}]},
        status=200,
        match=[matchers.query_param_matcher({"startFrom": "x", "maxItems": "2"})],
    )

    c = _client()
    first = c.zones_list_all({"max_items": 2})
    second = c.zones_list_all({"max_items": 2})

    assert first == second
    # Duplicates are not removed
    assert [z["id"] for z in first] == ["1", "1", "2"]


@responses.activate
def test_zones_list_all_starts_from_caller_cursor_and_keeps_name_filter():
    responses.add(
        responses.GET,
        f"{BASE}/zones",
        json={"zones": [{"id": "5"}], "nextId": "6"},
        status=200,
        match=[matchers.query_param_matcher({"nameFilter": "ok", "startFrom": "5"})],
    )
    responses.add(
        responses.GET,
        f"{BASE}/zones",
        json={"zones": [{"id": "6"}]},
        status=200,
        match=[matchers.query_param_matcher({"nameFilter": "ok", "startFrom": "6"})],
    )

    list_filter = {"name_filter": "ok", "start_from": "5"}
    zones = _client().zones_list_all(list_filter)

    assert [z["id"] for z in zones] == ["5", "6"]
    assert list_filter == {"name_filter": "ok", "start_from": "5"}


@responses.activate
def test_record_sets_list_all_follows_next_id():
    responses.add(
        responses.GET,
        f"{BASE}/zones/123/recordsets",
        json={"recordSets": [{"id": "rs1"}], "nextId": "rs2"},
        status=200,
        match=[matchers.query_param_matcher({"maxItems": "1"})],
    )
    responses.add(
        responses.GET,
        f"{BASE}/zones/123/recordsets",
        json={"recordSets": [{"id": "rs2"}]},
        status=200,
        match=[matchers.query_param_matcher({"startFrom": "rs2", "maxItems": "1"})],
    )

    record_sets = _client().record_sets_list_all("123", {"max_items": 1})

    assert [rs["id"] for rs in record_sets] == ["rs1", "rs2"]


def test_iter_pages_fetches_lazily():
    pages = {
        None: {"zones": [1], "nextId": "p2"},
        "p2": {"zones": [2], "nextId": "p3"},
        "p3": {"zones": [3]},
    }
    seen = []

    def fetch_page(page_filter):
        seen.append(page_filter.get("start_from"))
        return pages[page_filter.get("start_from")]

    it = iter_pages(fetch_page, {"max_items": 1})
    assert next(it)["zones"] == [1]
    assert seen == [None]

    assert [p["zones"] for p in it] == [[2], [3]]
    assert seen == [None, "p2", "p3"]


def test_list_all_rejects_non_object_page():
    with pytest.raises(TransportError):
        list_all(lambda f: "<html>oops</html>", None, "zones")


@pytest.mark.parametrize("second_page, expected", [
    ({"body": requests.exceptions.ConnectionError("reset")}, NetworkError),
    ({"body": "{not json", "status": 200, "content_type": "application/json"}, TransportError),
])
@responses.activate
def test_zones_list_all_propagates_transport_failure_on_later_page(second_page, expected):
    responses.add(
        responses.GET,
        f"{BASE}/zones",
        json={"zones": [{"id": "1"}], "nextId": "2"},
        status=200,
        match=[matchers.query_param_matcher({"maxItems": "1"})],
    )
    responses.add(
        responses.GET,
        f"{BASE}/zones",
        match=[matchers.query_param_matcher({"startFrom": "2", "maxItems": "1"})],
        **second_page,
    )

    with pytest.raises(expected) as ei:
        _client().zones_list_all({"max_items": 1})
    assert not isinstance(ei.value, ApiError)
    assert len(responses.calls) == 2


@responses.activate
def test_zones_list_all_rejects_non_list_items():
    responses.add(responses.GET, f"{BASE}/zones", json={"zones": "abc"}, status=200)
    with pytest.raises(TransportError):
        _client().zones_list_all()


@responses.activate
def test_single_page_listings_reject_non_list_items():
    responses.add(responses.GET, f"{BASE}/zones", json={"zones": {"id": "1"}}, status=200)
    responses.add(responses.GET, f"{BASE}/zones/123/recordsets", json={"recordSets": "rs1"}, status=200)
    c = _client()
    with pytest.raises(TransportError):
        c.zones()
    with pytest.raises(TransportError):
        c.record_sets("123")


def test_iter_pages_validates_when_called():
    calls = []
    with pytest.raises(ValidationError):
        iter_pages(lambda f: calls.append(f) or {}, {"max_items": 0})
    assert calls == []


def test_list_all_stops_on_repeated_cursor():
    calls = []

    def fetch_page(page_filter):
        calls.append(page_filter.get("start_from"))
        return {"zones": [{"id": "x"}], "nextId": "same"}

    with pytest.raises(TransportError):
        list_all(fetch_page, {"max_items": 1}, "zones")
    assert calls == [None, "same"]
