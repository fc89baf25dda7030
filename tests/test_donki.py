from datetime import date

import httpx
import pytest

from solarflare3d import donki
from solarflare3d.donki import (
    FlareFetchError,
    default_start_date,
    fetch_flares,
    flare_window,
    run,
)
from solarflare3d.models import FlareQuery
from solarflare3d.state import apply_fetch_error, apply_fetch_result, begin_fetch, initial_state

_QUERY = FlareQuery(start_date=date(2024, 5, 10), end_date=date(2024, 5, 17))


def _stub_get(monkeypatch, response_factory):
    calls = []

    def fake_get(url, params=None, timeout=None):
        calls.append({"url": url, "params": params, "timeout": timeout})
        return response_factory(httpx.Request("GET", url, params=params))

    monkeypatch.setattr(donki.httpx, "get", fake_get)
    return calls


def test_flare_window_spans_seven_days():
    assert flare_window(date(2024, 2, 26)) == FlareQuery(date(2024, 2, 26), date(2024, 3, 4))


def test_default_start_date_is_one_week_back():
    assert default_start_date(date(2024, 5, 17)) == date(2024, 5, 10)


def test_fetch_sends_window_and_key(monkeypatch, donki_payload):
    monkeypatch.setenv("NASA_API_KEY", "test-key")
    calls = _stub_get(monkeypatch, lambda req: httpx.Response(200, json=donki_payload, request=req))

    flares = fetch_flares(_QUERY)

    assert len(flares) == 3
    assert calls[0]["url"].endswith("/FLR")
    assert calls[0]["params"] == {
        "startDate": "2024-05-10",
        "endDate": "2024-05-17",
        "api_key": "test-key",
    }


def test_fetch_defaults_to_demo_key(monkeypatch):
    monkeypatch.delenv("NASA_API_KEY", raising=False)
    calls = _stub_get(monkeypatch, lambda req: httpx.Response(200, json=[], request=req))
    fetch_flares(_QUERY)
    assert calls[0]["params"]["api_key"] == "DEMO_KEY"


def test_fetch_empty_array(monkeypatch):
    _stub_get(monkeypatch, lambda req: httpx.Response(200, json=[], request=req))
    assert fetch_flares(_QUERY) == ()


def test_fetch_empty_body(monkeypatch):
    _stub_get(monkeypatch, lambda req: httpx.Response(200, content=b"", request=req))
    assert fetch_flares(_QUERY) == ()


def test_fetch_http_error_carries_status(monkeypatch):
    _stub_get(monkeypatch, lambda req: httpx.Response(503, text="busy", request=req))
    with pytest.raises(FlareFetchError) as exc_info:
        fetch_flares(_QUERY)
    assert exc_info.value.status == 503
    assert str(exc_info.value) == "HTTP error! status: 503"


def test_fetch_transport_error(monkeypatch):
    def boom(req):
        raise httpx.ConnectError("connection refused", request=req)

    _stub_get(monkeypatch, boom)
    with pytest.raises(FlareFetchError) as exc_info:
        fetch_flares(_QUERY)
    assert exc_info.value.status is None


def test_fetch_rejects_non_array_payload(monkeypatch):
    _stub_get(
        monkeypatch,
        lambda req: httpx.Response(200, json={"error": "nope"}, request=req),
    )
    with pytest.raises(FlareFetchError):
        fetch_flares(_QUERY)


def test_run_returns_view_of_top_placeable_flare(monkeypatch, donki_payload):
    _stub_get(monkeypatch, lambda req: httpx.Response(200, json=donki_payload, request=req))
    view = run(_QUERY)
    # X3.4 has no source location, so the X8.7 at the west limb wins
    assert view.flare.class_type == "X8.7"
    assert view.position is not None
    assert view.position.x < 0
    assert view.color == "#ff0000"


def test_run_empty_window(monkeypatch):
    _stub_get(monkeypatch, lambda req: httpx.Response(200, json=[], request=req))
    view = run(_QUERY)
    assert view.flare is None
    assert view.position is None


def test_fetch_skips_null_instrument_entries(monkeypatch):
    payload = [
        {
            "flrID": "a",
            "classType": "M1",
            "sourceLocation": "N1E1",
            "instruments": [None, {"displayName": "SDO: AIA 131"}],
            "linkedEvents": [None],
        }
    ]
    _stub_get(monkeypatch, lambda req: httpx.Response(200, json=payload, request=req))
    (flare,) = fetch_flares(_QUERY)
    assert [i.display_name for i in flare.instruments] == ["SDO: AIA 131"]
    assert flare.linked_events == ()


def test_fetch_malformed_record_becomes_fetch_error(monkeypatch):
    payload = [{"flrID": "a", "classType": "M1", "linkedEvents": 5}]
    _stub_get(monkeypatch, lambda req: httpx.Response(200, json=payload, request=req))
    with pytest.raises(FlareFetchError) as exc_info:
        fetch_flares(_QUERY)
    assert exc_info.value.status == 200
    assert str(exc_info.value).startswith("Unexpected DONKI payload")


def test_malformed_payload_leaves_state_settled(monkeypatch, flare_factory):
    shown = flare_factory()
    state = begin_fetch(initial_state(date(2024, 5, 1)), date(2024, 5, 1))
    state = apply_fetch_result(state, state.generation, [shown])

    _stub_get(
        monkeypatch,
        lambda req: httpx.Response(200, json=[{"instruments": 7}], request=req),
    )
    state = begin_fetch(state, date(2024, 5, 8))
    try:
        fetch_flares(flare_window(state.start_date))
    except FlareFetchError as e:
        state = apply_fetch_error(state, state.generation, str(e))

    assert not state.loading
    assert state.error is not None
    assert state.flare is shown
