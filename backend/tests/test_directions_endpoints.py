# backend/tests/test_directions_endpoints.py
import httpx
import respx

from core.directions_registry import DirectionsClientRegistry
from core.exceptions import ParseError, TransportError
from fakes import StaticDirectionsClient


def test_status_lists_providers(client):
    r = client.get("/status/providers")
    assert r.status_code == 200, r.text
    j = r.json()
    assert "mapbox" in j["providers"]
    assert j["default"] == "mapbox"


def test_directions_with_display_values(client, fake_provider):
    r = client.post(
        "/directions", json={"start": "A", "destination": "B", "provider": "fake"}
    )
    assert r.status_code == 200, r.text
    data = r.json()["data"]
    assert data["start"] == "A" and data["destination"] == "B"

    routes = data["routes"]
    assert [x["formatted_duration"] for x in routes] == ["30 min", "1 hr 30 min"]
    assert [x["formatted_distance"] for x in routes] == ["10 mi", "0 mi"]
    assert len(routes[1]["legs"]) == 2
    assert fake_provider.calls == [("A", "B")]


def test_directions_requires_both_fields(client, fake_provider):
    r = client.post(
        "/directions", json={"start": "A", "destination": "  ", "provider": "fake"}
    )
    assert r.status_code == 400
    assert fake_provider.calls == []


def test_directions_unknown_provider(client):
    r = client.post(
        "/directions", json={"start": "A", "destination": "B", "provider": "nope"}
    )
    assert r.status_code == 400
    assert "not registered" in r.json()["detail"]


def test_directions_upstream_failures_map_to_502(client):
    for name, err in (
        ("down", TransportError("unreachable")),
        ("garbled", ParseError("missing legs")),
    ):
        failing = StaticDirectionsClient(error=err)
        DirectionsClientRegistry.register(name, lambda f=failing: f)
        try:
            r = client.post(
                "/directions", json={"start": "A", "destination": "B", "provider": name}
            )
            assert r.status_code == 502, r.text
        finally:
            DirectionsClientRegistry.unregister(name)


@respx.mock
def test_directions_through_mapbox(client):
    respx.get(url__startswith="https://api.mapbox.com/geocoding/v5/").mock(
        return_value=httpx.Response(200, json={"features": [{"center": [10.0, 20.0]}]})
    )
    respx.get(url__startswith="https://api.mapbox.com/directions/v5/").mock(
        return_value=httpx.Response(
            200,
            json={
                "code": "Ok",
                "routes": [{"duration": 1200, "distance": 5000, "legs": [{"summary": "l1"}]}],
            },
        )
    )
    r = client.post("/directions", json={"start": "A", "destination": "B"})
    assert r.status_code == 200, r.text
    routes = r.json()["data"]["routes"]
    assert routes[0]["formatted_duration"] == "20 min"
    assert routes[0]["formatted_distance"] == "3.1 mi"
    assert routes[0]["legs"] == [{"summary": "l1"}]
