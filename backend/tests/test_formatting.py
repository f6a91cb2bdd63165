# backend/tests/test_formatting.py
import pytest

from core.formatting import format_distance, format_duration
from services.route_request_controller import RouteRequestController
from fakes import make_route


@pytest.mark.parametrize(
    "seconds,expected",
    [
        (0, "0 min"),
        (1, "1 min"),
        (61, "2 min"),
        (1200, "20 min"),
        (1800, "30 min"),
        (3600, "60 min"),
        (3601, "1 hr 1 min"),
        (5400, "1 hr 30 min"),
        (7199, "2 hr 0 min"),
        (7200, "2 hr 0 min"),
        (9000, "2 hr 30 min"),
    ],
)
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


def test_format_duration_is_pure():
    assert format_duration(5400) == format_duration(5400) == "1 hr 30 min"


@pytest.mark.parametrize(
    "meters,expected",
    [
        (0, "0 mi"),
        (16093.4, "10 mi"),
        (1609.344, "1 mi"),
        (2414.016, "1.5 mi"),
        (5000, "3.1 mi"),
        (2_000_000, "1,242.7 mi"),
        (1_609_344, "1,000 mi"),
    ],
)
def test_format_distance(meters, expected):
    assert format_distance(meters) == expected


def test_controller_display_helpers_delegate():
    route = make_route(duration=1800, distance=16093.4)
    assert RouteRequestController.formatted_duration(route) == "30 min"
    assert RouteRequestController.formatted_distance(route) == "10 mi"
