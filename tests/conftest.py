"""Shared fixtures and helpers for tests."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest

from flight_portal.http.client import HttpxTransport
from flight_portal.http.memory import InMemoryTransport

_REPO_ROOT = Path(__file__).parent.parent

BASE_URL = "http://portal.test/api"


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


Handler = Callable[[httpx.Request], httpx.Response]


def make_httpx_transport(handler: Handler, timeout: float = 10.0) -> HttpxTransport:
    """Build an ``HttpxTransport`` whose requests are answered by ``handler``."""
    client = httpx.AsyncClient(
        base_url=BASE_URL,
        timeout=httpx.Timeout(timeout),
        transport=httpx.MockTransport(handler),
    )
    return HttpxTransport(client)


class RecordingHandler:
    """MockTransport handler replying with a fixed response and keeping the requests."""

    def __init__(self, status_code: int = 200, json: Any = None, content: bytes | None = None) -> None:
        self.status_code = status_code
        self.json = json
        self.content = content
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        if self.json is None:
            return httpx.Response(self.status_code)
        return httpx.Response(self.status_code, json=self.json)


@pytest.fixture
def memory_transport() -> InMemoryTransport:
    return InMemoryTransport()


@pytest.fixture
def chart_entry() -> dict[str, Any]:
    """A chart index entry as served by the chart provider."""
    return {
        "id": "KSEA-10-9",
        "icao_airport_identifier": "KSEA",
        "type_code": "AP",
        "category": "APT",
        "index_number": "10-9",
        "name": "AIRPORT",
        "revision_date": "2026-09-05",
        "is_georeferenced": True,
        "width": 1700,
        "height": 2200,
        "bounding_boxes": {
            "planview": {
                "pixels": {"x1": 60, "y1": 300, "x2": 1640, "y2": 2000},
                "latlng": {"lng1": -122.33, "lat1": 47.42, "lng2": -122.28, "lat2": 47.47},
            },
            "minimums": {"pixels": {"x1": 0, "y1": 0, "x2": 0, "y2": 0}},
            "header": {"pixels": {"x1": 60, "y1": 40, "x2": 1640, "y2": 280}},
            "insets": [],
        },
        "procedures": [],
        "runways": ["16L", "16C", "16R", "34L", "34C", "34R"],
        "image_day": "KSEA_10-9_D.png",
        "image_night": "KSEA_10-9_N.png",
        "thumb_day": "KSEA_10-9_D_T.png",
        "thumb_night": "KSEA_10-9_N_T.png",
        "image_day_url": "https://charts.api-v2.navigraph.com/charts/KSEA/KSEA_10-9_D.png",
        "image_night_url": "https://charts.api-v2.navigraph.com/charts/KSEA/KSEA_10-9_N.png",
        "thumb_day_url": "https://charts.api-v2.navigraph.com/charts/KSEA/KSEA_10-9_D_T.png",
        "thumb_night_url": "https://charts.api-v2.navigraph.com/charts/KSEA/KSEA_10-9_N_T.png",
        "dark_mode": True,
    }
