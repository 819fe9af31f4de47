import os

import httpx

_DEFAULT_API_URL = "http://localhost:8080/api"
_DEFAULT_TIMEOUT = 10.0


def get_client() -> httpx.AsyncClient:
    base_url = os.getenv("FLIGHT_PORTAL_API_URL", _DEFAULT_API_URL)
    timeout = float(os.getenv("FLIGHT_PORTAL_TIMEOUT", str(_DEFAULT_TIMEOUT)))
    headers = {"Accept": "application/json"}
    token = os.getenv("FLIGHT_PORTAL_TOKEN")
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return httpx.AsyncClient(base_url=base_url, timeout=httpx.Timeout(timeout), headers=headers)
