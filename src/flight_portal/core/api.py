"""Typed operations against the portal backend.

Each operation issues exactly one request through an ``HttpTransport`` and
decodes the body into the declared model. A missing body is returned as
``None`` (or ``False`` for ``send_email_code``); transport errors and
validation errors propagate to the caller unchanged.
"""

from typing import Any

from pydantic import TypeAdapter

from flight_portal.core.ports.transport import HttpTransport
from flight_portal.models import (
    AirportChartsIndexResponse,
    AuditLogModel,
    EmailCodeRequest,
    PageDataResponse,
)

_METAR_ADAPTER = TypeAdapter(list[str])

NAVIGRAPH_CHARTS_URL = "https://charts.api-v2.navigraph.com/charts"
PROXY_BINARY_TIMEOUT = 30.0


async def get_page_data(
    transport: HttpTransport,
    url: str,
    page: int,
    page_size: int,
    item_type: Any = AuditLogModel,
) -> PageDataResponse[Any] | None:
    response = await transport.get(url, params={"page_number": page, "page_size": page_size})
    if response.data is None:
        return None
    return PageDataResponse[item_type].model_validate(response.data)  # type: ignore[valid-type]


def is_email_code_accepted(status_code: int, body: Any, email: str) -> bool:
    """Return True only for a 200 response echoing back the requested email."""
    return status_code == 200 and isinstance(body, dict) and body.get("email") == email


async def send_email_code(transport: HttpTransport, email: str, cid: int) -> bool:
    payload = EmailCodeRequest(email=email, cid=cid)
    response = await transport.post("/codes", json=payload.model_dump())
    return is_email_code_accepted(response.status_code, response.data, email)


async def get_metar(transport: HttpTransport, icao: str) -> list[str] | None:
    # icao is forwarded as-is; the backend rejects malformed codes.
    response = await transport.get("/metar", params={"icao": icao})
    if response.data is None:
        return None
    return _METAR_ADAPTER.validate_python(response.data)


async def send_proxy_request(transport: HttpTransport, url: str, binary: bool = False) -> Any:
    """Relay a GET for ``url`` through the backend's ``/charts`` proxy.

    The backend fetches the upstream resource on our behalf so that chart
    providers without CORS headers stay reachable. With ``binary`` set the body
    is returned as raw bytes and the request gets a longer timeout.
    """
    # url is interpolated unescaped; the backend decides what it will relay.
    if binary:
        response = await transport.get(f"/charts/{url}", binary=True, timeout=PROXY_BINARY_TIMEOUT)
    else:
        response = await transport.get(f"/charts/{url}")
    return response.data


async def get_airport_charts_index(transport: HttpTransport, icao: str) -> AirportChartsIndexResponse:
    # The chart provider only matches upper-case identifiers.
    data = await send_proxy_request(transport, f"{NAVIGRAPH_CHARTS_URL}/{icao.upper()}?version=STD")
    return AirportChartsIndexResponse.model_validate(data)


async def get_audit_logs(transport: HttpTransport, page: int, page_size: int) -> PageDataResponse[Any] | None:
    return await get_page_data(transport, "/audits", page, page_size, AuditLogModel)
