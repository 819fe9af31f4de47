import logging
from typing import Any

import httpx

from flight_portal.core.ports.transport import TransportResponse

logger = logging.getLogger(__name__)


def _decode(response: httpx.Response, binary: bool) -> Any:
    if binary:
        return response.content
    if not response.content:
        return None
    return response.json()


class HttpxTransport:
    """``HttpTransport`` backed by an ``httpx.AsyncClient``.

    Non-2xx responses raise ``httpx.HTTPStatusError``. Empty bodies and JSON
    ``null`` both decode to ``None``.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        *,
        binary: bool = False,
        timeout: float | None = None,
    ) -> TransportResponse:
        logger.debug("GET %s params=%s binary=%s", url, params, binary)
        if timeout is None:
            response = await self._client.get(url, params=params)
        else:
            response = await self._client.get(url, params=params, timeout=timeout)
        response.raise_for_status()
        return TransportResponse(status_code=response.status_code, data=_decode(response, binary))

    async def post(self, url: str, json: Any = None) -> TransportResponse:
        logger.debug("POST %s", url)
        response = await self._client.post(url, json=json)
        response.raise_for_status()
        return TransportResponse(status_code=response.status_code, data=_decode(response, False))

    async def dispose(self) -> None:
        await self._client.aclose()
