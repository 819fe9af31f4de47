from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class TransportResponse:
    status_code: int
    data: Any


class HttpTransport(Protocol):
    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        *,
        binary: bool = False,
        timeout: float | None = None,
    ) -> TransportResponse: ...

    async def post(self, url: str, json: Any = None) -> TransportResponse: ...
