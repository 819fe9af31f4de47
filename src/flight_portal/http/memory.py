from dataclasses import dataclass, field
from typing import Any

from flight_portal.core.ports.transport import TransportResponse


@dataclass(frozen=True)
class InMemoryRequest:
    method: str
    url: str
    params: dict[str, Any] | None = None
    json: Any = None
    binary: bool = False
    timeout: float | None = None


@dataclass
class InMemoryTransport:
    """Serves canned responses keyed by ``(method, url)`` and records every request."""

    routes: dict[tuple[str, str], TransportResponse] = field(default_factory=dict)
    requests: list[InMemoryRequest] = field(default_factory=list)

    def add_route(self, method: str, url: str, data: Any = None, status_code: int = 200) -> None:
        self.routes[(method.upper(), url)] = TransportResponse(status_code=status_code, data=data)

    def _lookup(self, method: str, url: str) -> TransportResponse:
        try:
            return self.routes[(method, url)]
        except KeyError:
            raise LookupError(f"No canned response for {method} {url}") from None

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        *,
        binary: bool = False,
        timeout: float | None = None,
    ) -> TransportResponse:
        self.requests.append(InMemoryRequest("GET", url, params=params, binary=binary, timeout=timeout))
        return self._lookup("GET", url)

    async def post(self, url: str, json: Any = None) -> TransportResponse:
        self.requests.append(InMemoryRequest("POST", url, json=json))
        return self._lookup("POST", url)
