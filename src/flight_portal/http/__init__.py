from flight_portal.http.client import HttpxTransport
from flight_portal.http.engine import get_client
from flight_portal.http.memory import InMemoryRequest, InMemoryTransport

__all__ = [
    "HttpxTransport",
    "InMemoryRequest",
    "InMemoryTransport",
    "get_client",
]
