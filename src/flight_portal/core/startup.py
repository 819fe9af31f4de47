"""Application startup: analytics, stores, user session, then mount.

The server configuration fetch runs in the background and its failure is
dropped. Mounting waits for the user session to finish loading, whether or
not that succeeds.
"""

import asyncio
import logging
import os
from typing import Protocol

logger = logging.getLogger(__name__)


class Analytics(Protocol):
    def init(self, project_id: str) -> None: ...

    def identify(self, custom_id: str) -> None: ...


class StateStore(Protocol):
    def init(self) -> None: ...


class ServerConfigStore(Protocol):
    async def get_config_from_server(self) -> None: ...


class UserData(Protocol):
    id: int
    cid: int


class UserSession(Protocol):
    is_login: bool
    user_data: UserData

    async def init_user(self) -> None: ...


class Mountable(Protocol):
    def mount(self, selector: str) -> None: ...


def get_project_id() -> str:
    return os.getenv("FLIGHT_PORTAL_ANALYTICS_PROJECT_ID", "")


def format_cid(cid: int) -> str:
    """Zero-pad a CID to four digits."""
    return str(cid).zfill(4)


async def _fetch_server_config(server_config: ServerConfigStore) -> None:
    try:
        await server_config.get_config_from_server()
    except Exception as exc:
        logger.debug("Ignoring server config fetch failure: %r", exc)


async def bootstrap(
    app: Mountable,
    *,
    analytics: Analytics,
    state_store: StateStore,
    server_config: ServerConfigStore,
    user_session: UserSession,
    project_id: str | None = None,
    selector: str = "#app",
) -> "asyncio.Task[None]":
    """Run the startup sequence and mount ``app``.

    ``project_id`` defaults to ``FLIGHT_PORTAL_ANALYTICS_PROJECT_ID``.
    Returns the background server config task. If loading the user session
    raises, the app is still mounted and the exception is re-raised.
    """
    analytics.init(project_id if project_id is not None else get_project_id())
    state_store.init()

    config_task = asyncio.create_task(_fetch_server_config(server_config))

    try:
        await user_session.init_user()
    finally:
        if user_session.is_login:
            user = user_session.user_data
            analytics.identify(f"{user.id}({format_cid(user.cid)})")
        logger.info("Mounting application on %s", selector)
        app.mount(selector)

    return config_task
