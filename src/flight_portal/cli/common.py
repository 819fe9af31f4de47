import asyncio
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, TypeVar

import httpx
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from flight_portal.http.client import HttpxTransport

R = TypeVar("R")

console = Console()


def get_transport() -> HttpxTransport:
    from flight_portal.http.engine import get_client

    return HttpxTransport(get_client())


def render_table(headers: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    table = Table(show_lines=False)
    for h in headers:
        table.add_column(h)
    for row in rows:
        table.add_row(*(str(v) for v in row))
    console.print(table)


def run_with_transport(fn: Callable[[HttpxTransport], Awaitable[R]]) -> R:
    """Run ``fn`` against a fresh transport, exiting with status 1 on HTTP or decode errors."""
    transport = get_transport()

    async def _run() -> R:
        try:
            return await fn(transport)
        finally:
            await transport.dispose()

    try:
        return asyncio.run(_run())
    except (httpx.HTTPError, ValueError) as exc:
        console.print(f"[red]Request failed:[/red] {escape(str(exc))}")
        raise typer.Exit(1) from exc
