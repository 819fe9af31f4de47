import json
from pathlib import Path
from typing import Annotated

import typer

from flight_portal.cli.common import console, render_table, run_with_transport
from flight_portal.core.api import get_airport_charts_index, send_proxy_request

charts_app = typer.Typer(help="Browse airport charts through the backend proxy.")


@charts_app.command("index")
def index(
    icao: Annotated[str, typer.Argument(help="ICAO airport identifier (any case).")],
) -> None:
    """List the charts published for an airport."""
    result = run_with_transport(lambda transport: get_airport_charts_index(transport, icao))
    rows = [(c.id, c.type_code, c.index_number, c.name, c.revision_date) for c in result.charts]
    render_table(["id", "type_code", "index_number", "name", "revision_date"], rows)
    console.print(f"({len(rows)} charts)")


@charts_app.command("fetch")
def fetch(
    url: Annotated[str, typer.Argument(help="Upstream URL to relay through the proxy.")],
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Write the raw body to this file.")] = None,
) -> None:
    """Fetch an upstream resource through the chart proxy."""
    if output is None:
        body = run_with_transport(lambda transport: send_proxy_request(transport, url))
        console.print_json(json.dumps(body))
        return
    data = run_with_transport(lambda transport: send_proxy_request(transport, url, binary=True))
    output.write_bytes(data)
    console.print(f"[green]Wrote[/green] {len(data)} bytes to {output}")
