from typing import Annotated

import typer

from flight_portal.cli.common import console, render_table, run_with_transport
from flight_portal.core.api import get_audit_logs, get_metar, send_email_code


def metar(
    icao: Annotated[str, typer.Argument(help="ICAO airport identifier.")],
) -> None:
    """Show the raw METAR reports for an airport."""
    reports = run_with_transport(lambda transport: get_metar(transport, icao))
    if not reports:
        console.print(f"[yellow]No METAR for {icao}[/yellow]")
        return
    for line in reports:
        console.print(line)


def audits(
    page: Annotated[int, typer.Option(min=1, help="1-based page number.")] = 1,
    page_size: Annotated[int, typer.Option(min=1, help="Entries per page.")] = 20,
) -> None:
    """List one page of audit logs."""
    result = run_with_transport(lambda transport: get_audit_logs(transport, page, page_size))
    if result is None:
        console.print("[yellow]No audit logs[/yellow]")
        return
    headers = sorted({key for item in result.items for key in item})
    render_table(headers, [[item.get(h, "") for h in headers] for item in result.items])
    console.print(f"(page {result.page}, {len(result.items)} of {result.total})")


def send_code(
    email: Annotated[str, typer.Argument(help="Address to send the verification code to.")],
    cid: Annotated[int, typer.Argument(help="Account CID.")],
) -> None:
    """Request an email verification code."""
    if run_with_transport(lambda transport: send_email_code(transport, email, cid)):
        console.print(f"[green]Verification code sent[/green] to {email}")
    else:
        console.print(f"[red]Verification code was not sent[/red] to {email}")
        raise typer.Exit(1)
