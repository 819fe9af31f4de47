import logging
from typing import Annotated

import typer

from flight_portal.cli.charts import charts_app
from flight_portal.cli.portal import audits, metar, send_code

app = typer.Typer(
    name="flight-portal",
    help="Flight portal CLI — query charts, weather and audit logs from the portal backend.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log HTTP requests.")] = False,
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


app.command("metar")(metar)
app.command("audits")(audits)
app.command("send-code")(send_code)
app.add_typer(charts_app, name="charts")


def main() -> None:
    app()
