import logging
from typing import Annotated

import typer

from hero_catalog.cli.db import db_app
from hero_catalog.cli.serve import serve_app

app = typer.Typer(
    name="hero-catalog",
    help="Hero Catalog CLI: serve the API and manage its MongoDB collections.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.add_typer(db_app, name="db")
app.add_typer(serve_app, name="serve")


@app.callback()
def configure(
    log_level: Annotated[
        str, typer.Option("--log-level", envvar="HERO_CATALOG_LOG_LEVEL", help="Root logging level.")
    ] = "INFO",
) -> None:
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    app()
