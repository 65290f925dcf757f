"""Management commands for the architecture showcase."""

from __future__ import annotations

import logging
from typing import Optional

import click

from showcase.core.config import SERVICE_PORTS
from showcase.microservices import SERVICE_FACTORIES
from showcase.patterns import DEMOS as PATTERN_DEMOS
from showcase.solid import DEMOS as SOLID_DEMOS

logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

DEMOS = {**SOLID_DEMOS, **PATTERN_DEMOS}


@click.group()
def cli() -> None:
    """Entry point for management commands."""


@cli.command("init-db")
@click.option("--reset", is_flag=True, help="Drop every table before creating it.")
def init_db(reset: bool) -> None:
    """Create the task, product and order tables."""
    from showcase.db.session import create_tables, drop_tables, get_engine

    if reset:
        drop_tables()
        logging.info("Dropped all tables.")
    create_tables()
    logging.info(
        "Tables ready on %s", get_engine().url.render_as_string(hide_password=True)
    )


@cli.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=5000, show_default=True, type=int)
@click.option("--debug", is_flag=True)
def serve(host: str, port: int, debug: bool) -> None:
    """Run the task, product and order APIs with the development server."""
    from showcase.main import create_app

    app = create_app()
    app.run(host=host, port=port, debug=debug)


@cli.command("microservice")
@click.argument("name", type=click.Choice(sorted(SERVICE_FACTORIES)))
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=None, type=int, help="Defaults to the service's port.")
def microservice(name: str, host: str, port: Optional[int]) -> None:
    """Run one microservice (or the gateway) on its own port."""
    app = SERVICE_FACTORIES[name]()
    port = port or SERVICE_PORTS[name]
    logging.info("Starting %s service on %s:%s", name, host, port)
    app.run(host=host, port=port)


@cli.command("demo")
@click.argument("name", required=False)
@click.option("--list", "list_only", is_flag=True, help="List the available demos.")
def demo(name: Optional[str], list_only: bool) -> None:
    """Print a SOLID principle or design pattern demo (all of them by default)."""
    if list_only:
        for key in DEMOS:
            click.echo(key)
        return

    if name is None:
        selected = list(DEMOS)
    elif name in DEMOS:
        selected = [name]
    else:
        raise click.ClickException(
            f"Unknown demo '{name}'. Use --list to see the available demos."
        )

    for key in selected:
        for line in DEMOS[key]():
            click.echo(line)
        click.echo("")


if __name__ == "__main__":
    cli()
