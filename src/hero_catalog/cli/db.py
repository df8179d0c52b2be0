"""MongoDB maintenance commands."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from hero_catalog.core.errors import StoreUnavailableError
from hero_catalog.core.ports.store import HeroStore
from hero_catalog.db.engine import get_client, get_database_name
from hero_catalog.db.mongo import MongoHeroStore

db_app = typer.Typer(help="Inspect and prepare the MongoDB database.")
console = Console()


def _get_store() -> HeroStore:
    return MongoHeroStore(get_client(), get_database_name())


async def _ping(store: HeroStore) -> bool:
    try:
        return await store.ping()
    finally:
        await store.dispose()


async def _ensure_indexes(store: HeroStore) -> None:
    try:
        await store.ensure_indexes()
    finally:
        await store.dispose()


@db_app.command("ping")
def ping() -> None:
    """Check that MongoDB is reachable."""
    if not asyncio.run(_ping(_get_store())):
        console.print(f"[red]MongoDB database '{get_database_name()}' is not reachable.[/red]")
        raise typer.Exit(1)
    console.print(f"[green]MongoDB database '{get_database_name()}' is reachable.[/green]")


@db_app.command("ensure-indexes")
def ensure_indexes() -> None:
    """Create the indexes used by hero listing and comment paging."""
    try:
        asyncio.run(_ensure_indexes(_get_store()))
    except StoreUnavailableError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc
    console.print("[green]Indexes are in place.[/green]")
