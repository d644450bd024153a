# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Approved-list cache CLI commands."""

from __future__ import annotations

import asyncio

import typer

app = typer.Typer()


@app.command()
def clear() -> None:
    """Delete the cached approved list."""
    asyncio.run(_async_clear())


async def _async_clear() -> None:
    from skillgate.cache.file import FileApprovedListStore
    from skillgate.core.config import get_settings

    settings = get_settings()
    store = FileApprovedListStore(settings.cache_path)
    if await store.clear():
        typer.echo(f"Cache cleared: {settings.cache_path} removed.")
    else:
        typer.echo("Cache already empty.")


@app.command()
def show() -> None:
    """Show cache age, entry count, and freshness."""
    asyncio.run(_async_show())


async def _async_show() -> None:
    from rich.console import Console
    from rich.table import Table

    from skillgate.cache.file import FileApprovedListStore
    from skillgate.cache.manager import ApprovalCache
    from skillgate.core.config import get_settings

    settings = get_settings()
    cache = ApprovalCache(FileApprovedListStore(settings.cache_path), ttl=settings.cache_ttl)
    snapshot = await cache.load()
    if snapshot is None:
        typer.echo(f"No cache at {settings.cache_path}.")
        return

    age = cache.age(snapshot)
    console = Console()
    table = Table(title="Approved-List Cache")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Path", str(settings.cache_path))
    table.add_row("Fetched At", snapshot.fetched_at.isoformat(timespec="seconds"))
    table.add_row("Age (s)", str(int(age.total_seconds())))
    table.add_row("TTL (s)", str(settings.cache_ttl))
    table.add_row("Status", "stale" if snapshot.stale else "fresh")
    table.add_row("Entries", str(len(snapshot)))

    console.print(table)
