"""Database schema commands."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from snippet_runner.config import get_settings
from snippet_runner.db.migrations import downgrade_migrations, run_migrations

db_app = typer.Typer(help="Manage the snippet database schema.")
console = Console()


@db_app.command("upgrade")
def upgrade(
    ini: Annotated[str, typer.Option(help="Path to alembic.ini.")] = "alembic.ini",
) -> None:
    """Apply all pending migrations."""
    run_migrations(get_settings().database_url, ini_path=ini)
    console.print("[green]Database schema is up to date.[/green]")


@db_app.command("downgrade")
def downgrade(
    revision: Annotated[str, typer.Argument(help="Target revision.")] = "base",
    ini: Annotated[str, typer.Option(help="Path to alembic.ini.")] = "alembic.ini",
) -> None:
    """Revert migrations down to REVISION."""
    downgrade_migrations(get_settings().database_url, revision=revision, ini_path=ini)
    console.print(f"[green]Database schema downgraded to {revision}.[/green]")
