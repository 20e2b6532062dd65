import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from snippet_runner.core.errors import SnippetValidationError, StorageError
from snippet_runner.core.ports.store import SnippetStore
from snippet_runner.core.snippets import create_snippet, list_snippets
from snippet_runner.models import SnippetPage

snippets_app = typer.Typer(help="Add and list stored snippets.")
console = Console()


def _get_store() -> SnippetStore:
    from snippet_runner.config import get_settings
    from snippet_runner.db.engine import get_engine
    from snippet_runner.db.postgres import PostgresSnippetStore

    return PostgresSnippetStore(get_engine(get_settings()))


def _render_page(result: SnippetPage) -> None:
    table = Table(show_lines=False)
    for header in ("id", "created_at", "username", "language", "source_code"):
        table.add_column(header)
    for record in result.records:
        first_line = record.source_code.splitlines()[0] if record.source_code else ""
        table.add_row(str(record.id), record.created_at.isoformat(), record.username, record.language, first_line)
    console.print(table)
    console.print(
        f"page {result.current_page} of {result.total_pages} ({result.total_items} snippets)",
    )


@snippets_app.command("add")
def add(
    path: Annotated[Path, typer.Argument(help="File containing the source code.")],
    username: Annotated[str, typer.Option(help="Author of the snippet.")],
    language: Annotated[str, typer.Option(help="Language label, e.g. Python.")],
    stdin: Annotated[str | None, typer.Option(help="Standard input stored with the snippet.")] = None,
) -> None:
    """Store a snippet read from PATH."""
    store = _get_store()
    source_code = path.read_text(encoding="utf-8")

    async def _run() -> None:
        try:
            snippet = await create_snippet(
                store,
                {"username": username, "language": language, "source_code": source_code, "stdin": stdin},
            )
            console.print(f"[green]Stored[/green] snippet {snippet.id} at {snippet.created_at.isoformat()}")
        finally:
            await store.dispose()

    try:
        asyncio.run(_run())
    except (SnippetValidationError, StorageError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc


@snippets_app.command("list")
def list_(
    page: Annotated[int, typer.Option(help="Page number, starting at 1.")] = 1,
    per_page: Annotated[int, typer.Option(help="Snippets per page.")] = 10,
) -> None:
    """List stored snippets, newest first."""
    store = _get_store()

    async def _run() -> SnippetPage:
        try:
            return await list_snippets(store, page, per_page)
        finally:
            await store.dispose()

    try:
        result = asyncio.run(_run())
    except StorageError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc
    _render_page(result)
