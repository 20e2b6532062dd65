import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from snippet_runner.core.errors import ExecutionError, UnsupportedLanguageError
from snippet_runner.core.execute import run_execution
from snippet_runner.core.languages import language_table
from snippet_runner.core.ports.executor import CodeExecutor
from snippet_runner.models import ExecutionResult

console = Console()


def _get_executor() -> CodeExecutor:
    from snippet_runner.config import get_settings
    from snippet_runner.execution.remote import RemoteExecutionClient

    return RemoteExecutionClient.from_settings(get_settings())


def execute(
    path: Annotated[Path, typer.Argument(help="File containing the source code.")],
    language: Annotated[str, typer.Option(help="Language label, e.g. Python.")],
    stdin: Annotated[str | None, typer.Option(help="Standard input for the program.")] = None,
    timeout: Annotated[float | None, typer.Option(help="Seconds to wait for a result.")] = None,
) -> None:
    """Run a source file on the remote execution service and print its output."""
    executor = _get_executor()
    source_code = path.read_text(encoding="utf-8")

    async def _run() -> ExecutionResult:
        try:
            return await run_execution(executor, language, source_code, stdin, timeout=timeout)
        finally:
            await executor.aclose()

    try:
        result = asyncio.run(_run())
    except (UnsupportedLanguageError, ExecutionError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc

    if result.status:
        console.print(f"[dim]status: {result.status}[/dim]")
    if result.stdout:
        console.print(result.stdout, end="", markup=False, highlight=False)
    for error_output in (result.compile_output, result.stderr):
        if error_output:
            console.print(error_output, end="", style="red", markup=False, highlight=False)


def languages() -> None:
    """List the language labels accepted by ``execute``."""
    table = Table(show_lines=False)
    table.add_column("language")
    table.add_column("id")
    for label, language_id in language_table():
        table.add_row(label, str(language_id))
    console.print(table)
