from typing import Annotated

import typer
from rich.console import Console

from snippet_runner.config import get_settings
from snippet_runner.logging_setup import configure_logging

console = Console()


def serve(
    host: Annotated[str, typer.Option(help="Interface to bind.")] = "127.0.0.1",
    port: Annotated[int, typer.Option(help="Port to listen on.")] = 3001,
) -> None:
    """Start the FastAPI REST API server."""
    import uvicorn

    from snippet_runner.api.app import create_app

    settings = get_settings()
    configure_logging(settings.log_level)
    app = create_app(settings)
    console.print(f"[green]Starting API server on {host}:{port}[/green]")
    uvicorn.run(app, host=host, port=port, log_config=None)
