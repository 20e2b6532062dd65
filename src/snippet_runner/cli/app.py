import typer

from snippet_runner.cli.db import db_app
from snippet_runner.cli.execute import execute, languages
from snippet_runner.cli.serve import serve
from snippet_runner.cli.snippets import snippets_app

app = typer.Typer(
    name="snippet-runner",
    help="Store code snippets and run them on a remote execution service.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.add_typer(db_app, name="db")
app.add_typer(snippets_app, name="snippets")
app.command("serve")(serve)
app.command("execute")(execute)
app.command("languages")(languages)


def main() -> None:
    app()
