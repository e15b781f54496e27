import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from import_attr_migrator.cli.migrate import dump, migrate
from import_attr_migrator.cli.serve import serve_app
from import_attr_migrator.cli.watch import watch

app = typer.Typer(
    name="import-attr-migrator",
    help="Migrate import assertions (assert) to import attributes (with).",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    configure_logging(verbose)


app.command("migrate")(migrate)
app.command("dump")(dump)
app.command("watch")(watch)
app.add_typer(serve_app, name="serve")


def main() -> None:
    app()
