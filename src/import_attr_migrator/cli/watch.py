import asyncio
import contextlib
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from import_attr_migrator.core.batch import run_migration
from import_attr_migrator.core.languages import Dialect, normalize_dialect, parse_extensions
from import_attr_migrator.models import FileOutcome
from import_attr_migrator.settings import get_settings
from import_attr_migrator.watcher.watchfiles_adapter import WatchfilesWatcher

console = Console(soft_wrap=True)


async def migrate_changed(paths: set[Path], dialect: Dialect | None = None, concurrency: int = 1) -> list[FileOutcome]:
    """Rewrite changed files in place, reporting the ones that were migrated."""
    outcomes = await run_migration(sorted(paths), write=True, dialect=dialect, concurrency=concurrency)
    for outcome in outcomes:
        if outcome.status == "changed":
            console.print(f"  [green]✓[/green] {escape(outcome.path)} ({outcome.replacements} replacement(s))")
        elif outcome.status == "skipped":
            console.print(f"  [yellow]skipped[/yellow] {escape(outcome.path)}: {escape(outcome.error or '')}")
    return outcomes


def watch(
    directory: Annotated[
        Path, typer.Argument(help="Directory to watch.", exists=True, file_okay=False, dir_okay=True)
    ],
    ext: Annotated[str | None, typer.Option("--ext", help="Comma-separated file extensions to watch.")] = None,
    language: Annotated[str | None, typer.Option(help="Force a dialect for every file.")] = None,
) -> None:
    """Watch a directory and migrate files as they change."""
    try:
        settings = get_settings()
        dialect = normalize_dialect(language) if language else None
    except ValueError as exc:
        console.print(f"[red]error:[/red] {escape(str(exc))}")
        raise typer.Exit(1) from None
    extensions = parse_extensions(ext) if ext else settings.extensions

    async def _on_change(paths: set[Path]) -> None:
        await migrate_changed(paths, dialect, settings.concurrency)

    async def _run() -> None:
        watcher = WatchfilesWatcher(directory, _on_change, extensions=extensions, skip_dirs=settings.skip_dirs)
        await watcher.start()
        try:
            await asyncio.Event().wait()
        finally:
            await watcher.stop()

    console.print(f"[green]Watching[/green] {escape(str(directory))} (Ctrl+C to stop)")
    with contextlib.suppress(KeyboardInterrupt):
        asyncio.run(_run())
