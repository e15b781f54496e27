import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from import_attr_migrator.core.ast import dump_tree
from import_attr_migrator.core.batch import run_migration
from import_attr_migrator.core.discovery import expand_paths
from import_attr_migrator.core.languages import Dialect, normalize_dialect, parse_extensions, resolve_dialect
from import_attr_migrator.core.migrate import migrate_file
from import_attr_migrator.settings import Settings, get_settings

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[red]error:[/red] {escape(message)}")
    return typer.Exit(1)


def _load_settings() -> Settings:
    try:
        return get_settings()
    except ValueError as exc:
        raise _fail(str(exc)) from None


def _resolve_language(language: str | None) -> Dialect | None:
    if language is None:
        return None
    try:
        return normalize_dialect(language)
    except ValueError as exc:
        raise _fail(str(exc)) from None


def _print_to_stdout(files: list[Path], dialect: Dialect | None) -> None:
    for path in files:
        try:
            result = migrate_file(path, dialect)
        except (OSError, ValueError) as exc:
            err_console.print(f"[yellow]WARN:[/yellow] skipping {escape(str(path))}: {escape(str(exc))}")
            continue
        if result.replacements:
            typer.echo(result.output, nl=False)


def migrate(
    paths: Annotated[list[str], typer.Argument(help="Files or directories to migrate.")],
    write: Annotated[bool, typer.Option("--write", "-w", help="Write result back to source files.")] = False,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="Show which files would change without modifying them.")
    ] = False,
    ext: Annotated[str | None, typer.Option("--ext", help="Comma-separated file extensions to process.")] = None,
    recursive: Annotated[bool, typer.Option("--recursive/--no-recursive", help="Recurse into directories.")] = True,
    language: Annotated[
        str | None, typer.Option(help="Force a dialect (javascript, typescript, tsx) for every file.")
    ] = None,
) -> None:
    """Rewrite `assert { ... }` import attributes to `with { ... }`.

    Without --write or --dry-run the migrated source of each changed file is printed to stdout.
    """
    settings = _load_settings()
    dialect = _resolve_language(language)
    extensions = parse_extensions(ext) if ext else settings.extensions

    try:
        files = expand_paths(paths, extensions, recursive=recursive, skip_dirs=settings.skip_dirs)
    except FileNotFoundError as exc:
        raise _fail(str(exc)) from None

    if not files:
        err_console.print("no matching files found")
        return

    if not write and not dry_run:
        _print_to_stdout(files, dialect)
        return

    outcomes = asyncio.run(
        run_migration(files, write=write and not dry_run, dialect=dialect, concurrency=settings.concurrency)
    )

    total_files = 0
    total_replacements = 0
    for outcome in outcomes:
        if outcome.status == "skipped":
            err_console.print(f"[yellow]WARN:[/yellow] skipping {escape(outcome.path)}: {escape(outcome.error or '')}")
            continue
        if outcome.status == "unchanged":
            continue
        total_files += 1
        total_replacements += outcome.replacements
        if dry_run:
            console.print(f"  {escape(outcome.path)} ({outcome.replacements} replacement(s))")
        else:
            console.print(f"  [green]✓[/green] {escape(outcome.path)} ({outcome.replacements} replacement(s))")

    err_console.print(f"\n{total_files} file(s) with {total_replacements} total replacement(s)")


def dump(
    path: Annotated[Path, typer.Argument(help="Source file to parse.")],
    language: Annotated[str | None, typer.Option(help="Dialect to parse with (javascript, typescript, tsx).")] = None,
) -> None:
    """Dump the parsed S-expression tree of a file."""
    try:
        source = path.read_bytes()
        dialect = resolve_dialect(language, path)
        sexp = dump_tree(source, dialect)
    except (OSError, ValueError) as exc:
        raise _fail(f"parsing {path}: {exc}") from None
    typer.echo(sexp)
