"""Migrate many files concurrently, isolating failures per file."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from import_attr_migrator.core.languages import Dialect
from import_attr_migrator.core.migrate import migrate_file
from import_attr_migrator.models import FileOutcome, MigrationResult

logger = logging.getLogger(__name__)

DEFAULT_CONCURRENCY = 8


def _write_preserving_mode(path: Path, output: bytes) -> None:
    mode = path.stat().st_mode
    path.write_bytes(output)
    path.chmod(mode)


def migrate_one(path: Path, write: bool = False, dialect: str | Dialect | None = None) -> FileOutcome:
    try:
        result: MigrationResult = migrate_file(path, dialect)
    except (OSError, ValueError) as exc:
        logger.warning("Skipping %s: %s", path, exc)
        return FileOutcome(path=str(path), status="skipped", error=str(exc))

    if result.replacements == 0:
        return FileOutcome(path=str(path), status="unchanged")

    if write:
        try:
            _write_preserving_mode(path, result.output)
        except OSError as exc:
            logger.error("Failed writing %s: %s", path, exc)
            return FileOutcome(path=str(path), status="skipped", replacements=result.replacements, error=str(exc))
        logger.info("Rewrote %s (%d replacement(s))", path, result.replacements)

    return FileOutcome(path=str(path), status="changed", replacements=result.replacements)


async def run_migration(
    paths: Sequence[str | Path],
    write: bool = False,
    dialect: str | Dialect | None = None,
    concurrency: int = DEFAULT_CONCURRENCY,
) -> list[FileOutcome]:
    """Migrate ``paths`` in worker threads; outcomes are returned in input order."""
    if concurrency < 1:
        raise ValueError(f"concurrency must be at least 1, got {concurrency}")
    semaphore = asyncio.Semaphore(concurrency)

    async def _run(path: Path) -> FileOutcome:
        async with semaphore:
            return await asyncio.to_thread(migrate_one, path, write, dialect)

    return list(await asyncio.gather(*(_run(Path(p)) for p in paths)))
