from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable, Coroutine, Iterable
from pathlib import Path
from typing import Any

from watchfiles import awatch

from import_attr_migrator.core.discovery import DEFAULT_SKIP_DIRS
from import_attr_migrator.core.languages import DEFAULT_EXTENSIONS, parse_extensions

logger = logging.getLogger(__name__)

_DEFAULT_WATCH_EXTENSIONS: frozenset[str] = parse_extensions(DEFAULT_EXTENSIONS)


def _is_supported_file(
    path: Path,
    extensions: frozenset[str] = _DEFAULT_WATCH_EXTENSIONS,
    skip_dirs: frozenset[str] = DEFAULT_SKIP_DIRS,
    root: Path | None = None,
) -> bool:
    if path.suffix not in extensions:
        return False
    parent = path.parent
    if root is not None and parent.is_relative_to(root):
        parent = parent.relative_to(root)
    return not any(part in skip_dirs or part.startswith(".") for part in parent.parts)


class WatchfilesWatcher:
    """Watch a directory for source-file changes and trigger a callback.

    Implements the ``FileWatcherPort`` protocol.
    """

    def __init__(
        self,
        directory: str | Path,
        on_change: Callable[[set[Path]], Coroutine[Any, Any, None]],
        extensions: Iterable[str] = _DEFAULT_WATCH_EXTENSIONS,
        skip_dirs: frozenset[str] = DEFAULT_SKIP_DIRS,
    ) -> None:
        self._directory = Path(directory)
        self._root = self._directory.resolve()
        self._on_change = on_change
        self._extensions = frozenset(extensions)
        self._skip_dirs = skip_dirs
        self._task: asyncio.Task[None] | None = None

    async def start(self) -> None:
        if self._task is not None:
            return
        self._task = asyncio.create_task(self._watch())
        logger.info("Watcher started for %s", self._directory)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("Watcher stopped for %s", self._directory)

    async def _watch(self) -> None:
        async for changes in awatch(self._directory):
            paths = {
                Path(p)
                for _, p in changes
                if _is_supported_file(Path(p), self._extensions, self._skip_dirs, self._root)
            }
            if paths:
                logger.info("Detected changes in %d file(s)", len(paths))
                try:
                    await self._on_change(paths)
                except Exception:
                    logger.exception("Error in watcher callback")
