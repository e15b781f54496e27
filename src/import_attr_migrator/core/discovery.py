import os
from collections.abc import Iterable
from pathlib import Path

DEFAULT_SKIP_DIRS = frozenset({"node_modules", "vendor", "dist", "build"})


def _is_skipped_dir(name: str, skip_dirs: frozenset[str]) -> bool:
    return name.startswith(".") or name in skip_dirs


def collect_files(
    root: str | Path,
    extensions: Iterable[str],
    recursive: bool = True,
    skip_dirs: frozenset[str] = DEFAULT_SKIP_DIRS,
) -> list[Path]:
    """Return files under ``root`` whose suffix is in ``extensions``, in sorted walk order.

    Hidden and skip-listed directories below ``root`` are not entered.
    """
    wanted = frozenset(extensions)
    files: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        if recursive:
            dirnames[:] = sorted(d for d in dirnames if not _is_skipped_dir(d, skip_dirs))
        else:
            dirnames[:] = []
        for filename in sorted(filenames):
            path = Path(dirpath) / filename
            if path.suffix in wanted:
                files.append(path)
    return files


def expand_paths(
    paths: Iterable[str | Path],
    extensions: Iterable[str],
    recursive: bool = True,
    skip_dirs: frozenset[str] = DEFAULT_SKIP_DIRS,
) -> list[Path]:
    """Expand command-line arguments into files; explicit files bypass the extension filter."""
    wanted = frozenset(extensions)
    files: list[Path] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            files.extend(collect_files(path, wanted, recursive=recursive, skip_dirs=skip_dirs))
        elif path.exists():
            files.append(path)
        else:
            raise FileNotFoundError(f"No such file or directory: {raw}")
    return files
