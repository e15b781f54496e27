import os
from dataclasses import dataclass

from import_attr_migrator.core.batch import DEFAULT_CONCURRENCY
from import_attr_migrator.core.discovery import DEFAULT_SKIP_DIRS
from import_attr_migrator.core.languages import DEFAULT_EXTENSIONS, parse_extensions


@dataclass(frozen=True)
class Settings:
    extensions: frozenset[str]
    skip_dirs: frozenset[str]
    concurrency: int


def _split(value: str) -> frozenset[str]:
    return frozenset(part.strip() for part in value.split(",") if part.strip())


def _concurrency(value: str) -> int:
    try:
        concurrency = int(value)
    except ValueError:
        raise ValueError(f"IMPORT_ATTR_MIGRATOR_CONCURRENCY must be an integer, got '{value}'") from None
    if concurrency < 1:
        raise ValueError(f"IMPORT_ATTR_MIGRATOR_CONCURRENCY must be at least 1, got {concurrency}")
    return concurrency


def get_settings() -> Settings:
    return Settings(
        extensions=parse_extensions(os.getenv("IMPORT_ATTR_MIGRATOR_EXTENSIONS", DEFAULT_EXTENSIONS)),
        skip_dirs=_split(os.getenv("IMPORT_ATTR_MIGRATOR_SKIP_DIRS", ",".join(sorted(DEFAULT_SKIP_DIRS)))),
        concurrency=_concurrency(os.getenv("IMPORT_ATTR_MIGRATOR_CONCURRENCY", str(DEFAULT_CONCURRENCY))),
    )
