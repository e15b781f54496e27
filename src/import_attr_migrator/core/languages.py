from enum import Enum
from pathlib import Path


class Dialect(str, Enum):
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    TSX = "tsx"


_DIALECT_ALIASES = {
    "javascript": Dialect.JAVASCRIPT,
    "js": Dialect.JAVASCRIPT,
    "jsx": Dialect.JAVASCRIPT,
    "mjs": Dialect.JAVASCRIPT,
    "cjs": Dialect.JAVASCRIPT,
    "typescript": Dialect.TYPESCRIPT,
    "ts": Dialect.TYPESCRIPT,
    "mts": Dialect.TYPESCRIPT,
    "cts": Dialect.TYPESCRIPT,
    "tsx": Dialect.TSX,
}

# JSX is a superset the JavaScript grammar already handles.
_EXTENSION_DIALECT_MAP = {
    ".cjs": Dialect.JAVASCRIPT,
    ".js": Dialect.JAVASCRIPT,
    ".jsx": Dialect.JAVASCRIPT,
    ".mjs": Dialect.JAVASCRIPT,
    ".cts": Dialect.TYPESCRIPT,
    ".mts": Dialect.TYPESCRIPT,
    ".ts": Dialect.TYPESCRIPT,
    ".tsx": Dialect.TSX,
}

DEFAULT_EXTENSIONS = ".js,.jsx,.ts,.tsx,.mjs,.mts"


def normalize_dialect(language: str | Dialect) -> Dialect:
    if isinstance(language, Dialect):
        return language
    normalized = language.strip().lower()
    if normalized not in _DIALECT_ALIASES:
        raise ValueError(f"Unsupported language '{language}'. Supported: {sorted(d.value for d in Dialect)}")
    return _DIALECT_ALIASES[normalized]


def detect_dialect_from_path(file_path: Path) -> Dialect:
    return _EXTENSION_DIALECT_MAP.get(file_path.suffix.lower(), Dialect.JAVASCRIPT)


def resolve_dialect(language: str | Dialect | None, file_path: Path | None) -> Dialect:
    if language:
        return normalize_dialect(language)
    if file_path:
        return detect_dialect_from_path(file_path)
    raise ValueError("Language must be provided when no file path is available.")


def parse_extensions(value: str) -> frozenset[str]:
    """Split a comma-separated extension list, adding the leading dot where missing."""
    extensions = set()
    for raw in value.split(","):
        ext = raw.strip()
        if not ext:
            continue
        if not ext.startswith("."):
            ext = "." + ext
        extensions.add(ext)
    return frozenset(extensions)
