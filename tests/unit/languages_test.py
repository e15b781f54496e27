"""Unit tests for dialect resolution and extension parsing."""

from pathlib import Path

import pytest

from import_attr_migrator.core.languages import (
    Dialect,
    detect_dialect_from_path,
    normalize_dialect,
    parse_extensions,
    resolve_dialect,
)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("javascript", Dialect.JAVASCRIPT),
        ("JS", Dialect.JAVASCRIPT),
        (" jsx ", Dialect.JAVASCRIPT),
        ("ts", Dialect.TYPESCRIPT),
        ("TypeScript", Dialect.TYPESCRIPT),
        ("tsx", Dialect.TSX),
        (Dialect.TSX, Dialect.TSX),
    ],
)
def test_normalize_dialect(name: str, expected: Dialect) -> None:
    assert normalize_dialect(name) is expected


def test_normalize_dialect_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="Unsupported language 'python'"):
        normalize_dialect("python")


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("a.js", Dialect.JAVASCRIPT),
        ("a.jsx", Dialect.JAVASCRIPT),
        ("a.mjs", Dialect.JAVASCRIPT),
        ("a.ts", Dialect.TYPESCRIPT),
        ("a.mts", Dialect.TYPESCRIPT),
        ("a.TSX", Dialect.TSX),
        ("a.vue", Dialect.JAVASCRIPT),
    ],
)
def test_detect_dialect_from_path(filename: str, expected: Dialect) -> None:
    assert detect_dialect_from_path(Path(filename)) is expected


def test_resolve_dialect_prefers_explicit_language() -> None:
    assert resolve_dialect("tsx", Path("a.js")) is Dialect.TSX
    assert resolve_dialect(None, Path("a.ts")) is Dialect.TYPESCRIPT


def test_resolve_dialect_requires_some_input() -> None:
    with pytest.raises(ValueError):
        resolve_dialect(None, None)


def test_parse_extensions() -> None:
    assert parse_extensions(".js, ts,,  .tsx ,") == frozenset({".js", ".ts", ".tsx"})
    assert parse_extensions("") == frozenset()
