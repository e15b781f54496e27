"""Unit tests for file discovery."""

from pathlib import Path

import pytest

from import_attr_migrator.core.discovery import collect_files, expand_paths

_EXTENSIONS = frozenset({".js", ".ts"})


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    for rel in [
        "a.js",
        "b.ts",
        "notes.md",
        "sub/c.js",
        "sub/deeper/d.ts",
        "node_modules/pkg/index.js",
        "dist/bundle.js",
        ".cache/e.js",
    ]:
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("", encoding="utf-8")
    return tmp_path


def _rel(root: Path, files: list[Path]) -> list[str]:
    return [p.relative_to(root).as_posix() for p in files]


def test_collect_files_recursive(tree: Path) -> None:
    files = collect_files(tree, _EXTENSIONS)

    assert _rel(tree, files) == ["a.js", "b.ts", "sub/c.js", "sub/deeper/d.ts"]


def test_collect_files_non_recursive(tree: Path) -> None:
    assert _rel(tree, collect_files(tree, _EXTENSIONS, recursive=False)) == ["a.js", "b.ts"]


def test_collect_files_custom_skip_list(tree: Path) -> None:
    files = collect_files(tree, {".js"}, skip_dirs=frozenset({"sub"}))

    assert _rel(tree, files) == ["a.js", "dist/bundle.js", "node_modules/pkg/index.js"]


def test_hidden_root_is_still_walked(tmp_path: Path) -> None:
    root = tmp_path / ".hidden"
    root.mkdir()
    (root / "x.js").write_text("", encoding="utf-8")

    assert _rel(root, collect_files(root, _EXTENSIONS)) == ["x.js"]


def test_expand_paths_keeps_explicit_files(tree: Path) -> None:
    files = expand_paths([tree / "notes.md", tree / "sub"], _EXTENSIONS)

    assert _rel(tree, files) == ["notes.md", "sub/c.js", "sub/deeper/d.ts"]


def test_expand_paths_missing_argument(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="missing"):
        expand_paths([tmp_path / "missing"], _EXTENSIONS)
