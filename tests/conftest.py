"""Shared fixtures and helpers for tests."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Fixture trees: hand-built nodes satisfying the SyntaxNode protocol
# ---------------------------------------------------------------------------


@dataclass(eq=False)
class FakeNode:
    type: str
    start_byte: int
    end_byte: int
    is_named: bool = True
    children: list[FakeNode] = field(default_factory=list)
    fields: dict[str, FakeNode] = field(default_factory=dict)
    parent: FakeNode | None = None

    @property
    def child_count(self) -> int:
        return len(self.children)

    def child(self, index: int) -> FakeNode | None:
        if 0 <= index < len(self.children):
            return self.children[index]
        return None

    def child_by_field_name(self, name: str) -> FakeNode | None:
        return self.fields.get(name)


def _make_node(
    type: str,
    span: tuple[int, int],
    *children: FakeNode,
    named: bool = True,
    fields: dict[str, FakeNode] | None = None,
) -> FakeNode:
    node = FakeNode(type=type, start_byte=span[0], end_byte=span[1], is_named=named, fields=dict(fields or {}))
    for child in children:
        child.parent = node
        node.children.append(child)
    return node


def _span_of(source: bytes, text: str, nth: int = 0) -> tuple[int, int]:
    needle = text.encode("utf-8")
    start = -1
    for _ in range(nth + 1):
        start = source.index(needle, start + 1)
    return start, start + len(needle)


@pytest.fixture
def make_node() -> Callable[..., FakeNode]:
    """Build a fixture node: ``make_node(type, (start, end), *children, named=True, fields=None)``."""
    return _make_node


@pytest.fixture
def span_of() -> Callable[..., tuple[int, int]]:
    """Return the byte span of the ``nth`` occurrence of ``text`` in ``source``."""
    return _span_of


@pytest.fixture
def fixtures_dir() -> Path:
    return Path(__file__).parent / "fixtures"
