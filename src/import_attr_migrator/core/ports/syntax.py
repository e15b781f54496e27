from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class SyntaxNode(Protocol):
    """Read-only view of a concrete syntax tree node.

    ``tree_sitter.Node`` satisfies this protocol as-is. Offsets index the
    source buffer the tree was parsed from.
    """

    @property
    def type(self) -> str: ...

    @property
    def is_named(self) -> bool: ...

    @property
    def start_byte(self) -> int: ...

    @property
    def end_byte(self) -> int: ...

    @property
    def parent(self) -> SyntaxNode | None: ...

    @property
    def children(self) -> Sequence[SyntaxNode]: ...

    @property
    def child_count(self) -> int: ...

    def child(self, index: int, /) -> SyntaxNode | None: ...

    def child_by_field_name(self, name: str, /) -> SyntaxNode | None: ...
