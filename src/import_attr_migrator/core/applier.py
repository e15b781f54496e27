from collections.abc import Sequence

from import_attr_migrator.core.nodes import REPLACEMENT_KEYWORD_BYTES
from import_attr_migrator.models import Occurrence


def apply_replacements(
    source: bytes,
    occurrences: Sequence[Occurrence],
    replacement: bytes = REPLACEMENT_KEYWORD_BYTES,
) -> bytes:
    """Splice ``replacement`` into every occurrence span of ``source``.

    Occurrences must be ascending and non-overlapping. Bytes outside the
    spans are copied verbatim; an empty plan yields a fresh copy of ``source``.
    """
    parts: list[bytes] = []
    cursor = 0
    for occurrence in occurrences:
        if occurrence.start < cursor:
            raise ValueError(
                f"Replacement at bytes {occurrence.start}-{occurrence.end} overlaps or precedes byte {cursor}"
            )
        if occurrence.end > len(source):
            raise ValueError(f"Replacement at bytes {occurrence.start}-{occurrence.end} exceeds source length")
        parts.append(source[cursor : occurrence.start])
        parts.append(replacement)
        cursor = occurrence.end
    parts.append(source[cursor:])
    return b"".join(parts)
