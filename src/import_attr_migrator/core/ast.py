from typing import cast

from tree_sitter import Parser, Tree
from tree_sitter_language_pack import SupportedLanguage, get_parser

from import_attr_migrator.core.errors import GrammarUnavailableError, InvalidEncodingError
from import_attr_migrator.core.languages import Dialect, normalize_dialect

_GRAMMARS: dict[Dialect, str] = {
    Dialect.JAVASCRIPT: "javascript",
    Dialect.TYPESCRIPT: "typescript",
    Dialect.TSX: "tsx",
}


def _get_parser(dialect: str | Dialect) -> Parser:
    try:
        resolved = normalize_dialect(dialect)
    except ValueError as exc:
        raise GrammarUnavailableError(str(exc)) from None

    grammar = _GRAMMARS.get(resolved)
    if grammar is None:
        raise GrammarUnavailableError(f"No grammar registered for dialect '{resolved.value}'")
    try:
        return get_parser(cast(SupportedLanguage, grammar))
    except Exception as exc:  # DownloadError and friends in 1.x are not ValueErrors
        raise GrammarUnavailableError(f"Grammar '{grammar}' is not available: {exc}") from exc


def parse_source(source: bytes, dialect: str | Dialect) -> Tree:
    """Parse ``source`` with the grammar for ``dialect``.

    The returned tree may contain ``ERROR`` regions; callers are expected to
    tolerate partial parses.
    """
    if not isinstance(source, (bytes, bytearray, memoryview)):
        raise InvalidEncodingError(f"Source must be bytes, got {type(source).__name__}")
    source_bytes = bytes(source)
    try:
        source_bytes.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidEncodingError(f"Source is not valid UTF-8: {exc}") from None

    parser = _get_parser(dialect)
    return parser.parse(source_bytes)


def dump_tree(source: bytes, dialect: str | Dialect) -> str:
    """Return the S-expression of the parsed source, for inspecting grammar output."""
    tree = parse_source(source, dialect)
    return str(tree.root_node)


def encode_text(text: str) -> bytes:
    """Encode ``text`` as UTF-8, rejecting lone surrogates as ``InvalidEncodingError``."""
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidEncodingError(f"Source is not valid UTF-8: {exc}") from None
