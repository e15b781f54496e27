from import_attr_migrator.core.ports.syntax import SyntaxNode

LEGACY_KEYWORD = "assert"
REPLACEMENT_KEYWORD = "with"

LEGACY_KEYWORD_BYTES = LEGACY_KEYWORD.encode("utf-8")
REPLACEMENT_KEYWORD_BYTES = REPLACEMENT_KEYWORD.encode("utf-8")

# Grammar revisions label the attribute clause differently.
ATTRIBUTE_CLAUSE_KINDS = frozenset({"import_attribute", "import_assertion", "assert_clause"})
IMPORT_EXPORT_STATEMENT_KINDS = frozenset({"import_statement", "export_statement"})
IMPORT_EXPORT_MARKER_KINDS = frozenset({"export_clause", "import_clause", "export", "import"})
PROPERTY_NAME_KINDS = frozenset({"property_identifier", "shorthand_property_identifier", "identifier"})

IDENTIFIER_KIND = "identifier"
STRING_KIND = "string"
ERROR_KIND = "ERROR"
CALL_EXPRESSION_KIND = "call_expression"
DYNAMIC_IMPORT_KIND = "import"


def node_text(node: SyntaxNode, source: bytes) -> bytes:
    """Return the source bytes covered by ``node``, or ``b""`` when the span falls outside ``source``."""
    start, end = node.start_byte, node.end_byte
    if start >= len(source) or end > len(source):
        return b""
    return source[start:end]


def is_legacy_keyword(node: SyntaxNode, source: bytes) -> bool:
    return node_text(node, source) == LEGACY_KEYWORD_BYTES
