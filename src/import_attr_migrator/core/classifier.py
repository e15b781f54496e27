"""Decide whether a syntax node is a legacy ``assert`` keyword that must become ``with``.

Three structural patterns are recognised, tried in order by :func:`classify`:

* attribute clause: the anonymous ``assert`` token of an ``import_attribute``
  (or equivalently named) clause::

      (import_statement source: (string) (import_attribute "assert" (object)))

* error recovery: grammars that do not know ``assert`` in this position emit
  an ``ERROR`` node, either inside the statement::

      (import_statement ... (ERROR (identifier) ...))

  or in place of the whole statement::

      (ERROR "export" (export_clause) "from" (string) (identifier) ...)

* dynamic import options: a property name inside the options object of
  ``import(specifier, { assert: {...} })``.

Anything else spelled ``assert`` (``console.assert``, a variable, an
unrelated object key) is left alone.
"""

import logging

from import_attr_migrator.core.nodes import (
    ATTRIBUTE_CLAUSE_KINDS,
    CALL_EXPRESSION_KIND,
    DYNAMIC_IMPORT_KIND,
    ERROR_KIND,
    IDENTIFIER_KIND,
    IMPORT_EXPORT_MARKER_KINDS,
    IMPORT_EXPORT_STATEMENT_KINDS,
    LEGACY_KEYWORD,
    PROPERTY_NAME_KINDS,
    STRING_KIND,
    is_legacy_keyword,
)
from import_attr_migrator.core.ports.syntax import SyntaxNode
from import_attr_migrator.models import Occurrence

logger = logging.getLogger(__name__)

# Ancestor levels searched for the enclosing import() call.
MAX_ANCESTOR_DEPTH = 6


def _occurrence(node: SyntaxNode) -> Occurrence:
    return Occurrence(start=node.start_byte, end=node.end_byte)


def match_attribute_clause(node: SyntaxNode, source: bytes) -> Occurrence | None:
    if node.is_named or node.type != LEGACY_KEYWORD:
        return None
    parent = node.parent
    if parent is None or parent.type not in ATTRIBUTE_CLAUSE_KINDS:
        return None
    return _occurrence(node)


def _match_statement_error(node: SyntaxNode, source: bytes) -> Occurrence | None:
    parent = node.parent
    if parent is None or parent.type not in IMPORT_EXPORT_STATEMENT_KINDS:
        return None
    first = node.child(0)
    if first is not None and first.type == IDENTIFIER_KIND and is_legacy_keyword(first, source):
        return _occurrence(first)
    return None


def has_import_export_marker(node: SyntaxNode) -> bool:
    return any(child.type in IMPORT_EXPORT_MARKER_KINDS for child in node.children)


def _match_orphan_error(node: SyntaxNode, source: bytes) -> Occurrence | None:
    if not has_import_export_marker(node):
        return None
    children = node.children
    # Only the first keyword directly after a module specifier counts.
    for previous, child in zip(children, children[1:]):
        if child.type != IDENTIFIER_KIND or not is_legacy_keyword(child, source):
            continue
        if previous.type == STRING_KIND:
            return _occurrence(child)
    return None


def match_error_recovery(node: SyntaxNode, source: bytes) -> Occurrence | None:
    if node.type != ERROR_KIND:
        return None
    return _match_statement_error(node, source) or _match_orphan_error(node, source)


def _calls_dynamic_import(call: SyntaxNode) -> bool:
    function = call.child_by_field_name("function")
    if function is not None and function.type == DYNAMIC_IMPORT_KIND:
        return True
    first = call.child(0)
    return first is not None and first.type == DYNAMIC_IMPORT_KIND


def is_inside_dynamic_import_options(node: SyntaxNode) -> bool:
    """Walk up to the nearest call within :data:`MAX_ANCESTOR_DEPTH` levels and check it is ``import(...)``."""
    current = node.parent
    depth = 0
    while current is not None and depth < MAX_ANCESTOR_DEPTH:
        if current.type in (CALL_EXPRESSION_KIND, DYNAMIC_IMPORT_KIND):
            return _calls_dynamic_import(current)
        current = current.parent
        depth += 1
    return False


def match_dynamic_import_option(node: SyntaxNode, source: bytes) -> Occurrence | None:
    if not node.is_named or node.type not in PROPERTY_NAME_KINDS:
        return None
    if not is_legacy_keyword(node, source) or not is_inside_dynamic_import_options(node):
        return None
    return _occurrence(node)


_STRATEGIES = (
    ("attribute-clause", match_attribute_clause),
    ("error-recovery", match_error_recovery),
    ("dynamic-import", match_dynamic_import_option),
)


def classify(node: SyntaxNode, source: bytes) -> Occurrence | None:
    """Return the span to rewrite for ``node``, or ``None`` when it is not a legacy keyword occurrence."""
    for name, strategy in _STRATEGIES:
        occurrence = strategy(node, source)
        if occurrence is not None:
            logger.debug("%s match at bytes %d-%d", name, occurrence.start, occurrence.end)
            return occurrence
    return None
