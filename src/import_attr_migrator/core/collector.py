import logging

from import_attr_migrator.core.classifier import classify
from import_attr_migrator.core.ports.syntax import SyntaxNode
from import_attr_migrator.models import Occurrence

logger = logging.getLogger(__name__)


def collect_replacements(root: SyntaxNode, source: bytes) -> list[Occurrence]:
    """Collect legacy keyword spans in source order.

    Pre-order depth-first walk; a matched node's subtree is not descended
    into, so the spans come out ascending and non-overlapping.
    """
    occurrences: list[Occurrence] = []
    stack: list[SyntaxNode] = [root]
    while stack:
        node = stack.pop()
        occurrence = classify(node, source)
        if occurrence is not None:
            occurrences.append(occurrence)
            continue
        stack.extend(reversed(node.children))

    logger.debug("Collected %d replacement(s)", len(occurrences))
    return occurrences
