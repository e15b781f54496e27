import logging
from pathlib import Path

from import_attr_migrator.core.applier import apply_replacements
from import_attr_migrator.core.ast import parse_source
from import_attr_migrator.core.collector import collect_replacements
from import_attr_migrator.core.languages import Dialect, resolve_dialect
from import_attr_migrator.models import MigrationResult

logger = logging.getLogger(__name__)


def migrate(source: bytes, dialect: str | Dialect) -> MigrationResult:
    """Rewrite every legacy ``assert`` import attribute keyword in ``source`` to ``with``.

    Raises ``GrammarUnavailableError`` or ``InvalidEncodingError`` before any
    output is built; zero replacements is a successful no-op.
    """
    tree = parse_source(source, dialect)
    source_bytes = bytes(source)
    occurrences = collect_replacements(tree.root_node, source_bytes)
    output = apply_replacements(source_bytes, occurrences)
    return MigrationResult(output=output, replacements=len(occurrences))


def migrate_file(path: str | Path, dialect: str | Dialect | None = None) -> MigrationResult:
    file_path = Path(path)
    resolved = resolve_dialect(dialect, file_path)

    try:
        source_bytes = file_path.read_bytes()
    except FileNotFoundError:
        raise FileNotFoundError(f"File not found: {path}") from None

    result = migrate(source_bytes, resolved)
    logger.debug("%s: %d replacement(s) (%s)", file_path, result.replacements, resolved.value)
    return result
