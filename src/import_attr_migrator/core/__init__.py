from import_attr_migrator.core.ast import dump_tree, parse_source
from import_attr_migrator.core.errors import GrammarUnavailableError, InvalidEncodingError, MigrationError
from import_attr_migrator.core.languages import Dialect
from import_attr_migrator.core.migrate import migrate, migrate_file

__all__ = [
    "Dialect",
    "GrammarUnavailableError",
    "InvalidEncodingError",
    "MigrationError",
    "dump_tree",
    "migrate",
    "migrate_file",
    "parse_source",
]
