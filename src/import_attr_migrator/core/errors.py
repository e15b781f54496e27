class MigrationError(Exception):
    """Base class for conditions that abort the migration of a single source."""


class GrammarUnavailableError(MigrationError, ValueError):
    """No grammar could be loaded for the requested dialect."""


class InvalidEncodingError(MigrationError, ValueError):
    """The source bytes cannot be handed to the tokenizer."""
