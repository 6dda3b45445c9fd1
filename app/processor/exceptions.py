class AuditError(Exception):
    """Base exception for all audit pipeline errors."""


class ConfigurationError(AuditError):
    """Raised when required configuration is missing or invalid."""


class InputNotFoundError(AuditError):
    """Raised when the decision spreadsheet does not exist."""


class SpreadsheetReadError(AuditError):
    """Raised when the decision spreadsheet cannot be parsed."""
