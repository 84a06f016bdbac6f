class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when manually entered data is invalid. Nothing is written."""


class PersistenceError(DomainError):
    """Raised when the ledger file cannot be written, deleted or copied."""


class CaptureUnavailableError(DomainError):
    """Raised when the code capture capability cannot be started."""
