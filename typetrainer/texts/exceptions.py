class TextError(Exception):
    """Base exception for text ingestion and storage errors."""


class TextValidationError(TextError):
    """Raised when an add/update request is rejected before any work is done."""


class TextNotFoundError(TextError):
    """Raised when a text cannot be found in the database."""


class TextAccessDeniedError(TextError):
    """Raised when a user acts on a text owned by someone else."""
