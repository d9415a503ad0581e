class PdfExtractionError(Exception):
    """Base class for every way turning a PDF into text can fail."""


class PdfToolNotFoundError(PdfExtractionError):
    """Raised when the external extraction command is not on the PATH."""


class EmptyExtractionError(PdfExtractionError):
    """Raised when extraction succeeds but yields no text (scanned or blank PDF)."""


class ExtractionFailedError(PdfExtractionError):
    """Raised for any other extraction failure; carries the tool's message."""
