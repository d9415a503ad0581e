import io

import pdfplumber

from typetrainer.logging.logger import Log
from typetrainer.pdf.base import BasePdfExtractor
from typetrainer.pdf.exceptions import (
    EmptyExtractionError,
    ExtractionFailedError,
    PdfExtractionError,
)


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts text in-process with pdfplumber, for hosts without Poppler."""

    def extract(self, pdf_bytes: bytes, display_name: str = "") -> str:
        if not pdf_bytes:
            raise ExtractionFailedError("Invalid file buffer provided for PDF processing.")

        Log.debug(f"Processing uploaded PDF with pdfplumber: {display_name}")
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
            text = "\n".join(pages).strip()
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise ExtractionFailedError(f"pdfplumber extraction failed: {exc}") from exc
        Log.debug(f"Extracted {len(text)} characters from {len(pages)} pages using pdfplumber")

        if not text:
            raise EmptyExtractionError(
                "Could not extract text using pdfplumber. PDF might be empty or image-based."
            )
        return text
