from abc import ABC, abstractmethod

import anyio.to_thread


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes, display_name: str = "") -> str:
        """Extract raw text from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content. Structure is not pre-validated;
                       the underlying engine decides whether it is a PDF.
            display_name: Original upload name, used for diagnostics only.

        Returns:
            The stripped extracted text, with no cleanup applied.

        Raises:
            PdfToolNotFoundError: if the engine's external tool is missing.
            EmptyExtractionError: if the PDF yields no text.
            ExtractionFailedError: on any other failure.
        """

    async def extract_async(self, pdf_bytes: bytes, display_name: str = "") -> str:
        """Run :meth:`extract` on a worker thread so the event loop stays free."""
        return await anyio.to_thread.run_sync(self.extract, pdf_bytes, display_name)
