from pathlib import Path
from typing import ClassVar

from typetrainer.config.settings import Settings
from typetrainer.pdf.base import BasePdfExtractor
from typetrainer.pdf.pdfplumber_adapter import PdfPlumberAdapter
from typetrainer.pdf.pdftotext_adapter import PdfToTextAdapter


class PdfExtractorFactory:
    """Creates the correct PDF extractor based on settings."""

    ENGINES: ClassVar[tuple[str, ...]] = ("pdftotext", "pdfplumber")

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.lower()
        if engine == "pdftotext":
            temp_dir = Path(settings.pdf_temp_dir) if settings.pdf_temp_dir else None
            return PdfToTextAdapter(command=settings.pdftotext_command, temp_dir=temp_dir)
        if engine == "pdfplumber":
            return PdfPlumberAdapter()
        raise ValueError(
            f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ENGINES)}"
        )
