import subprocess
from pathlib import Path

from typetrainer.logging.logger import Log
from typetrainer.pdf.base import BasePdfExtractor
from typetrainer.pdf.exceptions import (
    EmptyExtractionError,
    ExtractionFailedError,
    PdfExtractionError,
    PdfToolNotFoundError,
)
from typetrainer.pdf.scratch import scratch_pdf


class PdfToTextAdapter(BasePdfExtractor):
    """Extracts text by running Poppler's ``pdftotext`` on a scratch copy."""

    def __init__(self, command: str = "pdftotext", temp_dir: Path | None = None) -> None:
        self._command = command
        self._temp_dir = temp_dir

    def extract(self, pdf_bytes: bytes, display_name: str = "") -> str:
        if not pdf_bytes:
            raise ExtractionFailedError("Invalid file buffer provided for PDF processing.")

        Log.debug(f"Processing uploaded PDF with {self._command}: {display_name}")
        try:
            with scratch_pdf(pdf_bytes, self._temp_dir) as path:
                text = self._run(path)
        except PdfExtractionError:
            raise
        except OSError as exc:
            raise ExtractionFailedError(
                f"Error processing PDF with {self._command}: {exc}"
            ) from exc
        Log.debug(f"Extracted {len(text)} characters using {self._command}")

        if not text:
            raise EmptyExtractionError(
                f"Could not extract text using {self._command}. "
                "PDF might be empty or image-based."
            )
        return text

    def _run(self, path: Path) -> str:
        args = [self._command, "-enc", "UTF-8", str(path), "-"]
        try:
            completed = subprocess.run(args, capture_output=True, check=True)
        except FileNotFoundError as exc:
            raise PdfToolNotFoundError(
                f"Error processing PDF: {self._command} command not found. "
                "Please ensure Poppler utilities are installed and in the system PATH."
            ) from exc
        except subprocess.CalledProcessError as exc:
            raise ExtractionFailedError(
                f"Error processing PDF with {self._command}: {_tool_message(exc)}"
            ) from exc
        except OSError as exc:
            raise ExtractionFailedError(
                f"Error processing PDF with {self._command}: {exc}"
            ) from exc
        return completed.stdout.decode("utf-8", errors="replace").strip()


def _tool_message(exc: subprocess.CalledProcessError) -> str:
    stderr = (exc.stderr or b"").decode("utf-8", errors="replace").strip()
    return stderr or f"exited with status {exc.returncode}"
