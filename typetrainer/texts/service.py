from typing import ClassVar

from typetrainer.config.settings import Settings
from typetrainer.database.models import TextRecord
from typetrainer.database.repositories.texts_repository import TextsRepository
from typetrainer.logging.logger import Log
from typetrainer.normalization import TextNormalizer
from typetrainer.pdf.base import BasePdfExtractor
from typetrainer.pdf.exceptions import PdfExtractionError
from typetrainer.pdf.factory import PdfExtractorFactory
from typetrainer.summarization.exceptions import SummarizationUnavailableError
from typetrainer.summarization.factory import SummarizerFactory
from typetrainer.summarization.summarizer import Summarizer
from typetrainer.texts.exceptions import TextAccessDeniedError, TextValidationError
from typetrainer.texts.models import UploadedFile


class TextService:
    """Turns pasted text or an uploaded PDF into a stored, cleaned text.

    Flow for new texts: validate -> extract (PDF only) -> normalize -> persist.
    """

    PDF_MEDIA_TYPE: ClassVar[str] = "application/pdf"
    SUMMARY_TITLE_PREFIX: ClassVar[str] = "Summary of: "

    def __init__(
        self,
        text_repo: TextsRepository,
        pdf_extractor: BasePdfExtractor,
        normalizer: TextNormalizer,
        summarizer: Summarizer | None = None,
    ) -> None:
        self._text_repo = text_repo
        self._pdf_extractor = pdf_extractor
        self._normalizer = normalizer
        self._summarizer = summarizer

    def prepare_content(
        self,
        content: str | None,
        uploaded_file: UploadedFile | None = None,
    ) -> str:
        """Return the cleaned text for storage.

        Raises:
            PdfExtractionError: if the uploaded PDF cannot be turned into text.
        """
        raw = content
        if uploaded_file is not None:
            try:
                raw = self._pdf_extractor.extract(
                    uploaded_file.content, uploaded_file.display_name
                )
            except PdfExtractionError as exc:
                Log.warning(f"PDF extraction failed for {uploaded_file.display_name}: {exc}")
                raise
        return self._normalizer.normalize(raw)

    def add_text(
        self,
        user_id: int,
        title: str,
        *,
        content: str | None = None,
        uploaded_file: UploadedFile | None = None,
        category_id: int | None = None,
    ) -> TextRecord:
        """Validate, clean and store a new text for *user_id*.

        Raises:
            TextValidationError: on a blank title, a missing or doubled input,
                or a non-PDF upload.
            PdfExtractionError: if the uploaded PDF cannot be turned into text.
        """
        self._require_title(title)
        if uploaded_file is None and not content:
            raise TextValidationError("Please provide text content or upload a PDF file.")
        if uploaded_file is not None and content:
            raise TextValidationError("Please provide text content OR upload a PDF, not both.")
        if uploaded_file is not None and uploaded_file.media_type != self.PDF_MEDIA_TYPE:
            raise TextValidationError("Only PDF files are allowed!")

        final_content = self.prepare_content(content, uploaded_file)
        record = self._text_repo.add_text(user_id, title, final_content, category_id)
        source = "PDF" if uploaded_file is not None else "Textarea"
        Log.info(
            f"Text added: ID {record.id}, user {user_id}, category {category_id} "
            f"(source: {source}), final length {len(final_content)}"
        )
        return record

    def update_text(
        self,
        text_id: int,
        user_id: int,
        title: str,
        content: str | None,
        category_id: int | None = None,
    ) -> TextRecord:
        """Clean and store new title, content and folder for an owned text.

        Raises:
            TextNotFoundError: if the text does not exist.
            TextAccessDeniedError: if *user_id* does not own it.
            TextValidationError: on a blank title.
        """
        existing = self.get_owned_text(text_id, user_id)
        self._require_title(title)
        cleaned = self._normalizer.normalize(content)
        self._text_repo.update_text(text_id, title, cleaned, category_id)
        Log.info(f"Text updated: ID {text_id}, user {user_id}, category {category_id}")
        return TextRecord(
            id=existing.id,
            user_id=existing.user_id,
            title=title,
            content=cleaned,
            category_id=category_id,
            order_index=existing.order_index,
            created_at=existing.created_at,
        )

    def get_owned_text(self, text_id: int, user_id: int) -> TextRecord:
        """Fetch a text and check it belongs to *user_id*.

        Raises:
            TextNotFoundError: if the text does not exist.
            TextAccessDeniedError: if another user owns it.
        """
        text = self._text_repo.find_by_id(text_id)
        if text.user_id != user_id:
            Log.debug(
                f"Ownership check failed: user {user_id} does not own text {text_id} "
                f"(owner: {text.user_id})"
            )
            raise TextAccessDeniedError(f"Text {text_id} does not belong to user {user_id}")
        return text

    def summarize_text(self, text_id: int, user_id: int) -> TextRecord:
        """Summarize an owned text and store the summary as a new text.

        The summary lands in the same folder as the original.

        Raises:
            TextNotFoundError: if the text does not exist.
            TextAccessDeniedError: if *user_id* does not own it.
            TextValidationError: if the text is empty.
            SummarizationUnavailableError: if no provider is configured.
            SummarizationError: if the provider fails or returns nothing.
        """
        original = self.get_owned_text(text_id, user_id)
        if not original.content or not original.content.strip():
            raise TextValidationError("Cannot summarize empty text.")
        if self._summarizer is None:
            raise SummarizationUnavailableError(
                "AI Service is not configured or unavailable. Missing API Key."
            )

        summary = self._summarizer.summarize(original.content)
        record = self._text_repo.add_text(
            user_id,
            f"{self.SUMMARY_TITLE_PREFIX}{original.title}",
            summary,
            original.category_id,
        )
        Log.info(f"Summary of text {text_id} saved as new text ID {record.id}")
        return record

    @staticmethod
    def _require_title(title: str | None) -> None:
        # Blank titles are rejected; others are stored exactly as submitted.
        if not title or not title.strip():
            raise TextValidationError("Title cannot be empty.")


def build_text_service(settings: Settings, *, with_summarizer: bool = True) -> TextService:
    """Build a TextService with all required adapters.

    Pass ``with_summarizer=False`` when no summary will be requested, so
    summarization settings are not read at all.
    """
    return TextService(
        text_repo=TextsRepository(),
        pdf_extractor=PdfExtractorFactory.create(settings),
        normalizer=TextNormalizer(),
        summarizer=SummarizerFactory.create(settings) if with_summarizer else None,
    )
