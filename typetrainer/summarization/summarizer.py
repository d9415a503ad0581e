from typing import ClassVar

from typetrainer.logging.logger import Log
from typetrainer.summarization.client_base import BaseSummarizationClient
from typetrainer.summarization.exceptions import SummarizationError


class Summarizer:
    """Summarizes a text in its own language using an AI provider."""

    PROMPT_TEMPLATE: ClassVar[str] = (
        "Detect the language of the following text and provide a detailed "
        "summary (in that same language):\n\n---\n{text}\n---"
    )

    def __init__(
        self,
        *,
        client: BaseSummarizationClient,
        model: str,
        temperature: float = 0.3,
        system_prompt: str = "",
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._system_prompt = system_prompt

    def summarize(self, text: str) -> str:
        """Return the trimmed summary of *text*.

        Raises:
            SummarizationError: if *text* is blank or the provider replies with nothing.
            SummarizationNetworkError: if the provider cannot be reached.
        """
        if not text or not text.strip():
            raise SummarizationError("Cannot summarize empty text.")

        prompt = self.PROMPT_TEMPLATE.format(text=text)
        Log.debug(f"Sending summarization prompt ({len(prompt)} chars) to {self._model}")

        summary = self._client.create_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
        ).strip()
        if not summary:
            raise SummarizationError("AI did not return a summary.")

        Log.info(f"Summarization complete: {len(summary)} chars")
        return summary
