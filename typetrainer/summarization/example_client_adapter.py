"""Offline summarization client.

Returns the first sentences of the prompt's text block instead of calling a
provider. Useful for local development and tests.
"""

import re
from typing import ClassVar

from typetrainer.summarization.client_base import BaseSummarizationClient


class ExampleClientAdapter(BaseSummarizationClient):
    """Echoes the leading sentences of the text to summarize. No network calls."""

    MAX_SENTENCES: ClassVar[int] = 2

    _TEXT_BLOCK_RE: ClassVar[re.Pattern[str]] = re.compile(r"---\n(.*)\n---", re.DOTALL)
    _SENTENCE_END_RE: ClassVar[re.Pattern[str]] = re.compile(r"(?<=[.!?])\s+")

    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, system_prompt
        match = self._TEXT_BLOCK_RE.search(user_prompt)
        text = match.group(1) if match else user_prompt
        sentences = self._SENTENCE_END_RE.split(text.strip())
        return " ".join(sentences[: self.MAX_SENTENCES])
