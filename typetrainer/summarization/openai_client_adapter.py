import httpx
import openai

from typetrainer.summarization.client_base import BaseSummarizationClient
from typetrainer.summarization.exceptions import (
    SummarizationError,
    SummarizationNetworkError,
)


class OpenAIClientAdapter(BaseSummarizationClient):
    """Summarization client built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        messages = [{"role": "user", "content": user_prompt}]
        if system_prompt:
            messages.insert(0, {"role": "system", "content": system_prompt})
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=messages,  # type: ignore[arg-type]
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise SummarizationNetworkError(
                f"Network error communicating with AI service: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise SummarizationNetworkError(f"AI service error: {exc}") from exc

        if not response.choices:
            raise SummarizationError("AI did not return a summary.")
        content = response.choices[0].message.content
        if content is None:
            raise SummarizationError("AI did not return a summary.")
        return content
