from typing import ClassVar

from typetrainer.config.settings import Settings
from typetrainer.logging.logger import Log
from typetrainer.summarization.example_client_adapter import ExampleClientAdapter
from typetrainer.summarization.openai_client_adapter import OpenAIClientAdapter
from typetrainer.summarization.summarizer import Summarizer


class SummarizerFactory:
    """Creates the configured summarizer, or None when the feature is disabled."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> Summarizer | None:
        provider = settings.summarization_provider.lower()
        if provider == "example":
            return Summarizer(client=ExampleClientAdapter(), model="example", temperature=0.0)

        base_url = cls._resolve_base_url(provider, settings)
        if provider == "openai" and not settings.summarization_api_key:
            Log.warning(
                "SUMMARIZATION_API_KEY is not set. AI summarization feature will be disabled."
            )
            return None

        client = OpenAIClientAdapter(
            # Local OpenAI-compatible servers accept any key.
            api_key=settings.summarization_api_key or "not-needed",
            timeout_seconds=settings.summarization_timeout_seconds,
            base_url=base_url,
        )
        return Summarizer(
            client=client,
            model=settings.summarization_model_name,
            temperature=settings.summarization_temperature,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return settings.summarization_base_url.strip() or None
        if provider == "openai_compatible":
            url = settings.summarization_base_url.strip()
            if not url:
                raise ValueError(
                    "summarization_base_url is required for "
                    "summarization_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return settings.summarization_base_url.strip() or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown summarization provider '{provider}'. Choose from: {supported}"
        )
