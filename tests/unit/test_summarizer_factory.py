"""Tests for SummarizerFactory."""

from unittest.mock import patch

import pytest

from typetrainer.config.settings import Settings
from typetrainer.summarization.factory import SummarizerFactory
from typetrainer.summarization.summarizer import Summarizer


class TestSummarizerFactory:
    def test_creates_example_summarizer(self) -> None:
        settings = Settings(summarization_provider="example")
        summarizer = SummarizerFactory.create(settings)
        assert isinstance(summarizer, Summarizer)
        assert summarizer.summarize("One. Two. Three.") == "One. Two."

    def test_openai_without_key_disables_feature(self) -> None:
        settings = Settings(summarization_provider="openai", summarization_api_key="")
        with patch("typetrainer.summarization.factory.Log") as mock_log:
            summarizer = SummarizerFactory.create(settings)
        assert summarizer is None
        mock_log.warning.assert_called_once()

    def test_creates_openai_summarizer(self) -> None:
        settings = Settings(
            summarization_provider="openai",
            summarization_api_key="test-key",
            summarization_model_name="gpt-4",
        )
        with patch("typetrainer.summarization.factory.OpenAIClientAdapter"):
            summarizer = SummarizerFactory.create(settings)
        assert isinstance(summarizer, Summarizer)

    def test_uses_openai_settings(self) -> None:
        settings = Settings(
            summarization_provider="openai",
            summarization_api_key="openai-key",
            summarization_timeout_seconds=42,
        )
        with patch("typetrainer.summarization.factory.OpenAIClientAdapter") as mock_adapter:
            SummarizerFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="openai-key",
            timeout_seconds=42,
            base_url=None,
        )

    def test_uses_provider_default_base_url_for_openrouter(self) -> None:
        settings = Settings(summarization_provider="openrouter", summarization_api_key="k")
        with patch("typetrainer.summarization.factory.OpenAIClientAdapter") as mock_adapter:
            SummarizerFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == "https://openrouter.ai/api/v1"

    def test_base_url_setting_overrides_provider_default(self) -> None:
        settings = Settings(
            summarization_provider="groq",
            summarization_api_key="k",
            summarization_base_url="http://proxy/v1",
        )
        with patch("typetrainer.summarization.factory.OpenAIClientAdapter") as mock_adapter:
            SummarizerFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == "http://proxy/v1"

    def test_ollama_works_without_api_key(self) -> None:
        settings = Settings(summarization_provider="ollama", summarization_api_key="")
        with patch("typetrainer.summarization.factory.OpenAIClientAdapter") as mock_adapter:
            summarizer = SummarizerFactory.create(settings)
        assert isinstance(summarizer, Summarizer)
        assert mock_adapter.call_args.kwargs["api_key"] == "not-needed"
        assert mock_adapter.call_args.kwargs["base_url"] == "http://localhost:11434/v1"

    def test_openai_compatible_requires_base_url(self) -> None:
        settings = Settings(summarization_provider="openai_compatible", summarization_api_key="k")
        with pytest.raises(ValueError, match="summarization_base_url is required"):
            SummarizerFactory.create(settings)

    def test_is_case_insensitive(self) -> None:
        settings = Settings(summarization_provider="Example")
        assert isinstance(SummarizerFactory.create(settings), Summarizer)

    def test_raises_for_unknown_provider(self) -> None:
        settings = Settings(summarization_provider="unknown")
        with pytest.raises(ValueError, match="Unknown summarization provider"):
            SummarizerFactory.create(settings)
