from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from typetrainer.summarization.exceptions import SummarizationError, SummarizationNetworkError
from typetrainer.summarization.openai_client_adapter import OpenAIClientAdapter

OPENAI_CLS = "typetrainer.summarization.openai_client_adapter.openai.OpenAI"


def _make_mock_response(content: str | None) -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    return response


def _adapter(mock_client: MagicMock) -> OpenAIClientAdapter:
    with patch(OPENAI_CLS, return_value=mock_client):
        return OpenAIClientAdapter(api_key="k", timeout_seconds=30, base_url=None)


def _complete(adapter: OpenAIClientAdapter, system_prompt: str = "system") -> str:
    return adapter.create_completion(
        model="m",
        temperature=0.3,
        system_prompt=system_prompt,
        user_prompt="user",
    )


class TestOpenAIClientAdapter:
    def test_returns_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("A summary.")
        assert _complete(_adapter(mock_client)) == "A summary."

    def test_builds_client_with_settings(self) -> None:
        with patch(OPENAI_CLS) as mock_cls:
            OpenAIClientAdapter(api_key="k", timeout_seconds=12, base_url="http://llm/v1")
        mock_cls.assert_called_once_with(api_key="k", timeout=12, base_url="http://llm/v1")

    def test_sends_system_and_user_messages(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("ok")
        _complete(_adapter(mock_client))
        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "m"
        assert kwargs["temperature"] == 0.3
        assert kwargs["messages"] == [
            {"role": "system", "content": "system"},
            {"role": "user", "content": "user"},
        ]

    def test_omits_empty_system_prompt(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("ok")
        _complete(_adapter(mock_client), system_prompt="")
        messages = mock_client.chat.completions.create.call_args.kwargs["messages"]
        assert messages == [{"role": "user", "content": "user"}]

    def test_raises_error_for_empty_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response(None)
        with pytest.raises(SummarizationError, match="did not return a summary"):
            _complete(_adapter(mock_client))

    def test_raises_error_for_no_choices(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = MagicMock(choices=[])
        with pytest.raises(SummarizationError, match="did not return a summary"):
            _complete(_adapter(mock_client))

    def test_raises_network_error_on_connection_failure(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIConnectionError(
            request=MagicMock()
        )
        with pytest.raises(SummarizationNetworkError, match="Network error"):
            _complete(_adapter(mock_client))

    def test_raises_network_error_on_timeout(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = httpx.TimeoutException("timeout")
        with pytest.raises(SummarizationNetworkError, match="Network error"):
            _complete(_adapter(mock_client))

    def test_raises_network_error_on_api_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIError(
            message="server error",
            request=MagicMock(),
            body=None,
        )
        with pytest.raises(SummarizationNetworkError, match="AI service error"):
            _complete(_adapter(mock_client))
