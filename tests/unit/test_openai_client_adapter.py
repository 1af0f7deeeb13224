from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from docgenius.generation.exceptions import GenerationError, GenerationNetworkError
from docgenius.generation.openai_client_adapter import OpenAIClientAdapter


def _make_mock_response(content: str | None) -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    return response


def _complete(mock_client: MagicMock, system_prompt: str = "system") -> str:
    with patch(
        "docgenius.generation.openai_client_adapter.openai.OpenAI",
        return_value=mock_client,
    ):
        adapter = OpenAIClientAdapter(
            api_key="k",
            timeout_seconds=30,
            base_url=None,
        )
        return adapter.create_completion(
            model="m",
            temperature=0.7,
            system_prompt=system_prompt,
            user_prompt="user",
        )


class TestOpenAIClientAdapter:
    def test_returns_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("<p>ok</p>")
        assert _complete(mock_client) == "<p>ok</p>"

    def test_sends_system_and_user_messages(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("x")
        _complete(mock_client)
        messages = mock_client.chat.completions.create.call_args.kwargs["messages"]
        assert messages == [
            {"role": "system", "content": "system"},
            {"role": "user", "content": "user"},
        ]

    def test_omits_blank_system_prompt(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("x")
        _complete(mock_client, system_prompt="")
        messages = mock_client.chat.completions.create.call_args.kwargs["messages"]
        assert messages == [{"role": "user", "content": "user"}]

    def test_raises_error_for_empty_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response(None)
        with pytest.raises(GenerationError, match="empty response"):
            _complete(mock_client)

    def test_raises_error_for_no_choices(self) -> None:
        mock_client = MagicMock()
        response = MagicMock()
        response.choices = []
        mock_client.chat.completions.create.return_value = response
        with pytest.raises(GenerationError, match="no choices"):
            _complete(mock_client)

    def test_raises_network_error_on_connection_failure(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIConnectionError(
            request=MagicMock()
        )
        with pytest.raises(GenerationNetworkError, match="network error"):
            _complete(mock_client)

    def test_raises_network_error_on_timeout(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = httpx.TimeoutException("timeout")
        with pytest.raises(GenerationNetworkError, match="network error"):
            _complete(mock_client)

    def test_raises_network_error_on_api_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIError(
            message="quota exceeded",
            request=MagicMock(),
            body=None,
        )
        with pytest.raises(GenerationNetworkError, match="API error"):
            _complete(mock_client)
