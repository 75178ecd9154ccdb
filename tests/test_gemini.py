"""Tests for the Gemini adapter."""

from unittest.mock import MagicMock, patch

import pytest

from eventdesk.adapters.gemini import DEFAULT_MODEL, GeminiService


@pytest.fixture
def mock_client():
    with patch("eventdesk.adapters.gemini.genai.Client") as mock_cls:
        client = MagicMock()
        mock_cls.return_value = client
        yield mock_cls, client


class TestGeminiService:
    def test_client_gets_api_key(self, mock_client):
        mock_cls, _ = mock_client
        service = GeminiService("secret")
        mock_cls.assert_called_once_with(api_key="secret")
        assert service.model == DEFAULT_MODEL

    def test_generate_sends_config(self, mock_client):
        _, client = mock_client
        client.models.generate_content.return_value = MagicMock(text="ideas")

        service = GeminiService("secret", model="gemini-test")
        result = service.generate("prompt", system_instruction="be brief", temperature=0.8, top_k=40)

        assert result == "ideas"
        kwargs = client.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-test"
        assert kwargs["contents"] == "prompt"
        assert kwargs["config"].temperature == 0.8
        assert kwargs["config"].top_k == 40

    def test_empty_response_text(self, mock_client):
        _, client = mock_client
        client.models.generate_content.return_value = MagicMock(text=None)
        assert GeminiService("secret").generate("prompt") == ""

    def test_errors_propagate(self, mock_client):
        _, client = mock_client
        client.models.generate_content.side_effect = RuntimeError("quota exceeded")
        with pytest.raises(RuntimeError, match="quota exceeded"):
            GeminiService("secret").generate("prompt")
