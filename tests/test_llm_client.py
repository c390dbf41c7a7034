"""Tests for how-to generation."""

import pytest
from unittest.mock import Mock, patch

from tenacity import wait_none

from tube2notion.config import Settings
from tube2notion.llm.client import HowToGenerator, LLMError
from tube2notion.llm.prompts import HOWTO_SYSTEM_PROMPT, build_user_prompt


@pytest.fixture(autouse=True)
def no_retry_wait():
    """Skip tenacity backoff sleeps."""
    with patch.object(HowToGenerator._call_llm.retry, "wait", wait_none()):
        yield


class TestPrompts:
    """Tests for prompt construction."""

    def test_user_prompt_contains_inputs(self):
        prompt = build_user_prompt("some transcript {with braces}", "My Video", "desc")

        assert "- Video title: My Video" in prompt
        assert "- Video description: desc" in prompt
        assert "some transcript {with braces}" in prompt
        assert "--- BEGIN TRANSCRIPT ---" in prompt

    def test_system_prompt_mentions_howto(self):
        assert "how-to guide" in HOWTO_SYSTEM_PROMPT


class TestHowToGenerator:
    """Tests for the HowToGenerator class."""

    def test_generate_returns_content(self, mock_llm_client: Mock, sample_howto: str):
        """Test that model output is returned unchanged."""
        generator = HowToGenerator()
        result = generator.generate("transcript text", "Video")

        assert result == sample_howto
        mock_llm_client.assert_called_once()

    def test_generate_passes_settings(self, mock_llm_client: Mock):
        """Test model, temperature and token limit reach LiteLLM."""
        generator = HowToGenerator()
        generator.generate("transcript text", "Video")

        kwargs = mock_llm_client.call_args.kwargs
        assert kwargs["model"] == "gemini/gemini-2.0-flash"
        assert kwargs["temperature"] == 0.2
        assert kwargs["max_tokens"] == 8192
        assert kwargs["messages"][0] == {"role": "system", "content": HOWTO_SYSTEM_PROMPT}
        assert "transcript text" in kwargs["messages"][1]["content"]

    def test_custom_model(self, mock_llm_client: Mock):
        """Test using a custom model."""
        generator = HowToGenerator(model="openai/gpt-4o")

        assert generator.model == "openai/gpt-4o"

    def test_zero_temperature_is_kept(self, settings: Settings):
        """Test that an explicit 0.0 temperature is not replaced by the default."""
        generator = HowToGenerator(temperature=0.0)

        assert generator.temperature == 0.0

    @pytest.mark.parametrize("content", [None, "", "   \n"])
    def test_empty_response_raises(self, content):
        """Test that an empty model response is an error after retries."""
        with patch("tube2notion.llm.client.completion") as mock:
            mock.return_value = Mock(choices=[Mock(message=Mock(content=content))])

            with pytest.raises(LLMError, match="empty"):
                HowToGenerator().generate("t", "Video")

        assert mock.call_count == 3

    def test_retries_transient_errors(self, sample_howto: str):
        """Test that a connection failure is retried."""
        with patch("tube2notion.llm.client.completion") as mock:
            mock.side_effect = [
                Exception("connection reset"),
                Mock(choices=[Mock(message=Mock(content=sample_howto))]),
            ]

            result = HowToGenerator().generate("t", "Video")

        assert result == sample_howto
        assert mock.call_count == 2

    def test_unexpected_errors_propagate(self):
        """Test that non-transient errors are not retried."""
        with patch("tube2notion.llm.client.completion") as mock:
            mock.side_effect = KeyError("bad")

            with pytest.raises(KeyError):
                HowToGenerator().generate("t", "Video")

        assert mock.call_count == 1
