"""LLM client wrapper using LiteLLM for multi-provider support."""

import os
from typing import Optional

from litellm import completion
from loguru import logger
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from tube2notion.config import get_settings
from tube2notion.llm.prompts import build_user_prompt, get_system_prompt


class LLMError(Exception):
    """Error communicating with LLM provider."""

    pass


class HowToGenerator:
    """Generate how-to guides from transcripts through LiteLLM."""

    def __init__(
        self,
        model: Optional[str] = None,
        api_base: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> None:
        """Initialize the generator.

        Args:
            model: LiteLLM model string (e.g., "gemini/gemini-2.0-flash")
            api_base: Optional API base URL (for local LLMs)
            temperature: Sampling temperature (lower = more faithful)
            max_tokens: Maximum tokens in response
        """
        settings = get_settings()
        self.model = model or settings.default_model
        self.api_base = api_base
        self.temperature = settings.llm_temperature if temperature is None else temperature
        self.max_tokens = max_tokens or settings.llm_max_tokens

        # LiteLLM reads provider keys from the environment
        if settings.gemini_api_key:
            os.environ["GEMINI_API_KEY"] = settings.gemini_api_key

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type((LLMError,)),
        reraise=True,
    )
    def _call_llm(self, system_prompt: str, user_prompt: str) -> str:
        """Make an LLM API call with retry logic."""
        try:
            response = completion(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                api_base=self.api_base,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except Exception as e:
            if "rate_limit" in str(e).lower():
                raise LLMError(f"Rate limited: {e}") from e
            elif "api" in str(e).lower() or "connection" in str(e).lower():
                raise LLMError(f"API error: {e}") from e
            raise

        content = response.choices[0].message.content
        if not content or not content.strip():
            raise LLMError("LLM returned empty response")
        return content

    def generate(
        self,
        transcript: str,
        video_title: str,
        video_description: str = "",
    ) -> str:
        """Rewrite a transcript as a structured how-to guide.

        Args:
            transcript: Full transcript text
            video_title: Title of the source video
            video_description: Optional description of the video

        Returns:
            Markdown-subset text ready for block classification

        Raises:
            LLMError: If the model fails or returns nothing after retries
        """
        logger.info(f"Generating how-to with {self.model} for '{video_title}'")
        try:
            return self._call_llm(
                get_system_prompt(),
                build_user_prompt(transcript, video_title, video_description),
            )
        except LLMError as e:
            logger.error(f"How-to generation failed: {e}")
            raise
