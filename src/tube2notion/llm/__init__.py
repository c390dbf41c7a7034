"""LLM integration for tube2notion."""

from tube2notion.llm.client import HowToGenerator, LLMError
from tube2notion.llm.prompts import HOWTO_SYSTEM_PROMPT, build_user_prompt

__all__ = [
    "HowToGenerator",
    "LLMError",
    "HOWTO_SYSTEM_PROMPT",
    "build_user_prompt",
]
