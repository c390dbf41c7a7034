"""Pytest fixtures for tube2notion tests."""

import sys

import pytest
from pathlib import Path
from unittest.mock import Mock, patch

from loguru import logger

from tube2notion import config
from tube2notion.config import Settings


ENV_VARS = (
    "PORT",
    "WEBHOOK_SECRET",
    "SUPADATA_API_KEY",
    "SUPADATA_BASE_URL",
    "GEMINI_API_KEY",
    "NOTION_API_KEY",
    "NOTION_DEFAULT_PARENT_ID",
    "NOTION_DEFAULT_PARENT_TYPE",
    "TUBE2NOTION_MODEL",
    "TUBE2NOTION_TEMPERATURE",
    "TUBE2NOTION_MAX_TOKENS",
    "TUBE2NOTION_LOG_LEVEL",
    "TUBE2NOTION_HTTP_TIMEOUT",
)


@pytest.fixture(autouse=True)
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Isolated settings with no environment or .env leakage."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    instance = Settings(_env_file=None)
    monkeypatch.setattr(config, "_settings", instance)
    return instance


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo sinks installed by the CLI so later tests never log to a closed stream."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def configured_settings(settings: Settings) -> Settings:
    """Settings with every required secret filled in."""
    settings.webhook_secret = "s3cret"
    settings.gemini_api_key = "gemini-key"
    settings.notion_api_key = "notion-key"
    settings.supadata_api_key = "supadata-key"
    settings.notion_default_parent_id = "default-db"
    return settings


@pytest.fixture
def sample_howto() -> str:
    """Sample generated how-to guide."""
    return '''# Deploy a Flask App

## Overview
- Ship a **Flask** app to the cloud in *ten minutes*.

## Steps
1. Install the `gcloud` CLI
2. Open the **Settings** menu

```bash
gcloud run deploy app --source .
```

> Keep your *secrets* out of the repo.
Done.'''


@pytest.fixture
def mock_llm_response(sample_howto: str) -> str:
    """Mock LLM response."""
    return sample_howto


@pytest.fixture
def mock_llm_client(mock_llm_response: str):
    """Patch LiteLLM so no API calls are made."""
    with patch("tube2notion.llm.client.completion") as mock_completion:
        mock_completion.return_value = Mock(
            choices=[Mock(message=Mock(content=mock_llm_response))]
        )
        yield mock_completion


@pytest.fixture
def tmp_markdown_file(tmp_path: Path, sample_howto: str) -> Path:
    """Create a temporary markdown file for testing."""
    file_path = tmp_path / "guide.md"
    file_path.write_text(sample_howto, encoding="utf-8")
    return file_path
