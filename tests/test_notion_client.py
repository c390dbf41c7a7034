"""Tests for the Notion publisher."""

import pytest
from unittest.mock import Mock, patch

import httpx

from tube2notion.config import Settings
from tube2notion.notion.blocks import ParentRef
from tube2notion.notion.client import (
    MAX_CHILDREN_PER_REQUEST,
    NotionPublisher,
    PublishedPage,
    PublishError,
)


class TestNotionPublisher:
    """Tests for the NotionPublisher class."""

    @pytest.fixture
    def notion(self) -> Mock:
        """A mock notion_client.Client."""
        client = Mock()
        client.pages.create.return_value = {
            "id": "page-123",
            "url": "https://www.notion.so/page-123",
        }
        return client

    def test_create_page_in_database(self, notion: Mock, sample_howto: str):
        """Test page creation under a database parent."""
        publisher = NotionPublisher(client=notion)
        page = publisher.create_page("Fallback", sample_howto, ParentRef(id="db1"))

        assert page == PublishedPage(id="page-123", url="https://www.notion.so/page-123")

        kwargs = notion.pages.create.call_args.kwargs
        assert kwargs["parent"] == {"database_id": "db1"}
        assert kwargs["properties"] == {
            "Name": {"title": [{"text": {"content": "Deploy a Flask App"}}]}
        }
        assert kwargs["children"][0]["type"] == "heading_2"

    def test_create_page_under_page(self, notion: Mock):
        """Test page creation under a page parent."""
        publisher = NotionPublisher(client=notion)
        publisher.create_page("Guide", "Body text", ParentRef(id="pg1", type="page"))

        kwargs = notion.pages.create.call_args.kwargs
        assert kwargs["parent"] == {"page_id": "pg1"}
        assert kwargs["properties"] == {"title": {"title": [{"text": {"content": "Guide"}}]}}

    def test_default_parent_from_settings(self, notion: Mock, settings: Settings):
        """Test that the configured parent is used when none is passed."""
        settings.notion_default_parent_id = "cfg-page"
        settings.notion_default_parent_type = "page"

        publisher = NotionPublisher(client=notion)
        publisher.create_page("Guide", "Body")

        assert notion.pages.create.call_args.kwargs["parent"] == {"page_id": "cfg-page"}

    def test_missing_parent_raises(self, notion: Mock):
        """Test that publishing without any parent fails."""
        publisher = NotionPublisher(client=notion)

        with pytest.raises(PublishError, match="parent"):
            publisher.create_page("Guide", "Body")
        notion.pages.create.assert_not_called()

    def test_large_documents_are_batched(self, notion: Mock):
        """Test that children beyond the request limit are appended in batches."""
        markdown = "\n".join(f"- item {i}" for i in range(250))

        publisher = NotionPublisher(client=notion)
        publisher.create_page("Guide", markdown, ParentRef(id="db1"))

        first = notion.pages.create.call_args.kwargs["children"]
        assert len(first) == MAX_CHILDREN_PER_REQUEST

        appended = notion.blocks.children.append.call_args_list
        assert [len(call.kwargs["children"]) for call in appended] == [100, 50]
        assert all(call.kwargs["block_id"] == "page-123" for call in appended)

    def test_api_error_is_wrapped(self, notion: Mock):
        """Test that transport failures surface as PublishError."""
        notion.pages.create.side_effect = httpx.ConnectError("boom")

        publisher = NotionPublisher(client=notion)
        with pytest.raises(PublishError, match="boom"):
            publisher.create_page("Guide", "Body", ParentRef(id="db1"))

    def test_append_failure_names_created_page(self, notion: Mock):
        """Test that a half-filled page is identified in the error."""
        notion.blocks.children.append.side_effect = httpx.ReadTimeout("slow")
        markdown = "\n".join(f"- item {i}" for i in range(150))

        publisher = NotionPublisher(client=notion)
        with pytest.raises(PublishError, match="page-123") as exc_info:
            publisher.create_page("Guide", markdown, ParentRef(id="db1"))
        assert "slow" in str(exc_info.value)

    def test_response_without_id(self, notion: Mock):
        """Test that a malformed create response is a PublishError."""
        notion.pages.create.return_value = {"url": "https://www.notion.so/x"}

        publisher = NotionPublisher(client=notion)
        with pytest.raises(PublishError, match="page id"):
            publisher.create_page("Guide", "Body", ParentRef(id="db1"))

    def test_client_built_from_settings(self, settings: Settings):
        """Test the default client uses the configured token."""
        settings.notion_api_key = "secret-token"

        with patch("tube2notion.notion.client.Client") as mock_client:
            NotionPublisher()

        mock_client.assert_called_once_with(auth="secret-token")
