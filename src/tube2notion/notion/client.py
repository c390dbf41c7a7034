"""Notion page publishing."""

from dataclasses import dataclass
from typing import Any, Optional

import httpx
from loguru import logger
from notion_client import Client
from notion_client.errors import HTTPResponseError, RequestTimeoutError

from tube2notion.config import get_settings
from tube2notion.notion.blocks import (
    ParentRef,
    build_page,
    build_parent,
    build_properties,
)


# Notion accepts at most this many children per request
MAX_CHILDREN_PER_REQUEST = 100

NOTION_ERRORS = (HTTPResponseError, RequestTimeoutError, httpx.HTTPError)


class PublishError(Exception):
    """Error creating a page in Notion."""

    pass


def _describe(error: Exception) -> str:
    return f"code={getattr(error, 'code', None)}, status={getattr(error, 'status', None)}"


@dataclass(frozen=True)
class PublishedPage:
    """Identifier and URL of a created page."""

    id: str
    url: str


class NotionPublisher:
    """Create Notion pages from generated how-to markdown."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        default_parent: Optional[ParentRef] = None,
        client: Optional[Client] = None,
    ) -> None:
        """Initialize the publisher.

        Args:
            api_key: Notion integration token (default from settings)
            default_parent: Parent used when create_page gets none
            client: Preconfigured notion_client.Client
        """
        settings = get_settings()
        if default_parent is None and settings.notion_default_parent_id:
            default_parent = ParentRef(
                id=settings.notion_default_parent_id,
                type=settings.notion_default_parent_type,
            )
        self.default_parent = default_parent
        self.client = client or Client(auth=api_key or settings.notion_api_key)

    def create_page(
        self,
        title: str,
        markdown: str,
        parent: Optional[ParentRef] = None,
    ) -> PublishedPage:
        """Convert markdown into blocks and create a page.

        Args:
            title: Fallback title if the markdown has no leading heading
            markdown: Generated how-to content
            parent: Target database or page (default: configured parent)

        Returns:
            The created page's id and URL

        Raises:
            PublishError: If no parent is known or Notion rejects the request
        """
        parent = parent or self.default_parent
        if parent is None or not parent.id:
            raise PublishError("No Notion parent ID provided")

        content = build_page(markdown, title)
        children = content.to_notion_children()
        first_batch = children[:MAX_CHILDREN_PER_REQUEST]
        remaining = children[MAX_CHILDREN_PER_REQUEST:]

        logger.info(
            f"Creating Notion page '{content.title}' under {parent.type} {parent.id} "
            f"with {len(children)} block(s)"
        )

        try:
            response = self.client.pages.create(
                parent=build_parent(parent),
                properties=build_properties(content.title, parent.type),
                children=first_batch,
            )
        except NOTION_ERRORS as e:
            logger.error(f"Failed to create Notion page: {e} ({_describe(e)})")
            raise PublishError(f"Notion API error: {e}") from e

        page_id = response.get("id")
        if not page_id:
            raise PublishError("Notion API error: response did not include a page id")

        try:
            self._append_children(page_id, remaining)
        except NOTION_ERRORS as e:
            logger.error(
                f"Page {page_id} was created but appending blocks failed: {e} ({_describe(e)})"
            )
            raise PublishError(
                f"Notion API error: page {page_id} was created but is incomplete: {e}"
            ) from e

        page = PublishedPage(id=page_id, url=response.get("url", ""))
        logger.info(f"Notion page created: {page.id} {page.url}")
        return page

    def _append_children(self, page_id: str, children: list[dict[str, Any]]) -> None:
        """Append blocks beyond the first request in batches."""
        for start in range(0, len(children), MAX_CHILDREN_PER_REQUEST):
            self.client.blocks.children.append(
                block_id=page_id,
                children=children[start : start + MAX_CHILDREN_PER_REQUEST],
            )
