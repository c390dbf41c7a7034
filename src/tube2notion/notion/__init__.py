"""Notion integration for tube2notion."""

from tube2notion.notion.blocks import (
    PageContent,
    ParentRef,
    block_to_notion,
    build_page,
    build_parent,
    build_properties,
    run_to_rich_text,
)
from tube2notion.notion.client import NotionPublisher, PublishedPage, PublishError

__all__ = [
    "PageContent",
    "ParentRef",
    "block_to_notion",
    "build_page",
    "build_parent",
    "build_properties",
    "run_to_rich_text",
    "NotionPublisher",
    "PublishedPage",
    "PublishError",
]
