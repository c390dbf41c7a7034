"""Mapping from converted blocks to Notion API block objects."""

from dataclasses import dataclass, field
from typing import Any, Literal, Optional

from tube2notion.formatting.classifier import BlockClassifier
from tube2notion.formatting.ir import Block, BlockKind, StyledRun


# Notion rejects rich_text items whose content exceeds this many characters
MAX_TEXT_LENGTH = 2000

ParentType = Literal["database", "page"]


@dataclass(frozen=True)
class ParentRef:
    """Where a new page is created."""

    id: str
    type: ParentType = "database"


@dataclass
class PageContent:
    """Title and body blocks for a new page.

    Attributes:
        title: Page title (promoted leading heading or fallback)
        blocks: Body blocks in document order
    """

    title: str
    blocks: list[Block] = field(default_factory=list)

    def to_notion_children(self) -> list[dict[str, Any]]:
        """Render body blocks as Notion block objects."""
        return [block_to_notion(block) for block in self.blocks]


def _split_text(text: str) -> list[str]:
    """Split text into pieces Notion accepts."""
    if not text:
        return [text]
    return [text[i : i + MAX_TEXT_LENGTH] for i in range(0, len(text), MAX_TEXT_LENGTH)]


def run_to_rich_text(run: StyledRun) -> list[dict[str, Any]]:
    """Convert one styled run into Notion rich_text objects.

    Returns more than one object only when the run exceeds the Notion
    content length limit.
    """
    annotations: dict[str, bool] = {}
    if run.bold:
        annotations["bold"] = True
    elif run.italic:
        annotations["italic"] = True
    elif run.code:
        annotations["code"] = True

    items = []
    for piece in _split_text(run.text):
        item: dict[str, Any] = {"type": "text", "text": {"content": piece}}
        if annotations:
            item["annotations"] = dict(annotations)
        items.append(item)
    return items


def runs_to_rich_text(runs: tuple[StyledRun, ...]) -> list[dict[str, Any]]:
    """Convert a run sequence into a flat Notion rich_text array."""
    rich_text: list[dict[str, Any]] = []
    for run in runs:
        rich_text.extend(run_to_rich_text(run))
    return rich_text


def block_to_notion(block: Block) -> dict[str, Any]:
    """Convert a block into a Notion API block object."""
    block_type = block.kind.value

    if block.kind is BlockKind.CODE:
        body: dict[str, Any] = {
            "rich_text": [
                {"type": "text", "text": {"content": piece}}
                for piece in _split_text(block.code)
            ],
            "language": block.language.lower(),
        }
    else:
        body = {"rich_text": runs_to_rich_text(block.runs)}

    return {"object": "block", "type": block_type, block_type: body}


def build_page(
    markdown: str,
    fallback_title: str,
    classifier: Optional[BlockClassifier] = None,
) -> PageContent:
    """Convert generated markdown into a page title and body.

    When the document's first line is a level-one heading, its text becomes
    the page title and the heading is dropped from the body. Otherwise the
    fallback title is used and every block is kept.
    """
    blocks = (classifier or BlockClassifier()).classify(markdown)

    title = fallback_title
    first_line = markdown.split("\n", 1)[0].strip()
    if first_line.startswith("# "):
        title = first_line[2:]
        if blocks and blocks[0].kind is BlockKind.HEADING_1:
            blocks = blocks[1:]

    return PageContent(title=title, blocks=blocks)


def build_parent(parent: ParentRef) -> dict[str, str]:
    """Build the Notion parent object."""
    if parent.type == "database":
        return {"database_id": parent.id}
    return {"page_id": parent.id}


def build_properties(title: str, parent_type: ParentType) -> dict[str, Any]:
    """Build the title property for a new page.

    Database rows use the conventional "Name" title column; child pages
    use the built-in "title" property.
    """
    key = "Name" if parent_type == "database" else "title"
    return {key: {"title": [{"text": {"content": title[:MAX_TEXT_LENGTH]}}]}}
