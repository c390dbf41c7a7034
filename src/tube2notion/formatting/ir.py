"""Intermediate Representation for converted how-to documents.

This module defines the data structures that bridge generated markdown
output to the document-store block format. Blocks form a flat ordered
sequence; nesting is never modeled.
"""

from dataclasses import dataclass, field
from enum import Enum


# Language tag for code blocks whose fence names none
PLAIN_TEXT_LANGUAGE = "plain text"


class SpanStyle(str, Enum):
    """Inline style of a single text run."""

    PLAIN = "plain"
    BOLD = "bold"
    ITALIC = "italic"
    CODE = "code"


class BlockKind(str, Enum):
    """Structural kind of an output block."""

    HEADING_1 = "heading_1"
    HEADING_2 = "heading_2"
    HEADING_3 = "heading_3"
    BULLET_ITEM = "bulleted_list_item"
    NUMBERED_ITEM = "numbered_list_item"
    QUOTE = "quote"
    CODE = "code"
    PARAGRAPH = "paragraph"


@dataclass(frozen=True)
class StyledRun:
    """A contiguous run of text with a single style.

    Attributes:
        text: The text content, delimiters already stripped
        style: The inline style of the whole run
    """

    text: str
    style: SpanStyle = SpanStyle.PLAIN

    @property
    def bold(self) -> bool:
        """Check if this run is bold."""
        return self.style is SpanStyle.BOLD

    @property
    def italic(self) -> bool:
        """Check if this run is italic."""
        return self.style is SpanStyle.ITALIC

    @property
    def code(self) -> bool:
        """Check if this run is inline code."""
        return self.style is SpanStyle.CODE

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Block:
    """One structural unit of the output document.

    Every kind except CODE carries its content as styled runs. CODE
    blocks carry the raw fenced content and a language tag instead.

    Attributes:
        kind: The block kind
        runs: Styled runs making up the block's text (empty for CODE)
        code: Raw multi-line content (CODE only)
        language: Language tag from the opening fence (CODE only)
    """

    kind: BlockKind
    runs: tuple[StyledRun, ...] = field(default_factory=tuple)
    code: str = ""
    language: str = PLAIN_TEXT_LANGUAGE

    @classmethod
    def code_block(cls, code: str, language: str = PLAIN_TEXT_LANGUAGE) -> "Block":
        """Build a CODE block."""
        return cls(kind=BlockKind.CODE, code=code, language=language or PLAIN_TEXT_LANGUAGE)

    @property
    def plain_text(self) -> str:
        """Get the text content without styling."""
        if self.kind is BlockKind.CODE:
            return self.code
        return "".join(run.text for run in self.runs)

    def __str__(self) -> str:
        return self.plain_text
