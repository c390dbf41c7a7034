"""Block classifier for converting generated markdown into typed blocks."""

import re
from collections.abc import Sequence
from enum import Enum
from typing import Optional, Union

from loguru import logger

from tube2notion.formatting.ir import (
    PLAIN_TEXT_LANGUAGE,
    Block,
    BlockKind,
    SpanStyle,
    StyledRun,
)
from tube2notion.formatting.spans import SpanParser


Document = Union[str, Sequence[str]]


class InvalidArgumentError(ValueError):
    """Caller passed something that is not a document."""

    pass


class ScanState(Enum):
    """States of the line scanner."""

    SCANNING = "scanning"
    IN_CODE_BLOCK = "in_code_block"


class BlockClassifier:
    """Classify markdown lines into a flat sequence of blocks.

    Classification is line-local and prefix based. The only state carried
    between lines is whether the scanner is inside a fenced code block.
    """

    FENCE = "```"
    LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")
    NUMBERED_PATTERN = re.compile(r"^[0-9]+\. ")

    # Checked in order, first match wins
    HEADING_PREFIXES: tuple[tuple[str, BlockKind], ...] = (
        ("# ", BlockKind.HEADING_1),
        ("## ", BlockKind.HEADING_2),
        ("### ", BlockKind.HEADING_3),
    )
    BULLET_PREFIX = "- "
    QUOTE_PREFIX = "> "

    def __init__(self, span_parser: Optional[SpanParser] = None) -> None:
        self.span_parser = span_parser or SpanParser()
        # Number of buffered code lines dropped by the last classify() call
        self.last_discarded_lines = 0

    def classify(self, document: Document) -> list[Block]:
        """Convert a document into an ordered list of blocks.

        Args:
            document: Markdown text, or a sequence of its lines

        Returns:
            Blocks in source order; empty for an empty document

        Raises:
            InvalidArgumentError: If document is None or not text
        """
        lines = self._split_lines(document)

        blocks: list[Block] = []
        state = ScanState.SCANNING
        code_language = PLAIN_TEXT_LANGUAGE
        code_lines: list[str] = []

        for line in lines:
            trimmed = line.strip()

            if trimmed.startswith(self.FENCE):
                if state is ScanState.IN_CODE_BLOCK:
                    blocks.append(Block.code_block("\n".join(code_lines), code_language))
                    state = ScanState.SCANNING
                    code_lines = []
                    code_language = PLAIN_TEXT_LANGUAGE
                else:
                    state = ScanState.IN_CODE_BLOCK
                    code_language = trimmed[len(self.FENCE):].strip() or PLAIN_TEXT_LANGUAGE
                continue

            if state is ScanState.IN_CODE_BLOCK:
                code_lines.append(line)
                continue

            if not trimmed:
                continue

            blocks.append(self.classify_line(trimmed))

        self.last_discarded_lines = self._finish(state, code_lines)
        return blocks

    def classify_line(self, trimmed: str) -> Block:
        """Classify a single non-blank line outside any code block."""
        for prefix, kind in self.HEADING_PREFIXES:
            if trimmed.startswith(prefix):
                return Block(kind=kind, runs=self._literal_runs(trimmed[len(prefix):]))

        if trimmed.startswith(self.BULLET_PREFIX):
            return self._styled_block(BlockKind.BULLET_ITEM, trimmed[len(self.BULLET_PREFIX):])

        match = self.NUMBERED_PATTERN.match(trimmed)
        if match:
            return self._styled_block(BlockKind.NUMBERED_ITEM, trimmed[match.end():])

        if trimmed.startswith(self.QUOTE_PREFIX):
            return self._styled_block(BlockKind.QUOTE, trimmed[len(self.QUOTE_PREFIX):])

        return self._styled_block(BlockKind.PARAGRAPH, trimmed)

    def _styled_block(self, kind: BlockKind, text: str) -> Block:
        return Block(kind=kind, runs=tuple(self.span_parser.parse(text)))

    @staticmethod
    def _literal_runs(text: str) -> tuple[StyledRun, ...]:
        """Headings keep their text verbatim so they can serve as titles."""
        if not text:
            return ()
        return (StyledRun(text=text, style=SpanStyle.PLAIN),)

    @staticmethod
    def _finish(state: ScanState, code_lines: list[str]) -> int:
        """Terminal transition at end of input.

        An unterminated code fence drops its buffered content without
        emitting a block.

        Returns:
            Number of buffered lines that were discarded
        """
        if state is ScanState.IN_CODE_BLOCK:
            logger.debug(
                f"Unterminated code fence, discarding {len(code_lines)} buffered line(s)"
            )
            return len(code_lines)
        return 0

    def _split_lines(self, document: Document) -> list[str]:
        if document is None:
            raise InvalidArgumentError("document must not be None")
        if isinstance(document, str):
            if not document:
                return []
            return self.LINE_BREAK_PATTERN.split(document)
        if isinstance(document, (bytes, bytearray)):
            raise InvalidArgumentError("document must be text, not bytes")
        if isinstance(document, Sequence):
            if not all(isinstance(line, str) for line in document):
                raise InvalidArgumentError("document lines must all be strings")
            return list(document)
        raise InvalidArgumentError(
            f"document must be a string or a sequence of lines, got {type(document).__name__}"
        )


def classify(document: Document) -> list[Block]:
    """Classify a document with a fresh classifier."""
    return BlockClassifier().classify(document)
