"""Formatting utilities for converting generated markdown into blocks."""

from tube2notion.formatting.ir import (
    PLAIN_TEXT_LANGUAGE,
    Block,
    BlockKind,
    SpanStyle,
    StyledRun,
)
from tube2notion.formatting.spans import SpanParser, parse_spans
from tube2notion.formatting.classifier import (
    BlockClassifier,
    InvalidArgumentError,
    ScanState,
    classify,
)

__all__ = [
    "PLAIN_TEXT_LANGUAGE",
    "Block",
    "BlockKind",
    "SpanStyle",
    "StyledRun",
    "SpanParser",
    "parse_spans",
    "BlockClassifier",
    "InvalidArgumentError",
    "ScanState",
    "classify",
]
