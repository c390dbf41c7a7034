"""Transcript fetching for tube2notion."""

from tube2notion.transcript.client import (
    Transcript,
    TranscriptClient,
    TranscriptError,
    VideoMetadata,
    extract_video_id,
)

__all__ = [
    "Transcript",
    "TranscriptClient",
    "TranscriptError",
    "VideoMetadata",
    "extract_video_id",
]
