"""YouTube transcript and metadata fetching."""

import json
import re
from dataclasses import dataclass
from typing import Any, Optional

import httpx
from loguru import logger

from tube2notion.config import get_settings


OEMBED_URL = "https://www.youtube.com/oembed"
VIDEO_ID_PATTERN = re.compile(
    r"^.*(youtu\.be/|v/|u/\w/|embed/|watch\?v=|&v=)([^#&?]*).*"
)
VIDEO_ID_LENGTH = 11


class TranscriptError(Exception):
    """Error fetching a video transcript."""

    pass


@dataclass(frozen=True)
class VideoMetadata:
    """Basic video details from oEmbed."""

    title: str
    author_name: str


UNKNOWN_METADATA = VideoMetadata(title="Unknown Title", author_name="Unknown Author")


@dataclass(frozen=True)
class Transcript:
    """A fetched transcript with the video it belongs to."""

    text: str
    video_id: str
    title: str


def extract_video_id(url: str) -> Optional[str]:
    """Extract the 11-character video id from a YouTube URL.

    Supports youtube.com/watch?v=ID, youtu.be/ID, /embed/ID, /v/ID
    and URLs carrying the id in a later &v= parameter.
    """
    match = VIDEO_ID_PATTERN.match(url)
    if match and len(match.group(2)) == VIDEO_ID_LENGTH:
        return match.group(2)
    return None


def transcript_text_from_payload(payload: Any) -> str:
    """Pull plain transcript text out of a provider response body.

    Accepts a bare string, an object with a string "content" field, or a
    list of segments with "text" fields (bare or under "content").
    """
    if isinstance(payload, str):
        return payload
    if isinstance(payload, dict) and "content" in payload:
        content = payload["content"]
        if isinstance(content, str):
            return content
        if isinstance(content, list):
            return _join_segments(content)
    if isinstance(payload, list):
        return _join_segments(payload)

    keys = list(payload.keys()) if isinstance(payload, dict) else type(payload).__name__
    logger.warning(f"Unexpected transcript response format: {keys}")
    return json.dumps(payload)


def _join_segments(segments: list) -> str:
    return " ".join(
        str(item.get("text", "")) if isinstance(item, dict) else str(item)
        for item in segments
    )


class TranscriptClient:
    """Fetch transcripts through the Supadata API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        settings = get_settings()
        self.api_key = api_key or settings.supadata_api_key
        self.base_url = (base_url or settings.supadata_base_url).rstrip("/")
        self._owns_http = http_client is None
        self.http = http_client or httpx.Client(timeout=timeout or settings.http_timeout)

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> "TranscriptClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def get_video_metadata(self, url: str) -> VideoMetadata:
        """Fetch title and author via YouTube oEmbed.

        Never raises; falls back to placeholder values on any failure.
        """
        try:
            response = self.http.get(OEMBED_URL, params={"url": url, "format": "json"})
            response.raise_for_status()
            data = response.json()
            return VideoMetadata(
                title=data.get("title") or UNKNOWN_METADATA.title,
                author_name=data.get("author_name") or UNKNOWN_METADATA.author_name,
            )
        except (httpx.HTTPError, ValueError, AttributeError) as e:
            logger.warning(f"Failed to fetch video metadata: {e}")
            return UNKNOWN_METADATA

    def get_transcript(self, url: str) -> Transcript:
        """Fetch the transcript and title for a YouTube URL.

        Raises:
            TranscriptError: For an invalid URL, missing API key, or a
                failed provider request
        """
        video_id = extract_video_id(url)
        if not video_id:
            raise TranscriptError("Invalid YouTube URL")

        if not self.api_key:
            raise TranscriptError("SUPADATA_API_KEY is not configured")

        logger.info(f"Fetching transcript via Supadata for {video_id}")

        try:
            response = self.http.get(
                f"{self.base_url}/youtube/transcript",
                params={"videoId": video_id, "text": "true"},
                headers={"x-api-key": self.api_key},
            )
        except httpx.HTTPError as e:
            logger.error(f"Transcript request failed: {e}")
            raise TranscriptError(f"Transcript request failed: {e}") from e

        if response.is_error:
            raise TranscriptError(
                f"Supadata API failed: {response.status_code} "
                f"{response.reason_phrase} - {response.text}"
            )

        try:
            payload = response.json()
        except ValueError:
            payload = response.text

        metadata = self.get_video_metadata(url)
        return Transcript(
            text=transcript_text_from_payload(payload),
            video_id=video_id,
            title=metadata.title,
        )
