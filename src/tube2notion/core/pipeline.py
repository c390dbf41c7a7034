"""Main YouTube-to-Notion orchestrator."""

from typing import Optional

from loguru import logger

from tube2notion.config import get_settings
from tube2notion.llm.client import HowToGenerator, LLMError
from tube2notion.notion.blocks import ParentRef
from tube2notion.notion.client import NotionPublisher, PublishedPage, PublishError
from tube2notion.transcript.client import TranscriptClient, TranscriptError


class PipelineError(Exception):
    """Error while turning a video into a page."""

    pass


class HowToPipeline:
    """Orchestrates the video-to-page pipeline.

    Pipeline:
    1. Fetch the transcript and video title
    2. Rewrite the transcript as a how-to guide via LLM
    3. Classify the guide into blocks and publish a Notion page
    """

    def __init__(
        self,
        transcripts: Optional[TranscriptClient] = None,
        generator: Optional[HowToGenerator] = None,
        publisher: Optional[NotionPublisher] = None,
        model: Optional[str] = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            transcripts: Transcript client (default: Supadata client)
            generator: How-to generator (default: LiteLLM generator)
            publisher: Notion publisher (default: configured publisher)
            model: LiteLLM model string for the default generator
        """
        self.settings = get_settings()
        self.transcripts = transcripts or TranscriptClient()
        self.generator = generator or HowToGenerator(model=model)
        self.publisher = publisher or NotionPublisher()

    def close(self) -> None:
        """Release the transcript client's HTTP connections."""
        self.transcripts.close()

    def resolve_parent(self, parent: Optional[ParentRef] = None) -> ParentRef:
        """Pick the request parent, falling back to configuration.

        Raises:
            PipelineError: If neither source provides a parent id
        """
        if parent is not None and parent.id:
            return parent
        if self.settings.notion_default_parent_id:
            return ParentRef(
                id=self.settings.notion_default_parent_id,
                type=self.settings.notion_default_parent_type,
            )
        raise PipelineError("No Notion parent ID provided in request or config")

    def run(self, youtube_url: str, parent: Optional[ParentRef] = None) -> PublishedPage:
        """Turn a YouTube video into a published how-to page.

        Args:
            youtube_url: Link to the video
            parent: Optional target database or page

        Returns:
            The created page

        Raises:
            PipelineError: If any stage fails
        """
        target = self.resolve_parent(parent)

        try:
            transcript = self.transcripts.get_transcript(youtube_url)
            video_title = transcript.title or f"YouTube Video {transcript.video_id}"
            howto = self.generator.generate(transcript.text, video_title)
            page = self.publisher.create_page(video_title, howto, target)
        except (TranscriptError, LLMError, PublishError) as e:
            raise PipelineError(str(e)) from e

        logger.info(f"Processed {youtube_url} into Notion page {page.id}")
        return page
