from __future__ import annotations

from typing import Literal, Optional

from fastapi import APIRouter, Depends
from loguru import logger
from pydantic import BaseModel

from tube2notion.api.dependencies import WebhookError, get_pipeline, verify_token
from tube2notion.core.pipeline import PipelineError
from tube2notion.notion.blocks import ParentRef

router = APIRouter(prefix="/webhook", tags=["webhook"])


class NotionParent(BaseModel):
    type: Literal["database", "page"] = "database"
    id: str


class YoutubeToNotionRequest(BaseModel):
    youtube_url: Optional[str] = None
    notion_parent: Optional[NotionParent] = None
    # Accepted for compatibility; the transcript provider picks the language
    language: Optional[str] = None


class YoutubeToNotionResponse(BaseModel):
    status: Literal["ok"] = "ok"
    notion_page_id: str
    notion_page_url: str


@router.post(
    "/youtube-to-notion",
    response_model=YoutubeToNotionResponse,
    dependencies=[Depends(verify_token)],
)
def youtube_to_notion(request: YoutubeToNotionRequest) -> YoutubeToNotionResponse:
    if not request.youtube_url:
        raise WebhookError(400, "Missing youtube_url")

    logger.info(f"Received webhook request for {request.youtube_url}")

    parent = None
    if request.notion_parent is not None:
        parent = ParentRef(id=request.notion_parent.id, type=request.notion_parent.type)

    try:
        page = get_pipeline().run(request.youtube_url, parent)
    except PipelineError as e:
        logger.error(f"Error processing request: {e}")
        raise WebhookError(500, str(e) or "Internal Server Error") from e
    except Exception as e:
        logger.exception(f"Unexpected error processing request: {e}")
        raise WebhookError(500, str(e) or "Internal Server Error") from e

    return YoutubeToNotionResponse(notion_page_id=page.id, notion_page_url=page.url)
