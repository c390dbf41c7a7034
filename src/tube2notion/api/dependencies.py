from __future__ import annotations

import secrets
from functools import lru_cache
from typing import Optional

from fastapi import Header
from loguru import logger

from tube2notion.config import get_settings
from tube2notion.core.pipeline import HowToPipeline


class WebhookError(Exception):
    """Error returned to webhook callers as a JSON error body."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


@lru_cache(maxsize=1)
def get_pipeline() -> HowToPipeline:
    return HowToPipeline()


def verify_token(authorization: Optional[str] = Header(default=None)) -> None:
    """Check the bearer token against WEBHOOK_SECRET."""
    if not authorization or not authorization.startswith("Bearer "):
        logger.warning("Auth failed: missing or invalid Authorization header")
        raise WebhookError(401, "Missing or invalid Authorization header")

    token = authorization[len("Bearer "):].strip()
    expected = get_settings().webhook_secret
    if not expected or not secrets.compare_digest(token, expected):
        logger.warning(
            f"Auth failed: token mismatch (received length {len(token)}, "
            f"expected length {len(expected or '')})"
        )
        raise WebhookError(401, "Invalid secret token")
