from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from tube2notion import __version__
from tube2notion.api.dependencies import WebhookError
from tube2notion.api.routes import router as webhook_router
from tube2notion.config import ConfigurationError, get_settings, validate_settings


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "error_message": message},
    )


def describe_validation_error(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into one line, e.g. 'notion_parent.id: Field required'."""
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())[1:])
        details.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "Invalid request body: " + "; ".join(details)


def create_app() -> FastAPI:
    app = FastAPI(title="tube2notion", version=__version__)

    try:
        validate_settings(get_settings())
    except ConfigurationError as e:
        logger.warning(
            f"Configuration validation failed - application will start but may not function correctly: {e}"
        )

    app.include_router(webhook_router)

    @app.exception_handler(WebhookError)
    def handle_webhook_error(request: Request, exc: WebhookError) -> JSONResponse:
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = describe_validation_error(exc)
        logger.warning(f"Rejected request to {request.url.path}: {message}")
        return _error_response(400, message)

    @app.exception_handler(Exception)
    def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Unhandled error on {request.url.path}: {exc}")
        return _error_response(500, str(exc) or "Internal Server Error")

    @app.get("/healthz")
    def health() -> dict:
        return {"status": "ok"}

    return app
