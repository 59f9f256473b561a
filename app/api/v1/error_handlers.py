# Standard library imports
import logging

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exception: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as {"error": message}"""
    if exception.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exception.detail}")
    return JSONResponse(
        status_code=exception.status_code,
        content={"error": exception.detail},
        headers=getattr(exception, "headers", None),
    )


async def request_validation_handler(request: Request, exception: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are client errors, reported like validation failures"""
    messages = []
    for error in exception.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "; ".join(messages) or "malformed request"},
    )


def register_error_handlers(application: FastAPI) -> None:
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(RequestValidationError, request_validation_handler)
