"""
Error taxonomy and the handlers that turn it into ``{"error": ...}`` responses.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class IgnitAIError(Exception):
    """Base class for errors raised by services."""


class SessionNotFound(IgnitAIError):
    def __init__(self, session_id: str):
        super().__init__(f"Session not found: {session_id}")
        self.session_id = session_id


class InvalidRequest(IgnitAIError):
    """A well-formed request that does not fit the target resource."""


class UpstreamFailure(IgnitAIError):
    """An external collaborator (mail relay, AI backend) failed."""


class MailDeliveryError(UpstreamFailure):
    pass


class AIServiceError(UpstreamFailure):
    pass


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path", "form")]
    field = ".".join(location) or "body"
    if first.get("type") == "missing":
        return f"{field} is required"
    return f"{field}: {first.get('msg', 'invalid value')}"


async def session_not_found_handler(request: Request, exc: SessionNotFound):
    logger.info("[session] %s %s -> not found (%s)", request.method, request.url.path, exc.session_id)
    return JSONResponse(status_code=404, content={"error": "Session not found"})


async def invalid_request_handler(request: Request, exc: InvalidRequest):
    return JSONResponse(status_code=400, content={"error": str(exc)})


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": _describe_validation_error(exc)})


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("[error] %s %s failed", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SessionNotFound, session_not_found_handler)
    app.add_exception_handler(InvalidRequest, invalid_request_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
