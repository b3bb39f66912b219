import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class AuthError(ApiError):
    """Rendered as 401 with a JSON {"error": ...} body."""
    status_code = 401


class MissingCredentials(AuthError):
    message = "Missing credentials"


class InvalidCredentials(AuthError):
    message = "Invalid credentials"


class InvalidOrExpiredToken(AuthError):
    message = "Invalid or expired token"


class ValidationError(ApiError):
    """Rendered as 400 plain text, unlike the auth errors."""
    status_code = 400
    message = "Invalid request"


class NotFound(ApiError):
    status_code = 404
    message = "Not Found"


async def auth_error_handler(request: Request, exc: AuthError):
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


async def plain_error_handler(request: Request, exc: ApiError):
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def route_error_handler(request: Request, exc: StarletteHTTPException):
    # an unknown path and a known path without this method both mean "no route"
    if exc.status_code in (404, 405):
        return PlainTextResponse(NotFound.message, status_code=404)
    return await http_exception_handler(request, exc)


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse({"error": ApiError.message}, status_code=500)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AuthError, auth_error_handler)
    app.add_exception_handler(ApiError, plain_error_handler)
    app.add_exception_handler(StarletteHTTPException, route_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
