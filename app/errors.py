# app/errors.py
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .log import get_logger

logger = get_logger(__name__)


# ---------------------------
# Domain failures
# ---------------------------
class ProductAPIError(Exception):
    status_code = 500
    name = "ServerError"

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class NotFoundError(ProductAPIError):
    status_code = 404
    name = "NotFoundError"


class ValidationError(ProductAPIError):
    status_code = 400
    name = "ValidationError"


class RequestRejected(Exception):
    """Short-circuits a request with a bare ``{"message": ...}`` body."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


# ---------------------------
# Error mapper
# ---------------------------
def error_body(kind: str, message: str) -> dict:
    return {"success": False, "error": kind, "message": message}


async def handle_api_error(request: Request, exc: ProductAPIError) -> JSONResponse:
    logger.warning("Error: %s: %s", exc.name, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.name, exc.message or "Something went wrong"),
    )


async def handle_rejected(request: Request, exc: RequestRejected) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    kind = "NotFoundError" if exc.status_code == 404 else "HTTPError"
    logger.warning("Error: %s: %s %s", kind, request.method, request.url.path)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(kind, str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Error: unhandled failure on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=error_body("ServerError", "Something went wrong"),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ProductAPIError, handle_api_error)
    app.add_exception_handler(RequestRejected, handle_rejected)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(Exception, handle_unexpected)
