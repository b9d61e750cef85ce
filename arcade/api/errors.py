"""Exception handlers rendering every failure as ``{status, detail}``."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from arcade.core.errors import ArcadeError, ErrorKind
from arcade.core.logging import get_logger

logger = get_logger(__name__)


def error_response(status: int, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status, content={"status": status, "detail": detail})


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on the application."""

    @app.exception_handler(ArcadeError)
    async def arcade_error_handler(request: Request, exc: ArcadeError) -> JSONResponse:
        if exc.kind is ErrorKind.INTERNAL:
            logger.error("%s %s: %s", request.method, request.url.path, exc.message)
        return error_response(exc.status_code, f"{exc.kind.value}: {exc.message}")

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        kind = ErrorKind.BAD_REQUEST
        return error_response(kind.status_code, f"{kind.value}: {exc.errors()}")

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(500, "internal server error")
