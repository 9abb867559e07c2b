"""
Centralized error handlers.

Maps the application's error kinds to rendered error pages:
- NotFound          -> 404 page, logged at INFO (a normal outcome)
- ValidationFailed  -> 400 page
- Internal          -> 500 page, logged at ERROR with the cause

No exception text or stack trace for a 500 ever reaches the client.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.errors import AppError, ErrorKind, Internal, NotFound, ValidationFailed

logger = logging.getLogger(__name__)

ERROR_TEMPLATES = {
    400: "errors/400.html",
    404: "errors/404.html",
    500: "errors/500.html",
}


def render_error(request: Request, status_code: int, message: str) -> Response:
    """Render the error page for a status code."""
    templates = request.app.state.templates
    return templates.TemplateResponse(
        request,
        ERROR_TEMPLATES[status_code],
        {"status_code": status_code, "message": message},
        status_code=status_code,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError) -> Response:
        if exc.kind is ErrorKind.NOT_FOUND:
            logger.info("Not found: %s %s (%s)", request.method, request.url.path, exc.message)
            return render_error(request, 404, exc.message)
        if exc.kind is ErrorKind.VALIDATION_FAILED:
            return render_error(request, 400, exc.message)

        logger.error(
            "Internal error on %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
            exc_info=exc.__cause__ or exc,
        )
        return render_error(request, 500, "Internal Server Error")

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> Response:
        # A path that does not decode (e.g. /lists/abc/edit) names nothing
        if any(error.get("loc", ("",))[0] == "path" for error in exc.errors()):
            return await handle_app_error(request, NotFound())
        field = ".".join(str(part) for part in exc.errors()[0].get("loc", ())[1:])
        return await handle_app_error(
            request, ValidationFailed(field, None, "invalid request")
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> Response:
        if exc.status_code == 404:
            return render_error(request, 404, "Not Found")
        return PlainTextResponse(
            str(exc.detail), status_code=exc.status_code, headers=exc.headers
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> Response:
        """Anything that escaped classification is an internal error."""
        internal = Internal(f"{type(exc).__name__}: {exc}")
        internal.__cause__ = exc
        return await handle_app_error(request, internal)
