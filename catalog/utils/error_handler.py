"""
Error handling for HTTP handlers.

``handle_http_errors`` normalizes what a handler can raise (AppException
passes through, SQLAlchemyError becomes DatabaseError) and
``register_exception_handlers`` installs the shared error page every such
exception ends up on.
"""

from functools import wraps
from typing import Any, Callable

from fastapi import FastAPI, Request
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import HTMLResponse

from catalog.exceptions import AppException, DatabaseError
from catalog.logging import logger
from catalog.utils.templating import render

ERROR_TEMPLATE = "error.html"


def handle_http_errors(func: Callable) -> Callable:
    """
    Decorator for HTTP endpoints that normalizes raised exceptions.

    AppException instances are logged and re-raised for the application
    exception handler; SQLAlchemyError is logged with its traceback and
    re-raised as DatabaseError.

    Args:
        func: The HTTP endpoint function to wrap.

    Returns:
        Wrapped function that handles exceptions.

    Example:
        ```python
        @router.get("/genre/{genre_id}")
        @handle_http_errors
        async def genre_detail(...) -> HTMLResponse:
            detail = await command.execute(genre_id)  # may raise NotFoundError
            ...
        ```
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except AppException as ex:
            logger.warning(
                f"AppException in {func.__name__}: {ex.message}",
                extra={"exception_type": type(ex).__name__},
            )
            raise
        except SQLAlchemyError as ex:
            logger.error(
                f"Database error in {func.__name__}: {ex}",
                exc_info=True,
            )
            raise DatabaseError("Database error occurred") from ex

    return wrapper


async def app_exception_handler(
    request: Request, exc: AppException
) -> HTMLResponse:
    """Render the error page for an application exception."""
    return render(
        request,
        ERROR_TEMPLATE,
        {"title": "Error", "message": exc.message, "status": exc.http_status},
        status_code=exc.http_status,
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> HTMLResponse:
    """Render the error page for framework errors such as unknown routes."""
    return render(
        request,
        ERROR_TEMPLATE,
        {"title": "Error", "message": exc.detail, "status": exc.status_code},
        status_code=exc.status_code,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the shared error page on an application."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
