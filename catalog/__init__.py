# Uvicorn application factory <https://www.uvicorn.org/#application-factories>
from contextlib import asynccontextmanager

from fastapi import FastAPI

from catalog.logging import logger
from catalog.middlewares.correlation_id import CorrelationIDMiddleware
from catalog.middlewares.logging_context import LoggingContextMiddleware
from catalog.routing import collect_subrouters
from catalog.storage.db import engine, wait_and_init_db
from catalog.utils.error_handler import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager for startup and shutdown.

    Startup waits for the database and creates missing tables; shutdown
    disposes of the connection pool.
    """
    logger.info("Application startup initiated")
    await wait_and_init_db()
    logger.info("Application startup complete")

    yield  # Application runs here

    logger.info("Application shutdown initiated")
    await engine.dispose()
    logger.info("Application shutdown complete")


def application() -> FastAPI:
    """
    Initializes and configures the FastAPI application.

    Sets up:
    - Lifespan: waits for the database, creates tables, disposes the pool.
    - Routers collected by `catalog.routing.collect_subrouters()`.
    - Shared error page for AppException and HTTP errors.
    - `CorrelationIDMiddleware` and `LoggingContextMiddleware`.
    """
    app = FastAPI(
        title="Local Library",
        description="Server-rendered catalog of genres, authors and books",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(collect_subrouters())
    register_exception_handlers(app)

    # Middlewares (execute in REVERSE order of registration)
    # Execution flow: CorrelationIDMiddleware -> LoggingContextMiddleware
    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(CorrelationIDMiddleware)

    return app
