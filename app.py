"""Movies API FastAPI application.

Routes:

- ``/users`` — ``POST /register`` and ``POST /login`` are public; listing,
  lookup, update and delete require a bearer token.
- ``/movies`` — listing, lookup, create, update and delete, all behind a
  bearer token.
- ``GET /health`` — service status.

Interactive documentation is served at ``/docs`` and the OpenAPI document
at ``/docs.json``. Tables are created on startup if they do not exist.
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import Dict

from fastapi import FastAPI, Request

import config
from database import create_tables, engine
from error_handlers import register_error_handlers
from routes_movies import router as movies_router
from routes_users import router as users_router

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

access_logger = logging.getLogger("movies_api.access")


@asynccontextmanager
async def lifespan(app: FastAPI):
    await create_tables()
    logger.info("Movies API started")

    yield

    await engine.dispose()
    logger.info("Movies API shutting down")


app = FastAPI(
    root_path=config.ROOT_PATH,
    title="Movies API",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    openapi_url="/docs.json",
)

register_error_handlers(app)

app.include_router(users_router)
app.include_router(movies_router)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log one line per request: method, path, status and duration.

    Requests that end in an unhandled exception are logged as 500.
    """
    started = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        elapsed_ms = (time.perf_counter() - started) * 1000
        access_logger.info(
            "%s %s %d - %.3f ms",
            request.method,
            request.url.path,
            status_code,
            elapsed_ms,
        )


@app.get("/health", tags=["health"])
async def health() -> Dict[str, str]:
    """Health check endpoint returning the service status."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
