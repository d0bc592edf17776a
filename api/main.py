"""Biblioteca API — FastAPI entry point.

Registers routers, error handling and lifecycle hooks. The store is
connected once at startup; if that fails the process exits instead of
serving degraded traffic.
"""

import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

import core.database as db_module
from core.errors import StoreError
from core.observability.logging_setup import setup_logging
from verticals.biblioteca.config import config

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup/shutdown hooks."""
    setup_logging(config.logging.level, config.logging.format)
    try:
        await db_module.init_db(config.store)
    except StoreError as e:
        logger.critical(f"Error al conectar a la base de datos: {e.message}", exc_info=e)
        raise SystemExit(1) from e

    logger.info("Conectado a la base de datos")
    logger.info(f"Servidor funcionando en http://{config.server.host}:{config.server.port}")
    yield
    await db_module.close_db()
    logger.info("Biblioteca shutting down")


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

app = FastAPI(
    title="Biblioteca",
    description="Server-rendered catalog of books and categories",
    version=VERSION,
    lifespan=lifespan,
)


# ---------------------------------------------------------------------------
# Routers — verticals register here
# ---------------------------------------------------------------------------

from verticals.biblioteca.router import router as biblioteca_router  # noqa: E402

app.include_router(biblioteca_router, tags=["Biblioteca"])


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------

@app.get("/health")
async def health():
    healthy = db_module.database is not None and await db_module.database.health_check()
    return {"status": "healthy" if healthy else "unhealthy", "version": VERSION}


# Static assets, mounted after the routes so they take precedence
if os.path.isdir("public"):
    app.mount("/", StaticFiles(directory="public"), name="public")


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

@app.exception_handler(Exception)
async def generic_error_handler(request: Request, exc: Exception):
    """Catch-all; never leaks internal details."""
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=exc,
        extra={"path": request.url.path},
    )
    return PlainTextResponse(
        "Error interno del servidor",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def run() -> None:
    """Console entry point: serve on the configured host and port."""
    uvicorn.run(app, host=config.server.host, port=config.server.port)


if __name__ == "__main__":
    run()
