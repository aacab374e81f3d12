"""Application entrypoint for the ReviewGate API."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from reviewgate.api.errors import register_exception_handlers
from reviewgate.api.v1.router import get_api_router
from reviewgate.core.config import Config, get_config
from reviewgate.core.startup import bootstrap
from reviewgate.database.init_db import create_tables


def create_app(settings: Config | None = None, initialize_database: bool = True) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Configuration to use; defaults to the environment-derived config.
        initialize_database: Run startup checks and create tables in the lifespan.
    """
    cfg = settings or get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if initialize_database:
            bootstrap()
            create_tables()
        yield

    app = FastAPI(title=cfg.APP_NAME, version=cfg.APP_VERSION, lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cfg.CORS_ALLOW_ORIGINS),
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type", "x-webhook-secret"],
    )
    register_exception_handlers(app)
    app.include_router(get_api_router(prefix=cfg.API_PREFIX))

    @app.get("/")
    def root() -> dict:
        return {"service": cfg.APP_NAME, "version": cfg.APP_VERSION, "api_prefix": cfg.API_PREFIX}

    return app


# Expose ASGI app for `uvicorn reviewgate.main:app`.
app = create_app()


if __name__ == "__main__":
    import uvicorn

    config = get_config()
    uvicorn.run("reviewgate.main:app", host=config.API_HOST, port=config.API_PORT, log_config=None)
