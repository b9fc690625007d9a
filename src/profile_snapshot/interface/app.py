"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from profile_snapshot.interface.dependencies import shutdown, startup
from profile_snapshot.interface.error_handlers import register_error_handlers
from profile_snapshot.interface.routes import router


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage startup / shutdown of shared resources."""
    await startup()
    yield
    await shutdown()


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    app = FastAPI(
        title="GitHub Profile Snapshot",
        version="1.0.0",
        description=(
            "Takes a GitHub username and returns a normalized snapshot of the "
            "user's public footprint: profile, activity rollups, recent "
            "repositories with README and commits, and a text summary."
        ),
        lifespan=_lifespan,
    )

    register_error_handlers(app)
    app.include_router(router)

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
