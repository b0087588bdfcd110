"""FastAPI application wiring for physlist."""

from __future__ import annotations

from collections.abc import Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from physlist import __version__
from physlist.api import routes
from physlist.api.runtime import ApiState, build_state
from physlist.config import Settings, get_settings


def create_app(
    *,
    state_factory: Callable[[], ApiState] = build_state,
    settings: Settings | None = None,
) -> FastAPI:
    """Instantiate the FastAPI application with routing and lifecycle hooks."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        state = state_factory()
        app.state.api_state = state
        try:
            yield
        finally:
            await state.shutdown()

    app = FastAPI(title="physlist API", version=__version__, lifespan=lifespan)
    settings = settings or get_settings()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(routes.router)
    return app
