"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lad_registry.api.routes import geodesy, sessions
from lad_registry.config import get_settings
from lad_registry.services.elevation import ElevationResolver
from lad_registry.services.sessions import SessionStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Share one HTTP client and one session store for the app's lifetime."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    async with httpx.AsyncClient(timeout=settings.elevation_timeout_seconds) as client:
        store = SessionStore(ElevationResolver(client, settings=settings), settings=settings)
        app.state.session_store = store
        logger.info("Session store ready (debounce %.2fs)", settings.debounce_seconds)
        try:
            yield
        finally:
            await store.close_all()


app = FastAPI(
    title="LAD Registry API",
    description="Geodetic computation engine for landing-site registration",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(sessions.router, prefix="/api")
app.include_router(geodesy.router, prefix="/api")


@app.get("/api/health")
async def health():
    store = getattr(app.state, "session_store", None)
    return {
        "status": "ok",
        "sessions": len(store) if store is not None else 0,
    }
