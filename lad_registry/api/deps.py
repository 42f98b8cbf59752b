"""FastAPI dependency injection wiring."""

from __future__ import annotations

from fastapi import Depends, HTTPException, Request

from lad_registry.config import Settings, get_settings
from lad_registry.errors import SessionNotFoundError
from lad_registry.services.pipeline import DerivationPipeline
from lad_registry.services.sessions import SessionStore


# ------------------------------------------------------------------
# Settings
# ------------------------------------------------------------------


def get_app_settings() -> Settings:
    return get_settings()


# ------------------------------------------------------------------
# Session store (singleton from app.state)
# ------------------------------------------------------------------


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store


def get_pipeline(
    session_id: str,
    store: SessionStore = Depends(get_session_store),
) -> DerivationPipeline:
    try:
        return store.get(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail=f"Session {session_id} not found")
