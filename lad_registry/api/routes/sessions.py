"""Form session endpoints: feed edits in, read derived facts out."""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from lad_registry.api.deps import get_app_settings, get_pipeline, get_session_store
from lad_registry.config import Settings
from lad_registry.contracts.edits import (
    CoordinateEdit,
    FormEdit,
    PlaceTypeEdit,
    TrajectoryCountEdit,
)
from lad_registry.errors import FieldNotEditableError
from lad_registry.services.pipeline import DerivationPipeline
from lad_registry.services.sessions import SessionStore
from lad_registry.services.site_view import build_snapshot

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _snapshot(pipeline: DerivationPipeline, session_id: str) -> dict:
    data = build_snapshot(pipeline.state).to_dict()
    data["id"] = session_id
    return data


def _apply(pipeline: DerivationPipeline, edit: FormEdit) -> None:
    try:
        pipeline.apply(edit)
    except FieldNotEditableError as exc:
        raise HTTPException(status_code=409, detail=str(exc))


@router.post("", status_code=201)
async def create_session(
    store: SessionStore = Depends(get_session_store),
) -> dict:
    session_id, pipeline = store.create()
    return _snapshot(pipeline, session_id)


@router.get("/{session_id}")
async def get_session(
    session_id: str,
    wait: bool = False,
    pipeline: DerivationPipeline = Depends(get_pipeline),
    settings: Settings = Depends(get_app_settings),
) -> dict:
    """Current snapshot; with ``wait=true`` after pending edits settle."""
    if wait:
        try:
            await asyncio.wait_for(
                pipeline.wait_idle(), timeout=settings.session_wait_timeout_seconds
            )
        except asyncio.TimeoutError:
            logger.warning("Session %s still computing after wait timeout", session_id)
    return _snapshot(pipeline, session_id)


@router.patch("/{session_id}/coordinates")
async def edit_coordinate(
    session_id: str,
    edit: CoordinateEdit,
    pipeline: DerivationPipeline = Depends(get_pipeline),
) -> dict:
    _apply(pipeline, edit)
    return _snapshot(pipeline, session_id)


@router.put("/{session_id}/place-type")
async def set_place_type(
    session_id: str,
    edit: PlaceTypeEdit,
    pipeline: DerivationPipeline = Depends(get_pipeline),
) -> dict:
    _apply(pipeline, edit)
    return _snapshot(pipeline, session_id)


@router.put("/{session_id}/trajectories")
async def set_trajectory_count(
    session_id: str,
    edit: TrajectoryCountEdit,
    pipeline: DerivationPipeline = Depends(get_pipeline),
) -> dict:
    _apply(pipeline, edit)
    return _snapshot(pipeline, session_id)


@router.delete("/{session_id}", status_code=204, response_class=Response)
async def delete_session(
    session_id: str,
    pipeline: DerivationPipeline = Depends(get_pipeline),
    store: SessionStore = Depends(get_session_store),
) -> Response:
    await store.delete(session_id)
    return Response(status_code=204)
