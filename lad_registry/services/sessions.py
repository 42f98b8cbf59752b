"""In-memory registry of form sessions, one DerivationPipeline each."""

from __future__ import annotations

import logging
import uuid

from lad_registry.config import Settings, get_settings
from lad_registry.errors import SessionNotFoundError
from lad_registry.services.elevation import ElevationResolver
from lad_registry.services.geodesy.declination import (
    DeclinationProvider,
    LocalDeclinationProvider,
)
from lad_registry.services.pipeline import DerivationPipeline

logger = logging.getLogger(__name__)


class SessionStore:
    """Creates and looks up pipelines; all share the same resolvers."""

    def __init__(
        self,
        elevation: ElevationResolver,
        declination: DeclinationProvider | None = None,
        *,
        settings: Settings | None = None,
    ):
        self._elevation = elevation
        self._declination = declination or LocalDeclinationProvider()
        self._settings = settings or get_settings()
        self._sessions: dict[str, DerivationPipeline] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self) -> tuple[str, DerivationPipeline]:
        session_id = uuid.uuid4().hex[:16]
        pipeline = DerivationPipeline(
            self._elevation, self._declination, settings=self._settings
        )
        self._sessions[session_id] = pipeline
        logger.info("Created session %s", session_id)
        return session_id, pipeline

    def get(self, session_id: str) -> DerivationPipeline:
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None

    async def delete(self, session_id: str) -> None:
        pipeline = self.get(session_id)
        del self._sessions[session_id]
        await pipeline.close()
        logger.info("Deleted session %s", session_id)

    async def close_all(self) -> None:
        for session_id in list(self._sessions):
            await self.delete(session_id)
