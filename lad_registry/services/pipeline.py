"""Debounced, generation-gated derivation of site facts.

Lifecycle of a ``DerivationPipeline``::

    idle --edit--> scheduled --debounce elapsed--> computing --settled--> idle
                       ^                               |
                       +------------- edit ------------+

1. Every edit is applied to the raw inputs at once, bumps ``generation``
   and restarts the debounce timer.
2. When the timer elapses the run captures the generation ``G``, derives
   the geometry (center, runway length) synchronously, then resolves the
   declination and every active point's elevation concurrently.
3. Each result is committed as soon as it arrives, but only while the
   pipeline is still at generation ``G``; results of superseded runs are
   dropped.  In-flight requests are never aborted, only ignored.
4. Once all work for ``G`` has settled the pipeline is idle again.

The pipeline is the only writer of its ``DerivedState``.  Updates replace
the changed branch of the frozen model and skip fields whose value did not
change.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from lad_registry.config import Settings, get_settings
from lad_registry.contracts.common import Position
from lad_registry.contracts.derived import DerivedState
from lad_registry.contracts.edits import (
    CoordinateEdit,
    FormEdit,
    PlaceTypeEdit,
    TrajectoryCountEdit,
)
from lad_registry.contracts.enums import PipelinePhase, PlaceKind, PointId
from lad_registry.contracts.site import active_point_ids
from lad_registry.errors import FieldNotEditableError
from lad_registry.services.elevation import ElevationResolver
from lad_registry.services.geodesy.codec import point_position, to_dms
from lad_registry.services.geodesy.declination import (
    DeclinationProvider,
    LocalDeclinationProvider,
)
from lad_registry.services.geodesy.designator import round_half_up
from lad_registry.services.geodesy.kernel import distance_m, midpoint

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Pure reducers
# ------------------------------------------------------------------


def check_editable(state: DerivedState, edit: FormEdit) -> None:
    """Reject edits on fields the engine derives itself."""
    if (
        isinstance(edit, CoordinateEdit)
        and edit.point is PointId.CENTER
        and state.place_type is not None
        and state.place_type.kind is PlaceKind.RUNWAY_PAIR
    ):
        raise FieldNotEditableError(edit.point, state.place_type)


def apply_edit(state: DerivedState, edit: FormEdit) -> DerivedState:
    """Apply a raw input edit; derived fields are left for the next run."""
    if isinstance(edit, CoordinateEdit):
        point = state.points.get(edit.point).with_entry(edit.axis, edit.part, edit.value)
        return state.model_copy(
            update={"points": state.points.replace_point(edit.point, point)}
        )
    if isinstance(edit, PlaceTypeEdit):
        return state.model_copy(update={"place_type": edit.place_type})
    if isinstance(edit, TrajectoryCountEdit):
        return state.model_copy(update={"trajectory_count": edit.count})
    raise TypeError(f"Unsupported edit {type(edit).__name__}")


def derive_geometry(state: DerivedState) -> dict[str, Any]:
    """Center and runway length implied by the current thresholds.

    Returns the fields to update.  Runway pairs need both thresholds;
    helipad areas have no runway length.
    """
    if state.place_type is None:
        return {}
    if state.place_type.kind is PlaceKind.HELIPAD_AREA:
        return {"runway_length_m": None}

    points = state.points
    if not (points.umbral1.is_populated and points.umbral2.is_populated):
        return {}

    t1 = point_position(points.umbral1)
    t2 = point_position(points.umbral2)
    mid = midpoint(t1.lat, t1.lng, t2.lat, t2.lng)
    center = points.center.model_copy(update={"lat": to_dms(mid.lat), "lng": to_dms(mid.lng)})
    return {
        "points": points.replace_point(PointId.CENTER, center),
        "runway_length_m": round_half_up(distance_m(t1.lat, t1.lng, t2.lat, t2.lng)),
    }


def merge(state: DerivedState, changes: dict[str, Any]) -> DerivedState:
    """Apply only the changes that differ from the stored values."""
    effective = {k: v for k, v in changes.items() if getattr(state, k) != v}
    if not effective:
        return state
    return state.model_copy(update=effective)


def format_elevation(meters: int) -> str:
    return f"{meters:.1f}"


# ------------------------------------------------------------------
# Pipeline
# ------------------------------------------------------------------


class DerivationPipeline:
    """Keeps a site's derived facts consistent with its latest inputs."""

    def __init__(
        self,
        elevation: ElevationResolver,
        declination: DeclinationProvider | None = None,
        *,
        debounce_seconds: float | None = None,
        settings: Settings | None = None,
    ):
        settings = settings or get_settings()
        self._elevation = elevation
        self._declination = declination or LocalDeclinationProvider()
        self._debounce = (
            settings.debounce_seconds if debounce_seconds is None else debounce_seconds
        )
        self._state = DerivedState()
        self._timer: asyncio.Task | None = None
        self._tasks: set[asyncio.Task] = set()
        self._idle = asyncio.Event()
        self._idle.set()

    # --- Read side ---

    @property
    def state(self) -> DerivedState:
        return self._state

    @property
    def phase(self) -> PipelinePhase:
        return self._state.phase

    @property
    def busy(self) -> bool:
        return self._state.busy

    async def wait_idle(self) -> DerivedState:
        """Wait until the latest generation has been committed."""
        await self._idle.wait()
        return self._state

    # --- Write side ---

    def apply(self, edit: FormEdit) -> DerivedState:
        """Record an edit and (re)start the debounce window.

        Must be called from within the running event loop.
        """
        check_editable(self._state, edit)
        state = apply_edit(self._state, edit)
        generation = state.generation + 1
        self._state = state.model_copy(
            update={"generation": generation, "phase": PipelinePhase.SCHEDULED}
        )
        self._idle.clear()

        if self._timer is not None and not self._timer.done():
            self._timer.cancel()
        self._timer = asyncio.get_running_loop().create_task(self._run_after_debounce(generation))
        self._tasks.add(self._timer)
        self._timer.add_done_callback(self._tasks.discard)

        logger.debug("Edit %s scheduled generation %d", edit.kind, generation)
        return self._state

    async def close(self) -> None:
        """Cancel the timer and any in-flight run."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._timer = None

    # --- Internals ---

    async def _run_after_debounce(self, generation: int) -> None:
        await asyncio.sleep(self._debounce)
        # From here on a new edit no longer cancels this task: the run
        # finishes and its results are discarded if it has been superseded.
        self._timer = None
        if self._state.generation != generation:
            return
        await self._compute(generation)

    def _commit(self, generation: int, changes: dict[str, Any]) -> bool:
        """Merge ``changes`` if ``generation`` is still current."""
        if self._state.generation != generation:
            logger.debug(
                "Discarding stale result of generation %d (current %d)",
                generation, self._state.generation,
            )
            return False
        self._state = merge(self._state, changes)
        return True

    async def _compute(self, generation: int) -> None:
        self._commit(generation, {"phase": PipelinePhase.COMPUTING, "busy": True})
        self._commit(generation, derive_geometry(self._state))

        state = self._state
        jobs = []
        if state.points.center.is_populated:
            jobs.append(self._resolve_declination(generation, point_position(state.points.center)))
        for point_id in active_point_ids(state.place_type, state.trajectory_count):
            point = state.points.get(point_id)
            if point.is_populated:
                jobs.append(self._resolve_elevation(generation, point_id, point_position(point)))

        results = await asyncio.gather(*jobs, return_exceptions=True)
        for result in results:
            if isinstance(result, Exception):
                logger.warning("Resolution failed for generation %d: %s", generation, result)

        if self._commit(
            generation,
            {
                "busy": False,
                "phase": PipelinePhase.IDLE,
                "committed_generation": generation,
            },
        ):
            self._idle.set()
            logger.info(
                "Committed generation %d (%d resolutions)", generation, len(jobs)
            )

    async def _resolve_declination(self, generation: int, center: Position) -> None:
        try:
            value = await self._declination.resolve(center.lat, center.lng)
        except Exception:
            logger.warning(
                "Declination lookup failed, keeping %.2f",
                self._state.declination_deg,
                exc_info=True,
            )
            return
        self._commit(
            generation,
            {
                "declination_deg": round(value, 2),
                "declination_source": self._declination.source,
            },
        )

    async def _resolve_elevation(self, generation: int, point_id: PointId, position: Position) -> None:
        meters = await self._elevation.resolve(position.lat, position.lng)
        if self._state.generation != generation:
            logger.debug("Discarding stale elevation for %s", point_id.value)
            return
        points = self._state.points
        point = points.get(point_id)
        text = format_elevation(meters)
        if point.elevation == text:
            return
        updated = points.replace_point(point_id, point.model_copy(update={"elevation": text}))
        self._commit(generation, {"points": updated})
