"""DerivedState and the read models computed from it.

``DerivedState`` is owned by a ``DerivationPipeline`` and replaced (never
mutated) on every change.  The designation and snapshot models are
**calculated** on read and never stored.
"""

from pydantic import Field

from lad_registry.contracts.common import ContractModel, Position
from lad_registry.contracts.coordinates import GeoPoint
from lad_registry.contracts.enums import (
    DeclinationSource,
    PipelinePhase,
    PlaceType,
    PointId,
    SegmentKind,
)
from lad_registry.contracts.site import SiteCoordinates


class DerivedState(ContractModel):
    """Raw inputs plus every fact the engine derives from them."""

    # --- Inputs ---
    place_type: PlaceType | None = None
    trajectory_count: int = Field(default=1, ge=1, le=2)
    points: SiteCoordinates = Field(default_factory=SiteCoordinates)

    # --- Derived ---
    runway_length_m: int | None = Field(
        default=None, ge=0, description="Great-circle distance between thresholds"
    )
    declination_deg: float = Field(
        default=0.0, description="Magnetic declination, negative = west"
    )
    declination_source: DeclinationSource = DeclinationSource.MANUAL

    # --- Pipeline bookkeeping ---
    busy: bool = False
    phase: PipelinePhase = PipelinePhase.IDLE
    generation: int = Field(default=0, ge=0)
    committed_generation: int = Field(default=0, ge=0)


class RunwayDesignation(ContractModel):
    """Runway orientation and its two-number designator (e.g. ``"26/08"``)."""

    true_bearing_deg: float = Field(..., ge=0, lt=360)
    magnetic_bearing_deg: float = Field(..., ge=0, lt=360)
    designator: str = Field(..., pattern=r"^\d{2}/\d{2}$")


class TrajectoryBearing(ContractModel):
    """Inbound bearing from an approach reference point to the helipad center."""

    point: PointId
    true_bearing_deg: float = Field(..., ge=0, lt=360)
    magnetic_bearing_deg: float = Field(..., ge=0, lt=360)
    display: str = Field(..., description="Magnetic bearing, three digits")


class HelipadDesignation(ContractModel):
    trajectories: list[TrajectoryBearing] = Field(default_factory=list)


class MapSegment(ContractModel):
    """A line a map renderer should draw between two site points."""

    kind: SegmentKind
    start: PointId
    end: PointId


class SnapshotPoint(ContractModel):
    id: PointId
    point: GeoPoint
    position: Position


class SiteSnapshot(ContractModel):
    """Everything renderers need, computed from one DerivedState."""

    place_type: PlaceType | None
    trajectory_count: int
    points: list[SnapshotPoint]
    segments: list[MapSegment]
    runway_length_m: int | None
    declination_deg: float
    declination_display: str
    declination_source: DeclinationSource
    designation: RunwayDesignation | HelipadDesignation | None
    busy: bool
    phase: PipelinePhase
    generation: int
    committed_generation: int
