"""LAD registry data contracts — Pydantic v2 models for landing-site intake.

Inputs (typed by the user, owned by a pipeline)
-----------------------------------------------
- ``DMSValue`` / ``GeoPoint`` — coordinates exactly as typed
- ``SiteCoordinates`` — the five named slots of a site
- ``CoordinateEdit`` / ``PlaceTypeEdit`` / ``TrajectoryCountEdit`` — edits

Derived (owned by ``DerivationPipeline``)
-----------------------------------------
- ``DerivedState`` — inputs + center, runway length, declination, elevations

Calculated (never stored)
-------------------------
- ``RunwayDesignation`` / ``HelipadDesignation`` — bearings and designators
- ``SiteSnapshot`` — renderer view: active points, map segments, busy flag
"""

from lad_registry.contracts.enums import (
    Axis,
    DeclinationSource,
    DMSPart,
    PipelinePhase,
    PlaceKind,
    PlaceType,
    PointId,
    SegmentKind,
)
from lad_registry.contracts.common import ContractModel, Position
from lad_registry.contracts.coordinates import DMSValue, GeoPoint
from lad_registry.contracts.site import POINT_LABELS, SiteCoordinates, active_point_ids
from lad_registry.contracts.edits import (
    CoordinateEdit,
    FormEdit,
    PlaceTypeEdit,
    TrajectoryCountEdit,
)
from lad_registry.contracts.derived import (
    DerivedState,
    HelipadDesignation,
    MapSegment,
    RunwayDesignation,
    SiteSnapshot,
    SnapshotPoint,
    TrajectoryBearing,
)

__all__ = [
    # Enums
    "Axis",
    "DeclinationSource",
    "DMSPart",
    "PipelinePhase",
    "PlaceKind",
    "PlaceType",
    "PointId",
    "SegmentKind",
    # Common
    "ContractModel",
    "Position",
    # Inputs
    "DMSValue",
    "GeoPoint",
    "POINT_LABELS",
    "SiteCoordinates",
    "active_point_ids",
    "CoordinateEdit",
    "FormEdit",
    "PlaceTypeEdit",
    "TrajectoryCountEdit",
    # Derived / calculated
    "DerivedState",
    "HelipadDesignation",
    "MapSegment",
    "RunwayDesignation",
    "SiteSnapshot",
    "SnapshotPoint",
    "TrajectoryBearing",
]
