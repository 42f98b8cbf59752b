"""Enumerations shared across all LAD registry contracts."""

from enum import Enum


class PlaceKind(str, Enum):
    """Geometry family of a landing site."""
    RUNWAY_PAIR = "runway_pair"    # two thresholds + derived center
    HELIPAD_AREA = "helipad_area"  # center + 1 or 2 approach trajectories


class PlaceType(str, Enum):
    """Classification chosen on the intake form."""
    LAD = "LAD"
    LADA = "LADA"
    LADH = "LADH"

    @property
    def kind(self) -> PlaceKind:
        if self is PlaceType.LADH:
            return PlaceKind.HELIPAD_AREA
        return PlaceKind.RUNWAY_PAIR


class PointId(str, Enum):
    """Named coordinate slots of a site."""
    UMBRAL1 = "umbral1"
    UMBRAL2 = "umbral2"
    CENTER = "center"
    TRAJ1 = "traj1"
    TRAJ2 = "traj2"


class Axis(str, Enum):
    LAT = "lat"
    LNG = "lng"


class DMSPart(str, Enum):
    DEGREES = "degrees"
    MINUTES = "minutes"
    SECONDS = "seconds"


class PipelinePhase(str, Enum):
    """Lifecycle of a derivation pipeline."""
    IDLE = "idle"
    SCHEDULED = "scheduled"
    COMPUTING = "computing"


class DeclinationSource(str, Enum):
    MANUAL = "manual"
    LOCAL_MODEL = "local_model"


class SegmentKind(str, Enum):
    RUNWAY = "runway"
    APPROACH = "approach"
