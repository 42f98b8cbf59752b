"""Runway designators and helipad trajectory bearings.

Pure functions of the current state: nothing here is cached, every read
recomputes from the coordinates and the committed declination.

Runway ends are the magnetic heading rounded to the nearest ten degrees
(half up).  A computed end of 0 is shown as 36; both ends always differ by
exactly 18 (mod 36).
"""

from __future__ import annotations

import math

from lad_registry.contracts.common import Position
from lad_registry.contracts.derived import (
    DerivedState,
    HelipadDesignation,
    RunwayDesignation,
    TrajectoryBearing,
)
from lad_registry.contracts.enums import PlaceKind, PointId
from lad_registry.services.geodesy.codec import point_position
from lad_registry.services.geodesy.kernel import bearing_deg


def _normalize(deg: float) -> float:
    value = deg % 360
    return 0.0 if value >= 360 else value


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def magnetic_bearing(true_bearing: float, declination: float) -> float:
    """Magnetic = true - declination (west declination is negative)."""
    return _normalize(true_bearing - declination + 360)


def runway_end_number(magnetic: float) -> str:
    """Two-digit runway end number for a magnetic heading."""
    n = round_half_up(magnetic / 10)
    if n == 0:
        return "36"
    if n > 36:
        n -= 36
    return f"{n:02d}"


def designator(magnetic: float) -> str:
    end1 = runway_end_number(magnetic)
    end2 = runway_end_number(_normalize(magnetic + 180))
    return f"{end1}/{end2}"


def derive_runway(
    threshold1: Position, threshold2: Position, declination: float
) -> RunwayDesignation:
    """Orientation of the runway from threshold 1 towards threshold 2."""
    true_brg = bearing_deg(threshold1.lat, threshold1.lng, threshold2.lat, threshold2.lng)
    mag = magnetic_bearing(true_brg, declination)
    return RunwayDesignation(
        true_bearing_deg=true_brg,
        magnetic_bearing_deg=mag,
        designator=designator(mag),
    )


def derive_trajectory(
    point: PointId, reference: Position, center: Position, declination: float
) -> TrajectoryBearing:
    """Inbound bearing from an approach reference point to the center."""
    true_brg = bearing_deg(reference.lat, reference.lng, center.lat, center.lng)
    mag = magnetic_bearing(true_brg, declination)
    display = f"{round_half_up(mag):03d}"
    return TrajectoryBearing(
        point=point,
        true_bearing_deg=true_brg,
        magnetic_bearing_deg=mag,
        display=display,
    )


def derive(state: DerivedState) -> RunwayDesignation | HelipadDesignation | None:
    """Designation for the current place type, or None when inputs are missing."""
    if state.place_type is None:
        return None

    points = state.points
    declination = state.declination_deg

    if state.place_type.kind is PlaceKind.RUNWAY_PAIR:
        if not (points.umbral1.is_populated and points.umbral2.is_populated):
            return None
        return derive_runway(
            point_position(points.umbral1), point_position(points.umbral2), declination
        )

    if not points.center.is_populated:
        return None
    center = point_position(points.center)
    trajectory_ids = [PointId.TRAJ1]
    if state.trajectory_count == 2:
        trajectory_ids.append(PointId.TRAJ2)

    trajectories = [
        derive_trajectory(pid, point_position(points.get(pid)), center, declination)
        for pid in trajectory_ids
        if points.get(pid).is_populated
    ]
    return HelipadDesignation(trajectories=trajectories)
