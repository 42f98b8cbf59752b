"""Read-only projections of a DerivedState for map and form renderers."""

from __future__ import annotations

from lad_registry.contracts.coordinates import GeoPoint
from lad_registry.contracts.derived import (
    DerivedState,
    MapSegment,
    SiteSnapshot,
    SnapshotPoint,
)
from lad_registry.contracts.enums import PlaceKind, PointId, SegmentKind
from lad_registry.contracts.site import active_point_ids
from lad_registry.services.geodesy import designator
from lad_registry.services.geodesy.codec import point_position


def active_points(state: DerivedState) -> list[tuple[PointId, GeoPoint]]:
    """Populated points that take part in the current place type."""
    result = []
    for point_id in active_point_ids(state.place_type, state.trajectory_count):
        point = state.points.get(point_id)
        if point.is_populated:
            result.append((point_id, point))
    return result


def map_segments(state: DerivedState) -> list[MapSegment]:
    """Lines to draw: the runway centerline, or each approach to the center."""
    if state.place_type is None:
        return []
    shown = {pid for pid, _ in active_points(state)}

    if state.place_type.kind is PlaceKind.RUNWAY_PAIR:
        if {PointId.UMBRAL1, PointId.UMBRAL2} <= shown:
            return [MapSegment(kind=SegmentKind.RUNWAY, start=PointId.UMBRAL1, end=PointId.UMBRAL2)]
        return []

    if PointId.CENTER not in shown:
        return []
    return [
        MapSegment(kind=SegmentKind.APPROACH, start=pid, end=PointId.CENTER)
        for pid in (PointId.TRAJ1, PointId.TRAJ2)
        if pid in shown
    ]


def build_snapshot(state: DerivedState) -> SiteSnapshot:
    return SiteSnapshot(
        place_type=state.place_type,
        trajectory_count=state.trajectory_count,
        points=[
            SnapshotPoint(id=pid, point=point, position=point_position(point))
            for pid, point in active_points(state)
        ],
        segments=map_segments(state),
        runway_length_m=state.runway_length_m,
        declination_deg=state.declination_deg,
        declination_display=f"{state.declination_deg:.2f}",
        declination_source=state.declination_source,
        designation=designator.derive(state),
        busy=state.busy,
        phase=state.phase,
        generation=state.generation,
        committed_generation=state.committed_generation,
    )
