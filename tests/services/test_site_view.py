"""Tests for the snapshot projection of a DerivedState."""

from lad_registry.contracts.derived import DerivedState, HelipadDesignation, RunwayDesignation
from lad_registry.contracts.edits import PlaceTypeEdit, TrajectoryCountEdit
from lad_registry.contracts.enums import PlaceType, PointId, SegmentKind
from lad_registry.services.pipeline import apply_edit, derive_geometry, merge
from lad_registry.services.site_view import active_points, build_snapshot, map_segments
from tests.services.fakes import THRESHOLD1, THRESHOLD2, point_edits


def _state(place_type, *typed, count=1) -> DerivedState:
    state = DerivedState()
    edits = [PlaceTypeEdit(place_type=place_type), TrajectoryCountEdit(count=count)]
    for point_id, lat, lng in typed:
        edits += point_edits(point_id, lat, lng)
    for edit in edits:
        state = apply_edit(state, edit)
    return merge(state, derive_geometry(state))


CENTER = (PointId.CENTER, ("34", "36", "36"), ("58", "22", "48"))
TRAJ1 = (PointId.TRAJ1, ("34", "36", "0"), ("58", "22", "48"))
TRAJ2 = (PointId.TRAJ2, ("34", "37", "0"), ("58", "22", "48"))


class TestActivePoints:
    def test_empty_form(self):
        assert active_points(DerivedState()) == []

    def test_runway_with_one_threshold(self):
        state = _state(PlaceType.LAD, (PointId.UMBRAL1, *THRESHOLD1))
        assert [pid for pid, _ in active_points(state)] == [PointId.UMBRAL1]

    def test_runway_complete_includes_derived_center(self):
        state = _state(PlaceType.LAD, (PointId.UMBRAL1, *THRESHOLD1), (PointId.UMBRAL2, *THRESHOLD2))
        assert [pid for pid, _ in active_points(state)] == [
            PointId.UMBRAL1,
            PointId.UMBRAL2,
            PointId.CENTER,
        ]

    def test_helipad_hides_inactive_second_trajectory(self):
        state = _state(PlaceType.LADH, CENTER, TRAJ1, TRAJ2, count=1)
        assert [pid for pid, _ in active_points(state)] == [PointId.TRAJ1, PointId.CENTER]


class TestMapSegments:
    def test_runway_segment(self):
        state = _state(PlaceType.LADA, (PointId.UMBRAL1, *THRESHOLD1), (PointId.UMBRAL2, *THRESHOLD2))
        segments = map_segments(state)
        assert len(segments) == 1
        assert segments[0].kind == SegmentKind.RUNWAY
        assert (segments[0].start, segments[0].end) == (PointId.UMBRAL1, PointId.UMBRAL2)

    def test_runway_incomplete_has_no_segment(self):
        state = _state(PlaceType.LAD, (PointId.UMBRAL1, *THRESHOLD1))
        assert map_segments(state) == []

    def test_helipad_approaches(self):
        state = _state(PlaceType.LADH, CENTER, TRAJ1, TRAJ2, count=2)
        segments = map_segments(state)
        assert [(s.kind, s.start, s.end) for s in segments] == [
            (SegmentKind.APPROACH, PointId.TRAJ1, PointId.CENTER),
            (SegmentKind.APPROACH, PointId.TRAJ2, PointId.CENTER),
        ]

    def test_helipad_without_center(self):
        state = _state(PlaceType.LADH, TRAJ1)
        assert map_segments(state) == []

    def test_no_place_type(self):
        assert map_segments(_state(None, CENTER)) == []


class TestBuildSnapshot:
    def test_empty_snapshot(self):
        snap = build_snapshot(DerivedState())
        assert snap.points == []
        assert snap.designation is None
        assert snap.declination_display == "0.00"
        assert snap.runway_length_m is None

    def test_runway_snapshot(self):
        state = _state(PlaceType.LAD, (PointId.UMBRAL1, *THRESHOLD1), (PointId.UMBRAL2, *THRESHOLD2))
        state = state.model_copy(update={"declination_deg": -9.9})
        snap = build_snapshot(state)

        assert isinstance(snap.designation, RunwayDesignation)
        assert snap.designation.designator == "24/06"
        assert snap.declination_display == "-9.90"
        assert 545 <= snap.runway_length_m <= 555
        center = snap.points[-1]
        assert center.id == PointId.CENTER
        assert abs(center.position.lat + 34.61) < 1e-6

    def test_helipad_snapshot(self):
        state = _state(PlaceType.LADH, CENTER, TRAJ1)
        snap = build_snapshot(state)
        assert isinstance(snap.designation, HelipadDesignation)
        assert [t.point for t in snap.designation.trajectories] == [PointId.TRAJ1]

    def test_json_payload(self):
        state = _state(PlaceType.LAD, (PointId.UMBRAL1, *THRESHOLD1), (PointId.UMBRAL2, *THRESHOLD2))
        data = build_snapshot(state).to_dict()
        assert data["place_type"] == "LAD"
        assert data["phase"] == "idle"
        assert data["declination_source"] == "manual"
        assert data["points"][0]["id"] == "umbral1"
        assert data["points"][0]["point"]["lat"] == {"degrees": "34", "minutes": "36", "seconds": "30"}
        assert data["segments"] == [{"kind": "runway", "start": "umbral1", "end": "umbral2"}]
