"""SiteCoordinates — the five coordinate slots of a landing-site form.

Which slots are active depends on the place type:

- LAD / LADA (runway pair): ``umbral1``, ``umbral2`` and the derived ``center``
- LADH (helipad area): ``center``, ``traj1`` and, with two trajectories, ``traj2``
"""

from pydantic import Field

from lad_registry.contracts.common import ContractModel
from lad_registry.contracts.coordinates import GeoPoint
from lad_registry.contracts.enums import PlaceKind, PlaceType, PointId

POINT_LABELS: dict[PointId, str] = {
    PointId.UMBRAL1: "Umbral 1",
    PointId.UMBRAL2: "Umbral 2",
    PointId.CENTER: "Centro Geométrico",
    PointId.TRAJ1: "Punto Trayectoria 1",
    PointId.TRAJ2: "Punto Trayectoria 2",
}


def _empty(point_id: PointId) -> GeoPoint:
    return GeoPoint(label=POINT_LABELS[point_id])


class SiteCoordinates(ContractModel):
    """One GeoPoint per PointId."""

    umbral1: GeoPoint = Field(default_factory=lambda: _empty(PointId.UMBRAL1))
    umbral2: GeoPoint = Field(default_factory=lambda: _empty(PointId.UMBRAL2))
    center: GeoPoint = Field(default_factory=lambda: _empty(PointId.CENTER))
    traj1: GeoPoint = Field(default_factory=lambda: _empty(PointId.TRAJ1))
    traj2: GeoPoint = Field(default_factory=lambda: _empty(PointId.TRAJ2))

    def get(self, point_id: PointId) -> GeoPoint:
        return getattr(self, point_id.value)

    def replace_point(self, point_id: PointId, point: GeoPoint) -> "SiteCoordinates":
        """Copy with only ``point_id`` swapped; other points are shared."""
        return self.model_copy(update={point_id.value: point})


def active_point_ids(
    place_type: PlaceType | None, trajectory_count: int
) -> list[PointId]:
    """Slots that take part in the computation for a place type.

    The center comes last so that map renderers draw it on top.
    """
    if place_type is None:
        return [PointId.CENTER]
    if place_type.kind is PlaceKind.RUNWAY_PAIR:
        return [PointId.UMBRAL1, PointId.UMBRAL2, PointId.CENTER]
    ids = [PointId.TRAJ1]
    if trajectory_count == 2:
        ids.append(PointId.TRAJ2)
    ids.append(PointId.CENTER)
    return ids
