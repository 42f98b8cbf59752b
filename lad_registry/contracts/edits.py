"""Edits — the closed set of user inputs the engine reacts to.

Each edit names its target with typed identifiers instead of a free-form
path into the form state.  ``FormEdit`` is a tagged union on ``kind`` so a
JSON payload validates straight into the right class.
"""

from typing import Annotated, Literal, Union

from pydantic import Field

from lad_registry.contracts.common import ContractModel
from lad_registry.contracts.enums import Axis, DMSPart, PlaceType, PointId


class CoordinateEdit(ContractModel):
    """A single DMS sub-field typed by the user."""

    kind: Literal["coordinate"] = "coordinate"
    point: PointId
    axis: Axis
    part: DMSPart
    value: str = Field(default="", max_length=32)


class PlaceTypeEdit(ContractModel):
    """Place classification chosen (or cleared) on the form."""

    kind: Literal["place_type"] = "place_type"
    place_type: PlaceType | None


class TrajectoryCountEdit(ContractModel):
    """Number of approach trajectories of a helipad area."""

    kind: Literal["trajectory_count"] = "trajectory_count"
    count: Literal[1, 2]


FormEdit = Annotated[
    Union[CoordinateEdit, PlaceTypeEdit, TrajectoryCountEdit],
    Field(discriminator="kind"),
]
