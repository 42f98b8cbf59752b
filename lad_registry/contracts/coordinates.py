"""DMSValue and GeoPoint — coordinates as the user types them.

Hemisphere is never stored: the registry only covers sites where latitude
is south and longitude is west.
"""

from pydantic import Field, field_validator

from lad_registry.contracts.common import ContractModel
from lad_registry.contracts.enums import Axis, DMSPart


def _clean(v: object) -> str:
    if v is None:
        return ""
    return str(v).strip()


class DMSValue(ContractModel):
    """Degrees / minutes / seconds, each kept as raw text."""

    degrees: str = ""
    minutes: str = ""
    seconds: str = ""

    @field_validator("degrees", "minutes", "seconds", mode="before")
    @classmethod
    def coerce_text(cls, v: object) -> str:
        return _clean(v)

    @property
    def is_populated(self) -> bool:
        return bool(self.degrees)

    def with_part(self, part: DMSPart, value: str) -> "DMSValue":
        return self.model_copy(update={part.value: _clean(value)})


class GeoPoint(ContractModel):
    """A labelled site point with optional resolved elevation."""

    label: str = Field(..., min_length=1)
    lat: DMSValue = Field(default_factory=DMSValue)
    lng: DMSValue = Field(default_factory=DMSValue)
    elevation: str | None = Field(
        default=None, description="Ground elevation in meters, as displayed"
    )

    @property
    def is_populated(self) -> bool:
        return self.lat.is_populated and self.lng.is_populated

    def axis(self, axis: Axis) -> DMSValue:
        return self.lat if axis is Axis.LAT else self.lng

    def with_entry(self, axis: Axis, part: DMSPart, value: str) -> "GeoPoint":
        """Copy with a single DMS sub-field replaced."""
        updated = self.axis(axis).with_part(part, value)
        return self.model_copy(update={axis.value: updated})
