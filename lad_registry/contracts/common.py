"""Base classes and shared types for LAD registry contracts.

Unit conventions (all contracts and API responses):
- **Distances / lengths / elevations**: meters — suffix ``_m``
- **Headings/angles**: degrees — suffix ``_deg``
- **Coordinates**: decimal degrees on a sphere; south latitude and west
  longitude are negative
- **DMS entries**: text, exactly as typed on the form

Contracts that describe engine state are frozen: changes are expressed with
``model_copy(update=...)`` so only the changed branch is rebuilt.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ContractModel(BaseModel):
    """Base model with JSON-friendly serialization.

    - Enums serialize as string values.
    - ``to_dict()`` produces a JSON-safe dict.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=False,
        frozen=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Dump to a JSON-compatible dict."""
        return self.model_dump(mode="json", by_alias=True)


class Position(BaseModel):
    """Decimal-degree coordinate."""

    lat: float
    lng: float

    model_config = ConfigDict(frozen=True)
