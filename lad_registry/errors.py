"""Engine-specific exceptions."""

from lad_registry.contracts.enums import PlaceType, PointId


class LadRegistryError(Exception):
    """Base exception for all engine errors."""


class FieldNotEditableError(LadRegistryError):
    """Raised when an edit targets a field the engine derives itself."""

    def __init__(self, point: PointId, place_type: PlaceType | None):
        self.point = point
        self.place_type = place_type
        kind = place_type.value if place_type else "unset"
        super().__init__(f"{point.value} is derived for place type {kind}")


class SessionNotFoundError(LadRegistryError):
    """Raised when a form session id is unknown."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"session {session_id} not found")
