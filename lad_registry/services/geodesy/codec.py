"""DMS text <-> decimal degree conversion.

Every registered site lies in the southern and western hemispheres, so
decimal values are always negative and DMS values never carry a sign.
Malformed text degrades to zero instead of raising.
"""

from __future__ import annotations

import math

from lad_registry.contracts.common import Position
from lad_registry.contracts.coordinates import DMSValue, GeoPoint


def _magnitude(text: str | None) -> float:
    """Parse a DMS sub-field as a non-negative float; invalid -> 0."""
    if text is None:
        return 0.0
    try:
        value = float(str(text).strip().replace(",", "."))
    except ValueError:
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return abs(value)


def to_decimal(degrees: str | None, minutes: str | None, seconds: str | None) -> float:
    """Combine DMS text into signed decimal degrees (always <= 0)."""
    magnitude = _magnitude(degrees) + _magnitude(minutes) / 60 + _magnitude(seconds) / 3600
    return -magnitude


def to_dms(decimal: float) -> DMSValue:
    """Split decimal degrees into DMS text, seconds with two decimals.

    The sign is dropped.  Seconds that round up to 60 are carried into the
    minutes (and minutes into the degrees).
    """
    value = abs(decimal)
    degrees = math.floor(value)
    minutes_raw = (value - degrees) * 60
    minutes = math.floor(minutes_raw)
    seconds = round((minutes_raw - minutes) * 60, 2)

    if seconds >= 60:
        seconds = 0.0
        minutes += 1
    if minutes >= 60:
        minutes = 0
        degrees += 1

    return DMSValue(degrees=str(degrees), minutes=str(minutes), seconds=f"{seconds:.2f}")


def dms_to_decimal(value: DMSValue) -> float:
    return to_decimal(value.degrees, value.minutes, value.seconds)


def point_position(point: GeoPoint) -> Position:
    return Position(lat=dms_to_decimal(point.lat), lng=dms_to_decimal(point.lng))
