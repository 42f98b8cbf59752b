"""Spherical geometry for runway-scale distances.

All functions take decimal degrees.  The earth is a sphere of radius
``EARTH_RADIUS_M``; over a few kilometres the error against WGS-84 stays
well under the precision the form displays.
"""

from __future__ import annotations

import math

from lad_registry.contracts.common import Position

EARTH_RADIUS_M = 6_371_000.0


def distance_m(lat_a: float, lng_a: float, lat_b: float, lng_b: float) -> float:
    """Haversine great-circle distance in meters."""
    phi1, phi2 = math.radians(lat_a), math.radians(lat_b)
    dphi = math.radians(lat_b - lat_a)
    dlmb = math.radians(lng_b - lng_a)
    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlmb / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_M * c


def bearing_deg(lat_a: float, lng_a: float, lat_b: float, lng_b: float) -> float:
    """Initial great-circle bearing from A to B, in [0, 360)."""
    phi1, phi2 = math.radians(lat_a), math.radians(lat_b)
    dlmb = math.radians(lng_b - lng_a)
    y = math.sin(dlmb) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(dlmb)
    return (math.degrees(math.atan2(y, x)) + 360) % 360


def midpoint(lat_a: float, lng_a: float, lat_b: float, lng_b: float) -> Position:
    """Arithmetic mean of the two positions.

    Not the spherical midpoint: for thresholds a few km apart the two
    differ by centimetres.
    """
    return Position(lat=(lat_a + lat_b) / 2, lng=(lng_a + lng_b) / 2)
