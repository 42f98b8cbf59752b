"""Local linear approximation of magnetic declination.

The model is a first-order expansion around a reference point (Buenos
Aires) and epoch, tuned for sites in Argentina:

    declination = BASE
                + SECULAR_DRIFT * (decimal_year - EPOCH)
                + LAT_GRADIENT  * (lat - REF_LAT)
                + LNG_GRADIENT  * (lng - REF_LNG)

It is not a World Magnetic Model evaluation.  Negative values are west
variation.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Callable, Protocol

from lad_registry.contracts.enums import DeclinationSource

logger = logging.getLogger(__name__)

EPOCH = 2025.0
REF_LAT = -34.60
REF_LNG = -58.38
BASE_DEG = -9.6
SECULAR_DRIFT_DEG_PER_YEAR = -0.12
LAT_GRADIENT = 0.12  # deg of declination per deg of latitude
LNG_GRADIENT = 0.15  # deg of declination per deg of longitude


def decimal_year(as_of: date | datetime) -> float:
    """Year plus the elapsed fraction of that year."""
    if isinstance(as_of, datetime):
        if as_of.tzinfo is None:
            as_of = as_of.replace(tzinfo=timezone.utc)
        start = datetime(as_of.year, 1, 1, tzinfo=as_of.tzinfo)
        end = datetime(as_of.year + 1, 1, 1, tzinfo=as_of.tzinfo)
        return as_of.year + (as_of - start) / (end - start)
    start_d = date(as_of.year, 1, 1)
    days_in_year = (date(as_of.year + 1, 1, 1) - start_d).days
    return as_of.year + (as_of - start_d).days / days_in_year


def declination_deg(lat: float, lng: float, as_of: date | datetime) -> float:
    """Estimated declination at ``(lat, lng)`` on ``as_of``."""
    return (
        BASE_DEG
        + SECULAR_DRIFT_DEG_PER_YEAR * (decimal_year(as_of) - EPOCH)
        + LAT_GRADIENT * (lat - REF_LAT)
        + LNG_GRADIENT * (lng - REF_LNG)
    )


class DeclinationProvider(Protocol):
    """Anything the pipeline can await for a declination value."""

    source: DeclinationSource

    async def resolve(self, lat: float, lng: float) -> float: ...


class LocalDeclinationProvider:
    """Evaluates the local model for the current date."""

    source = DeclinationSource.LOCAL_MODEL

    def __init__(self, clock: Callable[[], datetime] | None = None):
        self._clock = clock or (lambda: datetime.now(tz=timezone.utc))

    async def resolve(self, lat: float, lng: float) -> float:
        value = declination_deg(lat, lng, self._clock())
        logger.debug("Declination at (%.5f, %.5f): %.2f", lat, lng, value)
        return value
