"""Elevation API client for ground-level lookups at site points.

Uses Google Elevation API when GOOGLE_ELEVATION_API_KEY is set,
falls back to Open-Elevation (free, no key) otherwise.  A lookup never
raises: when every service fails the configured fallback elevation is
returned so the pipeline can always settle.
"""

from __future__ import annotations

import logging
import math

import httpx

from lad_registry.config import Settings, get_settings

logger = logging.getLogger(__name__)


class ElevationLookupError(Exception):
    """A service answered, but not with a usable elevation."""


class ElevationResolver:
    """Resolves ground elevation in whole meters for a single point."""

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        *,
        settings: Settings | None = None,
    ):
        self._client = http_client
        self._settings = settings or get_settings()

    @property
    def fallback_m(self) -> int:
        return self._settings.elevation_fallback_m

    async def resolve(self, lat: float, lng: float) -> int:
        """Ground elevation at (lat, lng), or the fallback on any failure.

        Tries Google Elevation API first (if key available), then
        Open-Elevation.
        """
        api_key = self._settings.google_elevation_api_key
        if api_key:
            try:
                return await self._google_elevation(lat, lng, api_key)
            except Exception as exc:
                logger.warning("Google Elevation API failed at (%.5f, %.5f): %s", lat, lng, exc)

        try:
            return await self._open_elevation(lat, lng)
        except Exception as exc:
            logger.warning(
                "Open-Elevation failed at (%.5f, %.5f), using fallback %d m: %s",
                lat, lng, self.fallback_m, exc,
            )
            return self.fallback_m

    async def _get_json(self, url: str, params: dict) -> dict:
        timeout = self._settings.elevation_timeout_seconds
        if self._client is not None:
            resp = await self._client.get(url, params=params, timeout=timeout)
        else:
            async with httpx.AsyncClient(timeout=timeout) as client:
                resp = await client.get(url, params=params)
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, dict):
            raise ElevationLookupError(f"unexpected payload type {type(data).__name__}")
        return data

    async def _google_elevation(self, lat: float, lng: float, api_key: str) -> int:
        data = await self._get_json(
            self._settings.google_elevation_url,
            {"locations": f"{lat},{lng}", "key": api_key},
        )
        if data.get("status") != "OK":
            error = data.get("error_message", data.get("status", "unknown"))
            raise ElevationLookupError(f"Google status: {error}")
        return _first_elevation(data)

    async def _open_elevation(self, lat: float, lng: float) -> int:
        data = await self._get_json(
            self._settings.open_elevation_url,
            {"locations": f"{lat},{lng}"},
        )
        return _first_elevation(data)


def _first_elevation(data: dict) -> int:
    """Extract ``results[0].elevation`` rounded half up to whole meters."""
    results = data.get("results") or []
    if not results or not isinstance(results[0], dict):
        raise ElevationLookupError("no results in response")
    elevation = results[0].get("elevation")
    if isinstance(elevation, bool) or not isinstance(elevation, (int, float)):
        raise ElevationLookupError(f"invalid elevation {elevation!r}")
    if not math.isfinite(elevation):
        raise ElevationLookupError(f"invalid elevation {elevation!r}")
    return math.floor(elevation + 0.5)
