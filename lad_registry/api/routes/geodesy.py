"""Stateless geodesy helpers: DMS conversion and runway designation."""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel, Field

from lad_registry.contracts.coordinates import DMSValue, GeoPoint
from lad_registry.services.geodesy.codec import dms_to_decimal, point_position, to_dms
from lad_registry.services.geodesy.designator import derive_runway, round_half_up
from lad_registry.services.geodesy.kernel import distance_m

router = APIRouter(prefix="/geodesy", tags=["geodesy"])


class ToDMSRequest(BaseModel):
    """Request model for decimal -> DMS conversion."""

    decimal: float = Field(..., ge=-180.0, le=180.0)


class RunwayRequest(BaseModel):
    """Request model for a one-off runway designation."""

    threshold1: GeoPoint
    threshold2: GeoPoint
    declination_deg: float = Field(default=0.0, ge=-90.0, le=90.0)


@router.post("/to-decimal")
async def convert_to_decimal(value: DMSValue) -> dict:
    return {"decimal": dms_to_decimal(value)}


@router.post("/to-dms")
async def convert_to_dms(body: ToDMSRequest) -> dict:
    return to_dms(body.decimal).to_dict()


@router.post("/runway")
async def runway_designation(body: RunwayRequest) -> dict:
    t1 = point_position(body.threshold1)
    t2 = point_position(body.threshold2)
    data = derive_runway(t1, t2, body.declination_deg).to_dict()
    data["length_m"] = round_half_up(distance_m(t1.lat, t1.lng, t2.lat, t2.lng))
    return data
