"""CLI entry point: derive the facts of one site and print them as JSON.

Usage:
    python -m lad_registry.cli runway --t1 34:36:30 58:22:54 --t2 34:36:42 58:23:10
    python -m lad_registry.cli helipad --center 34:36:36 58:23:02 --traj 34:36:20 58:23:02
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import re

import httpx

from lad_registry.config import get_settings
from lad_registry.contracts.edits import CoordinateEdit, FormEdit, PlaceTypeEdit, TrajectoryCountEdit
from lad_registry.contracts.enums import Axis, DMSPart, PlaceType, PointId
from lad_registry.services.elevation import ElevationResolver
from lad_registry.services.pipeline import DerivationPipeline
from lad_registry.services.site_view import build_snapshot

logger = logging.getLogger(__name__)

_DMS_SPLIT = re.compile(r"[:\s°'\"]+")


def parse_dms(text: str) -> tuple[str, str, str]:
    """Split ``"34:36:30"`` (or ``34°36'30"``) into its three parts."""
    parts = [p for p in _DMS_SPLIT.split(text.strip()) if p]
    parts += [""] * (3 - len(parts))
    if len(parts) > 3:
        raise argparse.ArgumentTypeError(f"invalid DMS value: {text!r}")
    return parts[0], parts[1], parts[2]


def point_edits(point: PointId, lat: str, lng: str) -> list[FormEdit]:
    edits: list[FormEdit] = []
    for axis, text in ((Axis.LAT, lat), (Axis.LNG, lng)):
        for part, value in zip(DMSPart, parse_dms(text)):
            edits.append(CoordinateEdit(point=point, axis=axis, part=part, value=value))
    return edits


def build_edits(args: argparse.Namespace) -> list[FormEdit]:
    if args.command == "runway":
        edits: list[FormEdit] = [PlaceTypeEdit(place_type=PlaceType(args.place_type))]
        edits += point_edits(PointId.UMBRAL1, *args.t1)
        edits += point_edits(PointId.UMBRAL2, *args.t2)
        return edits

    edits = [
        PlaceTypeEdit(place_type=PlaceType.LADH),
        TrajectoryCountEdit(count=len(args.traj)),
    ]
    edits += point_edits(PointId.CENTER, *args.center)
    for point_id, (lat, lng) in zip((PointId.TRAJ1, PointId.TRAJ2), args.traj):
        edits += point_edits(point_id, lat, lng)
    return edits


async def run(edits: list[FormEdit]) -> dict:
    settings = get_settings()
    async with httpx.AsyncClient(timeout=settings.elevation_timeout_seconds) as client:
        pipeline = DerivationPipeline(
            ElevationResolver(client, settings=settings),
            debounce_seconds=0.0,
            settings=settings,
        )
        for edit in edits:
            pipeline.apply(edit)
        state = await pipeline.wait_idle()
        await pipeline.close()
    return build_snapshot(state).to_dict()


def main() -> None:
    parser = argparse.ArgumentParser(description="LAD registry geodetic computation")
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    runway = sub.add_parser("runway", help="Runway pair (LAD / LADA)")
    runway.add_argument("--t1", nargs=2, required=True, metavar=("LAT", "LNG"), help="Threshold 1 (S, W)")
    runway.add_argument("--t2", nargs=2, required=True, metavar=("LAT", "LNG"), help="Threshold 2 (S, W)")
    runway.add_argument("--place-type", choices=["LAD", "LADA"], default="LAD")

    helipad = sub.add_parser("helipad", help="Helipad area (LADH)")
    helipad.add_argument("--center", nargs=2, required=True, metavar=("LAT", "LNG"))
    helipad.add_argument(
        "--traj", nargs=2, action="append", required=True, metavar=("LAT", "LNG"),
        help="Approach reference point; repeat for a second trajectory",
    )

    args = parser.parse_args()
    if args.command == "helipad" and len(args.traj) > 2:
        parser.error("at most two trajectories")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        edits = build_edits(args)
    except argparse.ArgumentTypeError as exc:
        parser.error(str(exc))

    snapshot = asyncio.run(run(edits))
    print(json.dumps(snapshot, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
