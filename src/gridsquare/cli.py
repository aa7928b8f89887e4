"""
Grid Square Explorer: interactive CLI
======================================
Thin wrapper around the gridsquare library.

Usage:
    gridsquare                       # interactive mode
    gridsquare TQ3080                # describe a grid square
    gridsquare 51.5084 -0.1206       # grid square containing a WGS84 point
    gridsquare random [region]       # random 1km square in a region

Settings are read from environment variables:
    GRIDSQUARE_REGION     Default region for 'random' (greater-london)
    GRIDSQUARE_LOG_LEVEL  Logging level (WARNING)
"""

import logging
import math
import os
import sys
from typing import Optional

from gridsquare.exceptions import GridReferenceInvalid, GridSquareError, UnknownRegion
from gridsquare.regions import DEFAULT_REGION, REGIONS, get_region
from gridsquare.square import Square, random_square

# ── Settings ──────────────────────────────────────────────────
_DEFAULT_REGION = os.environ.get("GRIDSQUARE_REGION", DEFAULT_REGION)
_LOG_LEVEL = os.environ.get("GRIDSQUARE_LOG_LEVEL", "WARNING").upper()

_BANNER = """\
╔══════════════════════════════════════╗
║        Grid Square Explorer          ║
║  Grid ref ⇄ Lat/Lon · Random squares ║
╚══════════════════════════════════════╝
Enter a grid reference (TQ3080), a lat/lon pair (51.5 -0.12)
or 'random [region]'. Type 'q' to quit.
"""

_USAGE = "Usage: gridsquare [GRIDREF | LAT LON | random [REGION]]"


def _parse_lat_lon(args: list[str]) -> Optional[tuple[float, float]]:
    """Return (lat, lon) if *args* are two finite numbers, else None."""
    if len(args) != 2:
        return None
    try:
        lat, lon = float(args[0].rstrip(",")), float(args[1])
    except ValueError:
        return None
    if not (math.isfinite(lat) and math.isfinite(lon)):
        return None
    return lat, lon


def _resolve(args: list[str]) -> Square:
    """
    Turn command words into a Square.

    Raises GridReferenceInvalid or UnknownRegion for bad input.
    """
    if args and args[0].lower() == "random":
        region = get_region(args[1] if len(args) > 1 else _DEFAULT_REGION)
        origin = random_square(region.boundary)
        return Square(origin.easting, origin.northing)

    lat_lon = _parse_lat_lon(args)
    if lat_lon is not None:
        return Square.from_lat_lon(*lat_lon)

    return Square.from_grid_ref(" ".join(args))


def _describe(square: Square) -> None:
    corners = square.corners()
    centre = square.centre_lat_lon()
    print(f"  ┌──────────────────────────────────────────────────────┐")
    print(f"  │  Grid Reference    {square.grid_ref:<34}│")
    print(f"  │  10km Square       {square.ten_km_ref:<34}│")
    print(f"  │  Easting           {square.easting:<34}│")
    print(f"  │  Northing          {square.northing:<34}│")
    print(f"  │  Size              {f'{square.size} m':<34}│")
    print(f"  │  Centre            {f'{centre.lat:.6f}, {centre.lon:.6f}':<34}│")
    for label, corner in (
        ("SW", corners.sw), ("NW", corners.nw),
        ("NE", corners.ne), ("SE", corners.se),
    ):
        print(f"  │  {label} corner         {f'{corner.lat:.6f}, {corner.lon:.6f}':<34}│")
    print(f"  └──────────────────────────────────────────────────────┘")


def _run_interactive() -> None:
    print(_BANNER)

    while True:
        try:
            raw = input("\nSquare:  ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if raw.lower() in ("q", "quit", "exit"):
            print("Bye!")
            break
        if not raw:
            print("  ✗ Enter a grid reference, lat/lon or 'random'.")
            continue

        try:
            square = _resolve(raw.replace(",", " ").split())
        except GridReferenceInvalid:
            print(f"  ✗ Invalid grid reference: '{raw}'")
            continue
        except GridSquareError as exc:
            print(f"  ✗ Error: {exc}")
            continue

        _describe(square)


def main() -> None:
    """Entry point. Supports both CLI args and interactive mode."""
    logging.basicConfig(
        level=getattr(logging, _LOG_LEVEL, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    args = sys.argv[1:]
    if not args:
        _run_interactive()
        return

    if args[0] in ("-h", "--help"):
        print(_USAGE)
        print(f"Regions: {', '.join(sorted(REGIONS))}")
        return
    if args[0].startswith("-") and _parse_lat_lon(args) is None:
        print(_USAGE, file=sys.stderr)
        sys.exit(2)

    try:
        square = _resolve(args)
    except GridReferenceInvalid as exc:
        print(f"Invalid grid reference: {exc.grid_ref}", file=sys.stderr)
        sys.exit(1)
    except UnknownRegion as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(1)

    for key, val in square.to_dict().items():
        if key == "corners":
            for name, corner in val.items():
                print(f"{name:>20}: {corner['lat']:.6f}, {corner['lon']:.6f}")
        else:
            print(f"{key:>20}: {val}")


if __name__ == "__main__":
    main()
