"""Typed value models for gridsquare."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GridCoordinate:
    """A point on the British National Grid."""

    easting: float           # metres from the false origin
    northing: float          # metres from the false origin

    def to_dict(self) -> dict:
        return {"easting": self.easting, "northing": self.northing}


@dataclass(frozen=True)
class GeoCoordinate:
    """A latitude/longitude pair in degrees (WGS84 unless stated otherwise)."""

    lat: float
    lon: float

    def to_dict(self) -> dict:
        return {"lat": self.lat, "lon": self.lon}


@dataclass(frozen=True)
class GridReference:
    """A parsed alphanumeric grid reference such as 'TQ3080'."""

    text: str                # normalised: upper-case, no whitespace
    easting: int
    northing: int
    precision_m: int         # 10 ** (5 - digits per axis)

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return {
            "text": self.text,
            "easting": self.easting,
            "northing": self.northing,
            "precision_m": self.precision_m,
        }


@dataclass(frozen=True)
class SquareCorners:
    """The four WGS84 corners of a grid square."""

    sw: GeoCoordinate
    ne: GeoCoordinate
    nw: GeoCoordinate
    se: GeoCoordinate

    def to_dict(self) -> dict:
        return {
            "sw": self.sw.to_dict(),
            "ne": self.ne.to_dict(),
            "nw": self.nw.to_dict(),
            "se": self.se.to_dict(),
        }


@dataclass(frozen=True)
class SearchBounds:
    """A lat/lon box around a square, widened by a search buffer."""

    south: float
    west: float
    north: float
    east: float
    sw: GeoCoordinate
    ne: GeoCoordinate

    def to_dict(self) -> dict:
        return {
            "south": self.south,
            "west": self.west,
            "north": self.north,
            "east": self.east,
        }


@dataclass(frozen=True)
class BoundingBox:
    """An axis-aligned box in grid metres."""

    min_easting: float
    max_easting: float
    min_northing: float
    max_northing: float

    def contains(self, easting: float, northing: float) -> bool:
        return (
            self.min_easting <= easting <= self.max_easting
            and self.min_northing <= northing <= self.max_northing
        )


@dataclass(frozen=True)
class Placement:
    """Where a caller-supplied point sits relative to a square."""

    index: int               # position in the caller's input
    lat: float
    lon: float
    distance_km: float       # 0.0 when inside
    inside: bool

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "lat": self.lat,
            "lon": self.lon,
            "distance_km": round(self.distance_km, 3),
            "inside": self.inside,
        }
