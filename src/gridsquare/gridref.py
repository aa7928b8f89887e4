"""OS grid reference formatting, parsing and normalisation."""

import math
import re
from typing import Optional

from gridsquare.constants import MAX_EASTING, MAX_NORTHING
from gridsquare.exceptions import GridReferenceInvalid
from gridsquare.models import GridReference

_GRID_REF_RE = re.compile(r"^[A-Z]{2}([0-9]+)$")
_WHITESPACE_RE = re.compile(r"\s+")
_MAX_DIGITS = 10


def _letter_pair(e100km: int, n100km: int) -> str:
    l1 = (19 - n100km) - (19 - n100km) % 5 + (e100km + 10) // 5
    l2 = (19 - n100km) * 5 % 25 + e100km % 5

    # skip the letter I
    if l1 > 7:
        l1 += 1
    if l2 > 7:
        l2 += 1

    return chr(ord("A") + l1) + chr(ord("A") + l2)


def format_grid_ref(easting: float, northing: float, digits: int = 4) -> str:
    """
    Format easting/northing as an OS grid reference, e.g. 'TQ3080'.

    *digits* is the total count of numerals (2 to 10, even). The default
    of 4 gives a 1km reference. Coordinates are truncated, not rounded, so
    the reference names the square containing the point.
    """
    if digits % 2 or not 2 <= digits <= _MAX_DIGITS:
        raise ValueError(f"digits must be an even number from 2 to 10, got {digits}")

    half = digits // 2
    unit = 10 ** (5 - half)

    letters = _letter_pair(math.floor(easting / 100000), math.floor(northing / 100000))
    e = math.floor((easting % 100000) / unit)
    n = math.floor((northing % 100000) / unit)

    return f"{letters}{e:0{half}d}{n:0{half}d}"


def parse_grid_ref(raw: str) -> Optional[GridReference]:
    """
    Parse a grid reference such as 'TQ 30 80' or 'tq3080'.

    Returns None for anything malformed: wrong pattern, odd or excessive
    digit count, or a position outside the grid.
    """
    text = _WHITESPACE_RE.sub("", raw).upper()
    match = _GRID_REF_RE.match(text)
    if match is None:
        return None

    numbers = match.group(1)
    if len(numbers) % 2 or len(numbers) > _MAX_DIGITS:
        return None

    l1 = ord(text[0]) - ord("A")
    l2 = ord(text[1]) - ord("A")
    if l1 > 7:
        l1 -= 1
    if l2 > 7:
        l2 -= 1

    e100km = ((l1 - 2) % 5) * 5 + l2 % 5
    n100km = (19 - (l1 // 5) * 5) - l2 // 5

    half = len(numbers) // 2
    precision = 10 ** (5 - half)

    easting = e100km * 100000 + int(numbers[:half]) * precision
    northing = n100km * 100000 + int(numbers[half:]) * precision

    if not (0 <= easting <= MAX_EASTING and 0 <= northing <= MAX_NORTHING):
        return None

    return GridReference(
        text=text, easting=easting, northing=northing, precision_m=precision
    )


def validate(raw: str) -> bool:
    """Return True if *raw* is a grid reference that lies on the grid."""
    return parse_grid_ref(raw) is not None


def normalise(raw: str) -> GridReference:
    """
    Parse *raw*, e.g. 'tq 30 80' -> GridReference('TQ3080', 530000, 180000, 1000).

    Raises GridReferenceInvalid if the input is not a valid grid reference.
    """
    ref = parse_grid_ref(raw)
    if ref is None:
        raise GridReferenceInvalid(raw)
    return ref


def ten_km_grid_ref(grid_ref: str) -> str:
    """
    Reduce a grid reference to its 10km square, e.g. 'TQ3080' -> 'TQ38'.

    Input without at least one digit per axis is returned unchanged.
    """
    text = _WHITESPACE_RE.sub("", grid_ref).upper()
    numbers = text[2:]
    if len(numbers) < 2 or len(numbers) % 2:
        return grid_ref
    half = len(numbers) // 2
    return text[:2] + numbers[0] + numbers[half]
