"""Heliographic location parsing and projection onto the Sun sphere."""

import math
import re

from solarflare3d.models import Cartesian3D, HeliographicCoordinate

_LAT_TOKEN = re.compile(r"([SN])(\d+)")
_LON_TOKEN = re.compile(r"([EW])(\d+)")

_ORIGIN = HeliographicCoordinate(lat_deg=0.0, lon_deg=0.0)


def parse_coordinates(source_location: str | None) -> HeliographicCoordinate:
    """Parse a DONKI source location such as "N15W30" or "W30N15".

    Latitude and longitude are scanned independently, so token order and any
    separators between them don't matter. Missing, malformed or non-string
    input yields (0, 0). Values are not range-checked.

    Args:
        source_location: Location string, or None.

    Returns:
        HeliographicCoordinate with N and E positive, S and W negative.
    """
    if not isinstance(source_location, str) or not source_location:
        return _ORIGIN

    lat_match = _LAT_TOKEN.search(source_location)
    lon_match = _LON_TOKEN.search(source_location)
    if lat_match is None or lon_match is None:
        return _ORIGIN

    lat = int(lat_match.group(2)) * (1 if lat_match.group(1) == "N" else -1)
    lon = int(lon_match.group(2)) * (-1 if lon_match.group(1) == "W" else 1)
    return HeliographicCoordinate(lat_deg=float(lat), lon_deg=float(lon))


def project_to_sphere(coord: HeliographicCoordinate, radius: float) -> Cartesian3D:
    """Map a heliographic coordinate to a point on a sphere of the given radius.

    (0°, 0°) lands on +z, facing the default camera; north is +y.
    """
    lat = math.radians(coord.lat_deg)
    lon = math.radians(coord.lon_deg)
    return Cartesian3D(
        x=radius * math.cos(lat) * math.sin(lon),
        y=radius * math.sin(lat),
        z=radius * math.cos(lat) * math.cos(lon),
    )


def flare_position(source_location: str | None, radius: float) -> Cartesian3D:
    """Parse + project in one step. An absent location is placed at disk centre."""
    return project_to_sphere(parse_coordinates(source_location or "N0E0"), radius)
