"""
Geographic helpers for drawing warning areas
"""
import math
from typing import List, Tuple

from haversine import Unit, inverse_haversine


def circle_coordinates(
    lat: float,
    lon: float,
    radius_m: float,
    segments: int = 64
) -> List[Tuple[float, float]]:
    """
    Approximate a geodesic circle as a closed ring of (lon, lat) points.

    Points are placed at radius_m from the center on evenly spaced bearings,
    starting due north and going clockwise. The first point is repeated at
    the end so the ring is closed. Coordinates are (lon, lat) because that
    is the order staticmap expects.
    """
    if radius_m <= 0:
        raise ValueError(f"radius must be positive, got {radius_m}")
    if segments < 3:
        raise ValueError(f"a circle needs at least 3 segments, got {segments}")

    ring = []
    for i in range(segments):
        bearing = 2 * math.pi * i / segments
        p_lat, p_lon = inverse_haversine((lat, lon), radius_m, bearing, unit=Unit.METERS)
        ring.append((p_lon, p_lat))
    ring.append(ring[0])
    return ring
