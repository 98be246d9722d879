"""
Geodesic distance utilities for flight track analysis.
"""

import math

# Mean Earth radius in kilometers
EARTH_RADIUS_KM = 6371.0


def haversine_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    earth_radius: float = EARTH_RADIUS_KM,
) -> float:
    """
    Calculate the great circle distance between two points.

    Args:
        lat1: Latitude of the first point in decimal degrees
        lon1: Longitude of the first point in decimal degrees
        lat2: Latitude of the second point in decimal degrees
        lon2: Longitude of the second point in decimal degrees
        earth_radius: Sphere radius in kilometers (default: 6371)

    Returns:
        Distance in kilometers
    """
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)

    a = (
        math.sin(dphi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    )
    # Rounding can push a marginally past 1 for near-antipodal points
    a = min(a, 1.0)

    return 2 * earth_radius * math.atan2(math.sqrt(a), math.sqrt(1 - a))
