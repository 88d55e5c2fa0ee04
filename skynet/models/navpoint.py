#!/usr/bin/env python3

import math
from typing import Optional
from dataclasses import dataclass

EARTH_RADIUS_KM = 6371.0


def great_circle_distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Great circle distance between two coordinates using the Haversine formula.

    Args:
        lat1: Latitude of the first point in decimal degrees
        lon1: Longitude of the first point in decimal degrees
        lat2: Latitude of the second point in decimal degrees
        lon2: Longitude of the second point in decimal degrees

    Returns:
        Distance in kilometers

    Note:
        Inputs are not range checked, callers validate coordinates.
    """
    # Convert to radians
    lat1_rad = math.radians(lat1)
    lon1_rad = math.radians(lon1)
    lat2_rad = math.radians(lat2)
    lon2_rad = math.radians(lon2)

    dlat = lat2_rad - lat1_rad
    dlon = lon2_rad - lon1_rad

    a = math.sin(dlat / 2) ** 2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


@dataclass
class NavPoint:
    """
    A navigation point with coordinates and optional name.

    All coordinates are stored in decimal degrees:
    - Latitude: -90 to +90 degrees (negative for South, positive for North)
    - Longitude: -180 to +180 degrees (negative for West, positive for East)

    Construction fails with ValueError for coordinates outside those ranges,
    which is how airport coordinates are validated.
    """

    EARTH_RADIUS_KM = EARTH_RADIUS_KM

    latitude: float  # Decimal degrees, -90 to +90
    longitude: float  # Decimal degrees, -180 to +180
    name: Optional[str] = None  # Optional identifier for the point

    def __post_init__(self):
        """Validate coordinates after initialization."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(f"Latitude must be between -90 and 90 degrees, got {self.latitude}")
        if not -180 <= self.longitude <= 180:
            raise ValueError(f"Longitude must be between -180 and 180 degrees, got {self.longitude}")
