from dataclasses import dataclass
from typing import Optional

from skynet.models.navpoint import great_circle_distance_km

IATA_CODE_LENGTH = 3


def normalize_code(code: Optional[str]) -> str:
    """Strip and upper-case an airport code."""
    return (code or '').strip().upper()


@dataclass
class Airport:
    """Data class for storing airport information."""

    code: str  # IATA code, e.g. JFK
    name: str = ''
    city: str = ''
    country: str = ''
    latitude: float = 0.0
    longitude: float = 0.0

    def __post_init__(self):
        self.code = normalize_code(self.code)

    def distance_to(self, other: 'Airport') -> float:
        """Great circle distance to another airport in kilometers."""
        return great_circle_distance_km(self.latitude, self.longitude, other.latitude, other.longitude)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'code': self.code,
            'name': self.name,
            'city': self.city,
            'country': self.country,
            'latitude': self.latitude,
            'longitude': self.longitude,
        }

    def __str__(self):
        return f"{self.code} - {self.name} ({self.city}, {self.country})"
