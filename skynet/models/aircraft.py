from dataclasses import dataclass
from enum import Enum


class AircraftStatus(Enum):
    AVAILABLE = 'AVAILABLE'
    IN_FLIGHT = 'IN_FLIGHT'
    MAINTENANCE = 'MAINTENANCE'
    RETIRED = 'RETIRED'

    @classmethod
    def from_string(cls, value: str) -> 'AircraftStatus':
        """Parse a status name, unknown names map to AVAILABLE."""
        try:
            return cls((value or '').strip().upper())
        except ValueError:
            return cls.AVAILABLE


@dataclass
class Aircraft:
    """Data class for storing aircraft information."""

    id: str
    model: str = ''
    capacity: int = 0
    cruise_speed: float = 0.0  # km/h
    fuel_consumption: float = 0.0  # L/km
    status: AircraftStatus = AircraftStatus.AVAILABLE

    def __post_init__(self):
        self.id = (self.id or '').strip()
        if isinstance(self.capacity, float) and self.capacity.is_integer():
            self.capacity = int(self.capacity)
        if isinstance(self.status, str):
            self.status = AircraftStatus.from_string(self.status)

    def is_available(self) -> bool:
        return self.status == AircraftStatus.AVAILABLE

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'id': self.id,
            'model': self.model,
            'capacity': self.capacity,
            'cruise_speed': self.cruise_speed,
            'fuel_consumption': self.fuel_consumption,
            'status': self.status.value,
        }

    def __str__(self):
        return f"{self.id} {self.model} [{self.status.value}]"
