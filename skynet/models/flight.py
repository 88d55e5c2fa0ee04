from dataclasses import dataclass, field
from typing import List

from skynet.models.airport import normalize_code

SCHEDULED = 'SCHEDULED'
COMPLETED = 'COMPLETED'
CANCELLED = 'CANCELLED'


@dataclass
class Flight:
    """
    A booked flight with its full route.

    A Flight is the result of path planning and booking: the ordered list of
    airport codes from origin to destination, the assigned aircraft and the
    estimated distance, cost and duration.
    """

    flight_number: str
    aircraft_id: str = ''
    route: List[str] = field(default_factory=list)  # Ordered airport codes
    total_distance: float = 0.0  # km
    total_cost: float = 0.0
    estimated_time: float = 0.0  # hours
    departure_time: str = ''
    status: str = SCHEDULED  # Free text: SCHEDULED, COMPLETED, CANCELLED, ...

    def __post_init__(self):
        self.flight_number = (self.flight_number or '').strip()
        self.route = [normalize_code(code) for code in self.route]

    @property
    def origin(self) -> str:
        return self.route[0] if self.route else ''

    @property
    def destination(self) -> str:
        return self.route[-1] if self.route else ''

    @property
    def stops(self) -> int:
        return max(0, len(self.route) - 2)

    def is_scheduled(self) -> bool:
        return self.status == SCHEDULED

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'flight_number': self.flight_number,
            'aircraft_id': self.aircraft_id,
            'route': '-'.join(self.route),
            'origin': self.origin,
            'destination': self.destination,
            'stops': self.stops,
            'total_distance': self.total_distance,
            'total_cost': self.total_cost,
            'estimated_time': self.estimated_time,
            'departure_time': self.departure_time,
            'status': self.status,
        }

    def __str__(self):
        return f"{self.flight_number} {' → '.join(self.route)} [{self.status}]"
