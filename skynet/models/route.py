from dataclasses import dataclass

from skynet.models.airport import normalize_code


def make_route_id(origin: str, destination: str) -> str:
    """Directional route identifier, e.g. JFK-LHR."""
    return f"{normalize_code(origin)}-{normalize_code(destination)}"


@dataclass
class Route:
    """
    A directional connection between two airports.

    A bidirectional connection is stored as two Route records, one per
    direction, each with its own id. They are not kept in sync.
    """

    origin: str
    destination: str
    distance: float = 0.0  # km
    base_cost: float = 0.0
    operational: bool = True

    def __post_init__(self):
        self.origin = normalize_code(self.origin)
        self.destination = normalize_code(self.destination)

    @property
    def id(self) -> str:
        return make_route_id(self.origin, self.destination)

    def reverse(self) -> 'Route':
        """Return the mirror record for the opposite direction."""
        return Route(self.destination, self.origin, self.distance, self.base_cost, self.operational)

    def touches(self, code: str) -> bool:
        """True if the route starts or ends at the given airport."""
        return code in (self.origin, self.destination)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'id': self.id,
            'origin': self.origin,
            'destination': self.destination,
            'distance': self.distance,
            'base_cost': self.base_cost,
            'operational': self.operational,
        }

    def __str__(self):
        state = '' if self.operational else ' (inactive)'
        return f"{self.origin} → {self.destination} {self.distance:.0f}km{state}"
