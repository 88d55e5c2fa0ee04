"""
Specialized queryable collections for SkyNet entities.

Provides domain-specific filtering methods for common queries while
maintaining the composability of the base QueryableCollection.
"""

from typing import List, TYPE_CHECKING

from .queryable_collection import QueryableCollection
from .aircraft import AircraftStatus
from .airport import normalize_code

if TYPE_CHECKING:
    from .airport import Airport
    from .aircraft import Aircraft
    from .route import Route
    from .flight import Flight


class AirportCollection(QueryableCollection['Airport']):
    """
    Collection of airports.

    Examples:
        store.get_all_airports().by_country("USA").order_by(lambda a: a.name).all()
    """

    def by_country(self, country: str) -> 'AirportCollection':
        """Filter airports by country name (case insensitive)."""
        wanted = country.strip().lower()
        return AirportCollection([a for a in self._items if a.country.lower() == wanted])

    def by_city(self, city: str) -> 'AirportCollection':
        wanted = city.strip().lower()
        return AirportCollection([a for a in self._items if a.city.lower() == wanted])


class AircraftCollection(QueryableCollection['Aircraft']):
    """Collection of aircraft."""

    def by_status(self, status: AircraftStatus) -> 'AircraftCollection':
        return AircraftCollection([a for a in self._items if a.status == status])

    def available(self) -> 'AircraftCollection':
        """Aircraft that can be assigned to a new flight."""
        return self.by_status(AircraftStatus.AVAILABLE)

    def with_min_capacity(self, capacity: int) -> 'AircraftCollection':
        return AircraftCollection([a for a in self._items if a.capacity >= capacity])


class RouteCollection(QueryableCollection['Route']):
    """Collection of directional routes."""

    def operational(self) -> 'RouteCollection':
        """Routes that contribute edges to the routing graph."""
        return RouteCollection([r for r in self._items if r.operational])

    def from_airport(self, code: str) -> 'RouteCollection':
        code = normalize_code(code)
        return RouteCollection([r for r in self._items if r.origin == code])

    def to_airport(self, code: str) -> 'RouteCollection':
        code = normalize_code(code)
        return RouteCollection([r for r in self._items if r.destination == code])

    def touching(self, code: str) -> 'RouteCollection':
        """Routes starting or ending at the airport."""
        code = normalize_code(code)
        return RouteCollection([r for r in self._items if r.touches(code)])

    def total_distance(self) -> float:
        return sum(r.distance for r in self._items)


class FlightCollection(QueryableCollection['Flight']):
    """Collection of booked flights."""

    def by_aircraft(self, aircraft_id: str) -> 'FlightCollection':
        return FlightCollection([f for f in self._items if f.aircraft_id == aircraft_id])

    def through_airport(self, code: str) -> 'FlightCollection':
        """Flights whose route visits the airport (origin, stop or destination)."""
        code = normalize_code(code)
        return FlightCollection([f for f in self._items if code in f.route])
