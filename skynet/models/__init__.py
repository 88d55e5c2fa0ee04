"""
Data models for the skynet library.

This package contains the entities managed by the EntityStore (airports,
aircraft, routes and flights), the great circle geometry used to derive
route distances, validation, and queryable collections for fluent
querying of the store's contents.
"""

from .navpoint import NavPoint, great_circle_distance_km, EARTH_RADIUS_KM
from .airport import Airport, normalize_code
from .aircraft import Aircraft, AircraftStatus
from .route import Route, make_route_id
from .flight import Flight
from .validation import (
    ValidationResult,
    ValidationError,
    validate_airport,
    validate_aircraft,
    validate_route,
    validate_flight,
)
from .queryable_collection import QueryableCollection
from .entity_collections import AirportCollection, AircraftCollection, RouteCollection, FlightCollection

__all__ = [
    # Core models
    'Airport',
    'Aircraft',
    'AircraftStatus',
    'Route',
    'Flight',
    'NavPoint',
    'great_circle_distance_km',
    'EARTH_RADIUS_KM',
    'normalize_code',
    'make_route_id',
    # Validation
    'ValidationResult',
    'ValidationError',
    'validate_airport',
    'validate_aircraft',
    'validate_route',
    'validate_flight',
    # Queryable collections
    'QueryableCollection',
    'AirportCollection',
    'AircraftCollection',
    'RouteCollection',
    'FlightCollection',
]
