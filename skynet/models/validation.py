"""
Validation module for SkyNet entities.

This module provides validation results and the per-entity checks the
EntityStore runs before accepting a new or updated entity.
"""

from dataclasses import dataclass, field
from typing import List, Any

from .airport import Airport, IATA_CODE_LENGTH
from .navpoint import NavPoint
from .aircraft import Aircraft
from .route import Route
from .flight import Flight


@dataclass
class ValidationError:
    """Represents a single validation error."""

    field: str
    message: str
    value: Any = None

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.field}: {self.message} (value: {self.value})"
        return f"{self.field}: {self.message}"


@dataclass
class ValidationResult:
    """Result of a validation operation."""

    errors: List[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if validation passed (no errors)."""
        return len(self.errors) == 0

    def add_error(self, field: str, message: str, value: Any = None) -> None:
        """Add a validation error."""
        self.errors.append(ValidationError(field, message, value))

    def get_error_messages(self) -> List[str]:
        """Get all error messages as strings."""
        return [str(error) for error in self.errors]


def validate_airport(airport: Airport) -> ValidationResult:
    """
    Validate an airport.

    Args:
        airport: Airport to validate

    Returns:
        ValidationResult
    """
    result = ValidationResult()
    if len(airport.code) != IATA_CODE_LENGTH:
        result.add_error('code', f"must be exactly {IATA_CODE_LENGTH} characters", airport.code)
    try:
        NavPoint(airport.latitude, airport.longitude, airport.code)
    except ValueError as e:
        result.add_error('coordinates', str(e))
    return result


def validate_aircraft(aircraft: Aircraft) -> ValidationResult:
    result = ValidationResult()
    if not aircraft.id:
        result.add_error('id', "is required")
    if isinstance(aircraft.capacity, bool) or not isinstance(aircraft.capacity, int):
        result.add_error('capacity', "must be a whole number", aircraft.capacity)
    elif aircraft.capacity <= 0:
        result.add_error('capacity', "must be positive", aircraft.capacity)
    if not aircraft.cruise_speed > 0:
        result.add_error('cruise_speed', "must be positive", aircraft.cruise_speed)
    if not aircraft.fuel_consumption > 0:
        result.add_error('fuel_consumption', "must be positive", aircraft.fuel_consumption)
    return result


def validate_route(route: Route) -> ValidationResult:
    result = ValidationResult()
    if not route.origin or not route.destination:
        result.add_error('route', "origin and destination are required", route.id)
    elif route.origin == route.destination:
        result.add_error('destination', "must differ from origin", route.destination)
    if not route.distance >= 0:
        result.add_error('distance', "must be a non-negative number", route.distance)
    return result


def validate_flight(flight: Flight) -> ValidationResult:
    result = ValidationResult()
    if not flight.flight_number:
        result.add_error('flight_number', "is required")
    if len(flight.route) < 2:
        result.add_error('route', "must contain at least 2 airports", '-'.join(flight.route))
    return result
