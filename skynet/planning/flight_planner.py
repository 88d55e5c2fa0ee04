"""
Flight planning and booking on top of the EntityStore.

The planner previews the shortest route between two airports for a given
aircraft, estimating cost and duration from the aircraft's figures, and
books the route as a Flight.
"""

import dataclasses
import logging
from datetime import datetime, timedelta
from typing import Optional

from ..models.aircraft import Aircraft, AircraftStatus
from ..models.flight import Flight, SCHEDULED
from ..routing.path_finder import PathResult
from ..store.entity_store import EntityStore
from .scheduling import can_schedule

logger = logging.getLogger(__name__)

COST_FACTOR = 0.8  # Cost per litre of fuel
FLIGHT_NUMBER_PREFIX = 'FL'
FIRST_FLIGHT_NUMBER = 1000
DEFAULT_DEPARTURE_DELAY = timedelta(hours=2)
DEPARTURE_FORMAT = '%Y-%m-%dT%H:%M:%S'


def estimate(result: PathResult, aircraft: Aircraft) -> PathResult:
    """
    Fill in cost and duration estimates for a path flown by an aircraft.

    Cost is distance x fuel consumption x COST_FACTOR, duration is distance
    divided by cruise speed.

    Args:
        result: Path found by the path finder
        aircraft: Aircraft flying it

    Returns:
        A copy of result with total_cost and estimated_time replaced
    """
    if not result.found:
        return result
    return dataclasses.replace(
        result,
        path=list(result.path),
        total_cost=result.total_distance * aircraft.fuel_consumption * COST_FACTOR,
        estimated_time=result.total_distance / aircraft.cruise_speed,
    )


class FlightPlanner:
    """Preview and book flights against an EntityStore."""

    def __init__(self, store: EntityStore):
        self.store = store

    def preview(self, origin: str, destination: str, aircraft_id: Optional[str] = None) -> PathResult:
        """
        Shortest route between two airports, with estimates when the aircraft is known.
        """
        result = self.store.find_shortest_path(origin, destination)
        if result.found and aircraft_id:
            aircraft = self.store.get_aircraft(aircraft_id)
            if aircraft is not None:
                result = estimate(result, aircraft)
            else:
                logger.warning(f"Aircraft {aircraft_id} not found, no estimates for {origin}->{destination}")
        logger.debug(f"Preview {result}")
        return result

    def book(self, origin: str, destination: str, aircraft_id: str,
             departure_time: Optional[str] = None) -> Optional[Flight]:
        """
        Book a flight along the shortest route and mark the aircraft as in flight.

        Adding the flight and marking the aircraft are one undoable action.

        Args:
            origin: Origin airport code
            destination: Destination airport code
            aircraft_id: Aircraft to assign, must be AVAILABLE
            departure_time: Departure timestamp, defaults to two hours from now

        Returns:
            The booked Flight, or None if the aircraft is unavailable or no
            route exists
        """
        aircraft = self.store.get_aircraft(aircraft_id)
        if aircraft is None or not aircraft.is_available():
            logger.warning(f"Aircraft {aircraft_id} is not available for booking")
            return None

        result = self.preview(origin, destination, aircraft_id)
        if not result.is_valid():
            logger.warning(f"Cannot book {origin}->{destination}: {result.error_message or 'origin equals destination'}")
            return None

        if departure_time is None:
            departure_time = (datetime.now() + DEFAULT_DEPARTURE_DELAY).strftime(DEPARTURE_FORMAT)

        flight = Flight(
            flight_number=self.next_flight_number(),
            aircraft_id=aircraft.id,
            route=list(result.path),
            total_distance=result.total_distance,
            total_cost=result.total_cost,
            estimated_time=result.estimated_time,
            departure_time=departure_time,
            status=SCHEDULED,
        )
        if not can_schedule(flight, self.store.get_all_flights().by_aircraft(aircraft.id)):
            logger.warning(f"Aircraft {aircraft.id} already has a scheduled flight")
            return None
        if not self.store.add_flight(flight, dataclasses.replace(aircraft, status=AircraftStatus.IN_FLIGHT)):
            return None

        logger.info(f"Booked {flight}")
        return flight

    def next_flight_number(self) -> str:
        """First free number in the FL1000, FL1001, ... sequence."""
        number = FIRST_FLIGHT_NUMBER
        while self.store.get_flight(f"{FLIGHT_NUMBER_PREFIX}{number}") is not None:
            number += 1
        return f"{FLIGHT_NUMBER_PREFIX}{number}"
