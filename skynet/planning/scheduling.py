"""
Aircraft scheduling checks and time slot data.

A scheduled flight holds its aircraft: another flight cannot be scheduled on
the same aircraft while the first one is still SCHEDULED.
"""

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Iterable, List, Tuple

from dateutil import parser as date_parser

from ..models.flight import Flight

logger = logging.getLogger(__name__)


@dataclass
class TimeSlot:
    """One bar of a Gantt chart: an aircraft busy between two times."""

    aircraft_id: str
    start_time: str
    end_time: str
    location: str


def can_schedule(flight: Flight, existing_flights: Iterable[Flight]) -> bool:
    """True if no other scheduled flight uses the same aircraft."""
    for existing in existing_flights:
        if (existing.flight_number != flight.flight_number
                and existing.aircraft_id == flight.aircraft_id
                and existing.is_scheduled()):
            return False
    return True


def detect_conflicts(flights: List[Flight]) -> List[Tuple[str, str]]:
    """
    Pairs of scheduled flights sharing an aircraft.

    Returns:
        List of (flight_number, flight_number) pairs in input order
    """
    conflicts = []
    for i, first in enumerate(flights):
        for second in flights[i + 1:]:
            if (first.aircraft_id == second.aircraft_id
                    and first.is_scheduled() and second.is_scheduled()):
                conflicts.append((first.flight_number, second.flight_number))
    return conflicts


def estimated_arrival(flight: Flight) -> str:
    """
    Departure time plus estimated flight time, in ISO format.

    Falls back to the departure string when it is not a parseable date.
    """
    try:
        departure = date_parser.parse(flight.departure_time)
    except (ValueError, OverflowError):
        logger.debug(f"Unparseable departure time {flight.departure_time!r} for {flight.flight_number}")
        return flight.departure_time
    return (departure + timedelta(hours=flight.estimated_time)).isoformat()


def generate_gantt_data(flights: Iterable[Flight]) -> List[TimeSlot]:
    return [
        TimeSlot(
            aircraft_id=flight.aircraft_id,
            start_time=flight.departure_time,
            end_time=estimated_arrival(flight),
            location=f"{flight.origin} → {flight.destination}",
        )
        for flight in flights
    ]
