import pytest

from skynet.models import Aircraft, AircraftStatus, Flight
from skynet.planning import FlightPlanner, estimate
from skynet.planning.flight_planner import COST_FACTOR
from skynet.routing import PathResult


@pytest.fixture
def planner(network_store):
    return FlightPlanner(network_store)


def test_estimate():
    result = PathResult(found=True, path=["JFK", "LHR"], total_distance=1000.0, total_cost=500.0)
    aircraft = Aircraft('AC001', 'A320', 180, 800.0, 3.0)

    estimated = estimate(result, aircraft)
    assert estimated.total_cost == pytest.approx(1000.0 * 3.0 * COST_FACTOR)
    assert estimated.estimated_time == pytest.approx(1.25)
    assert estimated.total_distance == 1000.0
    # The input is left untouched
    assert result.total_cost == 500.0

    failure = PathResult.failure("No route available between airports")
    assert estimate(failure, aircraft) is failure


def test_preview_without_aircraft(planner):
    result = planner.preview('JFK', 'DXB')
    assert result.path == ['JFK', 'LHR', 'DXB']
    assert result.total_cost == pytest.approx(950.0)
    assert result.estimated_time == 0.0


def test_preview_with_aircraft(planner, network_store):
    result = planner.preview('JFK', 'DXB', 'AC001')
    assert result.total_cost == pytest.approx(result.total_distance * 7.5 * 0.8)
    assert result.estimated_time == pytest.approx(result.total_distance / 905.0)

    # Unknown aircraft falls back to the route costs
    assert planner.preview('JFK', 'DXB', 'AC999').total_cost == pytest.approx(950.0)


def test_book_flight(planner, network_store):
    flight = planner.book('JFK', 'DXB', 'AC001', departure_time='2026-01-01T10:00:00')

    assert flight is not None
    assert flight.flight_number == 'FL1000'
    assert flight.route == ['JFK', 'LHR', 'DXB']
    assert flight.aircraft_id == 'AC001'
    assert flight.departure_time == '2026-01-01T10:00:00'
    assert flight.is_scheduled()
    assert flight.total_cost == pytest.approx(flight.total_distance * 7.5 * 0.8)

    assert network_store.get_flight('FL1000') == flight
    assert network_store.get_aircraft('AC001').status == AircraftStatus.IN_FLIGHT


def test_book_requires_available_aircraft(planner, network_store):
    assert planner.book('JFK', 'DXB', 'AC001') is not None
    # AC001 is now in flight
    assert planner.book('LAX', 'JFK', 'AC001') is None
    assert planner.book('LAX', 'JFK', 'AC999') is None
    assert network_store.get_all_flights().count() == 1


def test_book_requires_route(planner, network_store):
    assert planner.book('JFK', 'CDG', 'AC002') is None
    assert planner.book('JFK', 'JFK', 'AC002') is None
    assert network_store.get_aircraft('AC002').is_available()
    assert network_store.get_all_flights().is_empty()


def test_default_departure_time(planner):
    flight = planner.book('LAX', 'JFK', 'AC002')
    assert flight is not None
    assert len(flight.departure_time) == len('2026-01-01T10:00:00')
    assert 'T' in flight.departure_time


def test_flight_numbers_are_sequential(planner, network_store):
    assert planner.next_flight_number() == 'FL1000'
    network_store.add_flight(Flight('FL1000', 'AC009', ['JFK', 'LHR']))
    network_store.add_flight(Flight('FL1001', 'AC009', ['LHR', 'JFK']))
    assert planner.next_flight_number() == 'FL1002'

    flight = planner.book('JFK', 'LHR', 'AC002')
    assert flight.flight_number == 'FL1002'


def test_undo_booking_frees_aircraft(planner, network_store):
    """Undoing a booking removes the flight and puts the aircraft back in service."""
    flight = planner.book('JFK', 'DXB', 'AC001', departure_time='2026-01-01T10:00:00')
    assert flight is not None
    assert len(network_store.undo_history()) == 1

    assert network_store.undo()
    assert network_store.get_flight(flight.flight_number) is None
    assert network_store.get_aircraft('AC001').status == AircraftStatus.AVAILABLE
    assert not network_store.can_undo()

    # The same aircraft can be booked again
    again = planner.book('JFK', 'DXB', 'AC001')
    assert again is not None
    assert again.flight_number == flight.flight_number


def test_book_refuses_aircraft_with_scheduled_flight(planner, network_store):
    assert network_store.add_flight(Flight('FL0001', 'AC002', ['LAX', 'JFK']))
    assert network_store.get_aircraft('AC002').is_available()

    assert planner.book('JFK', 'LHR', 'AC002') is None
    assert network_store.get_all_flights().count() == 1
