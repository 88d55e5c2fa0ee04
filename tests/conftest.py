import pytest
from pathlib import Path

from skynet.config import StoreConfig
from skynet.models import Airport, Aircraft, Route
from skynet.store import EntityStore


@pytest.fixture
def test_data_dir(tmp_path) -> Path:
    """Return a temporary directory for the store's data files."""
    return tmp_path / 'data_files'


@pytest.fixture
def config(test_data_dir) -> StoreConfig:
    return StoreConfig(data_dir=test_data_dir)


@pytest.fixture
def store(config) -> EntityStore:
    """Create a fresh, empty store for each test."""
    return EntityStore(config)


@pytest.fixture
def sample_airports():
    """A handful of real airports."""
    return [
        Airport("JFK", "John F Kennedy International", "New York", "USA", 40.6413, -73.7781),
        Airport("LAX", "Los Angeles International", "Los Angeles", "USA", 33.9416, -118.4085),
        Airport("LHR", "Heathrow", "London", "UK", 51.4700, -0.4543),
        Airport("CDG", "Charles de Gaulle", "Paris", "France", 49.0097, 2.5479),
        Airport("DXB", "Dubai International", "Dubai", "UAE", 25.2532, 55.3657),
    ]


@pytest.fixture
def sample_aircraft():
    return [
        Aircraft("AC001", "Boeing 777", 350, 905.0, 7.5),
        Aircraft("AC002", "Airbus A320", 180, 840.0, 3.2),
    ]


@pytest.fixture
def network_store(store, sample_airports, sample_aircraft) -> EntityStore:
    """
    Store with airports, aircraft and a small route network:

        LAX - JFK - LHR - DXB
                     |
                    CDG (inactive)
    """
    for airport in sample_airports:
        assert store.add_airport(airport)
    for aircraft in sample_aircraft:
        assert store.add_aircraft(aircraft)
    assert store.add_route_between("LAX", "JFK", base_cost=300.0)
    assert store.add_route_between("JFK", "LHR", base_cost=500.0)
    assert store.add_route_between("LHR", "DXB", base_cost=450.0)
    assert store.add_route(Route("LHR", "CDG", 344.0, 120.0, operational=False))
    store.clear_undo_stack()
    return store
