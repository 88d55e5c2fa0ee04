import pandas as pd

from skynet.models import (
    Aircraft,
    AircraftStatus,
    AircraftCollection,
    AirportCollection,
    Flight,
    FlightCollection,
    QueryableCollection,
    Route,
    RouteCollection,
)


def test_queryable_collection_basics():
    collection = QueryableCollection([3, 1, 2])

    assert collection.count() == 3
    assert len(collection) == 3
    assert collection.first() == 3
    assert collection.order_by(lambda x: x).all() == [1, 2, 3]
    assert collection.order_by(lambda x: x, reverse=True).take(2).all() == [3, 2]
    assert collection.filter(lambda x: x > 1).count() == 2
    assert list(collection) == [3, 1, 2]


def test_empty_collection():
    collection = QueryableCollection([])
    assert collection.is_empty()
    assert not collection
    assert collection.first() is None
    assert collection.take(3).all() == []
    assert repr(collection) == "QueryableCollection([])"


def test_airport_collection_filters(sample_airports):
    airports = AirportCollection(sample_airports)

    assert [a.code for a in airports.by_country('usa')] == ['JFK', 'LAX']
    assert [a.code for a in airports.by_city(' london ')] == ['LHR']
    assert airports.where(country='UK').first().code == 'LHR'

    # Chained filters keep the specialised collection type
    assert isinstance(airports.filter(lambda a: a.latitude > 40), AirportCollection)
    assert [a.code for a in airports.filter(lambda a: a.latitude > 40).by_country('USA')] == ['JFK']


def test_aircraft_collection_filters(sample_aircraft):
    sample_aircraft.append(Aircraft('AC003', 'ATR 72', 70, 510.0, 1.1, AircraftStatus.MAINTENANCE))
    fleet = AircraftCollection(sample_aircraft)

    assert fleet.available().count() == 2
    assert fleet.by_status(AircraftStatus.MAINTENANCE).first().id == 'AC003'
    assert [a.id for a in fleet.with_min_capacity(200)] == ['AC001']


def test_route_collection_filters():
    routes = RouteCollection([
        Route('JFK', 'LHR', 5540.0, 500.0),
        Route('LHR', 'JFK', 5540.0, 500.0),
        Route('LHR', 'CDG', 344.0, 120.0, operational=False),
    ])

    assert routes.operational().count() == 2
    assert [r.id for r in routes.from_airport('lhr')] == ['LHR-JFK', 'LHR-CDG']
    assert [r.id for r in routes.to_airport('CDG')] == ['LHR-CDG']
    assert routes.touching('JFK').count() == 2
    assert routes.total_distance() == 5540.0 + 5540.0 + 344.0


def test_flight_collection_filters():
    flights = FlightCollection([
        Flight('FL1000', 'AC001', ['JFK', 'LHR', 'DXB']),
        Flight('FL1001', 'AC002', ['LAX', 'JFK'], status='COMPLETED'),
    ])

    assert flights.where(status='SCHEDULED').first().flight_number == 'FL1000'
    assert flights.by_aircraft('AC002').first().flight_number == 'FL1001'
    assert flights.through_airport('lhr').count() == 1
    assert flights.through_airport('JFK').count() == 2


def test_to_dataframe(sample_airports):
    df = AirportCollection(sample_airports).to_dataframe()

    assert isinstance(df, pd.DataFrame)
    assert len(df) == 5
    assert list(df.columns) == ['code', 'name', 'city', 'country', 'latitude', 'longitude']
    assert df.loc[df['code'] == 'LHR', 'city'].iloc[0] == 'London'

    empty = AirportCollection([]).to_dataframe()
    assert len(empty) == 0
