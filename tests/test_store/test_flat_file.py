from skynet.config import StoreConfig
from skynet.models import Airport, Aircraft, AircraftStatus, Route, Flight
from skynet.store import EntityStore, FlatFileStorage


def write_file(path, lines):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text('\n'.join(lines) + '\n', encoding='utf-8')


def test_missing_files_load_as_empty(store, config):
    assert store.load_all()
    assert config.data_dir.is_dir()
    assert store.statistics()['airports'] == 0
    assert store.get_graph().is_empty()


def test_save_writes_headers(store, config):
    assert store.save_all()

    assert config.airports_path.read_text(encoding='utf-8') == 'Code,Name,City,Country,Latitude,Longitude\n'
    assert config.aircraft_path.read_text(encoding='utf-8') == \
        'ID,Model,Capacity,CruiseSpeed,FuelConsumption,Status\n'
    assert config.routes_path.read_text(encoding='utf-8') == 'Origin,Destination,Distance,BaseCost,Operational\n'
    assert config.flights_path.read_text(encoding='utf-8').startswith('FlightNumber,AircraftID,Route,')


def test_save_and_reload_round_trip(network_store, config):
    network_store.add_airport(Airport('BOM', 'Chhatrapati Shivaji, Mumbai', 'Mumbai', 'India', 19.0896, 72.8656))
    network_store.add_flight(Flight('FL1000', 'AC001', ['LAX', 'JFK', 'LHR'], 9500.0, 57000.0, 10.5,
                                    '2026-01-01T10:00:00'))
    network_store.update_aircraft(Aircraft('AC002', 'Airbus A320', 180, 840.0, 3.2, AircraftStatus.MAINTENANCE))
    assert network_store.save_all()

    reloaded = EntityStore(config)
    assert reloaded.load_all()

    assert reloaded.get_all_airports().all() == network_store.get_all_airports().all()
    assert reloaded.get_all_aircraft().all() == network_store.get_all_aircraft().all()
    assert reloaded.get_all_routes().all() == network_store.get_all_routes().all()
    assert reloaded.get_all_flights().all() == network_store.get_all_flights().all()

    assert reloaded.get_airport('BOM').name == 'Chhatrapati Shivaji, Mumbai'
    assert reloaded.get_route('LHR-CDG').operational is False
    assert reloaded.statistics() == network_store.statistics()
    # Loading does not create undo records
    assert not reloaded.can_undo()


def test_routes_file_format(network_store, config):
    assert network_store.save_all()
    lines = config.routes_path.read_text(encoding='utf-8').splitlines()
    assert lines[0] == 'Origin,Destination,Distance,BaseCost,Operational'
    assert lines[3] == 'LHR,CDG,344.0,120.0,0'
    assert len(lines) == 5


def test_malformed_rows_are_skipped(store, config):
    write_file(config.airports_path, [
        'Code,Name,City,Country,Latitude,Longitude',
        'JFK,John F Kennedy,New York,USA,40.6413,-73.7781',
        'BAD,Bad Latitude,Nowhere,None,north,0.0',
        'SHT,Too Short',
        '',
        'LHR,Heathrow,London,UK,51.47,-0.4543',
        'XXXX,Long Code,Nowhere,None,0.0,0.0',
    ])
    write_file(config.routes_path, [
        'Origin,Destination,Distance,BaseCost,Operational',
        'JFK,LHR,5540.0,500.0,1',
        'JFK,SFO,4150.0,250.0,1',
        'LHR,JFK,5540.0,500.0,true',
    ])

    assert store.load_all()
    assert [a.code for a in store.get_all_airports()] == ['JFK', 'LHR']
    assert [r.id for r in store.get_all_routes()] == ['JFK-LHR', 'LHR-JFK']
    assert store.get_route('LHR-JFK').operational is True
    assert store.find_shortest_path('JFK', 'LHR').total_distance == 5540.0


def test_flight_route_is_split_on_dashes(store, config):
    write_file(config.flights_path, [
        'FlightNumber,AircraftID,Route,TotalDistance,TotalCost,EstimatedTime,DepartureTime,Status',
        'FL1000,AC001,JFK-LHR-DXB,10990.5,6500.0,12.1,2026-01-01T10:00:00,SCHEDULED',
    ])
    assert store.load_all()
    flight = store.get_flight('FL1000')
    assert flight.route == ['JFK', 'LHR', 'DXB']
    assert flight.estimated_time == 12.1


def test_load_merges_with_existing_entities(store, config, sample_airports):
    store.add_airport(sample_airports[0])
    write_file(config.airports_path, [
        'Code,Name,City,Country,Latitude,Longitude',
        'JFK,Renamed,New York,USA,40.6413,-73.7781',
        'LHR,Heathrow,London,UK,51.47,-0.4543',
    ])
    assert store.load_all()
    assert store.get_airport('JFK').name == 'Renamed'
    assert store.get_all_airports().count() == 2


def test_unreadable_file_reports_failure(store, config):
    # A directory where a file is expected cannot be opened
    config.airports_path.mkdir(parents=True)
    write_file(config.aircraft_path, [
        'ID,Model,Capacity,CruiseSpeed,FuelConsumption,Status',
        'AC001,Airbus A320,180,840.0,3.2,AVAILABLE',
    ])

    assert not store.load_all()
    # The other files are still loaded
    assert store.get_aircraft('AC001') is not None
    assert not store.save_all()


def test_storage_load_returns_none_on_read_error(tmp_path):
    config = StoreConfig(data_dir=tmp_path)
    config.routes_path.mkdir()
    storage = FlatFileStorage(config)

    assert storage.load_routes() is None
    assert storage.load_airports() == []
    assert not storage.save_routes([Route('JFK', 'LHR', 1.0)])


def test_unbalanced_quote_only_skips_its_own_row(store, config):
    """An unterminated quoted field does not swallow the rows after it."""
    write_file(config.airports_path, [
        'Code,Name,City,Country,Latitude,Longitude',
        'JFK,John F Kennedy,New York,USA,40.6413,-73.7781',
        'BAD,"Broken,Nowhere,None,1.0,2.0',
        'LHR,Heathrow,London,UK,51.47,-0.4543',
        'BOM,"Chhatrapati Shivaji, Mumbai",Mumbai,India,19.0896,72.8656',
    ])

    assert store.load_all()
    assert [a.code for a in store.get_all_airports()] == ['BOM', 'JFK', 'LHR']
    assert store.get_airport('BOM').name == 'Chhatrapati Shivaji, Mumbai'
    assert store.get_airport('BAD') is None


def test_whole_float_capacity_survives_reload(store, config):
    assert store.add_aircraft(Aircraft('AC003', 'Airbus A321', 220.0, 840.0, 3.5))
    assert store.save_all()

    lines = config.aircraft_path.read_text(encoding='utf-8').splitlines()
    assert lines[1] == 'AC003,Airbus A321,220,840.0,3.5,AVAILABLE'

    reloaded = EntityStore(config)
    assert reloaded.load_all()
    assert reloaded.get_aircraft('AC003').capacity == 220
