#!/usr/bin/env python3

import sys
import argparse
import logging
from pathlib import Path

from skynet.config import StoreConfig
from skynet.models import Aircraft, Airport, normalize_code
from skynet.planning import FlightPlanner, detect_conflicts, generate_gantt_data
from skynet.routing import PathResult, get_pareto_frontier
from skynet.store import EntityStore

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

EXPORT_KINDS = ['airports', 'aircraft', 'routes', 'flights']


class Command:
    """Command-line interface for skynet."""

    def __init__(self, args):
        """
        Initialize the command interface and load the store.

        Args:
            args: Command line arguments
        """
        self.args = args
        self.store = EntityStore(StoreConfig.from_env(args.data_dir))
        if not self.store.load_all():
            logger.warning('Some data files could not be loaded, continuing with what was read')

    def run_stats(self) -> int:
        for name, value in self.store.statistics().items():
            print(f'{name:>12}: {value}')
        return 0

    def run_airports(self) -> int:
        airports = self.store.get_all_airports()
        if self.args.country:
            airports = airports.by_country(self.args.country)
        if self.args.city:
            airports = airports.by_city(self.args.city)
        for airport in airports:
            print(airport)
        return 0

    def run_routes(self) -> int:
        routes = self.store.get_all_routes()
        if self.args.origin:
            routes = routes.from_airport(self.args.origin)
        if self.args.destination:
            routes = routes.to_airport(self.args.destination)
        if self.args.operational:
            routes = routes.operational()
        if routes.is_empty():
            print('No routes')
            return 0

        listed = routes.order_by(lambda r: r.distance, reverse=True)
        if self.args.limit:
            listed = listed.take(self.args.limit)
        for route in listed:
            print(route)
        print(f'{routes.count()} routes, {routes.total_distance():.2f} km')
        return 0

    def run_aircraft(self) -> int:
        aircraft = self.store.get_all_aircraft()
        if self.args.available:
            aircraft = aircraft.available()
        if self.args.min_capacity:
            aircraft = aircraft.with_min_capacity(self.args.min_capacity)
        for plane in aircraft:
            print(plane)
        return 0

    def run_flights(self) -> int:
        flights = self.store.get_all_flights()
        if self.args.aircraft:
            flights = flights.by_aircraft(self.args.aircraft)
        if self.args.airport:
            flights = flights.through_airport(self.args.airport)
        if self.args.status:
            flights = flights.where(status=self.args.status.upper())
        for flight in flights:
            print(flight)
        return 0

    def run_schedule(self) -> int:
        flights = self.store.get_all_flights().order_by(lambda f: f.departure_time)
        for slot in generate_gantt_data(flights):
            print(f'{slot.aircraft_id:<8} {slot.start_time} -> {slot.end_time}  {slot.location}')
        conflicts = detect_conflicts(flights.all())
        for first, second in conflicts:
            print(f'Conflict: {first} and {second} share an aircraft')
        return 1 if conflicts else 0

    def run_path(self) -> int:
        result = FlightPlanner(self.store).preview(self.args.origin, self.args.destination, self.args.aircraft)
        self._print_result(result)
        return 0 if result.found else 1

    def run_frontier(self) -> int:
        frontier = get_pareto_frontier(self.store.get_graph(),
                                       normalize_code(self.args.origin), normalize_code(self.args.destination))
        for label, result in zip(['distance', 'cost', 'time'], frontier):
            print(f'[{label} priority]')
            self._print_result(result)
        return 0 if any(r.found for r in frontier) else 1

    def run_add_airport(self) -> int:
        airport = Airport(
            code=self.args.code,
            name=self.args.name,
            city=self.args.city,
            country=self.args.country,
            latitude=self.args.latitude,
            longitude=self.args.longitude,
        )
        if not self.store.add_airport(airport):
            logger.error(f'Airport {airport.code} was not added')
            return 1
        return self._save()

    def run_add_route(self) -> int:
        if not self.store.add_route_between(self.args.origin, self.args.destination,
                                            base_cost=self.args.cost, bidirectional=self.args.bidirectional):
            logger.error(f'Route {self.args.origin}-{self.args.destination} was not added')
            return 1
        return self._save()

    def run_add_aircraft(self) -> int:
        aircraft = Aircraft(
            id=self.args.id,
            model=self.args.model,
            capacity=self.args.capacity,
            cruise_speed=self.args.cruise_speed,
            fuel_consumption=self.args.fuel_consumption,
        )
        if not self.store.add_aircraft(aircraft):
            logger.error(f'Aircraft {aircraft.id} was not added')
            return 1
        return self._save()

    def run_book(self) -> int:
        aircraft_id = self.args.aircraft
        if aircraft_id is None:
            # First available aircraft large enough, by ascending capacity
            aircraft = (self.store.get_all_aircraft().available()
                        .with_min_capacity(self.args.passengers)
                        .order_by(lambda a: (a.capacity, a.id)).first())
            if aircraft is None:
                logger.error(f'No available aircraft seats {self.args.passengers} passengers')
                return 1
            aircraft_id = aircraft.id
        flight = FlightPlanner(self.store).book(self.args.origin, self.args.destination, aircraft_id)
        if flight is None:
            return 1
        print(flight)
        return self._save()

    def run_export(self) -> int:
        collection = getattr(self.store, f'get_all_{self.args.kind}')()
        df = collection.to_dataframe()
        df.to_csv(self.args.output, index=False)
        logger.info(f'Exported {len(df)} {self.args.kind} to {self.args.output}')
        return 0

    def _save(self) -> int:
        if not self.store.save_all():
            logger.error('Failed to save data')
            return 1
        return 0

    @staticmethod
    def _print_result(result: PathResult) -> None:
        if not result.found:
            print(f'  No route: {result.error_message}')
            return
        print(f'  Path: {" → ".join(result.path)}')
        print(f'  Distance: {result.total_distance:.2f} km, stops: {result.stops}')
        print(f'  Cost: {result.total_cost:.2f}')
        if result.estimated_time:
            hours = int(result.estimated_time)
            minutes = int((result.estimated_time - hours) * 60)
            print(f'  Duration: {hours}h {minutes:02d}m')

    def run(self) -> int:
        """Run the specified command."""
        return getattr(self, f'run_{self.args.command.replace("-", "_")}')()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='SkyNet flight network management tool')
    parser.add_argument('-d', '--data-dir', help='Directory holding the data files (default: $SKYNET_DATA_DIR or data_files)')
    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')
    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('stats', help='Show entity and graph counts')

    airports = subparsers.add_parser('airports', help='List airports')
    airports.add_argument('--country', help='Filter by country')
    airports.add_argument('--city', help='Filter by city')

    routes = subparsers.add_parser('routes', help='List routes, longest first')
    routes.add_argument('--from', dest='origin', help='Only routes departing this airport')
    routes.add_argument('--to', dest='destination', help='Only routes arriving at this airport')
    routes.add_argument('--operational', help='Only operational routes', action='store_true')
    routes.add_argument('-n', '--limit', help='Show at most this many routes', type=int)

    aircraft = subparsers.add_parser('aircraft', help='List aircraft')
    aircraft.add_argument('--available', help='Only available aircraft', action='store_true')
    aircraft.add_argument('--min-capacity', help='Only aircraft seating at least this many', type=int)

    flights = subparsers.add_parser('flights', help='List booked flights')
    flights.add_argument('--aircraft', help='Only flights of this aircraft')
    flights.add_argument('--airport', help='Only flights visiting this airport')
    flights.add_argument('--status', help='Only flights with this status, e.g. SCHEDULED')

    subparsers.add_parser('schedule', help='Aircraft time slots and scheduling conflicts')

    path = subparsers.add_parser('path', help='Shortest path between two airports')
    path.add_argument('origin')
    path.add_argument('destination')
    path.add_argument('-a', '--aircraft', help='Aircraft ID used for cost and duration estimates')

    frontier = subparsers.add_parser('frontier', help='Candidate paths under distance, cost and time priority')
    frontier.add_argument('origin')
    frontier.add_argument('destination')

    add_airport = subparsers.add_parser('add-airport', help='Add an airport')
    add_airport.add_argument('code')
    add_airport.add_argument('name')
    add_airport.add_argument('city')
    add_airport.add_argument('country')
    add_airport.add_argument('latitude', type=float)
    add_airport.add_argument('longitude', type=float)

    add_route = subparsers.add_parser('add-route', help='Add a route, distance computed from coordinates')
    add_route.add_argument('origin')
    add_route.add_argument('destination')
    add_route.add_argument('-c', '--cost', help='Base cost of the leg', type=float, default=0.0)
    add_route.add_argument('-b', '--bidirectional', help='Also add the reverse route', action='store_true')

    add_aircraft = subparsers.add_parser('add-aircraft', help='Add an aircraft')
    add_aircraft.add_argument('id')
    add_aircraft.add_argument('model')
    add_aircraft.add_argument('capacity', type=int)
    add_aircraft.add_argument('cruise_speed', help='km/h', type=float)
    add_aircraft.add_argument('fuel_consumption', help='L/km', type=float)

    book = subparsers.add_parser('book', help='Book a flight along the shortest path')
    book.add_argument('origin')
    book.add_argument('destination')
    book.add_argument('aircraft', nargs='?', help='Aircraft ID (default: smallest available aircraft that fits)')
    book.add_argument('-p', '--passengers', help='Seats needed when picking an aircraft', type=int, default=1)

    export = subparsers.add_parser('export', help='Export a collection to CSV')
    export.add_argument('kind', choices=EXPORT_KINDS)
    export.add_argument('output', type=Path)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    cmd = Command(args)
    return cmd.run()


if __name__ == '__main__':
    sys.exit(main())
