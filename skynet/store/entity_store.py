import copy
import logging
from typing import Any, Dict, List, Optional

from ..config import StoreConfig
from ..models.airport import Airport, normalize_code
from ..models.aircraft import Aircraft
from ..models.route import Route, make_route_id
from ..models.flight import Flight
from ..models.validation import (
    ValidationResult,
    validate_airport,
    validate_aircraft,
    validate_route,
    validate_flight,
)
from ..models.entity_collections import AirportCollection, AircraftCollection, RouteCollection, FlightCollection
from ..routing.graph import Graph
from ..routing.path_finder import PathResult, find_shortest_path
from .flat_file import FlatFileStorage
from .undo import ActionType, UndoLog, UndoRecord, MAX_UNDO

logger = logging.getLogger(__name__)


class EntityStore:
    """
    Central data store for airports, aircraft, routes and flights.

    The store validates and commits entity mutations, keeps a bounded undo
    log, persists to flat files and owns the routing graph. The graph is
    derived data: it is rebuilt from the current airports and operational
    routes after every airport or route mutation, so its nodes always equal
    the airport codes and its edges always mirror the operational routes.

    CRUD methods return True on success and False when the request is
    rejected (duplicate key on add, missing key on update or delete, failed
    validation). A rejected request leaves the store unchanged.

    Create one store at startup and pass it to whatever needs it:

        >>> store = EntityStore(StoreConfig.from_env())
        >>> store.load_all()
        >>> result = store.find_shortest_path('JFK', 'DXB')
    """

    def __init__(self, config: Optional[StoreConfig] = None, storage: Optional[FlatFileStorage] = None,
                 undo_limit: int = MAX_UNDO):
        """
        Initialize an empty store.

        Args:
            config: File locations, defaults to StoreConfig.from_env()
            storage: Persistence backend, defaults to FlatFileStorage(config)
            undo_limit: Maximum number of undo records kept
        """
        self.config = config or StoreConfig.from_env()
        self.storage = storage or FlatFileStorage(self.config)

        self._airports: Dict[str, Airport] = {}
        self._aircraft: Dict[str, Aircraft] = {}
        self._routes: Dict[str, Route] = {}
        self._flights: Dict[str, Flight] = {}

        self._graph = Graph()
        self._undo = UndoLog(undo_limit)

    # ========================================================================
    # Airports
    # ========================================================================

    def add_airport(self, airport: Airport) -> bool:
        if airport.code in self._airports:
            logger.warning(f"Airport {airport.code} already exists")
            return False
        if not self._check(validate_airport(airport), f"Airport {airport.code}"):
            return False

        self._airports[airport.code] = copy.deepcopy(airport)
        self._push_undo(ActionType.ADD_AIRPORT, self._serialize_airport(airport), airports=[airport])
        logger.debug(f"Added airport {airport.code}")
        self.rebuild_graph()
        return True

    def update_airport(self, airport: Airport) -> bool:
        if airport.code not in self._airports:
            logger.warning(f"Airport {airport.code} not found, cannot update")
            return False
        if not self._check(validate_airport(airport), f"Airport {airport.code}"):
            return False

        self._airports[airport.code] = copy.deepcopy(airport)
        logger.debug(f"Updated airport {airport.code}")
        self.rebuild_graph()
        return True

    def delete_airport(self, code: str) -> bool:
        """
        Delete an airport and every route starting or ending there.
        """
        code = normalize_code(code)
        airport = self._airports.get(code)
        if airport is None:
            logger.warning(f"Airport {code} not found, cannot delete")
            return False

        routes = self.get_all_routes().touching(code).all()
        self._push_undo(ActionType.DELETE_AIRPORT, self._serialize_airport(airport),
                        airports=[airport], routes=routes)
        self._remove_airport(code)
        logger.info(f"Deleted airport {code} and {len(routes)} connected routes")
        self.rebuild_graph()
        return True

    def get_airport(self, code: str) -> Optional[Airport]:
        return self._airports.get(normalize_code(code))

    def get_all_airports(self) -> AirportCollection:
        return AirportCollection([self._airports[k] for k in sorted(self._airports)])

    # ========================================================================
    # Aircraft
    # ========================================================================

    def add_aircraft(self, aircraft: Aircraft) -> bool:
        if aircraft.id in self._aircraft:
            logger.warning(f"Aircraft {aircraft.id} already exists")
            return False
        if not self._check(validate_aircraft(aircraft), f"Aircraft {aircraft.id}"):
            return False

        self._aircraft[aircraft.id] = copy.deepcopy(aircraft)
        self._push_undo(ActionType.ADD_AIRCRAFT, aircraft.id, aircraft=[aircraft])
        logger.debug(f"Added aircraft {aircraft.id}")
        return True

    def update_aircraft(self, aircraft: Aircraft) -> bool:
        if aircraft.id not in self._aircraft:
            logger.warning(f"Aircraft {aircraft.id} not found, cannot update")
            return False
        if not self._check(validate_aircraft(aircraft), f"Aircraft {aircraft.id}"):
            return False

        self._aircraft[aircraft.id] = copy.deepcopy(aircraft)
        logger.debug(f"Updated aircraft {aircraft.id}")
        return True

    def delete_aircraft(self, aircraft_id: str) -> bool:
        aircraft = self._aircraft.get(aircraft_id)
        if aircraft is None:
            logger.warning(f"Aircraft {aircraft_id} not found, cannot delete")
            return False

        self._push_undo(ActionType.DELETE_AIRCRAFT, aircraft_id, aircraft=[aircraft])
        del self._aircraft[aircraft_id]
        logger.debug(f"Deleted aircraft {aircraft_id}")
        return True

    def get_aircraft(self, aircraft_id: str) -> Optional[Aircraft]:
        return self._aircraft.get(aircraft_id)

    def get_all_aircraft(self) -> AircraftCollection:
        return AircraftCollection([self._aircraft[k] for k in sorted(self._aircraft)])

    # ========================================================================
    # Routes
    # ========================================================================

    def add_route(self, route: Route) -> bool:
        """
        Add a directional route between two known airports.

        A bidirectional connection needs a second call with route.reverse(),
        or add_route_between(..., bidirectional=True).
        """
        if route.id in self._routes:
            logger.warning(f"Route {route.id} already exists")
            return False
        if not self._check(self._validate_route(route), f"Route {route.id}"):
            return False

        self._routes[route.id] = copy.deepcopy(route)
        self._push_undo(ActionType.ADD_ROUTE, route.id, routes=[route])
        logger.debug(f"Added route {route.id}")
        self.rebuild_graph()
        return True

    def add_route_between(self, origin: str, destination: str, base_cost: float = 0.0,
                          operational: bool = True, bidirectional: bool = False) -> bool:
        """
        Add a route whose distance is the great circle distance between the airports.

        Args:
            origin: Origin airport code
            destination: Destination airport code
            base_cost: Cost of flying the leg
            operational: Whether the route is usable for routing
            bidirectional: Also add the mirror route destination -> origin

        Returns:
            True if every requested route was added. When any of them is
            rejected, none is added.
        """
        origin_airport = self.get_airport(origin)
        destination_airport = self.get_airport(destination)
        if origin_airport is None or destination_airport is None:
            logger.warning(f"Cannot add route {make_route_id(origin, destination)}: unknown airport")
            return False

        distance = origin_airport.distance_to(destination_airport)
        route = Route(origin_airport.code, destination_airport.code, distance, base_cost, operational)
        routes = [route, route.reverse()] if bidirectional else [route]

        # Check every direction first so a rejected request adds nothing
        for candidate in routes:
            if candidate.id in self._routes:
                logger.warning(f"Route {candidate.id} already exists")
                return False
            if not self._check(self._validate_route(candidate), f"Route {candidate.id}"):
                return False

        for candidate in routes:
            self.add_route(candidate)
        return True

    def update_route(self, route: Route) -> bool:
        if route.id not in self._routes:
            logger.warning(f"Route {route.id} not found, cannot update")
            return False
        if not self._check(self._validate_route(route), f"Route {route.id}"):
            return False

        self._routes[route.id] = copy.deepcopy(route)
        logger.debug(f"Updated route {route.id}")
        self.rebuild_graph()
        return True

    def delete_route(self, route_id: str) -> bool:
        route_id = normalize_code(route_id)
        route = self._routes.get(route_id)
        if route is None:
            logger.warning(f"Route {route_id} not found, cannot delete")
            return False

        self._push_undo(ActionType.DELETE_ROUTE, route_id, routes=[route])
        del self._routes[route_id]
        logger.debug(f"Deleted route {route_id}")
        self.rebuild_graph()
        return True

    def get_route(self, route_id: str) -> Optional[Route]:
        return self._routes.get(normalize_code(route_id))

    def get_all_routes(self) -> RouteCollection:
        return RouteCollection([self._routes[k] for k in sorted(self._routes)])

    # ========================================================================
    # Flights
    # ========================================================================

    def add_flight(self, flight: Flight, aircraft: Optional[Aircraft] = None) -> bool:
        """
        Add a flight, optionally updating its aircraft in the same action.

        Args:
            flight: Flight to add
            aircraft: New state of an existing aircraft (e.g. marked IN_FLIGHT
                      by a booking). Undoing the flight restores the aircraft
                      as it was before.

        Returns:
            True if the flight was added
        """
        if flight.flight_number in self._flights:
            logger.warning(f"Flight {flight.flight_number} already exists")
            return False
        if not self._check(validate_flight(flight), f"Flight {flight.flight_number}"):
            return False

        previous = []
        if aircraft is not None:
            if aircraft.id not in self._aircraft:
                logger.warning(f"Aircraft {aircraft.id} not found, cannot assign flight {flight.flight_number}")
                return False
            if not self._check(validate_aircraft(aircraft), f"Aircraft {aircraft.id}"):
                return False
            previous = [self._aircraft[aircraft.id]]
            self._aircraft[aircraft.id] = copy.deepcopy(aircraft)

        self._flights[flight.flight_number] = copy.deepcopy(flight)
        self._push_undo(ActionType.ADD_FLIGHT, flight.flight_number, flights=[flight], aircraft=previous)
        logger.debug(f"Added flight {flight.flight_number}")
        return True

    def update_flight(self, flight: Flight) -> bool:
        if flight.flight_number not in self._flights:
            logger.warning(f"Flight {flight.flight_number} not found, cannot update")
            return False
        if not self._check(validate_flight(flight), f"Flight {flight.flight_number}"):
            return False

        self._flights[flight.flight_number] = copy.deepcopy(flight)
        logger.debug(f"Updated flight {flight.flight_number}")
        return True

    def delete_flight(self, flight_number: str) -> bool:
        flight = self._flights.get(flight_number)
        if flight is None:
            logger.warning(f"Flight {flight_number} not found, cannot delete")
            return False

        self._push_undo(ActionType.DELETE_FLIGHT, flight_number, flights=[flight])
        del self._flights[flight_number]
        logger.debug(f"Deleted flight {flight_number}")
        return True

    def get_flight(self, flight_number: str) -> Optional[Flight]:
        return self._flights.get(flight_number)

    def get_all_flights(self) -> FlightCollection:
        return FlightCollection([self._flights[k] for k in sorted(self._flights)])

    # ========================================================================
    # Graph
    # ========================================================================

    def get_graph(self) -> Graph:
        return self._graph

    def rebuild_graph(self) -> None:
        """
        Rebuild the routing graph from the current airports and routes.

        Each operational route contributes an edge in both directions, with
        the route distance as weight and its base cost as cost.
        """
        self._graph.clear()

        for code in self._airports:
            self._graph.add_node(code)

        for route in self._routes.values():
            if route.operational:
                self._graph.add_edge(route.origin, route.destination, route.distance, route.base_cost)
                self._graph.add_edge(route.destination, route.origin, route.distance, route.base_cost)

        logger.debug(f"Graph rebuilt: {self._graph.node_count()} nodes, {self._graph.edge_count()} edges")

    def find_shortest_path(self, origin: str, destination: str) -> PathResult:
        """Shortest path between two airports on the current graph."""
        return find_shortest_path(self._graph, normalize_code(origin), normalize_code(destination))

    # ========================================================================
    # Undo
    # ========================================================================

    def undo(self) -> bool:
        """
        Reverse the most recent add or delete.

        Added entities are removed again, deleted entities (and the routes
        removed along with a deleted airport) are restored. Undoing a flight
        added with its aircraft also puts the aircraft back as it was. Reversing
        an action does not itself push an undo record.

        Returns:
            False if there is nothing to undo
        """
        record = self._undo.pop()
        if record is None:
            return False

        logger.info(f"Undoing {record}")
        action = record.action
        snapshot = record.snapshot

        if action == ActionType.ADD_AIRPORT:
            for airport in snapshot['airports']:
                self._remove_airport(airport.code)
        elif action == ActionType.DELETE_AIRPORT:
            for airport in snapshot['airports']:
                self._restore(self._airports, airport.code, airport)
            for route in snapshot.get('routes', []):
                if route.origin in self._airports and route.destination in self._airports:
                    self._restore(self._routes, route.id, route)
        elif action == ActionType.ADD_ROUTE:
            for route in snapshot['routes']:
                self._routes.pop(route.id, None)
        elif action == ActionType.DELETE_ROUTE:
            for route in snapshot['routes']:
                if route.origin in self._airports and route.destination in self._airports:
                    self._restore(self._routes, route.id, route)
        elif action == ActionType.ADD_AIRCRAFT:
            for aircraft in snapshot['aircraft']:
                self._aircraft.pop(aircraft.id, None)
        elif action == ActionType.DELETE_AIRCRAFT:
            for aircraft in snapshot['aircraft']:
                self._restore(self._aircraft, aircraft.id, aircraft)
        elif action == ActionType.ADD_FLIGHT:
            for flight in snapshot['flights']:
                self._flights.pop(flight.flight_number, None)
            for aircraft in snapshot.get('aircraft', []):
                if aircraft.id in self._aircraft:
                    self._aircraft[aircraft.id] = copy.deepcopy(aircraft)
        elif action == ActionType.DELETE_FLIGHT:
            for flight in snapshot['flights']:
                self._restore(self._flights, flight.flight_number, flight)

        if 'airports' in snapshot or 'routes' in snapshot:
            self.rebuild_graph()
        return True

    def can_undo(self) -> bool:
        return bool(self._undo)

    def clear_undo_stack(self) -> None:
        self._undo.clear()

    def undo_history(self) -> List[UndoRecord]:
        """Undo records, newest first."""
        return self._undo.records()

    # ========================================================================
    # Persistence
    # ========================================================================

    def load_all(self) -> bool:
        """
        Load all four entity files into the store and rebuild the graph.

        Entities read from disk replace in-memory entities with the same key.
        Rows that fail validation (or name unknown airports, for routes) are
        skipped. Loading does not touch the undo log.

        Returns:
            True if every file could be read (a missing file counts as read)
        """
        self.storage.ensure_data_dir()
        success = True

        airports = self.storage.load_airports()
        success &= airports is not None
        for airport in airports or []:
            if self._check(validate_airport(airport), f"Loaded airport {airport.code}"):
                self._airports[airport.code] = airport

        aircraft = self.storage.load_aircraft()
        success &= aircraft is not None
        for item in aircraft or []:
            if self._check(validate_aircraft(item), f"Loaded aircraft {item.id}"):
                self._aircraft[item.id] = item

        routes = self.storage.load_routes()
        success &= routes is not None
        for route in routes or []:
            if self._check(self._validate_route(route), f"Loaded route {route.id}"):
                self._routes[route.id] = route

        flights = self.storage.load_flights()
        success &= flights is not None
        for flight in flights or []:
            if self._check(validate_flight(flight), f"Loaded flight {flight.flight_number}"):
                self._flights[flight.flight_number] = flight

        self.rebuild_graph()
        if success:
            logger.info(f"All data loaded: {self.statistics()}")
        else:
            logger.error("Some data files could not be read")
        return success

    def save_all(self) -> bool:
        """
        Write all four entity files.

        Returns:
            True only if every file was written
        """
        self.storage.ensure_data_dir()
        success = True
        success &= self.storage.save_airports(self.get_all_airports())
        success &= self.storage.save_aircraft(self.get_all_aircraft())
        success &= self.storage.save_routes(self.get_all_routes())
        success &= self.storage.save_flights(self.get_all_flights())

        if success:
            logger.info(f"All data saved to {self.config.data_dir}")
        return success

    def statistics(self) -> Dict[str, int]:
        return {
            'airports': len(self._airports),
            'aircraft': len(self._aircraft),
            'routes': len(self._routes),
            'flights': len(self._flights),
            'graph_nodes': self._graph.node_count(),
            'graph_edges': self._graph.edge_count(),
        }

    # ========================================================================
    # Helpers
    # ========================================================================

    def _validate_route(self, route: Route) -> ValidationResult:
        result = validate_route(route)
        for code in (route.origin, route.destination):
            if code and code not in self._airports:
                result.add_error('route', "unknown airport", code)
        return result

    def _check(self, result: ValidationResult, label: str) -> bool:
        if not result.is_valid:
            logger.warning(f"{label} rejected: {'; '.join(result.get_error_messages())}")
        return result.is_valid

    def _remove_airport(self, code: str) -> None:
        """Remove an airport and its routes without logging an undo record."""
        for route_id in [rid for rid, r in self._routes.items() if r.touches(code)]:
            del self._routes[route_id]
        self._airports.pop(code, None)

    @staticmethod
    def _restore(collection: Dict[str, Any], key: str, entity: Any) -> None:
        if key in collection:
            logger.warning(f"Cannot restore {key}: key is in use again")
            return
        collection[key] = copy.deepcopy(entity)

    def _push_undo(self, action: ActionType, data: str, **snapshot: List[Any]) -> None:
        record = UndoRecord(action, data, {name: copy.deepcopy(items) for name, items in snapshot.items()})
        self._undo.push(record)

    @staticmethod
    def _serialize_airport(airport: Airport) -> str:
        return f"{airport.code},{airport.name},{airport.city},{airport.country}"
