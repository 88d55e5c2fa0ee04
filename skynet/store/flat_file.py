"""
Flat file persistence for the EntityStore.

One comma separated UTF-8 file per entity type, each starting with a header
row. Loading is forgiving: a missing file means there is nothing to load, and
a row that cannot be parsed is logged and skipped without aborting the rest
of the file.
"""

import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Generic, Iterable, List, Optional, TypeVar

from ..config import StoreConfig
from ..models.airport import Airport
from ..models.aircraft import Aircraft, AircraftStatus
from ..models.route import Route
from ..models.flight import Flight

logger = logging.getLogger(__name__)

T = TypeVar('T')

ROUTE_SEPARATOR = '-'


@dataclass
class FileFormat(Generic[T]):
    """Header and row conversions for one entity file."""

    kind: str
    header: List[str]
    to_row: Callable[[T], List[Any]]
    from_row: Callable[[List[str]], T]


def _parse_operational(value: str) -> bool:
    return value.strip().lower() in ('1', 'true')


def _parse_route(value: str) -> List[str]:
    return [code.strip() for code in value.split(ROUTE_SEPARATOR) if code.strip()]


AIRPORTS = FileFormat(
    kind='airports',
    header=['Code', 'Name', 'City', 'Country', 'Latitude', 'Longitude'],
    to_row=lambda a: [a.code, a.name, a.city, a.country, a.latitude, a.longitude],
    from_row=lambda p: Airport(
        code=p[0], name=p[1], city=p[2], country=p[3],
        latitude=float(p[4]), longitude=float(p[5]),
    ),
)

AIRCRAFT = FileFormat(
    kind='aircraft',
    header=['ID', 'Model', 'Capacity', 'CruiseSpeed', 'FuelConsumption', 'Status'],
    to_row=lambda a: [a.id, a.model, a.capacity, a.cruise_speed, a.fuel_consumption, a.status.value],
    from_row=lambda p: Aircraft(
        id=p[0], model=p[1], capacity=int(p[2]), cruise_speed=float(p[3]),
        fuel_consumption=float(p[4]), status=AircraftStatus.from_string(p[5]),
    ),
)

ROUTES = FileFormat(
    kind='routes',
    header=['Origin', 'Destination', 'Distance', 'BaseCost', 'Operational'],
    to_row=lambda r: [r.origin, r.destination, r.distance, r.base_cost, '1' if r.operational else '0'],
    from_row=lambda p: Route(
        origin=p[0], destination=p[1], distance=float(p[2]),
        base_cost=float(p[3]), operational=_parse_operational(p[4]),
    ),
)

FLIGHTS = FileFormat(
    kind='flights',
    header=['FlightNumber', 'AircraftID', 'Route', 'TotalDistance', 'TotalCost',
            'EstimatedTime', 'DepartureTime', 'Status'],
    to_row=lambda f: [f.flight_number, f.aircraft_id, ROUTE_SEPARATOR.join(f.route), f.total_distance,
                      f.total_cost, f.estimated_time, f.departure_time, f.status],
    from_row=lambda p: Flight(
        flight_number=p[0], aircraft_id=p[1], route=_parse_route(p[2]),
        total_distance=float(p[3]), total_cost=float(p[4]), estimated_time=float(p[5]),
        departure_time=p[6], status=p[7],
    ),
)


class FlatFileStorage:
    """Reads and writes the four entity files described by a StoreConfig."""

    def __init__(self, config: StoreConfig):
        self.config = config

    def ensure_data_dir(self) -> None:
        self.config.data_dir.mkdir(parents=True, exist_ok=True)

    # Loading

    def load_airports(self) -> Optional[List[Airport]]:
        return self._load(self.config.airports_path, AIRPORTS)

    def load_aircraft(self) -> Optional[List[Aircraft]]:
        return self._load(self.config.aircraft_path, AIRCRAFT)

    def load_routes(self) -> Optional[List[Route]]:
        return self._load(self.config.routes_path, ROUTES)

    def load_flights(self) -> Optional[List[Flight]]:
        return self._load(self.config.flights_path, FLIGHTS)

    # Saving

    def save_airports(self, airports: Iterable[Airport]) -> bool:
        return self._save(self.config.airports_path, AIRPORTS, airports)

    def save_aircraft(self, aircraft: Iterable[Aircraft]) -> bool:
        return self._save(self.config.aircraft_path, AIRCRAFT, aircraft)

    def save_routes(self, routes: Iterable[Route]) -> bool:
        return self._save(self.config.routes_path, ROUTES, routes)

    def save_flights(self, flights: Iterable[Flight]) -> bool:
        return self._save(self.config.flights_path, FLIGHTS, flights)

    def _load(self, path: Path, file_format: FileFormat[T]) -> Optional[List[T]]:
        """
        Parse one entity file.

        Each physical line is parsed on its own, so a row with an unbalanced
        quote is skipped without swallowing the lines after it. Quoted fields
        therefore cannot span lines.

        Args:
            path: File to read
            file_format: Header and row conversion for the entity type

        Returns:
            Parsed entities (empty when the file does not exist), or None when
            the file exists but cannot be read
        """
        if not path.exists():
            logger.info(f"{path} not found, nothing to load for {file_format.kind}")
            return []

        entities = []
        skipped = 0
        try:
            with open(path, 'r', encoding='utf-8', newline='') as f:
                next(f, None)  # Skip header
                for line_number, line in enumerate(f, start=2):
                    line = line.rstrip('\r\n')
                    if not line.strip():
                        continue
                    try:
                        row = next(csv.reader([line], strict=True))
                    except csv.Error as e:
                        logger.warning(f"{path}:{line_number}: malformed {file_format.kind} row {line!r}: {e}")
                        skipped += 1
                        continue
                    parts = [part.strip() for part in row]
                    if len(parts) < len(file_format.header):
                        logger.warning(f"{path}:{line_number}: expected {len(file_format.header)} fields, "
                                       f"got {len(parts)}, skipping")
                        skipped += 1
                        continue
                    try:
                        entities.append(file_format.from_row(parts))
                    except (ValueError, IndexError) as e:
                        logger.warning(f"{path}:{line_number}: error parsing {file_format.kind} row {row}: {e}")
                        skipped += 1
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading {path}: {e}")
            return None

        logger.info(f"Loaded {len(entities)} {file_format.kind} from {path}"
                    + (f" ({skipped} rows skipped)" if skipped else ""))
        return entities

    def _save(self, path: Path, file_format: FileFormat[T], entities: Iterable[T]) -> bool:
        """Overwrite the file with the header and one row per entity."""
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8', newline='') as f:
                writer = csv.writer(f, lineterminator='\n')
                writer.writerow(file_format.header)
                count = 0
                for entity in entities:
                    writer.writerow(file_format.to_row(entity))
                    count += 1
        except OSError as e:
            logger.error(f"Error saving {file_format.kind} to {path}: {e}")
            return False

        logger.debug(f"Saved {count} {file_format.kind} to {path}")
        return True
