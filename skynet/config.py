import os
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

DATA_DIR_ENV = 'SKYNET_DATA_DIR'
DEFAULT_DATA_DIR = 'data_files'


@dataclass
class StoreConfig:
    """Where the EntityStore keeps its flat files."""

    data_dir: Path = field(default_factory=lambda: Path(DEFAULT_DATA_DIR))
    airports_file: str = 'airports.txt'
    aircraft_file: str = 'aircraft.txt'
    routes_file: str = 'routes.txt'
    flights_file: str = 'flights.txt'

    def __post_init__(self):
        self.data_dir = Path(self.data_dir)

    @classmethod
    def from_env(cls, data_dir: Optional[Union[str, Path]] = None) -> 'StoreConfig':
        """
        Build a configuration from an explicit directory or the environment.

        Args:
            data_dir: Directory to use. When None, SKYNET_DATA_DIR is read and
                      the default 'data_files' is used if it is not set.

        Returns:
            StoreConfig
        """
        if data_dir is None:
            data_dir = os.environ.get(DATA_DIR_ENV, DEFAULT_DATA_DIR)
        logger.debug(f"Using data directory {data_dir}")
        return cls(data_dir=Path(data_dir))

    @property
    def airports_path(self) -> Path:
        return self.data_dir / self.airports_file

    @property
    def aircraft_path(self) -> Path:
        return self.data_dir / self.aircraft_file

    @property
    def routes_path(self) -> Path:
        return self.data_dir / self.routes_file

    @property
    def flights_path(self) -> Path:
        return self.data_dir / self.flights_file
