"""
SkyNet flight network library.

This package manages a network of airports and routes and computes optimal
paths through it for flight planning.

The main public API includes:
- EntityStore: Airports, aircraft, routes and flights with persistence and undo
- Graph: Weighted directed flight network derived from operational routes
- find_shortest_path: Dijkstra shortest path returning a PathResult
- RouteOptimizer: Stop constrained search and candidate path sets
- FlightPlanner: Route preview and flight booking
"""

from .config import StoreConfig
from .models import Airport, Aircraft, AircraftStatus, Route, Flight, NavPoint, great_circle_distance_km
from .routing import Graph, PathResult, find_shortest_path, Criteria, RouteOptimizer
from .store import EntityStore
from .planning import FlightPlanner

__version__ = '0.1.0'
__all__ = [
    'StoreConfig',
    'Airport',
    'Aircraft',
    'AircraftStatus',
    'Route',
    'Flight',
    'NavPoint',
    'great_circle_distance_km',
    'Graph',
    'PathResult',
    'find_shortest_path',
    'Criteria',
    'RouteOptimizer',
    'EntityStore',
    'FlightPlanner',
]
