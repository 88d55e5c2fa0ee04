"""
Routing engine: the flight network graph and path searches over it.
"""

from .graph import Graph, Edge
from .path_finder import PathResult, find_shortest_path
from .optimizer import Criteria, RouteOptimizer, optimize, get_pareto_frontier
from .weather import WeatherCondition, WeatherImpact, get_impact

__all__ = [
    'Graph',
    'Edge',
    'PathResult',
    'find_shortest_path',
    'Criteria',
    'RouteOptimizer',
    'optimize',
    'get_pareto_frontier',
    'WeatherCondition',
    'WeatherImpact',
    'get_impact',
]
