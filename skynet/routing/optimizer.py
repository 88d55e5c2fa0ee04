"""
Multi-criteria route optimization.

RouteOptimizer wraps the shortest path search with a stop count filter and
produces a small set of candidate paths for comparison.

The distance, cost and time weights of Criteria are accepted and carried on
the request, but the search itself is the plain shortest-distance Dijkstra:
the weights do not change which path is returned. get_pareto_frontier runs
three single-axis criteria and returns the three results as candidates; it
is not a non-dominated set computation.
"""

import logging
from dataclasses import dataclass
from typing import List

from .graph import Graph
from .path_finder import PathResult, find_shortest_path

logger = logging.getLogger(__name__)

EXCEEDS_MAX_STOPS = "Exceeds maximum stops constraint"
FRONTIER_MAX_STOPS = 5


@dataclass
class Criteria:
    """Optimization request: objective weights and the stop limit."""

    distance_weight: float = 0.4
    cost_weight: float = 0.3
    time_weight: float = 0.3
    max_stops: int = 3


DISTANCE_PRIORITY = Criteria(1.0, 0.0, 0.0, FRONTIER_MAX_STOPS)
COST_PRIORITY = Criteria(0.0, 1.0, 0.0, FRONTIER_MAX_STOPS)
TIME_PRIORITY = Criteria(0.0, 0.0, 1.0, FRONTIER_MAX_STOPS)


class RouteOptimizer:
    """Stop-constrained path search over a Graph."""

    def optimize(self, graph: Graph, start: str, end: str, criteria: Criteria = None) -> PathResult:
        """
        Find a path honouring the criteria's stop limit.

        Args:
            graph: Flight network
            start: Origin airport code
            end: Destination airport code
            criteria: Optimization request, defaults to Criteria()

        Returns:
            The shortest path, or a not-found result when it needs more
            intermediate stops than criteria.max_stops
        """
        if criteria is None:
            criteria = Criteria()

        result = find_shortest_path(graph, start, end)
        if result.found and result.stops > criteria.max_stops:
            logger.debug(f"Path {start}->{end} has {result.stops} stops, limit is {criteria.max_stops}")
            return PathResult.failure(EXCEEDS_MAX_STOPS)
        return result

    def get_pareto_frontier(self, graph: Graph, start: str, end: str) -> List[PathResult]:
        """
        Candidate paths under distance, cost and time priority, in that order.
        """
        return [
            self.optimize(graph, start, end, criteria)
            for criteria in (DISTANCE_PRIORITY, COST_PRIORITY, TIME_PRIORITY)
        ]


def optimize(graph: Graph, start: str, end: str, criteria: Criteria = None) -> PathResult:
    return RouteOptimizer().optimize(graph, start, end, criteria)


def get_pareto_frontier(graph: Graph, start: str, end: str) -> List[PathResult]:
    return RouteOptimizer().get_pareto_frontier(graph, start, end)
