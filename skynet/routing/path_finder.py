"""
Single source shortest path over a Graph.

Dijkstra's algorithm with a binary heap. Edge weights (distances) must be
non-negative. Failures are reported through PathResult, never raised.
"""

import heapq
import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from .graph import Graph

logger = logging.getLogger(__name__)

ORIGIN_NOT_FOUND = "Origin airport not found"
DESTINATION_NOT_FOUND = "Destination airport not found"
NO_ROUTE = "No route available between airports"
RECONSTRUCTION_FAILED = "Path reconstruction failed"


@dataclass
class PathResult:
    """
    Result of a path search.

    Carries the ordered airport codes of the chosen path and its totals. When
    no path is found, `found` is False and `error_message` says why.
    """

    found: bool = False
    path: List[str] = field(default_factory=list)
    total_distance: float = 0.0  # km
    total_cost: float = 0.0
    estimated_time: float = 0.0  # hours
    error_message: str = ''

    @classmethod
    def failure(cls, message: str) -> 'PathResult':
        return cls(found=False, error_message=message)

    def is_valid(self) -> bool:
        """Check the path exists and has at least two airports."""
        return self.found and len(self.path) >= 2

    @property
    def stops(self) -> int:
        """Number of intermediate airports."""
        return max(0, len(self.path) - 2)

    def __str__(self):
        if not self.found:
            return f"No path: {self.error_message}"
        return f"{' → '.join(self.path)} ({self.total_distance:.2f} km, cost {self.total_cost:.2f})"


def find_shortest_path(graph: Graph, start: str, end: str) -> PathResult:
    """
    Find the shortest path between two nodes.

    Args:
        graph: Graph to search
        start: Origin node
        end: Destination node

    Returns:
        PathResult with the path, its total distance (sum of edge weights) and
        the cost accumulated along it
    """
    if not graph.has_node(start):
        return PathResult.failure(ORIGIN_NOT_FOUND)
    if not graph.has_node(end):
        return PathResult.failure(DESTINATION_NOT_FOUND)

    if start == end:
        return PathResult(found=True, path=[start], total_distance=0.0, total_cost=0.0)

    distances: Dict[str, float] = {node: math.inf for node in graph.get_nodes()}
    costs: Dict[str, float] = {node: 0.0 for node in distances}
    parent: Dict[str, str] = {}
    visited: Set[str] = set()

    distances[start] = 0.0
    queue = [(0.0, start)]

    while queue:
        _, current = heapq.heappop(queue)

        # Dijkstra guarantees the first extraction of the destination is optimal
        if current == end:
            break

        # The heap can hold stale duplicates from earlier relaxations
        if current in visited:
            continue
        visited.add(current)

        for edge in graph.get_neighbors(current):
            neighbor = edge.destination
            new_distance = distances[current] + edge.weight
            if new_distance < distances[neighbor]:
                distances[neighbor] = new_distance
                costs[neighbor] = costs[current] + edge.cost
                parent[neighbor] = current
                heapq.heappush(queue, (new_distance, neighbor))

    if distances[end] == math.inf:
        return PathResult.failure(NO_ROUTE)

    path = _reconstruct_path(parent, start, end)
    if not path:
        logger.error(f"Broken parent chain from {end} back to {start} despite finite distance")
        return PathResult.failure(RECONSTRUCTION_FAILED)

    return PathResult(
        found=True,
        path=path,
        total_distance=distances[end],
        total_cost=costs[end],
    )


def _reconstruct_path(parent: Dict[str, str], start: str, end: str) -> List[str]:
    """Walk parent pointers back from end to start. Empty list if the chain breaks."""
    path = []
    current: Optional[str] = end
    while current != start:
        path.append(current)
        if current not in parent:
            return []
        current = parent[current]
    path.append(start)
    path.reverse()
    return path

