"""
Weighted directed graph over airport codes.

The graph is an adjacency list: each node maps to the list of its outgoing
edges. Every operation is total; unknown nodes and edges behave as no-ops or
empty results.
"""

from dataclasses import dataclass
from typing import Dict, List, Set


@dataclass
class Edge:
    """Directed edge to `destination` with a distance weight and a cost."""

    destination: str
    weight: float  # Distance in km
    cost: float = 0.0


class Graph:
    """Weighted directed graph keyed by opaque node identifiers."""

    def __init__(self):
        self._adjacency: Dict[str, List[Edge]] = {}

    # Node operations

    def add_node(self, node_id: str) -> None:
        if node_id not in self._adjacency:
            self._adjacency[node_id] = []

    def remove_node(self, node_id: str) -> None:
        """Remove a node, its outgoing edges and every edge pointing at it."""
        if node_id not in self._adjacency:
            return
        for node, edges in self._adjacency.items():
            self._adjacency[node] = [e for e in edges if e.destination != node_id]
        del self._adjacency[node_id]

    def has_node(self, node_id: str) -> bool:
        return node_id in self._adjacency

    def get_nodes(self) -> Set[str]:
        return set(self._adjacency)

    # Edge operations

    def add_edge(self, source: str, destination: str, weight: float, cost: float = 0.0) -> None:
        """
        Add a directed edge, creating missing nodes.

        An existing source -> destination edge is updated in place, so there
        is never more than one edge per ordered pair.
        """
        self.add_node(source)
        self.add_node(destination)
        for edge in self._adjacency[source]:
            if edge.destination == destination:
                edge.weight = weight
                edge.cost = cost
                return
        self._adjacency[source].append(Edge(destination, weight, cost))

    def remove_edge(self, source: str, destination: str) -> None:
        if source not in self._adjacency:
            return
        self._adjacency[source] = [e for e in self._adjacency[source] if e.destination != destination]

    def has_edge(self, source: str, destination: str) -> bool:
        return any(e.destination == destination for e in self._adjacency.get(source, []))

    def get_edge(self, source: str, destination: str):
        """Return the edge or None."""
        return next((e for e in self._adjacency.get(source, []) if e.destination == destination), None)

    # Query operations

    def get_neighbors(self, node_id: str) -> List[Edge]:
        """Outgoing edges of a node, empty for an unknown node."""
        return list(self._adjacency.get(node_id, []))

    def node_count(self) -> int:
        return len(self._adjacency)

    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._adjacency.values())

    # Utility

    def clear(self) -> None:
        self._adjacency.clear()

    def is_empty(self) -> bool:
        return not self._adjacency

    def __contains__(self, node_id: str) -> bool:
        return node_id in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self):
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"
