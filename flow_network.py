import logging
import numbers
from typing import List, NamedTuple, Optional, Tuple

from edge import Edge
from add_edge import add_edge
from errors import InvalidCapacity, InvalidEndpoint, NetworkFrozen, NotYetSolved
from max_flow import edmonds_karp
from reduce_flow import Reduction, reduce_flow

logger = logging.getLogger(__name__)


class RoadFlow(NamedTuple):
    """Read-only view of one road after solving."""
    source: int
    destination: int
    capacity: int
    flow: int


class FlowNetwork:
    """
    Road network as a capacitated flow graph.

    Attributes:
        num_vertices (int): Intersections are numbered 0 … num_vertices-1
        arena (List[Edge]): Forward arcs at even indices, reverse partners at index ^ 1
        adjacency (List[List[int]]): Arena indices leaving each vertex, in insertion order
        max_flow (Optional[int]): Baseline total after `solve`, None before
    """

    def __init__(self, num_vertices: int) -> None:
        if not _is_int(num_vertices) or num_vertices <= 0:
            raise ValueError(f"num_vertices must be a positive integer, got {num_vertices!r}")
        self.num_vertices = int(num_vertices)
        self.arena: List[Edge] = []
        self.adjacency: List[List[int]] = [[] for _ in range(self.num_vertices)]
        self._roads: List[Tuple[int, int, int]] = []
        self.max_flow: Optional[int] = None
        self.terminals: Optional[Tuple[int, int]] = None

    # ------------------------------------------------------------------ building

    def check_vertex(self, vertex) -> int:
        if not _is_int(vertex) or not 0 <= vertex < self.num_vertices:
            raise InvalidEndpoint(vertex, self.num_vertices)
        return int(vertex)

    def add_edge(self, u: int, v: int, capacity: int) -> int:
        """
        Add a one-way road u -> v. Returns the road index.

        Raises:
            InvalidEndpoint: u or v outside the vertex range
            InvalidCapacity: capacity negative or not an integer
            NetworkFrozen: the network has already been solved
        """
        # validate everything before touching any state
        u = self.check_vertex(u)
        v = self.check_vertex(v)
        if not _is_int(capacity) or capacity < 0:
            raise InvalidCapacity(capacity)
        if self.max_flow is not None:
            raise NetworkFrozen("roads cannot be added after the network is solved")

        capacity = int(capacity)
        add_edge(self.arena, self.adjacency, u, v, capacity)
        self._roads.append((u, v, capacity))
        return len(self._roads) - 1

    # ------------------------------------------------------------------ accessors

    @property
    def roads(self) -> Tuple[Tuple[int, int, int], ...]:
        """(source, destination, capacity) of every road as it was added."""
        return tuple(self._roads)

    @property
    def num_roads(self) -> int:
        return len(self._roads)

    def edges(self) -> List[RoadFlow]:
        return [
            RoadFlow(e.source, e.destination, e.capacity, e.flow)
            for e in self.arena[0::2]
        ]

    def flow_value(self, source: int) -> int:
        """Net flow leaving `source` over the roads."""
        return -self.excess(source)

    def excess(self, vertex: int) -> int:
        """Inflow minus outflow at `vertex`; zero for every balanced intersection."""
        total = 0
        for e in self.arena[0::2]:
            if e.destination == vertex:
                total += e.flow
            if e.source == vertex:
                total -= e.flow
        return total

    def reset_flows(self) -> None:
        for e in self.arena:
            e.flow = 0
        self.max_flow = None
        self.terminals = None

    # ------------------------------------------------------------------ solving

    def solve(self, source: int, sink: int) -> int:
        """
        Push flow from `source` to `sink` until no augmenting path is left.
        Resumes from the current flows when the same terminals were solved
        before, so a second call on a maximal network changes nothing.
        """
        source = self.check_vertex(source)
        sink = self.check_vertex(sink)

        if self.terminals is not None and self.terminals != (source, sink):
            logger.info(
                "terminals changed from %s to %s, solving from zero flow",
                self.terminals, (source, sink),
            )
            self.reset_flows()

        added = edmonds_karp(self, source, sink)
        self.max_flow = (self.max_flow or 0) + added
        self.terminals = (source, sink)
        logger.debug("max flow %d -> %d: %d (added %d)", source, sink, self.max_flow, added)
        return self.max_flow

    def reduce(self, source: int, sink: int) -> List[Reduction]:
        """
        Lower each road's flow as far as possible without losing throughput.
        """
        if self.terminals is not None and self.terminals != (self.check_vertex(source), self.check_vertex(sink)):
            raise NotYetSolved(f"network was solved for {self.terminals}, not {(source, sink)}")
        return reduce_flow(self, source, sink)

    def __repr__(self) -> str:
        return (
            f"FlowNetwork(vertices={self.num_vertices}, roads={self.num_roads}, "
            f"max_flow={self.max_flow})"
        )


def _is_int(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)
