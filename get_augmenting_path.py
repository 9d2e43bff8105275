from collections import deque
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

if TYPE_CHECKING:
    from flow_network import FlowNetwork


def get_augmenting_path(
    network: "FlowNetwork",
    s: int,
    t: int,
    limits: Optional[Dict[int, int]] = None,
) -> Tuple[List[Optional[int]], bool]:
    """
    Breadth-first search over the residual network.
    An arc is usable while its flow is below its capacity, or below
    `limits[index]` when that ceiling is tighter.

    Returns (parent, found_flag). parent[v] is the arena index of the arc
    that first reached v (None for s and for unreached vertices).
    If no s-t path exists, found_flag == False.
    """
    arena = network.arena
    visited = [False] * network.num_vertices
    parent: List[Optional[int]] = [None] * network.num_vertices

    q = deque([s])
    visited[s] = True

    while q:
        u = q.popleft()
        # adjacency order decides which of several shortest paths wins
        for i in network.adjacency[u]:
            e = arena[i]
            if visited[e.destination]:
                continue
            limit = limits.get(i) if limits else None
            if e.remaining_capacity(limit) <= 0:
                continue
            visited[e.destination] = True
            parent[e.destination] = i
            q.append(e.destination)

    return parent, visited[t]


def path_from_parents(network: "FlowNetwork", parent: List[Optional[int]], s: int, t: int) -> List[int]:
    """
    Arena indices of the arcs on the s-t path, in order from s.
    """
    path = []
    v = t
    while v != s:
        i = parent[v]
        path.append(i)
        v = network.arena[i].source
    path.reverse()
    return path
