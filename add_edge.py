from typing import List
from edge import Edge

def add_edge(edges: List[Edge], adjacency: List[List[int]], u: int, v: int, cap: int) -> int:
    """
    Append forward & reverse residual arcs to the edge arena and index them
    in the adjacency lists. Returns the arena index of the forward arc;
    its reverse partner lives at index ^ 1.
    """
    fwd = Edge(u, v, cap)
    rev = Edge(v, u, 0)
    edges.append(fwd)
    edges.append(rev)
    adjacency[u].append(len(edges) - 2)
    adjacency[v].append(len(edges) - 1)
    return len(edges) - 2
