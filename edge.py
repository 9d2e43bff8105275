from typing import Optional


class Edge:
    """
    One directed arc in the residual network.
    Forward arcs sit at even arena indices and carry the road capacity;
    their zero-capacity partner sits at index ^ 1.
    """

    __slots__ = (
        "source",          # tail intersection
        "destination",     # head intersection
        "capacity",        # cars per timing window, fixed once built
        "flow",            # current flow, negative on reverse arcs
    )

    def __init__(self, source: int, destination: int, capacity: int) -> None:
        self.source = source
        self.destination = destination
        self.capacity = capacity
        self.flow = 0

    # ------------------------------------------------------------------ helpers

    def remaining_capacity(self, limit: Optional[int] = None) -> int:
        """
        Residual capacity, optionally under a tighter ceiling than `capacity`.
        """
        cap = self.capacity if limit is None else min(self.capacity, limit)
        return cap - self.flow

    # ------------------------------------------------------------------ dunder

    def __repr__(self) -> str:  # nice for debugging
        return (
            f"Edge({self.source}→{self.destination}, "
            f"cap={self.capacity}, flow={self.flow})"
        )
