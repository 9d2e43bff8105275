"""Exceptions raised by the road-network flow engine."""


class FlowNetworkError(Exception):
    """Base class for every flow-network failure."""


class InvalidEndpoint(FlowNetworkError, ValueError):
    """A vertex index lies outside [0, num_vertices)."""

    def __init__(self, vertex, num_vertices: int) -> None:
        super().__init__(
            f"vertex {vertex!r} is out of range [0, {num_vertices})"
        )
        self.vertex = vertex
        self.num_vertices = num_vertices


class InvalidCapacity(FlowNetworkError, ValueError):
    """A road capacity is negative or not an integer."""

    def __init__(self, capacity) -> None:
        super().__init__(f"capacity must be a non-negative integer, got {capacity!r}")
        self.capacity = capacity


class NotYetSolved(FlowNetworkError, RuntimeError):
    """Flow reduction was requested before a baseline max flow exists."""


class NetworkFrozen(FlowNetworkError, RuntimeError):
    """A road was added after the network has been solved."""


class IterationLimitExceeded(FlowNetworkError, RuntimeError):
    """The augmenting loop ran past its safety cap."""
