import logging
from typing import TYPE_CHECKING, Dict, List, Optional

from edge import Edge
from errors import IterationLimitExceeded
from get_augmenting_path import get_augmenting_path, path_from_parents

if TYPE_CHECKING:
    from flow_network import FlowNetwork

logger = logging.getLogger(__name__)


def augment(arena: List[Edge], index: int, amount: int) -> None:
    """
    Push `amount` units through arc `index`, mirroring it on the partner arc.
    """
    arena[index].flow += amount
    arena[index ^ 1].flow -= amount


def edmonds_karp(
    network: "FlowNetwork",
    s: int,
    t: int,
    *,
    limits: Optional[Dict[int, int]] = None,
    max_units: Optional[int] = None,
    max_iterations: Optional[int] = None,
) -> int:
    """
    Edmonds-Karp max flow: augment along BFS-shortest residual paths.

    The network's current flows are the starting point, so calling this on
    a solved network only adds what is still reachable (zero when nothing is).

    Parameters
    ----------
    network : FlowNetwork
        Graph whose arc flows are updated in place.
    s, t : int
        Source and sink vertices.
    limits : optional {arena index: ceiling} that tightens arc capacities
             for this run without touching them.
    max_units : stop once this many units have been pushed.
    max_iterations : safety cap on augmentations; defaults to the total
                     capacity + 1, which no integral run can exceed.

    Returns
    -------
    flow added by this call
    """
    s = network.check_vertex(s)
    t = network.check_vertex(t)
    if s == t:
        return 0

    arena = network.arena
    if max_iterations is None:
        max_iterations = sum(e.capacity for e in arena[0::2]) + 1

    added = 0
    iterations = 0
    while max_units is None or added < max_units:
        parent, found = get_augmenting_path(network, s, t, limits)
        if not found:
            break

        iterations += 1
        if iterations > max_iterations:
            raise IterationLimitExceeded(
                f"no convergence after {max_iterations} augmentations from {s} to {t}"
            )

        path = path_from_parents(network, parent, s, t)

        # bottleneck on the path
        bottleneck = min(
            arena[i].remaining_capacity(limits.get(i) if limits else None)
            for i in path
        )
        if max_units is not None:
            bottleneck = min(bottleneck, max_units - added)
        if bottleneck <= 0:
            raise IterationLimitExceeded(f"non-positive bottleneck {bottleneck} on path {path}")

        for i in path:
            augment(arena, i, bottleneck)

        added += bottleneck
        logger.debug("augmented %d along %s", bottleneck, path)

    return added
