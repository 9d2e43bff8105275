import logging
from typing import TYPE_CHECKING, List, NamedTuple

from errors import NotYetSolved
from max_flow import augment, edmonds_karp

if TYPE_CHECKING:
    from flow_network import FlowNetwork

logger = logging.getLogger(__name__)


class Reduction(NamedTuple):
    road: int
    source: int
    destination: int
    flow_before: int
    flow_after: int


def reduce_flow(network: "FlowNetwork", source: int, sink: int) -> List[Reduction]:
    """
    Greedy per-road flow minimisation under a fixed max flow.

    Roads are visited in the order they were added. Each one gives up a
    unit of flow at a time; after every decrement Edmonds-Karp is re-run on
    the whole network, starting from the lowered flows, to carry that unit
    from the road's tail to its head along other roads. A decrement stands
    only if the unit is re-placed and the flow leaving `source` is still the
    baseline maximum; the first one that fails is undone and the road keeps
    its last value.

    The tail-to-head run is the source-to-sink re-solve in residual form.
    Two flows of equal value differ by a circulation, so `source` still
    reaches the maximum with the road one unit lower exactly when the
    displaced unit can travel from the road's tail back to its head.

    Every road is capped at its flow before reduction (processed roads at
    their reduced flow), so rerouting can only cancel flow, never add it.
    Capacities are not modified.

    Returns the roads whose flow went down.
    """
    if network.max_flow is None:
        raise NotYetSolved("solve the network before reducing its flows")
    source = network.check_vertex(source)
    sink = network.check_vertex(sink)

    target = network.max_flow
    arena = network.arena
    initial = {i: arena[i].flow for i in range(0, len(arena), 2)}
    limits = dict(initial)

    for i in range(0, len(arena), 2):
        e = arena[i]

        while e.flow > 0:
            snapshot = [a.flow for a in arena]

            augment(arena, i, -1)
            limits[i] = e.flow
            replaced = edmonds_karp(
                network, e.source, e.destination, limits=limits, max_units=1
            )

            if replaced == 1 and network.flow_value(source) == target:
                continue

            for a, flow in zip(arena, snapshot):
                a.flow = flow
            limits[i] = e.flow
            break

    # rerouting can lower roads other than the one being probed
    reductions = [
        Reduction(i // 2, arena[i].source, arena[i].destination, before, arena[i].flow)
        for i, before in initial.items()
        if arena[i].flow < before
    ]
    for r in reductions:
        logger.debug("road %d (%d->%d): %d -> %d", *r)

    logger.info(
        "reduced %d of %d roads, max flow %d -> %d kept at %d",
        len(reductions), len(arena) // 2, source, sink, network.flow_value(source),
    )
    return reductions
