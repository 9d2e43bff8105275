from typing import List, Sequence, Tuple

import numpy as np
from ortools.graph.python import max_flow


def ortools_max_flow(roads: Sequence[Sequence[int]], source: int, sink: int) -> Tuple[int, List[int]]:
    """
    Max flow with OR-Tools, independent of the Edmonds-Karp engine.

    roads : [(u, v, capacity), ...]
    returns (max_flow, per-road flows in input order)
    """
    if not roads:
        return 0, []

    # Instantiate a SimpleMaxFlow solver.
    smf = max_flow.SimpleMaxFlow()

    # Define three parallel arrays: from-node, to-node, capacities.
    start_nodes = np.array([road[0] for road in roads])
    end_nodes = np.array([road[1] for road in roads])
    capacities = np.array([road[2] for road in roads])

    # Add arcs in bulk using numpy.
    all_arcs = smf.add_arcs_with_capacity(start_nodes, end_nodes, capacities)

    status = smf.solve(source, sink)
    if status != smf.OPTIMAL:
        raise RuntimeError(f"There was an issue with the max flow input. Status: {status}")

    solution_flows = smf.flows(all_arcs)
    return int(smf.optimal_flow()), [int(f) for f in solution_flows]
