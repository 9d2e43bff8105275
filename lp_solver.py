import logging
from typing import Any, Dict, List, Optional

import pandas as pd
import pulp as pl
from pulp import LpMinimize, LpProblem, LpStatus, LpVariable, lpSum

from flow_network import FlowNetwork

logger = logging.getLogger(__name__)


class MinTotalFlowSolver:
    """
    Smallest total road flow that still carries a required throughput.

    The greedy reducer depends on road order; this integer program gives the
    provable minimum of sum(flow) over all roads for the same throughput.

    Attributes:
        network (FlowNetwork): Roads and capacities (its flows are not read)
        source, sink (int): Terminals
        throughput (int): Flow that must leave `source`; defaults to the network's max flow
        problem (LpProblem): The integer programming problem
        flow_vars (Dict[int, LpVariable]): One flow variable per road
    """

    def __init__(self, network: FlowNetwork, source: int, sink: int,
                 throughput: Optional[int] = None) -> None:
        self.network = network
        self.source = network.check_vertex(source)
        self.sink = network.check_vertex(sink)
        if throughput is None:
            throughput = network.max_flow
        if throughput is None:
            raise ValueError("throughput not given and the network has not been solved")
        self.throughput = throughput
        self.problem = LpProblem("Min_Total_Road_Flow", LpMinimize)
        self.flow_vars: Dict[int, LpVariable] = {}
        self._solution: Optional[Dict[str, Any]] = None

    def build_model(self) -> None:
        self._add_flow_vars()
        self._add_objective()
        self._add_flow_conservation_constraints()

    def _add_flow_vars(self) -> None:
        """
        Integer flow per road, bounded by its capacity.
        """
        for k, (u, v, capacity) in enumerate(self.network.roads):
            self.flow_vars[k] = LpVariable(
                f"f_{k}_{u}_{v}", lowBound=0, upBound=capacity, cat=pl.LpInteger
            )

    def _add_objective(self) -> None:
        """
        Total flow on all roads, i.e. total green time before rounding.
        """
        self.problem += lpSum(self.flow_vars.values())

    def _add_flow_conservation_constraints(self) -> None:
        """
        Balanced intersections, `throughput` out of the source and into the sink.
        """
        roads = self.network.roads
        for node in range(self.network.num_vertices):
            inflow = lpSum(var for k, var in self.flow_vars.items() if roads[k][1] == node)
            outflow = lpSum(var for k, var in self.flow_vars.items() if roads[k][0] == node)
            if node == self.source:
                balance = -self.throughput
            elif node == self.sink:
                balance = self.throughput
            else:
                balance = 0
            self.problem += (inflow - outflow == balance), f"balance_{node}"

    def solve(self) -> Dict[str, Any]:
        """
        Solve the integer program.

        Returns:
            Dict containing:
                - status: Solution status
                - objective_value: Minimal total flow
                - flows: Per-road flows in road order
        Raises:
            RuntimeError: If the model hasn't been built
        """
        if not self.flow_vars and self.network.num_roads:
            raise RuntimeError("Model must be built before solving")

        status = self.problem.solve(pl.PULP_CBC_CMD(msg=False))

        if status != pl.LpStatusOptimal:
            logger.warning("solver status: %s", LpStatus[status])
            self._solution = {
                'status': LpStatus[status],
                'objective_value': None,
                'flows': None,
            }
            return self._solution

        flows = [int(round(self.flow_vars[k].value())) for k in range(len(self.flow_vars))]
        self._solution = {
            'status': 'Optimal',
            'objective_value': sum(flows),
            'flows': flows,
        }
        return self._solution

    def get_result_df(self) -> pd.DataFrame:
        """
        One row per road: source, destination, capacity, minimal flow.
        """
        if not self._solution or self._solution['status'] != 'Optimal':
            raise RuntimeError("No optimal solution available")

        results: List[List[int]] = [
            [k, u, v, capacity, self._solution['flows'][k]]
            for k, (u, v, capacity) in enumerate(self.network.roads)
        ]
        return pd.DataFrame(results, columns=["road", "source", "destination", "capacity", "flow"])
