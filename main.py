import logging
import os
import sys

from config import DEFAULT_MODEL, input_dir, output_dir
from flow_network import FlowNetwork
from load_data import load_roads
from ortools_solver import ortools_max_flow
from report import RoadReport

SOURCE = 0
SINK = 5


def uniform_example() -> FlowNetwork:
    """Six intersections, every road carries 20 cars."""
    g = FlowNetwork(6)
    for u, v in [(0, 1), (0, 2), (1, 2), (1, 3), (2, 1),
                 (2, 4), (3, 2), (3, 5), (4, 3), (4, 5)]:
        g.add_edge(u, v, 20)
    return g


def mixed_example() -> FlowNetwork:
    """Six intersections with different road capacities."""
    g = FlowNetwork(6)
    for u, v, cap in [(0, 1, 16), (0, 2, 13), (1, 2, 10), (1, 3, 12), (2, 1, 4),
                      (2, 4, 14), (3, 2, 9), (3, 5, 20), (4, 3, 7), (4, 5, 4)]:
        g.add_edge(u, v, cap)
    return g


def run_all(g: FlowNetwork, name: str, source: int = SOURCE, sink: int = SINK) -> RoadReport:
    # Run Edmonds-Karp to find the maximum flow
    max_flow = g.solve(source, sink)

    # cross-check against OR-Tools
    reference, _ = ortools_max_flow(g.roads, source, sink)
    if reference != max_flow:
        raise RuntimeError(f"max flow {max_flow} disagrees with OR-Tools ({reference})")

    # Reduce the flow on each road
    g.reduce(source, sink)

    report = RoadReport.from_network(g, DEFAULT_MODEL)
    print(report.render())
    print(f"Total green time saved: {report.total_time_saved()} sec")

    csv_path = report.save(output_dir, prefix=f"signal_timing_{name}")
    print(f"Results saved to {csv_path}\n")
    return report


def main():
    logging.basicConfig(level=logging.INFO)

    # roads from a CSV file given on the command line, else the two examples
    if len(sys.argv) > 1:
        file_path = sys.argv[1]
        if not os.path.exists(file_path):
            file_path = os.path.join(input_dir, file_path)
        try:
            g = load_roads(file_path)
            source = int(sys.argv[2]) if len(sys.argv) > 2 else 0
            sink = int(sys.argv[3]) if len(sys.argv) > 3 else g.num_vertices - 1
            run_all(g, "custom", source, sink)
        except (OSError, ValueError) as e:
            print(f"Error: {e}")
            print("Please check the input data.")
            sys.exit(1)
        return

    print("\nExample of 6 roads of flow 20:")
    run_all(uniform_example(), "uniform")

    print("\nExample of 6 roads of different flows:")
    run_all(mixed_example(), "mixed")


if __name__ == "__main__":
    main()
