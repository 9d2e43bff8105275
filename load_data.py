from typing import Optional

import networkx as nx
import pandas as pd

from errors import InvalidCapacity
from flow_network import FlowNetwork


def load_roads(
    file_path: str,
    source_colname: str = "source",
    destination_colname: str = "destination",
    capacity_colname: str = "capacity",
    num_vertices: Optional[int] = None,
) -> FlowNetwork:
    """
    Build a network from a CSV with one road per row.

    Args:
        file_path: CSV file to read
        *_colname: column holding the tail, head and capacity of each road
        num_vertices: vertex count; defaults to the largest intersection id + 1

    Raises:
        ValueError: if a required column is missing, an intersection id is not
            an integer, or the file has no roads
        InvalidCapacity: if a capacity is fractional or negative
    """
    roads_df = pd.read_csv(file_path).dropna()

    required_columns = [source_colname, destination_colname, capacity_colname]
    if not all(col in roads_df.columns for col in required_columns):
        raise ValueError(f"DataFrame must contain columns: {required_columns}")
    if roads_df.empty:
        raise ValueError(f"no roads found in {file_path}")

    # fractional cars and intersection ids would be truncated by the cast
    for col in required_columns:
        column = roads_df[col]
        if pd.api.types.is_numeric_dtype(column):
            fractional = column[column % 1 != 0]
        else:
            fractional = column
        if fractional.empty:
            continue
        if col == capacity_colname:
            raise InvalidCapacity(fractional.iloc[0])
        raise ValueError(f"column '{col}' holds a non-integer intersection id: {fractional.iloc[0]!r}")

    roads_df = roads_df.astype({col: int for col in required_columns})

    if num_vertices is None:
        num_vertices = int(roads_df[[source_colname, destination_colname]].max().max()) + 1

    network = FlowNetwork(num_vertices)
    for u, v, capacity in roads_df[required_columns].itertuples(index=False, name=None):
        network.add_edge(u, v, capacity)
    return network


def construct_network(G: nx.DiGraph, capacity: str = "capacity") -> FlowNetwork:
    """
    Build a network from a directed graph whose nodes are 0 … n-1.
    Roads are added in G's edge order; each needs a `capacity` attribute.
    """
    if G.number_of_nodes() == 0:
        raise ValueError("graph has no intersections")
    num_vertices = max(G.nodes()) + 1

    network = FlowNetwork(num_vertices)
    for u, v, data in G.edges(data=True):
        if capacity not in data:
            raise ValueError(f"road {u}->{v} has no '{capacity}' attribute")
        network.add_edge(u, v, data[capacity])
    return network


def to_networkx(network: FlowNetwork) -> nx.DiGraph:
    """
    Directed graph with one edge per road; parallel roads merge their capacity
    and flow.
    """
    G = nx.DiGraph()
    G.add_nodes_from(range(network.num_vertices))
    for road in network.edges():
        if G.has_edge(road.source, road.destination):
            G[road.source][road.destination]["capacity"] += road.capacity
            G[road.source][road.destination]["flow"] += road.flow
        else:
            G.add_edge(road.source, road.destination, capacity=road.capacity, flow=road.flow)
    return G
