import logging
import math
import os
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple

import pandas as pd

from config import DEFAULT_MODEL, ThroughputModel

logger = logging.getLogger(__name__)


def green_light_time(num_cars: int, model: ThroughputModel = DEFAULT_MODEL) -> int:
    """
    Seconds of green needed for `num_cars` to clear the intersection.
    """
    return int(math.ceil(abs(num_cars) * model.seconds_per_car))


def red_light_time(num_cars: int, cycle_time: int, model: ThroughputModel = DEFAULT_MODEL) -> int:
    """
    Seconds of red left in a `cycle_time` cycle once `num_cars` have had their green.
    """
    green = green_light_time(num_cars, model)
    if green > cycle_time:
        raise ValueError(f"{num_cars} cars need {green}s of green, more than the {cycle_time}s cycle")
    return cycle_time - green


@dataclass(frozen=True)
class RoadTiming:
    road: int
    source: int
    destination: int
    capacity: int
    flow: int
    green_time: int
    time_saved: int
    saved_ratio: float
    red_time: Optional[int] = None


class RoadReport:
    """
    Signal timing for every road, built once from a solved network.

    Rows are matched to roads by index, so one network can be reported
    any number of times.
    """

    columns = [
        "road", "source", "destination", "capacity", "flow",
        "green_time_s", "time_saved_s", "saved_ratio",
    ]

    def __init__(self, rows: List[RoadTiming], model: ThroughputModel = DEFAULT_MODEL,
                 max_flow: Optional[int] = None):
        self.rows = rows
        self.model = model
        self.max_flow = max_flow

    @classmethod
    def from_network(cls, network, model: ThroughputModel = DEFAULT_MODEL):
        """
        Create a report from `network.edges()` (any object exposing it works).
        """
        roads = list(network.edges())
        return cls.from_flows(
            [(r.source, r.destination, r.capacity, r.flow) for r in roads],
            model=model,
            max_flow=getattr(network, "max_flow", None),
        )

    @classmethod
    def from_flows(cls, roads: List[Tuple[int, int, int, int]],
                   model: ThroughputModel = DEFAULT_MODEL,
                   max_flow: Optional[int] = None):
        rows = []
        for k, (u, v, capacity, flow) in enumerate(roads):
            green = green_light_time(flow, model)
            full_green = green_light_time(capacity, model)
            saved = full_green - green

            # a closed road needs no green either way
            ratio = saved / full_green if full_green else 0.0
            ratio = min(max(ratio, 0.0), 1.0)

            red = None
            if model.cycle_time_s is not None:
                if green <= model.cycle_time_s:
                    red = red_light_time(flow, model.cycle_time_s, model)
                else:
                    logger.warning(
                        "road %d (%d->%d) needs %ds of green, more than the %ds cycle",
                        k, u, v, green, model.cycle_time_s,
                    )

            rows.append(RoadTiming(k, u, v, capacity, flow, green, saved, ratio, red))
        return cls(rows, model=model, max_flow=max_flow)

    def to_dataframe(self) -> pd.DataFrame:
        data = [
            [r.road, r.source, r.destination, r.capacity, r.flow,
             r.green_time, r.time_saved, r.saved_ratio]
            for r in self.rows
        ]
        df = pd.DataFrame(data, columns=self.columns)
        if self.model.cycle_time_s is not None:
            df["red_time_s"] = [r.red_time for r in self.rows]
        return df

    def total_time_saved(self) -> int:
        return sum(r.time_saved for r in self.rows)

    def render(self) -> str:
        lines = []
        if self.max_flow is not None:
            lines.append(f"Maximum flow: {self.max_flow}")
        lines.append("Roads after minimizing flow without affecting the maximum flow:")
        lines.append(
            self.to_dataframe().to_string(index=False, float_format=lambda x: f"{x:.3f}")
        )
        return "\n".join(lines)

    def save(self, directory: str, prefix: str = "signal_timing") -> str:
        """
        Write the report to a timestamped CSV under `directory`; returns its path.
        """
        os.makedirs(directory, exist_ok=True)
        csv_filename = f'{prefix}_{datetime.now().strftime("%Y%m%d_%H%M%S")}.csv'
        path = os.path.join(directory, csv_filename)
        self.to_dataframe().to_csv(path, index=False)
        return path

    def __len__(self) -> int:
        return len(self.rows)
