"""Configuration for the signal-timing model and file locations."""

from dataclasses import dataclass
from typing import Optional

input_dir = "data/"
output_dir = "results/"


@dataclass(frozen=True)
class ThroughputModel:
    """How many seconds of green one car needs.

    Green time includes the yellow phase. Cars are assumed to move in a
    single platoon at constant speed.
    """
    car_length_m: float = 4.5
    car_gap_m: float = 2.0
    speed_mps: float = 8.333  # 30 km/h

    # Full signal cycle; when set, reports also carry the red phase
    cycle_time_s: Optional[int] = None

    def __post_init__(self):
        if self.speed_mps <= 0:
            raise ValueError(f"speed_mps must be positive, got {self.speed_mps}")
        if self.car_length_m < 0 or self.car_gap_m < 0:
            raise ValueError("car length and gap must be non-negative")
        if self.cycle_time_s is not None and self.cycle_time_s < 0:
            raise ValueError(f"cycle_time_s must be non-negative, got {self.cycle_time_s}")

    @property
    def seconds_per_car(self) -> float:
        return (self.car_length_m + self.car_gap_m) / self.speed_mps


DEFAULT_MODEL = ThroughputModel()
