"""Tests for signal-timing reports."""

import logging
import os

import pandas as pd
import pytest

from config import DEFAULT_MODEL, ThroughputModel
from flow_network import FlowNetwork
from report import RoadReport, green_light_time, red_light_time


class TestGreenLightTime:
    """Test the car-throughput model."""

    def test_no_cars_no_green(self):
        assert green_light_time(0) == 0

    @pytest.mark.parametrize("cars, seconds", [(1, 1), (13, 11), (20, 16)])
    def test_known_values(self, cars, seconds):
        assert green_light_time(cars) == seconds

    def test_non_decreasing_integers(self):
        times = [green_light_time(n) for n in range(200)]
        assert all(isinstance(t, int) and t >= 0 for t in times)
        assert times == sorted(times)

    def test_negative_flow_uses_magnitude(self):
        assert green_light_time(-20) == green_light_time(20)

    def test_custom_model(self):
        model = ThroughputModel(car_length_m=8.0, car_gap_m=2.0, speed_mps=10.0)
        assert green_light_time(5, model) == 5

    def test_bad_model(self):
        with pytest.raises(ValueError):
            ThroughputModel(speed_mps=0)
        with pytest.raises(ValueError):
            ThroughputModel(cycle_time_s=-1)


class TestRedLightTime:

    def test_remaining_cycle(self):
        assert red_light_time(20, 60) == 44
        assert red_light_time(0, 60) == 60

    def test_green_longer_than_cycle(self):
        with pytest.raises(ValueError):
            red_light_time(20, 10)


class TestRoadReport:
    """Test per-road report rows."""

    def test_rows_after_reduce(self, uniform):
        uniform.solve(0, 5)
        uniform.reduce(0, 5)
        report = RoadReport.from_network(uniform)

        assert len(report) == 10
        assert report.max_flow == 40
        busy, idle = report.rows[0], report.rows[2]
        assert (busy.flow, busy.green_time, busy.time_saved, busy.saved_ratio) == (20, 16, 0, 0.0)
        assert (idle.flow, idle.green_time, idle.time_saved, idle.saved_ratio) == (0, 0, 16, 1.0)
        assert report.total_time_saved() == 4 * 16

    def test_ratio_clamped(self, mixed):
        mixed.solve(0, 5)
        for row in RoadReport.from_network(mixed).rows:
            assert 0.0 <= row.saved_ratio <= 1.0
            assert row.time_saved == green_light_time(row.capacity) - green_light_time(row.flow)

    def test_closed_road(self):
        g = FlowNetwork(2)
        g.add_edge(0, 1, 0)
        g.solve(0, 1)
        row = RoadReport.from_network(g).rows[0]
        assert (row.green_time, row.time_saved, row.saved_ratio) == (0, 0, 0.0)

    def test_repeatable(self, mixed):
        mixed.solve(0, 5)
        first = RoadReport.from_network(mixed)
        second = RoadReport.from_network(mixed)
        assert first.rows == second.rows
        assert mixed.roads == tuple((r.source, r.destination, r.capacity) for r in second.rows)

    def test_dataframe(self, mixed):
        mixed.solve(0, 5)
        df = RoadReport.from_network(mixed).to_dataframe()
        assert list(df.columns) == RoadReport.columns
        assert df["flow"].tolist() == [e.flow for e in mixed.edges()]

    def test_red_time_column(self, mixed):
        mixed.solve(0, 5)
        model = ThroughputModel(cycle_time_s=90)
        df = RoadReport.from_network(mixed, model).to_dataframe()
        assert "red_time_s" in df.columns
        assert (df["red_time_s"] + df["green_time_s"] == 90).all()

    def test_road_over_cycle_has_no_red_time(self, mixed, caplog):
        mixed.solve(0, 5)
        model = ThroughputModel(cycle_time_s=10)
        with caplog.at_level(logging.WARNING, logger="report"):
            report = RoadReport.from_network(mixed, model)

        assert len(report) == 10
        assert any(r.red_time is None for r in report.rows)
        for r in report.rows:
            if r.green_time > 10:
                assert r.red_time is None
            else:
                assert r.red_time + r.green_time == 10
        assert "more than the 10s cycle" in caplog.text

    def test_render(self, uniform):
        uniform.solve(0, 5)
        text = RoadReport.from_network(uniform, DEFAULT_MODEL).render()
        assert text.startswith("Maximum flow: 40")
        assert "green_time_s" in text

    def test_save(self, mixed, tmp_path):
        mixed.solve(0, 5)
        path = RoadReport.from_network(mixed).save(str(tmp_path / "results"))
        assert os.path.exists(path)
        df = pd.read_csv(path)
        assert len(df) == 10
        assert df["capacity"].tolist() == [r[2] for r in mixed.roads]
