"""The washing machine: weigh the load, pick a mode and plan the cycle."""

from __future__ import annotations

from dataclasses import dataclass

from laundrysim.cycle import Rinse, Spin, Wash
from laundrysim.selector import ModeSelect
from laundrysim.sensor import WeightSensor


@dataclass(frozen=True)
class CycleReport:
    """Everything the machine shows for one run."""

    mode: str
    weight: int
    total_water: int
    total_time: int
    wash_water: int
    wash_time: int
    rinse_water: int
    rinse_time: int
    rinse_count: int
    spin_mode: str
    spin_time: int


class Washer:
    """Washing machine tying the sensor, selector and phases together."""

    def __init__(self, sensor=None, selector=None):
        self.sensor = sensor if sensor is not None else WeightSensor()
        self.selector = selector if selector is not None else ModeSelect()
        self.initial_weight = 0
        self.strategy = None

    def initialize_weight(self) -> int:
        """Weigh the load and remember the reading."""
        self.initial_weight = self.sensor.measure()
        return self.initial_weight

    def run(self, keys) -> CycleReport:
        """Weigh, select a mode from ``keys`` and compute the cycle."""
        weight = self.initialize_weight()
        self.selector.select(keys)
        self.strategy = self.selector.strategy()

        wash = Wash(self.strategy, weight)
        rinse = Rinse(self.strategy, weight)
        spin = Spin(self.strategy, weight)
        return CycleReport(
            mode=self.strategy.name,
            weight=weight,
            total_water=wash.total_water_aligned(),
            total_time=wash.total_time_aligned(),
            wash_water=wash.water(),
            wash_time=wash.time(),
            rinse_water=rinse.water(),
            rinse_time=rinse.time(),
            rinse_count=self.strategy.rinse_count,
            spin_mode=spin.mode(),
            spin_time=spin.time(),
        )