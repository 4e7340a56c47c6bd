"""Wash, rinse and spin phase calculations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from laundrysim.modes import ModeStrategy

SPIN_STANDARD = "標準"
SPIN_AIR = "送風"
AIR_SPIN_MIN_WEIGHT = 5


def _base_time(weight: int) -> int:
    return (weight - 1) * 10 + 25


def _base_water(weight: int) -> int:
    return (weight - 1) * 5 + 40


def _align5(value: int) -> int:
    """Round toward zero to a multiple of five."""
    return value - int(math.fmod(value, 5))


@dataclass
class Wash:
    """Wash phase for a load of ``weight`` kilograms."""

    strategy: ModeStrategy
    weight: int = 0

    time_ratio: ClassVar[float] = 0.45
    water_ratio: ClassVar[float] = 0.6

    def total_time_aligned(self) -> int:
        """Whole cycle time in minutes, in steps of five."""
        return _align5(_base_time(self.weight))

    def time(self) -> int:
        """Wash time in minutes."""
        return int(_base_time(self.weight) * self.time_ratio * self.strategy.wash_time_coefficient)

    def total_water_aligned(self) -> int:
        """Whole cycle water in litres, in steps of five."""
        return _align5(_base_water(self.weight))

    def water(self) -> int:
        """Wash water in litres."""
        # The water coefficient is applied as a whole number.
        coefficient = int(self.strategy.wash_water_coefficient)
        return int(_base_water(self.weight) * self.water_ratio * coefficient)


@dataclass
class Rinse:
    """Rinse phase for a load of ``weight`` kilograms."""

    strategy: ModeStrategy
    weight: int = 0

    time_ratio: ClassVar[float] = 0.2
    water_ratio: ClassVar[float] = 0.2

    def time(self) -> int:
        """Rinse time in minutes over all rinses."""
        return int(
            _base_time(self.weight)
            * self.time_ratio
            * self.strategy.rinse_time_coefficient
            * self.strategy.rinse_count
        )

    def water(self) -> int:
        """Rinse water in litres."""
        # The water coefficient is applied as a whole number.
        coefficient = int(self.strategy.rinse_water_coefficient)
        return int(_base_water(self.weight) * self.water_ratio * coefficient)


@dataclass
class Spin:
    """Spin phase for a load of ``weight`` kilograms."""

    strategy: ModeStrategy
    weight: int = 0

    time_ratio: ClassVar[float] = 0.15

    def time(self) -> int:
        """Spin time in minutes."""
        # The time coefficient is applied as a whole number.
        coefficient = int(self.strategy.spin_time_coefficient)
        return int(_base_time(self.weight) * self.time_ratio * coefficient)

    def mode(self) -> str:
        """Spin style: air drying for heavy loads, standard otherwise."""
        return SPIN_AIR if self.weight >= AIR_SPIN_MIN_WEIGHT else SPIN_STANDARD