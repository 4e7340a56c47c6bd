"""Washing tub and the weight sensor that measures its load."""

from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass
class WashingTub:
    """The tub holding the laundry load."""

    weight: int = 0


class WeightSensor:
    """Measures the load in a tub; readings are whole kilograms from 1 to 7."""

    MIN_WEIGHT = 1
    MAX_WEIGHT = 7

    def __init__(self, tub=None, rng=None):
        self.tub = tub if tub is not None else WashingTub()
        self._rng = rng if rng is not None else random.Random()

    @property
    def weight(self) -> int:
        """The last measured weight."""
        return self.tub.weight

    def measure(self) -> int:
        """Take a reading, store it in the tub and return it."""
        self.tub.weight = self._rng.randint(self.MIN_WEIGHT, self.MAX_WEIGHT)
        return self.tub.weight