"""Washing-machine model: load weighing, mode selection and wash, rinse and spin estimates."""

__version__ = "0.1.0"
__all__ = ["modes", "cycle", "sensor", "selector", "washer"]