import random

import pytest

from laundrysim.cycle import Rinse, Spin, Wash
from laundrysim.modes import FASHIONABLE_CLOTH, RINSE_AND_SPIN, STANDARD
from laundrysim.selector import Key
from laundrysim.sensor import WeightSensor
from laundrysim.washer import Washer


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def randint(self, low, high):
        return self.value


def _washer(weight):
    return Washer(sensor=WeightSensor(rng=_FixedRng(weight)))


def test_standard_run():
    report = _washer(3).run([Key.ENTER])
    assert report.mode == "標準"
    assert report.weight == 3
    assert report.wash_time == Wash(STANDARD, 3).time()
    assert report.wash_water == Wash(STANDARD, 3).water()
    assert report.rinse_time == Rinse(STANDARD, 3).time()
    assert report.rinse_count == STANDARD.rinse_count
    assert report.spin_mode == "標準"


def test_selected_mode_drives_cycle():
    washer = _washer(6)
    report = washer.run([Key.DOWN, Key.ENTER])
    assert washer.strategy is FASHIONABLE_CLOTH
    assert report.mode == "おしゃれ着"
    assert report.spin_mode == "送風"
    assert report.rinse_count == FASHIONABLE_CLOTH.rinse_count
    assert report.spin_time == Spin(FASHIONABLE_CLOTH, 6).time()


def test_rinse_and_spin_skips_wash():
    report = _washer(4).run([Key.DOWN] * 6 + [Key.ENTER])
    assert report.mode == RINSE_AND_SPIN.name
    assert report.wash_time == 0
    assert report.wash_water == 0
    assert report.total_time == Wash(RINSE_AND_SPIN, 4).total_time_aligned()
    assert report.rinse_water == Rinse(RINSE_AND_SPIN, 4).water()


def test_run_without_enter_raises():
    with pytest.raises(ValueError):
        _washer(2).run([Key.DOWN])


def test_initialize_weight_records_reading():
    washer = Washer(sensor=WeightSensor(rng=random.Random(7)))
    reading = washer.initialize_weight()
    assert 1 <= reading <= 7
    assert washer.initial_weight == reading
    assert washer.sensor.weight == reading


def test_report_totals_cover_phases():
    report = _washer(5).run([Key.ENTER])
    assert report.wash_time <= report.total_time
    assert report.wash_water <= report.total_water