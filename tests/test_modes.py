import dataclasses

import pytest

from laundrysim.modes import MODES, ModeStrategy, strategy_for

MENU = [
    "標準",
    "おしゃれ着",
    "デリケート",
    "部屋干し",
    "お急ぎ",
    "エコ",
    "すすぎ、脱水",
]


def test_modes_in_menu_order():
    assert [mode.name for mode in MODES] == MENU
    assert [strategy_for(name) for name in MENU] == list(MODES)


@pytest.mark.parametrize("mode", MODES)
def test_strategy_for_round_trip(mode):
    found = strategy_for(mode.name)
    assert found is mode
    assert found.name == mode.name


def test_unknown_mode_raises():
    with pytest.raises(ValueError):
        strategy_for("unknown")


def test_codes_are_unique():
    codes = [strategy_for(name).code for name in MENU]
    assert len(set(codes)) == len(MENU)


def test_strategy_is_immutable():
    mode = strategy_for("標準")
    with pytest.raises(dataclasses.FrozenInstanceError):
        mode.rinse_count = 5
    assert strategy_for("標準").rinse_count == 2


@pytest.mark.parametrize(
    "name, rinse_count",
    [
        ("標準", 2),
        ("おしゃれ着", 1),
        ("デリケート", 1),
        ("部屋干し", 2),
        ("お急ぎ", 1),
        ("エコ", 1),
        ("すすぎ、脱水", 2),
    ],
)
def test_rinse_counts(name, rinse_count):
    assert strategy_for(name).rinse_count == rinse_count


def test_every_mode_rinses_at_least_once():
    strategies = [strategy_for(name) for name in MENU]
    assert all(isinstance(mode, ModeStrategy) for mode in strategies)
    assert min(mode.rinse_count for mode in strategies) >= 1