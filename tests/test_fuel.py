import pytest

from edhighway.carriers import CARRIER_MAX_JUMP, MAX_CARRIER_CARGO
from edhighway.formatting import spaced_1000s
from edhighway.fuel import (
    FuelResult,
    JumpDistance,
    RefuelMode,
    calc_carrier_fuel,
    cargo_to_max,
    describe_result,
    non_fuel_mass_text,
)


def test_cargo_to_max_fills_capacity():
    assert cargo_to_max(1000, 2000) + 1000 + 2000 == MAX_CARRIER_CARGO


def test_cargo_to_max_never_negative():
    assert cargo_to_max(MAX_CARRIER_CARGO, 500) == 0


def test_non_fuel_mass_text_sums_masses():
    text = non_fuel_mass_text(300, 700)
    assert text.startswith("Non-fuel mass of carrier: 1000(t).")


def test_overweight_detected():
    result = calc_carrier_fuel(MAX_CARRIER_CARGO, 1, 0)
    assert result.overweight
    assert describe_result(result) == "Total mass is bigger then maximum cargo 25000(t)."


def test_tank_full_empty_carrier_distance():
    result = calc_carrier_fuel(0, 0, 0, mode=RefuelMode.TANK_FULL)
    assert result.distance == 7000
    assert not result.infinite


def test_on_empty_counts_jumps_without_reserve():
    result = calc_carrier_fuel(0, 0, 0, mode=RefuelMode.ON_EMPTY)
    assert result.jumps_till_refuel * CARRIER_MAX_JUMP == result.distance
    assert result.jumps_till_refuel == 14


def test_distance_is_whole_jumps():
    result = calc_carrier_fuel(500, 2000, 3000, mode=RefuelMode.ON_EMPTY)
    assert result.distance > 0
    assert result.distance % CARRIER_MAX_JUMP == 0


def test_more_cargo_does_not_travel_further():
    light = calc_carrier_fuel(500, 0, 5000, mode=RefuelMode.TANK_FULL)
    heavy = calc_carrier_fuel(500, 15000, 5000, mode=RefuelMode.TANK_FULL)
    assert heavy.distance <= light.distance


def test_more_fuel_travels_further():
    few = calc_carrier_fuel(500, 0, 1000, mode=RefuelMode.ON_EMPTY)
    many = calc_carrier_fuel(500, 0, 8000, mode=RefuelMode.ON_EMPTY)
    assert many.distance > few.distance


def test_random_mining_can_be_infinite():
    result = calc_carrier_fuel(
        0, 0, 0, refuel_each_nth=1, refuel_tonnes=200, mode=RefuelMode.RANDOM
    )
    assert result.infinite
    assert describe_result(result) == "Infinite travel."


def test_random_mode_rejects_zero_interval():
    with pytest.raises(ValueError):
        calc_carrier_fuel(0, 0, 0, refuel_each_nth=0, refuel_tonnes=10, mode=RefuelMode.RANDOM)


def test_jump_distance_range_uses_rng():
    calls = []

    def fake_rng(low, high):
        calls.append((low, high))
        return high

    result = calc_carrier_fuel(
        0, 0, 0, mode=RefuelMode.TANK_FULL, jump_distance=JumpDistance.D470, rng=fake_rng
    )
    assert calls
    assert all(call == (0.0, CARRIER_MAX_JUMP - 470.0) for call in calls)
    assert result.distance % CARRIER_MAX_JUMP == 0


def test_default_jump_distance_does_not_use_rng():
    def failing_rng(low, high):
        raise AssertionError("rng must not be called")

    result = calc_carrier_fuel(0, 0, 0, mode=RefuelMode.TANK_FULL, rng=failing_rng)
    assert result.distance > 0


def test_return_distance_is_half():
    result = FuelResult(mode=RefuelMode.TANK_FULL, distance=3000.0)
    assert result.return_distance * 2 == result.distance


def test_describe_on_empty_mentions_jumps():
    result = FuelResult(mode=RefuelMode.ON_EMPTY, distance=7000.0, jumps_till_refuel=14)
    text = describe_result(result)
    assert text == (
        f"Max distance: {spaced_1000s(7000, True)} (ly). "
        f"With return same way: {spaced_1000s(3500, True)} (ly). "
        f"Jumps till refuel: {spaced_1000s(14, True)}"
    )


def test_describe_tank_full_has_no_jump_count():
    result = FuelResult(mode=RefuelMode.TANK_FULL, distance=7000.0)
    text = describe_result(result)
    assert "Jumps till refuel" not in text
    assert text.endswith("(ly).")