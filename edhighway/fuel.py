"""Fleet carrier tritium range calculator."""

from __future__ import annotations

import enum
import math
from collections.abc import Callable
from dataclasses import dataclass

from .carriers import CARRIER_MAX_JUMP, CARRIER_TANK_SIZE, MAX_CARRIER_CARGO
from .formatting import spaced_1000s, uniform_random

INFINITE_TRAVEL_JUMPS = 20000
MINIMUM_JUMP_COST = 5.0
_JUMP_DISTANCE_FACTOR = 1.0 / 8.0

RandomSource = Callable[[float, float], float]


class RefuelMode(enum.Enum):
    """How the carrier's tank is kept supplied from the cargo hold."""

    ON_EMPTY = "on_empty"
    TANK_FULL = "tank_full"
    RANDOM = "random"


class JumpDistance(enum.Enum):
    """Lower bound of the distance covered by every jump."""

    D470 = 470.0
    D495 = 495.0
    D500 = 500.0


@dataclass(frozen=True)
class FuelResult:
    """Outcome of a range calculation."""

    mode: RefuelMode
    distance: float = 0.0
    jumps_till_refuel: int = 0
    infinite: bool = False
    overweight: bool = False

    @property
    def return_distance(self) -> float:
        """Distance reachable when the carrier has to come back the same way."""
        return self.distance / 2.0


def cargo_to_max(modules: int, fuel: int) -> int:
    """Cargo that fills the carrier up to its capacity, within ``[0, max]``."""
    return max(0, min(MAX_CARRIER_CARGO, MAX_CARRIER_CARGO - (modules + fuel)))


def non_fuel_mass_text(modules: int, cargo: int) -> str:
    return (
        f"Non-fuel mass of carrier: {modules + cargo}(t). "
        "This should be same as (total mass - tritium mass)."
    )


def _round_half_away(value: float) -> int:
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


def calc_carrier_fuel(
    modules: int,
    cargo: int,
    fuel: int,
    refuel_each_nth: int = 1,
    refuel_tonnes: int = 0,
    mode: RefuelMode = RefuelMode.ON_EMPTY,
    jump_distance: JumpDistance = JumpDistance.D500,
    rng: RandomSource | None = None,
) -> FuelResult:
    """Simulate jumps until tritium runs out and report the distance travelled."""
    if modules + cargo + fuel > MAX_CARRIER_CARGO:
        return FuelResult(mode=mode, overweight=True)

    random_mine = mode is RefuelMode.RANDOM
    keep_full = random_mine or mode is RefuelMode.TANK_FULL
    refuel_empty = mode is RefuelMode.ON_EMPTY
    if random_mine and refuel_each_nth < 1:
        raise ValueError("refuel_each_nth must be at least 1")

    draw = rng if rng is not None else uniform_random
    step = CARRIER_MAX_JUMP

    def update_distance() -> None:
        nonlocal step
        if jump_distance is JumpDistance.D500:
            return
        low = jump_distance.value
        step = max(CARRIER_MAX_JUMP, draw(0.0, CARRIER_MAX_JUMP - low) + low)

    distance = 0.0

    def jump() -> None:
        nonlocal distance
        distance += step
        update_distance()

    jumps_till_refuel = 0
    count_jumps = True
    infinite = False

    update_distance()
    current_fuel = fuel
    current_used = 0
    tank = CARRIER_TANK_SIZE
    njump = 1
    while current_fuel + tank > current_used:
        if njump > INFINITE_TRAVEL_JUMPS:
            infinite = True
            break

        for _ in range(2):
            total = current_fuel + tank
            if total < CARRIER_TANK_SIZE:
                current_fuel = 0
                tank = total
            current_used = _round_half_away(
                MINIMUM_JUMP_COST
                + step
                * _JUMP_DISTANCE_FACTOR
                * (1.0 + (current_fuel + cargo + modules) / MAX_CARRIER_CARGO)
            )

            if random_mine and njump % refuel_each_nth == 0:
                if current_used >= refuel_tonnes:
                    current_used -= refuel_tonnes
                else:
                    extra = refuel_tonnes - current_used
                    current_used = 0
                    if modules + cargo + current_fuel + extra > MAX_CARRIER_CARGO:
                        current_fuel = MAX_CARRIER_CARGO - modules - cargo
                    else:
                        current_fuel += extra

            if keep_full:
                if current_fuel > current_used:
                    current_fuel -= current_used
                    jump()
                elif tank > current_used:
                    tank -= current_used
                    jump()
                break

            if refuel_empty:
                if current_used > total:
                    break
                if tank < current_used:
                    delta = min(CARRIER_TANK_SIZE - tank, current_fuel)
                    tank += delta
                    current_fuel -= delta
                    count_jumps = False
                else:
                    tank -= current_used
                    if count_jumps:
                        jumps_till_refuel += 1
                    jump()
                    break
        njump += 1

    return FuelResult(
        mode=mode,
        distance=distance,
        jumps_till_refuel=jumps_till_refuel,
        infinite=infinite,
    )


def describe_result(result: FuelResult) -> str:
    """Human readable text for a calculation result."""
    if result.overweight:
        return f"Total mass is bigger then maximum cargo {MAX_CARRIER_CARGO}(t)."
    if result.infinite:
        return "Infinite travel."
    text = (
        f"Max distance: {spaced_1000s(result.distance, True)} (ly). "
        f"With return same way: {spaced_1000s(result.return_distance, True)} (ly)."
    )
    if result.mode is RefuelMode.ON_EMPTY:
        text += f" Jumps till refuel: {spaced_1000s(result.jumps_till_refuel, True)}"
    return text