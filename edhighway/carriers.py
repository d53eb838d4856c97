"""Fleet carrier constants, service modules and their running totals."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

from .formatting import spaced_1000s

MAX_CARRIER_CARGO = 25000
CARRIER_TANK_SIZE = 1000
CARRIER_MAX_JUMP = 500.0


@dataclass(frozen=True)
class CarrierModuleInfo:
    """Costs and cargo use of a carrier service module."""

    name: str
    purchase: int
    full_upkeep: int
    paused_upkeep: int
    cargo_use: int

    def __add__(self, other: CarrierModuleInfo) -> CarrierModuleInfo:
        if not isinstance(other, CarrierModuleInfo):
            return NotImplemented
        return replace(
            self,
            purchase=self.purchase + other.purchase,
            full_upkeep=self.full_upkeep + other.full_upkeep,
            paused_upkeep=self.paused_upkeep + other.paused_upkeep,
            cargo_use=self.cargo_use + other.cargo_use,
        )

    def __sub__(self, other: CarrierModuleInfo) -> CarrierModuleInfo:
        if not isinstance(other, CarrierModuleInfo):
            return NotImplemented
        return replace(
            self,
            purchase=self.purchase - other.purchase,
            full_upkeep=self.full_upkeep - other.full_upkeep,
            paused_upkeep=self.paused_upkeep - other.paused_upkeep,
            cargo_use=self.cargo_use - other.cargo_use,
        )

    def __str__(self) -> str:
        return self.name


CARRIER_MODULES: tuple[CarrierModuleInfo, ...] = (
    CarrierModuleInfo("Refuel", 40000000, 1500000, 750000, 500),
    CarrierModuleInfo("Repair", 50000000, 1500000, 750000, 180),
    CarrierModuleInfo("Armoury", 95000000, 1500000, 750000, 250),
    CarrierModuleInfo("Redemption office", 150000000, 1850000, 850000, 100),
    CarrierModuleInfo("Shipyard", 250000000, 6500000, 1800000, 3000),
    CarrierModuleInfo("Outfitting", 250000000, 5000000, 1500000, 1750),
    CarrierModuleInfo("Secure warehouse(black market)", 165000000, 2000000, 1250000, 250),
    CarrierModuleInfo("Universal Cartographics", 150000000, 1850000, 700000, 120),
    CarrierModuleInfo("Concourse Bar", 200000000, 1750000, 1250000, 250),
    CarrierModuleInfo("Vista Genomics", 150000000, 1500000, 700000, 120),
    CarrierModuleInfo("Pioneer Supplies", 250000000, 5000000, 1500000, 200),
)

_BASE = CarrierModuleInfo("", 0, 5000000, 5000000, 0)


class CarrierModulesSelection:
    """Which modules are installed, with the summed costs of the carrier."""

    def __init__(self, modules: Sequence[CarrierModuleInfo] | None = None):
        self.modules: tuple[CarrierModuleInfo, ...] = tuple(
            CARRIER_MODULES if modules is None else modules
        )
        self._checked = [False] * len(self.modules)
        self.total = _BASE

    def toggle(self, index: int, checked: bool) -> None:
        """Install or remove a module; setting the current state changes nothing."""
        module = self.modules[index]
        if self._checked[index] == checked:
            return
        self._checked[index] = checked
        self.total = self.total + module if checked else self.total - module

    def is_checked(self, index: int) -> bool:
        return self._checked[index]

    def summary(self) -> str:
        t = self.total
        return (
            f"Purchase: {spaced_1000s(t.purchase)}; "
            f"Upkeep: {spaced_1000s(t.full_upkeep)}; "
            f"Paused Upkeep: {spaced_1000s(t.paused_upkeep)};\n"
            f"Cargo Use by Mods: {spaced_1000s(t.cargo_use)}; "
            f"Cargo Free: {spaced_1000s(MAX_CARRIER_CARGO - t.cargo_use)}\n"
            f"Savings on pausing per week: {spaced_1000s(t.full_upkeep - t.paused_upkeep)}"
        )