import pytest

from edhighway.carriers import (
    CARRIER_MODULES,
    MAX_CARRIER_CARGO,
    CarrierModuleInfo,
    CarrierModulesSelection,
)
from edhighway.formatting import spaced_1000s


def test_module_table_first_entry():
    sel = CarrierModulesSelection()
    sel.toggle(0, True)
    assert sel.total.purchase == 40000000
    assert sel.total.cargo_use == 500
    assert sel.total.full_upkeep == 5000000 + 1500000
    assert sel.total.paused_upkeep == 5000000 + 750000
    assert str(CARRIER_MODULES[0]) == "Refuel"


def test_add_sub_round_trip_keeps_left_name():
    a = CarrierModuleInfo("A", 1, 2, 3, 4)
    b = CarrierModuleInfo("B", 10, 20, 30, 40)
    total = a + b
    assert total == CarrierModuleInfo("A", 11, 22, 33, 44)
    assert total - b == a


def test_initial_total():
    sel = CarrierModulesSelection()
    assert sel.total == CarrierModuleInfo("", 0, 5000000, 5000000, 0)
    assert not any(sel.is_checked(i) for i in range(len(CARRIER_MODULES)))


def test_toggle_adds_and_removes():
    sel = CarrierModulesSelection()
    start = sel.total
    sel.toggle(4, True)
    assert sel.is_checked(4)
    assert sel.total.cargo_use == CARRIER_MODULES[4].cargo_use
    assert sel.total.full_upkeep == start.full_upkeep + CARRIER_MODULES[4].full_upkeep
    sel.toggle(4, False)
    assert not sel.is_checked(4)
    assert sel.total == start


def test_toggle_same_state_is_ignored():
    sel = CarrierModulesSelection()
    sel.toggle(0, True)
    once = sel.total
    sel.toggle(0, True)
    assert sel.total == once
    sel.toggle(1, False)
    assert sel.total == once


def test_toggle_out_of_range():
    sel = CarrierModulesSelection()
    with pytest.raises(IndexError):
        sel.toggle(len(CARRIER_MODULES), True)


def test_custom_module_list():
    mod = CarrierModuleInfo("Test", 10, 20, 5, 100)
    sel = CarrierModulesSelection([mod])
    sel.toggle(0, True)
    assert sel.total.purchase == mod.purchase


def test_summary_reports_free_cargo():
    sel = CarrierModulesSelection()
    sel.toggle(0, True)
    text = sel.summary()
    free = spaced_1000s(MAX_CARRIER_CARGO - CARRIER_MODULES[0].cargo_use)
    assert f"Cargo Free: {free}" in text
    assert text.startswith(f"Purchase: {spaced_1000s(CARRIER_MODULES[0].purchase)};")
    savings = sel.total.full_upkeep - sel.total.paused_upkeep
    assert text.endswith(f"Savings on pausing per week: {spaced_1000s(savings)}")