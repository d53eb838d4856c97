# edhighway

A library of helpers for planning trips in Elite Dangerous. It describes
requests for the EDSM and Spansh web APIs, talks to Spansh for neutron
routes and system-name suggestions, filters EDSM system data by economy,
primary star and bodies, keeps ordered system lists with travel distances,
estimates how far a fleet carrier gets on its tritium, and totals the cost
and cargo use of carrier service modules.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `edhighway.point` – `Point`, an immutable 3-D coordinate in light years:
  `distance`, `no_sqrt_dist`, `length`, `vector_to`, `scaled`,
  `normalized` (raises `ValueError` for a zero vector), `cross`, `dot`, and
  the operators `+`, `-`, `*` (dot product with a point, scaling with a
  number) and `/`. `Point.from_json` reads the `coords` field of an EDSM
  object and raises `ValueError` when a field is missing or not a number;
  `to_params` gives `x`, `y`, `z` as strings with four decimals
  (`format_float`).
- `edhighway.api_params` – request descriptions, each with `api`, `params`,
  `is_get` and `has_job`: `EDSMNearestSystems` (sphere or cube around a
  point or a named system), `EDSMSysInfo`, `EDSMSysBodies`,
  `SpanshRoutePostData` and `SpanshSysName`.
- `edhighway.named_system` – `NamedStarSystem`, a name with its `Point`;
  `from_json` returns a system with `blank=True` when the input cannot be
  read. It compares equal to a string holding its name.
- `edhighway.carriers` – the constants `MAX_CARRIER_CARGO`,
  `CARRIER_TANK_SIZE` and `CARRIER_MAX_JUMP`, `CarrierModuleInfo` (adds and
  subtracts field by field), the list `CARRIER_MODULES`, and
  `CarrierModulesSelection`, which tracks installed modules with `toggle`
  and `is_checked` and reports totals with `summary()`.
- `edhighway.fuel` – `calc_carrier_fuel` simulates carrier jumps for a
  `RefuelMode` (`ON_EMPTY`, `TANK_FULL`, `RANDOM`) and a `JumpDistance`
  (`D470`, `D495`, `D500`) and returns a `FuelResult`; `describe_result`
  renders it as text. `cargo_to_max` and `non_fuel_mass_text` help with
  mass input. An optional `rng(low, high)` callable makes the randomized
  jump distances reproducible.
- `edhighway.star_classes` – `EDSM_STAR_CLASSES`, the primary star types
  EDSM reports, and `StarClassSelection` with `select`, `deselect`,
  `is_selected` and `limits_in_effect`.
- `edhighway.spansh` – `SpanshApi`, a thread-pooled Spansh client.
  `execute_request(api, params, has_job, callback)` and
  `submit(request, callback)` return a `Future`; the callback gets an error
  message (empty on success) and the parsed result. Route jobs are polled
  until a result arrives. `suggestion_names` turns a name-lookup result into
  a list of strings. Errors from the site are raised inside the worker as
  `SpanshError` and reported through the callback.
- `edhighway.history` – `update_recent` keeps a bounded list of recently
  used names, `clean_string_list` drops blank entries, and
  `extract_system_jumps` and `find_row` work on Spansh route results.
- `edhighway.systems_list` – `SystemsList`, a thread-safe ordered list of
  system names whose cumulative distances (`compute_distances`) are
  recalculated after every change using a `locate(name) -> Point` callable
  you supply; unknown systems count as being at the origin.
- `edhighway.roundtrip` – `parse_bulk_systems` splits pasted text into
  names, `filter_systems` keeps the EDSM systems that pass a `SystemFilter`
  (economy, star classes, ring types, gas giant count, inner radius) and puts
  the center first (`move_center_first`), and `UndoStack` holds a bounded
  history of system lists.
- `edhighway.storage` – `writable_location` and `writable_location_app`
  return the per-user data directory and the application's directory in it.

## Examples

```python
from edhighway.point import Point
from edhighway.fuel import JumpDistance, RefuelMode, calc_carrier_fuel, describe_result

sol = Point(0.0, 0.0, 0.0)
print(sol.distance(Point(3.0, 4.0, 0.0)))   # 5.0

result = calc_carrier_fuel(
    modules=3000, cargo=0, fuel=10000,
    mode=RefuelMode.ON_EMPTY, jump_distance=JumpDistance.D500,
)
print(describe_result(result))
```

```python
from edhighway.api_params import SpanshRoutePostData
from edhighway.history import extract_system_jumps
from edhighway.spansh import SpanshApi

def done(error, result):
    if error:
        print("failed:", error)
    else:
        for row in extract_system_jumps(result):
            print(row.get("system"))

with SpanshApi(3) as api:
    future = api.submit(SpanshRoutePostData(60, 50.0, "Sol", "Colonia"), done)
    future.result()
```

## What it does not do

This is a library only: there is no command-line program and no graphical
interface. It has no EDSM client of its own; `edhighway.api_params`
describes EDSM requests and `filter_systems` works on replies you fetch
yourself, and `SystemsList` needs a `locate` callable to know where systems
are. Nothing is saved to disk: `edhighway.storage` only says where data
would go.