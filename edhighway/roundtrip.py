"""Round trip planning: bulk input, EDSM result filtering and undo history."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .point import Point
from .star_classes import StarClassSelection

EDSM_RANGE_LIMIT = 100
"""Largest search radius, in light years, the EDSM web site accepts."""

ECONOMIES: tuple[str, ...] = (
    "Agriculture",
    "Colony",
    "Extraction",
    "High Tech",
    "Industrial",
    "Military",
    "Refinery",
    "Service",
    "Terraforming",
    "Tourism",
    "Prison",
    "Repair",
    "Rescue",
    "Damaged",
)


@dataclass
class SystemFilter:
    """Conditions a system found around a center must meet to be kept.

    An empty ``economy`` switches the economy filter off; ``star_classes``
    only filters when at least one class is selected.
    """

    economy: str = ""
    star_classes: StarClassSelection | None = None
    icy_rings: bool = False
    rocky_rings: bool = False
    metallic_rings: bool = False
    metal_rich_rings: bool = False
    giants: bool = False
    giants_count: int = 1

    @property
    def wants_rings(self) -> bool:
        return self.icy_rings or self.rocky_rings or self.metallic_rings or self.metal_rich_rings

    @property
    def needs_bodies_info(self) -> bool:
        """True when body data must be fetched to apply this filter."""
        return self.wants_rings or self.giants

    def ring_matches(self, ring_type: str) -> bool:
        return (
            (self.icy_rings and ring_type == "Icy")
            or (self.rocky_rings and ring_type == "Rocky")
            or (self.metal_rich_rings and ring_type == "Metal Rich")
            or (self.metallic_rings and ring_type == "Metallic")
        )


def parse_bulk_systems(text: str) -> list[str]:
    """Split pasted text into system names, one per line.

    Quotes, commas and semicolons are treated as blanks. Empty lines are
    skipped, the remaining lines are stripped.
    """
    for mark in ('"', ",", ";"):
        text = text.replace(mark, " ")
    return [line.strip() for line in text.split("\n") if line]


def _get(obj: Any, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key)
    return None


def _get_str(obj: Any, key: str) -> str | None:
    value = _get(obj, key)
    return value if isinstance(value, str) else None


def _text(obj: Any, *path: str) -> str:
    """String found by following ``path``, or an empty string."""
    *parents, last = path
    for key in parents:
        obj = _get(obj, key)
    value = _get_str(obj, last)
    return value if value is not None else ""


def _items(value: Any) -> Iterable[Any]:
    if isinstance(value, (list, tuple)):
        return value
    if isinstance(value, Mapping):
        return value.values()
    return ()


def _bodies_match(entry: Any, criteria: SystemFilter) -> bool:
    matched = False
    giants_found = 0
    for body in _items(_get(entry, "bodies")):
        if matched:
            break
        if criteria.wants_rings:
            for ring in _items(_get(body, "rings")):
                ring_type = _get_str(ring, "type")
                if ring_type is None:
                    break
                if criteria.ring_matches(ring_type):
                    matched = True
                    break
        if criteria.giants:
            sub_type = _get_str(body, "subType")
            if sub_type is not None:
                if "giant" in sub_type:
                    giants_found += 1
                matched = matched or giants_found >= criteria.giants_count
    return matched


def _bodies_by_name(bodies_info: Iterable[Any]) -> dict[str, Any]:
    by_name: dict[str, Any] = {}
    for entry in bodies_info:
        name = _get_str(entry, "name")
        if name is not None:
            by_name[name] = entry
    return by_name


def filter_systems(
    systems_info: Iterable[Mapping[str, Any]],
    bodies_info: Iterable[Any] | None,
    center: str,
    center_point: Point,
    inner_ly: float,
    criteria: SystemFilter | None = None,
) -> list[str]:
    """Names of the systems that pass ``criteria``, center first if present.

    Systems closer to ``center_point`` than ``inner_ly`` are dropped. A system
    without coordinates raises ``ValueError``.
    """
    criteria = criteria if criteria is not None else SystemFilter()
    need_bodies = criteria.needs_bodies_info
    bodies = _bodies_by_name(bodies_info or ()) if need_bodies else {}
    economy = criteria.economy.casefold()
    star_filter = criteria.star_classes is not None and criteria.star_classes.limits_in_effect()

    names: list[str] = []
    for info in systems_info:
        if center_point.distance(Point.from_json(info)) < inner_ly:
            continue
        name = _text(info, "name")
        if not name:
            continue

        keep = True
        if economy:
            keep = economy in (
                _text(info, "information", "economy").casefold(),
                _text(info, "information", "secondEconomy").casefold(),
            )
        if star_filter and criteria.star_classes is not None:
            keep = keep and criteria.star_classes.is_selected(_text(info, "primaryStar", "type"))
        if not keep:
            continue

        if need_bodies and not (name in bodies and _bodies_match(bodies[name], criteria)):
            continue
        names.append(name)

    return move_center_first(names, center)


def move_center_first(names: Sequence[str], center: str) -> list[str]:
    """Copy of ``names`` with ``center`` swapped into the first place."""
    result = list(names)
    if center in result:
        index = result.index(center)
        if index:
            result[0], result[index] = result[index], result[0]
    return result


class UndoStack:
    """Bounded history of system lists; the oldest entries drop out first."""

    def __init__(self, limit: int):
        self.limit = limit
        self._states: deque[list[str]] = deque()

    def push(self, systems: Iterable[str]) -> None:
        self._states.append(list(systems))
        while len(self._states) > max(0, self.limit):
            self._states.popleft()

    def pop(self) -> list[str] | None:
        """Most recent saved list, or None when there is nothing to undo."""
        if not self._states:
            return None
        return self._states.pop()

    def __len__(self) -> int:
        return len(self._states)

    def __bool__(self) -> bool:
        return bool(self._states)