"""A star system with its name and position."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .point import Point


@dataclass(eq=False)
class NamedStarSystem:
    """Named system; ``blank`` is true when it could not be read."""

    point: Point = field(default_factory=Point)
    name: str = ""
    blank: bool = True

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> NamedStarSystem:
        """Build from an EDSM system object; a blank system on bad input."""
        result = cls()
        try:
            result.point = Point.from_json(obj)
            name = obj["name"]
            if not isinstance(name, str):
                raise TypeError("system name is not a string")
            result.name = name
            result.blank = False
        except (ValueError, KeyError, TypeError):
            pass
        return result

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return other == self.name
        if isinstance(other, NamedStarSystem):
            return (self.point, self.name, self.blank) == (other.point, other.name, other.blank)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.name