"""Three-dimensional galaxy coordinates and vector helpers."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


def format_float(value: float) -> str:
    """Format a number with four decimals and a point as separator."""
    return "%0.4f" % value


def _field(obj: Any, name: str) -> Any:
    if not isinstance(obj, Mapping) or name not in obj:
        raise ValueError(f"JSON object does not have field '{name}'")
    return obj[name]


def _number(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"JSON field '{name}' is not a number")
    return float(value)


@dataclass(frozen=True)
class Point:
    """A position in space, in light years."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def vector_to(self, end: Point) -> Point:
        """Vector from this point (the start) to ``end``."""
        return Point(end.x - self.x, end.y - self.y, end.z - self.z)

    def no_sqrt_dist(self, other: Point) -> float:
        """Squared distance; enough for comparing distances."""
        return (
            (self.x - other.x) ** 2
            + (self.y - other.y) ** 2
            + (self.z - other.z) ** 2
        )

    def distance(self, other: Point) -> float:
        return math.sqrt(self.no_sqrt_dist(other))

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def scaled(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor, self.z * factor)

    def normalized(self) -> Point:
        magnitude = self.length()
        if magnitude == 0:
            raise ValueError("cannot normalize a zero-length vector")
        return self.scaled(1.0 / magnitude)

    def cross(self, other: Point) -> Point:
        return Point(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: Point) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def to_params(self) -> dict[str, str]:
        """Request parameters describing this point."""
        return {"x": format_float(self.x), "y": format_float(self.y), "z": format_float(self.z)}

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> Point:
        """Read a point from an object holding a ``coords`` field."""
        coords = _field(obj, "coords")
        return cls(*(_number(_field(coords, axis), axis) for axis in ("x", "y", "z")))

    def __add__(self, other: Point | float) -> Point:
        if isinstance(other, Point):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, (int, float)):
            return Point(self.x + other, self.y + other, self.z + other)
        return NotImplemented

    def __sub__(self, other: Point | float) -> Point:
        if isinstance(other, Point):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, (int, float)):
            return Point(self.x - other, self.y - other, self.z - other)
        return NotImplemented

    def __mul__(self, other: Point | float) -> Point | float:
        if isinstance(other, Point):
            return self.dot(other)
        if isinstance(other, (int, float)):
            return self.scaled(other)
        return NotImplemented

    def __truediv__(self, other: float) -> Point:
        if isinstance(other, (int, float)):
            return Point(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def __str__(self) -> str:
        return f"[{self.x:g}; {self.y:g}; {self.z:g}]"