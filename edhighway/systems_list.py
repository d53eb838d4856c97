"""An ordered list of star systems with cumulative travel distances."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Iterator, Sequence

from .point import Point

Locator = Callable[[str], Point]
"""Returns the position of a named system; may raise when it is unknown."""

HEADERS: tuple[str, str] = ("System Name", "Distances")


def _position(name: str, locate: Locator | None) -> Point:
    if locate is None:
        return Point()
    try:
        return locate(name)
    except Exception:  # an unknown or unreachable system sits at the origin
        return Point()


def compute_distances(names: Sequence[str], locate: Locator | None) -> list[float]:
    """Distance travelled from the first system to each system in turn.

    Systems whose position cannot be found are treated as being at the origin.
    """
    if not names:
        return []
    distances = [0.0]
    total = 0.0
    previous = _position(names[0], locate)
    for name in names[1:]:
        current = _position(name, locate)
        total += previous.distance(current)
        previous = current
        distances.append(total)
    return distances


class SystemsList:
    """Thread-safe list of system names kept together with their distances.

    ``on_change`` is called with no arguments after every modification.
    """

    def __init__(self, locate: Locator | None = None):
        self._locate = locate
        self._lock = threading.RLock()
        self._names: list[str] = []
        self._distances: list[float] = []
        self.on_change: Callable[[], None] | None = None

    @property
    def names(self) -> list[str]:
        with self._lock:
            return list(self._names)

    @property
    def distances(self) -> list[float]:
        with self._lock:
            return list(self._distances)

    def __len__(self) -> int:
        with self._lock:
            return len(self._names)

    def __iter__(self) -> Iterator[tuple[str, float]]:
        with self._lock:
            rows = list(zip(self._names, self._distances))
        return iter(rows)

    def _changed(self) -> None:
        self._distances = compute_distances(self._names, self._locate)
        if self.on_change is not None:
            self.on_change()

    def add(self, name: str) -> None:
        with self._lock:
            self._names.append(name)
            self._changed()

    def remove(self, name: str) -> None:
        """Remove every occurrence of ``name``."""
        with self._lock:
            self._names = [item for item in self._names if item != name]
            self._changed()

    def add_many(self, names: Iterable[str]) -> None:
        with self._lock:
            self._names.extend(names)
            self._changed()

    def set_all(self, names: Iterable[str]) -> None:
        """Replace the whole list."""
        with self._lock:
            self._names = list(names)
            self._changed()

    def clear(self) -> None:
        with self._lock:
            self._names = []
            self._changed()

    def name_at(self, row: int) -> str:
        """Name in ``row``, or an empty string when the row does not exist."""
        with self._lock:
            if 0 <= row < len(self._names):
                return self._names[row]
            return ""

    def copy_text(self) -> str:
        """The names, one per line, as put on the clipboard."""
        with self._lock:
            return "\n".join(self._names)