"""Star classes known to EDSM and a selection of them used as a filter."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

# Spectral letters with the colour descriptions EDSM uses for each of them.
_SPECTRAL: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("B", ("Blue-White", "Blue-White super giant")),
    ("A", ("Blue-White", "Blue-White super giant")),
    ("F", ("White", "White super giant")),
    ("G", ("White-Yellow", "White-Yellow super giant")),
    ("K", ("Yellow-Orange", "Yellow-Orange giant")),
    ("M", ("Red dwarf", "Red giant", "Red super giant")),
    ("L", ("Brown dwarf",)),
    ("T", ("Brown dwarf",)),
    ("Y", ("Brown dwarf",)),
)

_WOLF_RAYET_SUFFIXES = ("", "N ", "NC ", "C ", "O ")
_CARBON_AND_S_TYPES = ("CS", "C", "CN", "CJ", "CH", "CHd", "MS-type", "S-type")
_WHITE_DWARF_TYPES = (
    "D", "DA", "DAB", "DAO", "DAZ", "DAV", "DB", "DBZ",
    "DBV", "DO", "DOV", "DQ", "DC", "DCV", "DX",
)
_REMNANTS_AND_OTHERS = ("Neutron Star", "Black Hole", "Supermassive Black Hole", "X", "RoguePlanet")


def _build_star_classes() -> tuple[str, ...]:
    # EDSM spells the O class with a trailing space; it must match exactly.
    names = ["O (Blue-White) Star "]
    names.extend(
        f"{letter} ({colour}) Star" for letter, colours in _SPECTRAL for colour in colours
    )
    names.extend(("T Tauri Star", "Herbig Ae/Be Star"))
    names.extend(f"Wolf-Rayet {suffix}Star" for suffix in _WOLF_RAYET_SUFFIXES)
    names.extend(f"{kind} Star" for kind in _CARBON_AND_S_TYPES)
    names.extend(f"White Dwarf ({kind}) Star" for kind in _WHITE_DWARF_TYPES)
    names.extend(_REMNANTS_AND_OTHERS)
    return tuple(names)


EDSM_STAR_CLASSES: tuple[str, ...] = _build_star_classes()


@dataclass
class StarClassSelection:
    """Star classes chosen by the user; empty means no filtering."""

    selected: set[str] = field(default_factory=set)

    def select(self, star_class: str) -> None:
        self.selected.add(star_class)

    def deselect(self, star_class: str) -> None:
        self.selected.discard(star_class)

    def is_selected(self, star_class: str) -> bool:
        return star_class in self.selected

    def limits_in_effect(self) -> bool:
        """True when at least one class is selected, so the filter applies."""
        return bool(self.selected)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.selected))

    def __len__(self) -> int:
        return len(self.selected)