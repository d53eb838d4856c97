"""Recently used system names and route result helpers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any


def clean_string_list(items: Iterable[str]) -> list[str]:
    """Drop entries that are empty or only whitespace."""
    return [item for item in items if item.strip()]


def _dedupe_keep_last(items: Sequence[str]) -> list[str]:
    seen: set[str] = set()
    kept: list[str] = []
    for item in reversed(items):
        if item not in seen:
            seen.add(item)
            kept.append(item)
    kept.reverse()
    return kept


def update_recent(items: Sequence[str], value: str, limit: int) -> list[str]:
    """Add ``value`` as the most recent entry, keeping at most ``limit`` items.

    The oldest entries are at the front. A repeated value moves to the end.
    """
    recent = list(items)
    limit = max(0, limit)
    if len(recent) > limit:
        recent = recent[len(recent) - limit:]
    trimmed = value.strip()
    if trimmed:
        recent.append(trimmed)
        recent = _dedupe_keep_last(recent)
    if len(recent) > limit:
        recent = recent[len(recent) - limit:]
    return recent


def extract_system_jumps(result: Any) -> list[Any]:
    """The route table from a route result, or an empty list."""
    if isinstance(result, Mapping) and "system_jumps" in result:
        jumps = result["system_jumps"]
        return list(jumps) if isinstance(jumps, (list, tuple)) else []
    return []


def find_row(rows: Iterable[Mapping[str, Any]], system: str) -> int | None:
    """Index of the first row for ``system``, or None."""
    if not system:
        return None
    for index, row in enumerate(rows):
        if isinstance(row, Mapping) and row.get("system") == system:
            return index
    return None