"""Summary figures computed from a list of waiting entries."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Dict, Iterable, List, Optional

from .config import PRIORITY_NAMES
from .entry import Entry, outranks


def priority_breakdown(entries: Iterable[Entry]) -> Dict[str, int]:
    """Count waiting entries per priority class.

    Every class appears in the result, including those with nobody waiting,
    in order from most to least urgent.
    """
    counts = {name: 0 for name in PRIORITY_NAMES}
    for entry in entries:
        counts[entry.priority.label] += 1
    return counts


def _compare(a: Entry, b: Entry) -> int:
    if outranks(a, b):
        return -1
    if outranks(b, a):
        return 1
    return 0


def service_order(entries: Iterable[Entry]) -> List[Entry]:
    """Entries sorted into the order in which they would be called."""
    return sorted(entries, key=cmp_to_key(_compare))


def service_position(entries: Iterable[Entry], arrival: int) -> Optional[int]:
    """Return the 1-based calling position of the entry with *arrival*.

    ``None`` is returned when no entry currently holds that arrival number.
    """
    entries = list(entries)
    target = next((e for e in entries if e.arrival == arrival), None)
    if target is None:
        return None
    return 1 + sum(1 for e in entries if e is not target and outranks(e, target))
