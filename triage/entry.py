"""Waiting-patient record and the ordering used by the triage heap."""

from dataclasses import dataclass

from .priority import Priority


@dataclass
class Entry:
    """Immutable by convention; only the queue calls ``decrement_arrival``."""

    name: str
    priority: Priority
    arrival: int  # 1-based, renumbered by the queue after removals

    def __post_init__(self):
        self.priority = Priority(self.priority)

    def decrement_arrival(self):
        self.arrival -= 1

    def to_display_string(self) -> str:
        return f"{self.arrival} {int(self.priority)} {self.name}"


def outranks(a: Entry, b: Entry) -> bool:
    """Return ``True`` when *a* should be called before *b*.

    The lower priority code wins. Between entries of the same class the one
    with the larger arrival number ranks higher.
    """
    if a.priority != b.priority:
        return a.priority < b.priority
    return a.arrival > b.arrival
