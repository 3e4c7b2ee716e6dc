"""Binary max-heap of waiting patients with dense arrival renumbering."""

from dataclasses import dataclass, field
import logging
from typing import Callable, Dict, Iterator, List, Optional

from .config import ARRIVAL_WIDTH, NAME_WIDTH, NOT_FOUND_MESSAGE, PRIORITY_WIDTH
from .entry import Entry, outranks
from .metrics import priority_breakdown, service_order
from .priority import Priority

logger = logging.getLogger(__name__)


@dataclass
class QueueSnapshot:
    entries: List[Entry]                 # heap order, copies
    waiting: Dict[str, int]              # priority label -> count
    next_name: Optional[str] = None
    revision: int = 0                    # bumped by every mutation
    service_positions: Dict[int, int] = field(default_factory=dict)  # arrival -> position


class TriageQueue:
    """Array-backed heap; index 0 holds the next patient to be called.

    ``higher(a, b)`` decides whether *a* belongs above *b*; it defaults to
    :func:`triage.entry.outranks`.
    """

    def __init__(self, higher: Callable[[Entry, Entry], bool] = outranks):
        self._higher = higher
        self._data: List[Entry] = []
        self._revision = 0

    # ---- public API ----

    def add(self, entry: Entry):
        """Insert a copy of *entry*; its arrival number should be ``size() + 1``."""
        self._data.append(Entry(entry.name, entry.priority, entry.arrival))
        self._sift_up(len(self._data) - 1)
        self._revision += 1
        logger.debug("added %s", entry.to_display_string())

    def remove_top(self) -> Entry:
        """Remove and return the root entry.

        Every remaining entry that arrived after the removed one moves down
        by one arrival number. Raises ``IndexError`` on an empty queue; check
        :meth:`is_empty` first.
        """
        if not self._data:
            raise IndexError("remove_top on an empty triage queue")

        top = self._data[0]
        for entry in self._data:
            if entry.arrival > top.arrival:
                entry.decrement_arrival()

        last = self._data.pop()
        if self._data:
            self._data[0] = last
            if len(self._data) > 1:
                self._sift_down(0)
        self._revision += 1
        logger.debug("removed %s", top.to_display_string())
        return top

    def peek(self) -> str:
        """Name of the next patient. Raises ``IndexError`` on an empty queue."""
        if not self._data:
            raise IndexError("peek on an empty triage queue")
        return self._data[0].name

    def change_priority(self, arrival: int, priority) -> str:
        """Move the entry holding *arrival* to another priority class.

        The arrival number is kept and heap order is restored around the
        changed slot. Returns a confirmation, or the not-found message when
        no entry holds *arrival*.
        """
        priority = Priority(priority)
        for index, entry in enumerate(self._data):
            if entry.arrival == arrival:
                self._data[index] = Entry(entry.name, priority, entry.arrival)
                self._restore(index)
                self._revision += 1
                logger.debug(
                    "changed arrival %d from %s to %s",
                    arrival, entry.priority.label, priority.label,
                )
                return f"Changed patient {entry.name}'s priority to {priority.label}"
        logger.debug("no entry with arrival %d", arrival)
        return NOT_FOUND_MESSAGE

    def size(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return self.size()

    def is_empty(self) -> bool:
        return not self._data

    def entries(self) -> List[Entry]:
        """Copies of the stored entries in heap order."""
        return [Entry(e.name, e.priority, e.arrival) for e in self._data]

    def listing(self) -> Iterator[str]:
        """Yield one formatted line per entry, in heap array order."""
        for entry in self._data:
            yield (
                f"{entry.arrival:>{ARRIVAL_WIDTH}}\t"
                f"\t{entry.priority.label:<{PRIORITY_WIDTH}}"
                f"{entry.name:<{NAME_WIDTH}}"
            )

    def to_text(self) -> str:
        return "\n".join(self.listing()) + "\n"

    def export_commands(self) -> str:
        """Replayable ``add`` commands ordered by arrival number."""
        by_arrival = sorted(self._data, key=lambda e: e.arrival)
        lines = [f"add {e.priority.label} {e.name}" for e in by_arrival]
        if not lines:
            return ""
        return "\n".join(lines) + "\n"

    def check_invariant(self) -> bool:
        """``True`` when no child outranks its parent."""
        for child in range(1, len(self._data)):
            if self._higher(self._data[child], self._data[self._parent(child)]):
                return False
        return True

    def get_snapshot(self) -> QueueSnapshot:
        entries = self.entries()
        positions = {
            e.arrival: pos for pos, e in enumerate(service_order(entries), start=1)
        }
        return QueueSnapshot(
            entries=entries,
            waiting=priority_breakdown(entries),
            next_name=self._data[0].name if self._data else None,
            revision=self._revision,
            service_positions=positions,
        )

    # ---- internals ----

    @staticmethod
    def _parent(index: int) -> int:
        return (index - 1) // 2

    @staticmethod
    def _left(index: int) -> int:
        return 2 * index + 1

    @staticmethod
    def _right(index: int) -> int:
        return 2 * index + 2

    def _sift_up(self, index: int) -> int:
        data = self._data
        while index > 0:
            parent = self._parent(index)
            if not self._higher(data[index], data[parent]):
                break
            data[index], data[parent] = data[parent], data[index]
            index = parent
        return index

    def _sift_down(self, index: int) -> int:
        data = self._data
        size = len(data)
        while True:
            left, right = self._left(index), self._right(index)
            if left >= size:
                break
            best = left
            if right < size and self._higher(data[right], data[left]):
                best = right
            if not self._higher(data[best], data[index]):
                break
            data[index], data[best] = data[best], data[index]
            index = best
        return index

    def _restore(self, index: int):
        if self._sift_up(index) == index:
            self._sift_down(index)
