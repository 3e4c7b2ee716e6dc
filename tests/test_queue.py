import random

import pytest

from triage.config import NOT_FOUND_MESSAGE
from triage.entry import Entry
from triage.priority import Priority
from triage.queue import TriageQueue


def _queue_with(*items):
    queue = TriageQueue()
    for priority, name in items:
        queue.add(Entry(name, priority, queue.size() + 1))
    return queue


def _arrivals(queue):
    return {e.name: e.arrival for e in queue.entries()}


@pytest.mark.parametrize("seed", [1, 7, 42, 2024])
def test_heap_invariant_survives_random_adds_and_removals(seed):
    rng = random.Random(seed)
    queue = TriageQueue()
    for step in range(300):
        if queue.is_empty() or rng.random() < 0.6:
            priority = rng.choice(list(Priority))
            queue.add(Entry(f"p{step}", priority, queue.size() + 1))
        else:
            queue.remove_top()
        assert queue.check_invariant()
        assert sorted(e.arrival for e in queue.entries()) == list(range(1, queue.size() + 1))


def test_remove_top_renumbers_only_later_arrivals():
    queue = _queue_with(
        (Priority.URGENT, "A"),
        (Priority.IMMEDIATE, "B"),
        (Priority.MINIMAL, "C"),
        (Priority.EMERGENCY, "D"),
    )
    removed = queue.remove_top()

    assert removed.name == "B"
    assert _arrivals(queue) == {"A": 1, "C": 2, "D": 3}


def test_remove_latest_arrival_keeps_numbers():
    queue = _queue_with((Priority.MINIMAL, "A"), (Priority.URGENT, "B"), (Priority.IMMEDIATE, "C"))
    queue.remove_top()
    assert _arrivals(queue) == {"A": 1, "B": 2}


def test_remove_last_entry_empties_queue():
    queue = _queue_with((Priority.URGENT, "solo"))
    assert queue.remove_top().name == "solo"
    assert queue.is_empty()
    assert len(queue) == 0


def test_empty_queue_contract_violations_raise():
    queue = TriageQueue()
    with pytest.raises(IndexError):
        queue.peek()
    with pytest.raises(IndexError):
        queue.remove_top()


def test_peek_does_not_mutate():
    queue = _queue_with((Priority.URGENT, "A"), (Priority.IMMEDIATE, "B"))
    before = queue.entries()
    assert queue.peek() == "B"
    assert queue.entries() == before


def test_change_priority_unknown_arrival_changes_nothing():
    queue = _queue_with((Priority.URGENT, "A"), (Priority.MINIMAL, "B"))
    before = queue.entries()

    assert queue.change_priority(5, Priority.IMMEDIATE) == NOT_FOUND_MESSAGE
    assert queue.entries() == before
    assert queue.size() == 2


def test_change_priority_keeps_arrival_and_reorders():
    """A changed entry keeps its arrival number and is moved to its new place at once."""
    queue = _queue_with((Priority.MINIMAL, "A"), (Priority.MINIMAL, "B"))
    assert queue.peek() == "B"

    message = queue.change_priority(1, Priority.IMMEDIATE)

    assert message == "Changed patient A's priority to immediate"
    assert queue.peek() == "A"
    assert _arrivals(queue) == {"A": 1, "B": 2}
    assert queue.check_invariant()


def test_change_priority_demoting_the_root_sifts_down():
    queue = _queue_with((Priority.IMMEDIATE, "A"), (Priority.MINIMAL, "B"), (Priority.URGENT, "C"))
    queue.change_priority(1, Priority.MINIMAL)

    assert queue.peek() == "C"
    assert queue.check_invariant()
    assert [queue.remove_top().name for _ in range(3)] == ["C", "B", "A"]


def test_change_priority_accepts_plain_codes():
    queue = _queue_with((Priority.MINIMAL, "A"))
    assert queue.change_priority(1, 2) == "Changed patient A's priority to emergency"
    assert queue.entries()[0].priority is Priority.EMERGENCY


def test_listing_follows_heap_order_and_column_widths():
    queue = _queue_with((Priority.MINIMAL, "Ann"), (Priority.IMMEDIATE, "Bob"))
    lines = list(queue.listing())

    assert lines == [
        "      2\t\timmediate    Bob             ",
        "      1\t\tminimal      Ann             ",
    ]
    assert queue.to_text() == "\n".join(lines) + "\n"
    # restartable
    assert list(queue.listing()) == lines


def test_listing_of_empty_queue():
    queue = TriageQueue()
    assert list(queue.listing()) == []
    assert queue.to_text() == "\n"


def test_export_commands_orders_by_arrival():
    queue = _queue_with((Priority.MINIMAL, "A"), (Priority.IMMEDIATE, "B"), (Priority.URGENT, "Carol Ann"))
    assert queue.entries()[0].name == "B"
    assert queue.export_commands() == (
        "add minimal A\n"
        "add immediate B\n"
        "add urgent Carol Ann\n"
    )
    assert TriageQueue().export_commands() == ""


def test_export_then_replay_reproduces_queue():
    queue = _queue_with(
        (Priority.URGENT, "A"),
        (Priority.IMMEDIATE, "B"),
        (Priority.MINIMAL, "C D"),
        (Priority.EMERGENCY, "E"),
        (Priority.IMMEDIATE, "F"),
    )
    queue.remove_top()
    exported = queue.export_commands()

    replayed = TriageQueue()
    for line in exported.splitlines():
        verb, label, name = line.split(" ", 2)
        assert verb == "add"
        replayed.add(Entry(name, Priority.from_name(label), replayed.size() + 1))

    original = {(e.priority, e.name) for e in queue.entries()}
    assert {(e.priority, e.name) for e in replayed.entries()} == original

    names_in_lines = [line.split(" ", 2)[2] for line in exported.splitlines()]
    assert [_arrivals(replayed)[n] for n in names_in_lines] == list(range(1, len(names_in_lines) + 1))
    assert replayed.export_commands() == exported


def test_custom_ordering_function():
    first_come = TriageQueue(higher=lambda a, b: a.arrival < b.arrival)
    for arrival, priority in enumerate([Priority.MINIMAL, Priority.IMMEDIATE, Priority.URGENT], start=1):
        first_come.add(Entry(f"p{arrival}", priority, arrival))
    assert first_come.peek() == "p1"
    assert first_come.check_invariant()


def test_entries_returns_copies():
    queue = _queue_with((Priority.URGENT, "A"))
    copy = queue.entries()
    copy[0].decrement_arrival()
    assert queue.entries()[0].arrival == 1


def test_add_stores_a_copy_of_the_entry():
    queue = TriageQueue()
    queue.add(Entry("Z", Priority.IMMEDIATE, 1))
    mine = Entry("A", Priority.URGENT, 2)
    queue.add(mine)

    queue.remove_top()

    assert mine.arrival == 2
    assert queue.entries() == [Entry("A", Priority.URGENT, 1)]
