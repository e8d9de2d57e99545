# tests/test_task_service.py

from __future__ import annotations

import dataclasses

import pytest

from todo_simple.tasks.task_models import Task
from todo_simple.tasks.task_service import TaskService


def _assert_ordered(tasks) -> None:
    open_ids = [t.id for t in tasks if not t.completed]
    done_ids = [t.id for t in tasks if t.completed]
    assert [t.completed for t in tasks] == sorted(t.completed for t in tasks)
    assert open_ids == sorted(open_ids, reverse=True)
    assert done_ids == sorted(done_ids, reverse=True)


def test_scenario_add_add_toggle() -> None:
    svc = TaskService()
    svc.add("Buy milk", "")
    svc.add("Call mom", "reminder")

    assert [(t.id, t.title, t.completed) for t in svc.all()] == [
        (2, "Call mom", False),
        (1, "Buy milk", False),
    ]

    assert svc.toggle(1, True) is True
    assert [(t.id, t.title, t.completed) for t in svc.all()] == [
        (2, "Call mom", False),
        (1, "Buy milk", True),
    ]


def test_ids_are_never_reused() -> None:
    svc = TaskService()
    seen = set()
    for i in range(5):
        seen.add(svc.add(f"t{i}", "").id)
    svc.delete(5)
    svc.delete(4)

    new = svc.add("after delete", "")
    assert new.id == 6
    assert new.id not in seen


def test_next_id_derived_from_loaded_max() -> None:
    svc = TaskService([Task(3, "a"), Task(10, "b", completed=True), Task(7, "c")])
    assert svc.next_id == 11
    assert [t.id for t in svc.all()] == [7, 3, 10]

    assert svc.add("d", "").id == 11
    assert TaskService().next_id == 1


def test_ordering_invariant_after_mixed_operations() -> None:
    svc = TaskService([Task(2, "x", completed=True), Task(1, "y")])
    for i in range(6):
        svc.add(f"t{i}", "")
    svc.toggle(4, True)
    svc.toggle(8, True)
    svc.delete(5)
    svc.toggle(2, False)
    svc.add("last", "")

    tasks = svc.all()
    _assert_ordered(tasks)
    assert tasks[0].title == "last"
    assert len({t.id for t in tasks}) == len(tasks)


def test_toggle_is_idempotent() -> None:
    svc = TaskService()
    task = svc.add("x", "")

    assert svc.toggle(task.id, True) is True
    assert svc.toggle(task.id, True) is True
    assert svc.get(task.id).completed is True


def test_toggle_unknown_id_is_noop() -> None:
    svc = TaskService([Task(1, "a"), Task(2, "b", completed=True)])
    before = svc.all()

    assert svc.toggle(42, True) is False
    assert svc.all() == before


def test_delete_unknown_id_is_noop() -> None:
    svc = TaskService([Task(1, "a"), Task(2, "b")])
    before = svc.all()

    assert svc.delete(9999) is False
    assert svc.all() == before
    assert svc.delete(1) is True
    assert [t.id for t in svc.all()] == [2]


def test_add_trims_and_defaults() -> None:
    svc = TaskService()
    task = svc.add("  Buy milk  ", None)

    assert task == Task(id=1, title="Buy milk", description="", completed=False)
    assert svc.add("x", "  note \n").description == "note"


def test_core_does_not_validate_title() -> None:
    # Title validation lives in TaskApi.create.
    svc = TaskService()
    assert svc.add("   ", "").title == ""


def test_snapshot_cannot_mutate_collection() -> None:
    svc = TaskService()
    svc.add("a", "")
    snapshot = svc.all()

    assert isinstance(snapshot, tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        snapshot[0].completed = True  # type: ignore[misc]
    assert svc.all()[0].completed is False


def test_counts() -> None:
    svc = TaskService([Task(1, "a"), Task(2, "b", completed=True), Task(3, "c")])
    assert svc.counts() == (2, 1)
    assert len(svc) == 3
