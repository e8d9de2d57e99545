# src/todo_simple/tasks/task_service.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace

from .task_models import Task

logger = logging.getLogger(__name__)


def _sort_key(task: Task) -> tuple[bool, int]:
    # incomplete first, then newest (highest id) first
    return (task.completed, -task.id)


class TaskService:
    """
    In-memory task collection: owns identity assignment and ordering.

    Ids are never reused: next_id starts above the highest loaded id and
    only grows. The order is derived from (completed, id) and recomputed
    after every mutation.

    Not thread-safe; callers serialize mutations (see TaskApi).
    """

    def __init__(self, initial: Iterable[Task] = ()) -> None:
        self._tasks: list[Task] = list(initial)
        self._next_id = max((t.id for t in self._tasks), default=0) + 1
        self._sort()

    def _sort(self) -> None:
        self._tasks.sort(key=_sort_key)

    def _index_of(self, task_id: int) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._tasks)

    def all(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def get(self, task_id: int) -> Task | None:
        idx = self._index_of(task_id)
        return None if idx is None else self._tasks[idx]

    def counts(self) -> tuple[int, int]:
        """Return (open, done)."""
        done = sum(1 for t in self._tasks if t.completed)
        return len(self._tasks) - done, done

    def add(self, title: str, description: str | None = "") -> Task:
        task = Task(
            id=self._next_id,
            title=title.strip(),
            description=(description or "").strip(),
            completed=False,
        )
        self._next_id += 1
        self._tasks.append(task)
        self._sort()
        logger.debug("Added task id=%s", task.id)
        return task

    def toggle(self, task_id: int, value: bool) -> bool:
        idx = self._index_of(task_id)
        if idx is None:
            return False
        self._tasks[idx] = replace(self._tasks[idx], completed=bool(value))
        self._sort()
        logger.debug("Task id=%s completed=%s", task_id, bool(value))
        return True

    def delete(self, task_id: int) -> bool:
        idx = self._index_of(task_id)
        if idx is None:
            return False
        del self._tasks[idx]
        self._sort()
        logger.debug("Deleted task id=%s", task_id)
        return True
