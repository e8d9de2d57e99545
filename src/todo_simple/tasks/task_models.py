# src/todo_simple/tasks/task_models.py

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Task:
    """
    One to-do item.

    Frozen on purpose: snapshots handed out by TaskService cannot be used to
    change the live collection. Toggling replaces the instance.
    """

    id: int
    title: str
    description: str = ""
    completed: bool = False


@dataclass(slots=True)
class LoadResult:
    """
    Outcome of TaskStore.load().

    Load never fails the caller; instead it reports what happened:
    - file_missing: first run, nothing persisted yet
    - skipped_lines: corrupt records dropped while parsing
    - error: whole-file failure (tasks is empty in that case)
    """

    tasks: list[Task] = field(default_factory=list)
    file_missing: bool = False
    skipped_lines: int = 0
    error: str | None = None

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __len__(self) -> int:
        return len(self.tasks)


@dataclass(frozen=True, slots=True)
class SaveResult:
    ok: bool
    count: int = 0
    error: str | None = None
