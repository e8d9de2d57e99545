# src/todo_simple/tasks/task_api.py

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from .task_models import LoadResult, SaveResult, Task
from .task_service import TaskService
from .task_store import TaskStore

logger = logging.getLogger(__name__)

WarningSink = Callable[[str], None]


class TaskApi:
    """
    Collaborator-facing API over TaskService + TaskStore.

    Each successful mutation is followed by a full save, both inside one
    lock, so "mutate then overwrite the file" stays a single step even if
    several front-ends share the same session.

    Save failures do not raise. They are recorded in `last_save_error` and
    passed to `on_warning` (if given); the in-memory state stays usable and
    the next mutation tries to save again.
    """

    def __init__(
        self,
        store: TaskStore,
        service: TaskService,
        *,
        on_warning: WarningSink | None = None,
        load_result: LoadResult | None = None,
    ) -> None:
        self.store = store
        self.service = service
        self.on_warning = on_warning
        self.load_result = load_result or LoadResult()
        self.last_save_error: str | None = None
        self._lock = threading.RLock()

    @classmethod
    def open(cls, store: TaskStore, *, on_warning: WarningSink | None = None) -> TaskApi:
        loaded = store.load()
        return cls(store, TaskService(loaded), on_warning=on_warning, load_result=loaded)

    def _flush_locked(self) -> SaveResult:
        result = self.store.save(self.service.all())
        if result.ok:
            self.last_save_error = None
            return result

        self.last_save_error = result.error or "unknown error"
        msg = f"Failed to save: {self.last_save_error}"
        if self.on_warning is not None:
            try:
                self.on_warning(msg)
            except Exception:
                logger.exception("on_warning callback failed.")
        return result

    # ---- public API ----

    def list(self) -> tuple[Task, ...]:
        with self._lock:
            return self.service.all()

    def get(self, task_id: int) -> Task | None:
        with self._lock:
            return self.service.get(task_id)

    def create(self, title: str, description: str | None = "") -> Task:
        if not title or not title.strip():
            raise ValueError("title is required")
        with self._lock:
            task = self.service.add(title, description)
            self._flush_locked()
        logger.info("Created task id=%s", task.id)
        return task

    def set_completed(self, task_id: int, value: bool) -> bool:
        with self._lock:
            ok = self.service.toggle(task_id, value)
            if ok:
                self._flush_locked()
        if not ok:
            logger.debug("set_completed: no task id=%s", task_id)
        return ok

    def remove(self, task_id: int) -> bool:
        with self._lock:
            ok = self.service.delete(task_id)
            if ok:
                self._flush_locked()
        if ok:
            logger.info("Removed task id=%s", task_id)
        return ok

