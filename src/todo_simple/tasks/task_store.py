# src/todo_simple/tasks/task_store.py

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .task_models import LoadResult, SaveResult, Task

logger = logging.getLogger(__name__)

DEFAULT_TASKS_PATH = Path.home() / ".todo_simple" / "tasks.txt"

FIELD_SEP = "\t"
MIN_FIELDS = 4

_UNSAFE_CHARS = str.maketrans({"\t": " ", "\n": " ", "\r": " "})


def sanitize_field(value: str | None) -> str:
    """Keep a record on one line: tabs and newlines become single spaces."""
    if value is None:
        return ""
    return value.translate(_UNSAFE_CHARS)


class TaskStore:
    """
    Flat-file task store.

    Format (UTF-8, one record per line):
        <id>\\t<completed:0|1>\\t<title>\\t<description>

    - save() always rewrites the whole file (no append, no locking)
    - load() is lenient: corrupt lines are skipped, an unreadable file
      degrades to "no tasks"
    """

    def __init__(self, path: str | Path = DEFAULT_TASKS_PATH) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def _ensure_parent(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def _parse_line(line: str) -> Task | None:
        parts = line.split(FIELD_SEP)
        if len(parts) < MIN_FIELDS:
            return None
        try:
            task_id = int(parts[0])
        except ValueError:
            return None
        return Task(
            id=task_id,
            title=parts[2],
            description=parts[3],
            completed=parts[1] == "1",
        )

    @staticmethod
    def _format_line(task: Task) -> str:
        return FIELD_SEP.join(
            (
                str(task.id),
                "1" if task.completed else "0",
                sanitize_field(task.title),
                sanitize_field(task.description),
            )
        )

    # ---- public API ----

    def load(self) -> LoadResult:
        result = LoadResult()
        try:
            with open(self._path, encoding="utf-8") as f:
                for lineno, raw in enumerate(f, start=1):
                    line = raw.rstrip("\n")
                    if not line.strip():
                        continue
                    task = self._parse_line(line)
                    if task is None:
                        result.skipped_lines += 1
                        logger.debug("Skipping corrupt record %s:%d", self._path, lineno)
                        continue
                    result.tasks.append(task)
        except FileNotFoundError:
            logger.info("No task file at %s (first run).", self._path)
            return LoadResult(file_missing=True)
        except Exception as e:
            logger.exception("Failed to load tasks from %s", self._path)
            return LoadResult(error=str(e) or type(e).__name__)

        if result.skipped_lines:
            logger.warning(
                "Loaded %d tasks from %s, skipped %d corrupt lines.",
                len(result.tasks),
                self._path,
                result.skipped_lines,
            )
        else:
            logger.info("Loaded %d tasks from %s", len(result.tasks), self._path)
        return result

    def save(self, tasks: Iterable[Task]) -> SaveResult:
        """
        Overwrite the file with `tasks` in the given order.

        The payload is encoded before the file is opened, so text that cannot
        be written as UTF-8 leaves the previous file untouched.
        """
        lines = [self._format_line(t) for t in tasks]
        try:
            payload = "".join(line + os.linesep for line in lines).encode("utf-8")
            self._ensure_parent()
            with open(self._path, "wb") as f:
                f.write(payload)
        except (OSError, UnicodeError) as e:
            # surfaced to the user by TaskApi
            logger.info("Failed to save tasks to %s: %s", self._path, e)
            return SaveResult(ok=False, count=0, error=str(e) or type(e).__name__)

        logger.debug("Saved %d tasks to %s", len(lines), self._path)
        return SaveResult(ok=True, count=len(lines))
