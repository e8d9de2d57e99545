# src/todo_simple/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the concrete TaskStore / TaskApi into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_api import TaskApi, WarningSink
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, on_warning: WarningSink | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore(settings.tasks_path)
    api = TaskApi.open(store, on_warning=on_warning)

    loaded = api.load_result
    if loaded.error:
        logger.warning("Task file unreadable, starting empty: %s", loaded.error)

    return AppState(settings=settings, task_store=store, tasks=api)

